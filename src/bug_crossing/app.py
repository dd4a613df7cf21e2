"""
Bug Crossing game
"""

from __future__ import annotations

import time
from typing import Dict, Optional

import pygame

from bug_crossing.constants import ALL_IMAGES, GRID, SPRITE_HEIGHT
from bug_crossing.game import GameState, Notifier, tick
from bug_crossing.player import Direction
from bug_crossing.resources import PygameCanvas, Resources
from bug_crossing.settings import GameSettings
from bug_crossing.utils import find_assets_root, logger, set_screen

KEY_DIRECTIONS: Dict[int, Direction] = {
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_UP: Direction.UP,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_DOWN: Direction.DOWN,
}

BANNER_SECONDS = 2.5


def key_to_direction(key: int) -> Optional[Direction]:
    """
    Map a pygame key code to a direction, ``None`` for any other key
    """
    return KEY_DIRECTIONS.get(key)


class Game:
    """
    Game class
    """

    _carry_on = True

    def __init__(self, name: str):
        """
        :param name: Name of the game
        :type name: str
        """
        logger.debug("Initializing %s", name)
        self._name = name
        self._clock = pygame.time.Clock()
        pygame.init()

    def _set_screen(self, width: int, height: int) -> pygame.Surface:
        logger.debug("Setting screen %dx%d", width, height)
        return set_screen(self._name, width, height)

    def handle_events(self):
        """
        Handle the events

        :raise NotImplementedError: Subclasses must implement this method
        """
        raise NotImplementedError("Subclasses must implement this method")

    def handle_game_logic(self):
        """
        Handle the game logic

        :raise NotImplementedError: Subclasses must implement this method
        """
        raise NotImplementedError("Subclasses must implement this method")

    def draw_stuff(self):
        """
        Draw the stuff

        :raise NotImplementedError: Subclasses must implement this method
        """
        raise NotImplementedError("Subclasses must implement this method")


class BugCrossing(Game):
    """
    Bug Crossing class
    """

    def __init__(
        self,
        settings: GameSettings | None = None,
        resources: Resources | None = None,
    ):
        """
        :param settings: Startup configuration
        :type settings: GameSettings | None

        :param resources: Image cache, defaults to one over the assets directory
        :type resources: Resources | None
        """
        self._settings = settings or GameSettings()
        super().__init__(self._settings.title)

        width = int(GRID.canvas_width)
        height = int(GRID.canvas_height + SPRITE_HEIGHT - GRID.row_height)
        self._screen = self._set_screen(width, height)
        self._font = pygame.font.Font(None, 26)

        self._resources = resources or Resources(find_assets_root())
        self._canvas = PygameCanvas(self._screen, self._resources)

        self._banner: Optional[str] = None
        self._banner_until = 0.0

        self._state: Optional[GameState] = None

    @property
    def state(self) -> Optional[GameState]:
        return self._state

    @property
    def banner(self) -> Optional[str]:
        return self._banner

    def _show_banner(self, message: str) -> None:
        logger.info(message)
        self._banner = message
        self._banner_until = time.perf_counter() + BANNER_SECONDS

    def _start(self) -> None:
        logger.debug("Starting game with settings %s", self._settings.to_dict())
        self._state = GameState.new(
            self._settings.enemy_count,
            rng=self._settings.make_rng(),
            notifier=Notifier(self._show_banner),
            start_time=time.perf_counter(),
        )

    def handle_events(self):
        """
        Handle the events
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                logger.debug("Quitting the game")
                self._carry_on = False
            elif event.type == pygame.KEYDOWN:
                self._state.player.handle_input(key_to_direction(event.key))

    def handle_game_logic(self):
        """
        Advance the game by one tick while it is running
        """
        tick(self._state, time.perf_counter(), self._canvas)

    def _draw_banner(self) -> None:
        if self._banner is None:
            return
        if time.perf_counter() > self._banner_until and self._state.running:
            self._banner = None
            return

        text = self._font.render(self._banner, True, (255, 255, 255))
        box = text.get_rect(midtop=(self._screen.get_width() / 2, 8))
        pygame.draw.rect(self._screen, (0, 0, 0), box.inflate(16, 8))
        self._screen.blit(text, box)

    def draw_stuff(self):
        """
        Present the frame, then deliver messages raised during it
        """
        self._draw_banner()
        pygame.display.flip()
        self._state.notifier.flush()

    def start(self):
        """
        Preload every image and start the game once they are cached
        """
        self._resources.load(ALL_IMAGES)
        self._resources.on_ready(self._start)

    def step(self):
        """
        One pass of the main loop
        """
        self._clock.tick(self._settings.fps)
        self.handle_events()
        if self._state.running:
            self.handle_game_logic()
        self.draw_stuff()

    def run(self):
        """
        Run the game
        """
        logger.debug("Running the game")

        self.start()
        while self._carry_on:
            self.step()

        pygame.quit()
