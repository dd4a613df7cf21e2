"""
Game loop: update, render and collision checks, one tick per frame.

Nothing here touches pygame. The host calls ``tick`` with a monotonic
timestamp once per frame and ``Notifier.flush`` once the frame is on
screen.
"""

from __future__ import annotations

import random
from collections import deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, Deque, List

from bug_crossing.constants import (
    DEFAULT_ENEMY_COUNT,
    GRID,
    LOSS_MESSAGE,
    ROW_IMAGES,
    WIN_MESSAGE,
    GridConfig,
)
from bug_crossing.enemy import Enemy
from bug_crossing.entity import Canvas
from bug_crossing.factory import create_enemies
from bug_crossing.player import Player
from bug_crossing.utils import logger

Sink = Callable[[str], None]


class GameStatus(Enum):
    RUNNING = auto()
    STOPPED = auto()  # terminal, reached on win


class Notifier:
    """
    Holds user-facing messages until the current frame has been presented.

    Messages posted during a tick are delivered, in order, to every sink on
    the next ``flush``.
    """

    def __init__(self, *sinks: Sink) -> None:
        self._sinks: List[Sink] = list(sinks)
        self._pending: Deque[str] = deque()

    def subscribe(self, sink: Sink) -> None:
        self._sinks.append(sink)

    def post(self, message: str) -> None:
        self._pending.append(message)

    @property
    def pending(self) -> List[str]:
        return list(self._pending)

    def flush(self) -> int:
        """
        Deliver every pending message

        :return: Number of messages delivered
        :rtype: int
        """
        delivered = 0
        while self._pending:
            message = self._pending.popleft()
            for sink in self._sinks:
                sink(message)
            delivered += 1
        return delivered


@dataclass
class GameState:
    """
    Everything one game session owns
    """

    player: Player
    enemies: List[Enemy]
    grid: GridConfig = GRID
    status: GameStatus = GameStatus.RUNNING
    last_time: float = 0.0
    notifier: Notifier = field(default_factory=Notifier)

    @classmethod
    def new(
        cls,
        enemy_count: int = DEFAULT_ENEMY_COUNT,
        rng: random.Random | None = None,
        grid: GridConfig = GRID,
        notifier: Notifier | None = None,
        start_time: float = 0.0,
    ) -> GameState:
        """
        Start a game: a fresh player and ``enemy_count`` enemies

        :param enemy_count: Number of enemies, clamped to the lane count
        :type enemy_count: int

        :param rng: Random source shared by every entity
        :type rng: random.Random | None

        :param grid: Layout of the field
        :type grid: GridConfig

        :param notifier: Where win/loss messages go
        :type notifier: Notifier | None

        :param start_time: Timestamp the first tick measures from
        :type start_time: float

        :return: GameState
        """
        rng = rng or random.Random()
        logger.debug("Setting enemies")
        enemies = create_enemies(enemy_count, rng=rng, grid=grid)
        logger.debug("Setting player")
        player = Player(rng, grid)

        return cls(
            player=player,
            enemies=enemies,
            grid=grid,
            last_time=start_time,
            notifier=notifier or Notifier(),
        )

    @property
    def running(self) -> bool:
        return self.status is GameStatus.RUNNING


def update_entities(state: GameState, dt: float) -> None:
    for enemy in state.enemies:
        enemy.update(dt)


def render(state: GameState, canvas: Canvas) -> None:
    """
    Draw the tile rows, then the enemies, then the player
    """
    grid = state.grid
    for row, image in enumerate(ROW_IMAGES[: grid.num_rows]):
        for col in range(grid.num_cols):
            canvas.draw(image, col * grid.tile_width, row * grid.row_height)

    for enemy in state.enemies:
        enemy.render(canvas)

    state.player.render(canvas)


def check_collisions(state: GameState) -> None:
    """
    Stop the game on a win, send the player home on the first bug hit
    """
    player = state.player
    if player.reached_water():
        logger.info("Player reached the water")
        state.notifier.post(WIN_MESSAGE)
        state.status = GameStatus.STOPPED
        return

    for enemy in state.enemies:
        if enemy.collides_with(player):
            logger.info("Player hit by %r", enemy)
            state.notifier.post(LOSS_MESSAGE)
            player.restart()
            break


def tick(state: GameState, now: float, canvas: Canvas) -> GameState:
    """
    Run one frame: update, render, check collisions.

    Does nothing once the game is stopped.

    :param state: Game to advance
    :type state: GameState

    :param now: Current time in seconds, monotonic
    :type now: float

    :param canvas: Surface to draw on
    :type canvas: Canvas

    :return: The same state, advanced
    :rtype: GameState
    """
    if not state.running:
        return state

    dt = now - state.last_time

    update_entities(state, dt)
    render(state, canvas)
    check_collisions(state)

    state.last_time = now
    return state
