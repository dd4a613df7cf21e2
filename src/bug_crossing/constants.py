"""
Constants for the game.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GridConfig:
    """
    Tile layout of the playing field.

    Every position in the game is expressed in these units. Derived values
    are properties so they can never drift from the four base fields.
    """

    tile_width: float = 101
    row_height: float = 83
    num_cols: int = 5
    num_rows: int = 6

    @property
    def canvas_width(self) -> float:
        return self.num_cols * self.tile_width

    @property
    def canvas_height(self) -> float:
        return self.num_rows * self.row_height

    @property
    def collision_limits(self) -> tuple[float, float]:
        """Half-widths of the collision box, ``(x_limit, y_limit)``."""
        return (self.tile_width / 3) * 2, self.tile_width / 2

    @property
    def stride(self) -> tuple[float, float]:
        """Player displacement per key press, ``(stride_x, stride_y)``."""
        return self.tile_width / 2, self.row_height / 2

    @property
    def max_x(self) -> float:
        # can't go more east than this
        return self.canvas_width - self.tile_width

    @property
    def max_y(self) -> float:
        # can't go more south than this
        return (self.num_rows - 1) * self.row_height

    @property
    def player_spawn(self) -> tuple[float, float]:
        return (self.num_cols // 2) * self.tile_width, self.max_y

    @property
    def lane_height(self) -> float:
        """Y of the first lane; lane ``n`` sits at ``n * lane_height``."""
        return self.row_height / 2


GRID = GridConfig()

FPS = 60

LANE_COUNT = 6
DEFAULT_ENEMY_COUNT = 4

# Top row is water, then 3 rows of stone and 2 of grass
ROW_IMAGES = (
    "images/water-block.png",
    "images/stone-block.png",
    "images/stone-block.png",
    "images/stone-block.png",
    "images/grass-block.png",
    "images/grass-block.png",
)

ENEMY_SPRITE = "images/enemy-bug.png"

CHARACTERS = (
    "images/char-boy.png",
    "images/char-cat-girl.png",
    "images/char-horn-girl.png",
    "images/char-pink-girl.png",
    "images/char-princess-girl.png",
)

ALL_IMAGES = tuple(dict.fromkeys(ROW_IMAGES + (ENEMY_SPRITE,) + CHARACTERS))

# Sprite images are taller than a row; the window leaves room for the overhang
SPRITE_HEIGHT = 171

WIN_MESSAGE = "YIPPIE! I WIN!! Time for a refreshing swim!"
LOSS_MESSAGE = "WAAAAAH!! Icky bug jumped on me! I must bathe back home!!"
