"""
Player class
"""

from __future__ import annotations

import random
from enum import Enum

from bug_crossing.constants import CHARACTERS, GRID, GridConfig
from bug_crossing.entity import Entity


class Direction(str, Enum):
    LEFT = "left"
    UP = "up"
    RIGHT = "right"
    DOWN = "down"


class Player(Entity):
    """
    Player class
    """

    def __init__(self, rng: random.Random | None = None, grid: GridConfig = GRID):
        """
        :param rng: Random source for the character, defaults to ``random``
        :type rng: random.Random | None

        :param grid: Layout the player lives on
        :type grid: GridConfig
        """
        rng = rng or random
        x, y = grid.player_spawn
        super().__init__(rng.choice(CHARACTERS), x, y, grid)

    def reached_water(self) -> bool:
        """
        Whether the player stands on the top row.

        Exact equality works because moves clamp to 0 and the vertical
        stride evenly divides the distance from spawn to water. A layout
        that breaks that division has to be checked against this test.
        """
        return self.y == 0

    def handle_input(self, direction: Direction | str | None) -> None:
        """
        Jump one stride, clamped to the field. Unknown directions are ignored.

        :param direction: Where to move
        :type direction: Direction | str | None
        """
        try:
            direction = Direction(direction)
        except ValueError:
            return

        stride_x, stride_y = self.grid.stride
        if direction is Direction.LEFT:
            self.x = max(self.x - stride_x, 0)
        elif direction is Direction.UP:
            self.y = max(self.y - stride_y, 0)
        elif direction is Direction.RIGHT:
            self.x = min(self.x + stride_x, self.grid.max_x)
        elif direction is Direction.DOWN:
            self.y = min(self.y + stride_y, self.grid.max_y)
