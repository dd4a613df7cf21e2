"""
Enemy class
"""

from __future__ import annotations

import random

from bug_crossing.constants import ENEMY_SPRITE, GRID, GridConfig
from bug_crossing.entity import Entity


class Enemy(Entity):
    """
    A bug running left to right along one lane, forever.
    """

    def __init__(self, rng: random.Random | None = None, grid: GridConfig = GRID):
        """
        :param rng: Random source for the speed, defaults to the ``random`` module
        :type rng: random.Random | None

        :param grid: Layout the enemy lives on
        :type grid: GridConfig
        """
        super().__init__(ENEMY_SPRITE, 0, grid.lane_height, grid)

        rng = rng or random
        min_speed = grid.tile_width
        range_speed = grid.canvas_width - min_speed
        self.speed = rng.random() * range_speed + min_speed

    def update(self, dt: float) -> None:
        """
        Advance along the lane, wrapping around at the right edge.

        Must run before ``render`` in the same frame.

        :param dt: Seconds since the previous frame, non-negative
        :type dt: float
        """
        self.x = (self.x + dt * self.speed) % self.grid.canvas_width
