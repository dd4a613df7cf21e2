"""
Entity class
"""

from __future__ import annotations

from typing import Protocol

from bug_crossing.constants import GRID, GridConfig


class Canvas(Protocol):
    """
    Drawing surface the entities render onto
    """

    def draw(self, image_key: str, x: float, y: float) -> None: ...


class Entity:
    """
    Shared base of the player and the enemies: a sprite key, a current
    position and the spawn point it returns to on ``restart``.
    """

    def __init__(
        self, sprite: str, x: float, y: float, grid: GridConfig = GRID
    ) -> None:
        """
        :param sprite: Image key of the sprite
        :type sprite: str

        :param x: Spawn x
        :type x: float

        :param y: Spawn y
        :type y: float

        :param grid: Layout the entity lives on
        :type grid: GridConfig
        """
        self.sprite = sprite
        self.x = self._x0 = x
        self.y = self._y0 = y
        self.grid = grid

    @property
    def x0(self) -> float:
        return self._x0

    @property
    def y0(self) -> float:
        return self._y0

    def render(self, canvas: Canvas) -> None:
        """
        Draw the sprite at the current position

        :param canvas: Surface to draw on
        :type canvas: Canvas
        """
        canvas.draw(self.sprite, self.x, self.y)

    def restart(self) -> None:
        """
        Move back to the spawn point
        """
        self.x = self._x0
        self.y = self._y0

    def collides_with(self, other: Entity) -> bool:
        """
        Box test centered on this entity, bounds inclusive

        :param other: Entity to test against
        :type other: Entity

        :return: bool
        """
        x_limit, y_limit = self.grid.collision_limits
        return abs(other.x - self.x) <= x_limit and abs(other.y - self.y) <= y_limit

    def __repr__(self) -> str:
        return f"{type(self).__name__}(sprite={self.sprite!r}, x={self.x}, y={self.y})"
