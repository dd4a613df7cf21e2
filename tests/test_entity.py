"""
Tests for the shared entity behaviour: render, restart, collision.
"""
from bug_crossing.constants import GRID, GridConfig
from bug_crossing.entity import Entity


class TestCollision:
    """Box test centered on the entity, bounds inclusive."""

    def test_entity_collides_with_itself(self):
        """An entity always overlaps itself."""
        entity = Entity("images/char-boy.png", 123.0, 45.0)
        assert entity.collides_with(entity)

    def test_same_position_collides(self):
        """Two entities on the same point collide either way round."""
        a = Entity("a", 202, 415)
        b = Entity("b", 202, 415)
        assert a.collides_with(b)
        assert b.collides_with(a)

    def test_bounds_are_inclusive(self):
        """An entity exactly on both limits still collides."""
        x_limit, y_limit = GRID.collision_limits
        a = Entity("a", 0, 0)
        corner = Entity("b", x_limit, y_limit)
        assert a.collides_with(corner)

    def test_outside_x_limit(self):
        """Past the horizontal limit there is no collision."""
        x_limit, _ = GRID.collision_limits
        a = Entity("a", 100, 100)
        b = Entity("b", 100 + x_limit + 1, 100)
        assert not a.collides_with(b)

    def test_outside_y_limit(self):
        """Past the vertical limit there is no collision."""
        _, y_limit = GRID.collision_limits
        a = Entity("a", 100, 100)
        b = Entity("b", 100, 100 - y_limit - 0.5)
        assert not a.collides_with(b)

    def test_limits_follow_grid(self):
        """Limits come from the grid of the entity doing the test."""
        small = GridConfig(tile_width=30, row_height=20)
        a = Entity("a", 0, 0, grid=small)
        b = Entity("b", 25, 0, grid=small)
        assert not a.collides_with(b)
        assert Entity("c", 0, 0).collides_with(b)


class TestRestartAndRender:
    """Spawn point handling and drawing."""

    def test_restart_returns_to_spawn(self):
        """restart() puts the entity back on its spawn point."""
        entity = Entity("a", 10, 20)
        entity.x, entity.y = 300, 7
        entity.restart()
        assert (entity.x, entity.y) == (10, 20)

    def test_restart_is_idempotent(self):
        """Restarting twice is the same as restarting once."""
        entity = Entity("a", 10, 20)
        entity.x = 99
        entity.restart()
        entity.restart()
        assert (entity.x, entity.y) == (10, 20)

    def test_spawn_point_is_fixed(self):
        """Moving the entity leaves x0 and y0 alone."""
        entity = Entity("a", 10, 20)
        entity.x, entity.y = 1, 2
        assert (entity.x0, entity.y0) == (10, 20)

    def test_render_draws_sprite_at_position(self, canvas):
        """render() draws the sprite wherever the entity currently is."""
        entity = Entity("images/enemy-bug.png", 50.5, 83)
        entity.render(canvas)
        entity.x = 60
        entity.render(canvas)
        assert canvas.calls == [
            ("images/enemy-bug.png", 50.5, 83),
            ("images/enemy-bug.png", 60, 83),
        ]
