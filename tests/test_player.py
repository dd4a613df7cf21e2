"""
Tests for player movement, clamping and the water check.
"""
import random

import pytest

from bug_crossing.constants import CHARACTERS, GRID
from bug_crossing.player import Direction, Player


@pytest.fixture
def player(rng):
    return Player(rng)


def test_spawns_bottom_center(player):
    """The player starts on the bottom-center tile as one of the characters."""
    assert (player.x, player.y) == (202, 415)
    assert player.sprite in CHARACTERS


def test_character_is_random():
    """Different seeds pick different characters."""
    sprites = {Player(random.Random(seed)).sprite for seed in range(50)}
    assert len(sprites) > 1


def test_left_stops_at_zero(player):
    """Walking left ends exactly on the left wall."""
    for _ in range(20):
        player.handle_input("left")
    assert player.x == 0


def test_right_stops_at_max_x(player):
    """Walking right ends exactly on the last column."""
    for _ in range(20):
        player.handle_input(Direction.RIGHT)
    assert player.x == GRID.max_x


def test_down_stops_at_max_y(player):
    """The player cannot go below the bottom row."""
    player.handle_input("down")
    assert player.y == GRID.max_y


def test_single_stride(player):
    """One press moves exactly one stride along one axis."""
    player.handle_input("up")
    assert player.y == 415 - 41.5
    player.handle_input("left")
    assert player.x == 202 - 50.5


def test_up_reaches_water(player):
    """Ten presses up land exactly on the water row."""
    assert not player.reached_water()
    for _ in range(9):
        player.handle_input("up")
    assert player.y == 41.5
    assert not player.reached_water()

    player.handle_input("up")
    assert player.y == 0
    assert player.reached_water()

    player.handle_input("up")
    assert player.y == 0


def test_clamping_snaps_to_water():
    """A stride that would overshoot the top lands on 0."""
    player = Player(random.Random(0))
    player.y = 20
    player.handle_input("up")
    assert player.reached_water()


@pytest.mark.parametrize("key", [None, "jump", "", "LEFT", 37])
def test_unknown_direction_is_ignored(player, key):
    """Anything that is not one of the four directions is a no-op."""
    player.handle_input(key)
    assert (player.x, player.y) == (202, 415)


def test_restart_after_moving(player):
    """restart() brings the player back to the spawn tile."""
    player.handle_input("up")
    player.handle_input("right")
    player.restart()
    assert (player.x, player.y) == (202, 415)
