"""
Enemy factory
"""

from __future__ import annotations

import random
from typing import List

from bug_crossing.constants import GRID, LANE_COUNT, GridConfig
from bug_crossing.enemy import Enemy
from bug_crossing.utils import logger


def sample_lanes(rng: random.Random, count: int, lanes: int = LANE_COUNT) -> List[int]:
    """
    Pick ``count`` distinct lanes out of ``1..lanes`` without replacement.

    Partial Fisher-Yates: each pick takes a random index of the active
    range, swaps it to the end of the range and shrinks the range.

    :param rng: Random source
    :type rng: random.Random

    :param count: Number of lanes wanted, clamped to ``[0, lanes]``
    :type count: int

    :param lanes: Number of candidate lanes
    :type lanes: int

    :return: Lanes in the order they were picked
    :rtype: List[int]
    """
    pool = list(range(1, lanes + 1))
    count = max(0, min(count, lanes))

    picked = []
    current = len(pool)
    for _ in range(count):
        index = rng.randrange(current)
        current -= 1
        picked.append(pool[index])
        pool[index], pool[current] = pool[current], pool[index]

    return picked


def create_enemies(
    count: int,
    max_lanes: int = LANE_COUNT,
    rng: random.Random | None = None,
    grid: GridConfig = GRID,
) -> List[Enemy]:
    """
    Create up to ``max_lanes`` enemies, one per lane, ordered back to front.

    More enemies than lanes would only overlap, so ``count`` is clamped.

    :param count: Number of enemies wanted
    :type count: int

    :param max_lanes: Number of lanes available
    :type max_lanes: int

    :param rng: Random source, defaults to a fresh ``random.Random``
    :type rng: random.Random | None

    :param grid: Layout the enemies live on
    :type grid: GridConfig

    :return: Enemies in ascending lane order
    :rtype: List[Enemy]
    """
    rng = rng or random.Random()
    count = min(count, max_lanes)
    logger.debug("Creating %d enemies", count)

    enemies = []
    # further lanes first so closer bugs are drawn on top of them
    for lane in sorted(sample_lanes(rng, count, max_lanes)):
        enemy = Enemy(rng, grid)
        enemy.y *= lane
        enemies.append(enemy)

    return enemies
