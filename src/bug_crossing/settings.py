"""
Game settings
"""

from __future__ import annotations

import logging
import random
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Optional

from bug_crossing.constants import DEFAULT_ENEMY_COUNT, FPS


@dataclass(frozen=True)
class GameSettings:
    """
    Startup configuration, fixed for the whole run
    """

    enemy_count: int = DEFAULT_ENEMY_COUNT
    fps: int = FPS
    seed: Optional[int] = None
    log_level: str = "INFO"
    title: str = "Bug Crossing"

    def __post_init__(self) -> None:
        if self.enemy_count < 0:
            raise ValueError(f"enemy_count must be >= 0, got {self.enemy_count}")
        if self.fps <= 0:
            raise ValueError(f"fps must be > 0, got {self.fps}")
        if not isinstance(logging.getLevelName(str(self.log_level).upper()), int):
            raise ValueError(f"unknown log_level {self.log_level!r}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> GameSettings:
        """
        Build settings from a dict, ignoring unknown keys and ``None`` values

        :param data: Settings data
        :type data: Dict[str, Any]

        :raise ValueError: If a value is out of range
        :return: GameSettings
        """
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known and v is not None})

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def make_rng(self) -> random.Random:
        return random.Random(self.seed)
