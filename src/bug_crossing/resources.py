"""
Image cache and the pygame canvas that draws from it
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, Iterable, List

import pygame

from bug_crossing.utils import load_image, logger


class Resources:
    """
    Loads images once and hands them out by key.

    Keys are paths relative to ``root``, e.g. ``images/enemy-bug.png``.
    """

    def __init__(self, root: Path, loader: Callable[[Path], pygame.Surface] = load_image):
        self._root = Path(root)
        self._loader = loader
        self._cache: Dict[str, pygame.Surface] = {}
        self._requested: List[str] = []
        self._ready_callbacks: List[Callable[[], None]] = []

    def load(self, keys: str | Iterable[str]) -> None:
        """
        Load one key or several

        :param keys: Image key or keys
        :type keys: str | Iterable[str]
        """
        if isinstance(keys, str):
            keys = [keys]

        for key in keys:
            self._load(key)

        if self.is_ready():
            for callback in self._ready_callbacks:
                callback()
            self._ready_callbacks.clear()

    def _load(self, key: str) -> pygame.Surface:
        if key in self._cache:
            return self._cache[key]

        logger.debug("Loading image %s", key)
        self._requested.append(key)
        image = self._loader(self._root / key)
        self._cache[key] = image
        return image

    def get(self, key: str) -> pygame.Surface:
        """
        :raise KeyError: If ``key`` was never loaded
        """
        return self._cache[key]

    def is_ready(self) -> bool:
        return all(key in self._cache for key in self._requested)

    def on_ready(self, callback: Callable[[], None]) -> None:
        """
        Run ``callback`` once every requested image is loaded; immediately if
        that is already the case
        """
        if self._requested and self.is_ready():
            callback()
            return
        self._ready_callbacks.append(callback)


class PygameCanvas:
    """
    Canvas backed by a pygame surface
    """

    def __init__(self, screen: pygame.Surface, resources: Resources) -> None:
        self.screen = screen
        self.resources = resources

    def draw(self, image_key: str, x: float, y: float) -> None:
        self.screen.blit(self.resources.get(image_key), (x, y))
