"""
Bug Crossing utils
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pygame

logger = logging.getLogger("bug_crossing")


def configure_logging(level: int | str = logging.INFO) -> None:
    """
    Configure the root handler and the package logger level.

    :param level: Logging level, either a number or a name such as ``"DEBUG"``
    :type level: int | str
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logging.basicConfig(
        level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    logger.setLevel(level)


def find_assets_root() -> Path:
    """Return the path to the `assets` directory.

    Works in:
    - dev: repo/assets (when running from source tree)
    - pip install: site-packages/assets
    - PyInstaller onefile: _MEIPASS/assets (if bundled with --add-data)

    :raises FileNotFoundError: If the assets directory cannot be found.
    """
    # pylint: disable=protected-access
    if hasattr(sys, "_MEIPASS"):
        candidate = Path(sys._MEIPASS) / "assets"
        if candidate.is_dir():
            return candidate
    # pylint: enable=protected-access

    here = Path(__file__).resolve()
    for parent in here.parents:
        candidate = parent / "assets"
        if candidate.is_dir():
            return candidate

    raise FileNotFoundError("Could not locate 'assets' directory.")


def load_image(filename: str | Path, alpha: bool = True) -> pygame.Surface:
    """
    Load an image

    :param filename: Path of the file
    :type filename: str | Path

    :param alpha: Keep per-pixel transparency
    :type alpha: bool

    :raise SystemExit: If pygame cannot read the file
    :return: pygame.Surface
    """
    try:
        image = pygame.image.load(str(filename))
    except pygame.error as message:
        logger.error("Failed to load image %s: %s", filename, message)
        raise SystemExit(message) from message

    if pygame.display.get_surface() is None:
        return image

    return image.convert_alpha() if alpha else image.convert()


def set_screen(caption: str, width: int, height: int) -> pygame.Surface:
    """
    Set the screen

    :param caption: Caption of the screen
    :type caption: str

    :param width: Width of the screen
    :type width: int

    :param height: Height of the screen
    :type height: int

    :return: pygame.Surface
    """
    screen = pygame.display.set_mode((width, height))
    pygame.display.set_caption(caption)

    return screen
