"""
Command line entry point
"""

from __future__ import annotations

import argparse
from typing import Any, Dict, List, Optional

from bug_crossing.app import BugCrossing
from bug_crossing.settings import GameSettings
from bug_crossing.utils import configure_logging, logger


def parse_args(argv: Optional[List[str]] = None) -> Dict[str, Any]:
    """
    Parse command line arguments into a settings dict

    :param argv: Arguments, defaults to ``sys.argv[1:]``
    :type argv: Optional[List[str]]

    :return: Settings data
    :rtype: Dict[str, Any]
    """
    parser = argparse.ArgumentParser(
        prog="bug-crossing", description="Dodge the bugs and reach the water."
    )
    parser.add_argument("--enemies", dest="enemy_count", type=int, help="number of bugs (max 6)")
    parser.add_argument("--fps", type=int, help="frame rate cap")
    parser.add_argument("--seed", type=int, help="seed for a reproducible game")
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    args = parser.parse_args(argv)

    data = vars(args)
    data["log_level"] = "DEBUG" if data.pop("debug") else None
    return data


def main(argv: Optional[List[str]] = None) -> None:
    settings = GameSettings.from_dict(parse_args(argv))
    configure_logging(settings.log_level)
    logger.info("Starting %s...", settings.title)
    BugCrossing(settings).run()


if __name__ == "__main__":
    main()
