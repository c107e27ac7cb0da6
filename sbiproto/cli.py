"""Command line entry point of the prototyping system's project tool."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from .app import App, ConfigError
from .config import (
    config_file_exists,
    load_config,
    read_config_file,
    save_app_to_string,
    write_config_file,
)
from .term import terminal_main

logger = logging.getLogger(__name__)

_TRACE = 5
# Index 1 (errors only) is the level used without -v or -q.
_LEVELS = [logging.CRITICAL + 1, logging.ERROR, logging.WARNING, logging.INFO, logging.DEBUG, _TRACE]
_DEFAULT_LEVEL_INDEX = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="xtask", description="RustSBI Prototyping System")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="more output per occurrence")
    parser.add_argument("-q", "--quiet", action="count", default=0, help="less output per occurrence")
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("config", help="Configure this project")
    return parser


def _log_level(verbose: int, quiet: int) -> int:
    index = _DEFAULT_LEVEL_INDEX + verbose - quiet
    return _LEVELS[max(0, min(index, len(_LEVELS) - 1))]


def _configure(project: Path) -> int:
    text = ""
    try:
        if config_file_exists(project):
            text = read_config_file(project)
            app = App.from_config(load_config(text))
        else:
            app = App()
    except (OSError, ConfigError) as err:
        logger.error("%s", err)
        return 1
    terminal_main(app)
    try:
        write_config_file(project, save_app_to_string(app, text))
    except (OSError, ConfigError) as err:
        logger.error("%s", err)
        return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=_log_level(args.verbose, args.quiet))
    if args.command == "config":
        return _configure(Path.cwd())
    return 2


if __name__ == "__main__":
    raise SystemExit(main())