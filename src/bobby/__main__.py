"""Entry point: python -m bobby"""

import argparse
import sys
from pathlib import Path

from bobby import __version__
from bobby.cli.app import BobbyApp
from bobby.config import BobbySettings, set_settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bobby",
        description="Bobby, a command-line task tracker.",
    )
    parser.add_argument(
        "--data-file",
        type=Path,
        help="Task file to load and save (default: ~/.bobby/tasks.json)",
    )
    parser.add_argument(
        "--no-persist",
        action="store_true",
        help="Keep tasks in memory only",
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        help="Logging verbosity",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    overrides: dict[str, object] = {}
    if args.data_file is not None:
        overrides["data_file"] = args.data_file.expanduser().resolve()
    if args.no_persist:
        overrides["persist"] = False
    if args.log_level is not None:
        overrides["log_level"] = args.log_level

    settings = BobbySettings(**overrides)
    set_settings(settings)

    app = BobbyApp(settings)
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
