from typing import List, Optional
import os
import sys
import argparse
import logging

from .. import __version__
from ..printing import render_document
from .config import (
    CheetsheetError,
    find_sheet,
    list_sheets,
    read_sheet,
    resolve_config_dir,
)

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cheetsheet",
        description="Terminal cheatsheet viewer",
    )
    parser.add_argument(
        "command",
        nargs="?",
        metavar="COMMAND",
        help="Command name to look up (e.g., tmux, git, docker)",
    )
    parser.add_argument(
        "-c",
        "--config-dir",
        metavar="DIR",
        default=os.getenv("CHEETSHEET_CONFIG_DIR") or None,
        help="Custom config directory (default: ~/.config/cheetsheet)",
    )
    parser.add_argument(
        "-l",
        "--list",
        action="store_true",
        help="List available cheatsheets and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug details to stderr",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def run(argv: Optional[List[str]] = None) -> int:
    """Main entry point for cheetsheet. Returns the process exit code."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config_dir = resolve_config_dir(args.config_dir)
    logger.debug(f"Using config dir: {config_dir}")

    if args.list:
        for name in list_sheets(config_dir):
            print(name)
        return 0

    if not args.command:
        parser.error("the following arguments are required: COMMAND")

    try:
        path = find_sheet(config_dir, args.command)
        content = read_sheet(path)
    except (CheetsheetError, OSError) as e:
        logger.debug(f"Lookup failed for '{args.command}': {e!r}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    render_document(content)
    return 0


def main() -> None:
    sys.exit(run())
