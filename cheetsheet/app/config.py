from __future__ import annotations

from typing import List, Optional
import os
import pathlib
import logging

logger = logging.getLogger(__name__)

APP_NAME = "cheetsheet"
SHEET_SUFFIX = ".md"


class CheetsheetError(Exception):
    """Base error for user-facing failures."""


class SheetNotFoundError(CheetsheetError):
    def __init__(self, command: str, path: pathlib.Path) -> None:
        self.command = command
        self.path = path
        super().__init__(
            f"No cheatsheet found for '{command}'.\n"
            f"Expected: {path}\n"
            "Tip: create a markdown file at that path to get started."
        )


def _home_dir() -> pathlib.Path:
    try:
        return pathlib.Path.home()
    except RuntimeError:
        return pathlib.Path(".")


def resolve_config_dir(custom: Optional[str] = None) -> pathlib.Path:
    """Directory holding the cheatsheets.

    Order: explicit directory, then $XDG_CONFIG_HOME/cheetsheet, then
    ~/.config/cheetsheet.
    """
    if custom:
        return pathlib.Path(custom)
    xdg = os.getenv("XDG_CONFIG_HOME")
    if isinstance(xdg, str) and xdg.strip():
        return pathlib.Path(xdg) / APP_NAME
    return _home_dir() / ".config" / APP_NAME


def sheet_path(config_dir: pathlib.Path, command: str) -> pathlib.Path:
    return config_dir / f"{command}{SHEET_SUFFIX}"


def find_sheet(config_dir: pathlib.Path, command: str) -> pathlib.Path:
    path = sheet_path(config_dir, command)
    if path.exists():
        logger.debug(f"Found sheet: {path}")
        return path
    raise SheetNotFoundError(command, path)


def read_sheet(path: pathlib.Path) -> str:
    with open(path, "r", encoding="utf-8") as fh:
        return fh.read()


def list_sheets(config_dir: pathlib.Path) -> List[str]:
    if not config_dir.is_dir():
        return []
    return sorted(p.stem for p in config_dir.glob(f"*{SHEET_SUFFIX}") if p.is_file())
