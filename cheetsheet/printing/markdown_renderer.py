from __future__ import annotations

from functools import lru_cache
from typing import Iterable, Optional
import logging

from rich.console import Console
from rich.markdown import Markdown
from rich.theme import Theme

from ..core.segments import Code, Segment, Text, split
from .highlight import CODE_THEME, get_code_theme, write_code_block

logger = logging.getLogger(__name__)

ACCENT = "yellow"
SECONDARY_ACCENT = "magenta"
TERTIARY_ACCENT = "cyan"

# Markdown element -> terminal style
PROFILE_STYLES = {
    "markdown.h1": f"bold {ACCENT}",
    "markdown.h1.border": ACCENT,
    "markdown.h2": f"bold {ACCENT}",
    "markdown.h3": ACCENT,
    "markdown.h4": ACCENT,
    "markdown.h5": ACCENT,
    "markdown.h6": ACCENT,
    "markdown.strong": f"bold {ACCENT}",
    "markdown.em": f"italic {SECONDARY_ACCENT}",
    "markdown.emph": f"italic {SECONDARY_ACCENT}",
    "markdown.code": "bright_white on grey23",
    "markdown.code_block": "on grey11",
    "markdown.table.border": TERTIARY_ACCENT,
    "markdown.table.header": f"bold {TERTIARY_ACCENT}",
}


@lru_cache(maxsize=None)
def get_styling_profile() -> Theme:
    return Theme(PROFILE_STYLES)


def make_console(**kwargs) -> Console:
    return Console(theme=get_styling_profile(), **kwargs)


def render(segments: Iterable[Segment], console: Optional[Console] = None) -> None:
    """Print segments to the console in order.

    Text segments go through rich's Markdown renderer under the styling
    profile. Code segments are highlighted line by line and followed by a
    terminal reset.
    """
    if console is None:
        console = make_console()
    theme = get_code_theme()
    with console.use_theme(get_styling_profile()):
        for segment in segments:
            if isinstance(segment, Text):
                console.print(Markdown(segment.content, code_theme=CODE_THEME))
            elif isinstance(segment, Code):
                write_code_block(console.file, segment.language, segment.body, theme)
            else:
                raise TypeError(f"Unknown segment type: {type(segment).__name__}")


def render_document(content: str, console: Optional[Console] = None) -> None:
    """Split a cheatsheet document and render it to the terminal."""
    segments = split(content)
    logger.debug(
        f"Rendering {len(segments)} segments "
        f"({sum(isinstance(s, Code) for s in segments)} code blocks)"
    )
    render(segments, console)
