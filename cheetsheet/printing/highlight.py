from __future__ import annotations

from functools import lru_cache
from typing import IO, List, Tuple
import logging

from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name
from pygments.lexers.special import TextLexer
from pygments.util import ClassNotFound
from rich.color import ColorSystem
from rich.style import Style
from rich.syntax import PygmentsSyntaxTheme, SyntaxTheme

logger = logging.getLogger(__name__)

# Single built-in dark theme for fenced code
CODE_THEME = "monokai"
CODE_INDENT = "  "
RESET = "\x1b[0m"

Span = Tuple[str, Style]


def _plain_lexer() -> Lexer:
    return TextLexer(stripnl=False, ensurenl=False)


def resolve_lexer(language: str) -> Lexer:
    """Look up a pygments lexer for a fence language tag.

    Only the first word of the tag is used and matching is case-insensitive
    against the registered aliases. Unknown or empty tags get the plain-text
    lexer, which does no tokenization.
    """
    words = language.split()
    if not words:
        return _plain_lexer()
    name = words[0].lower()
    try:
        return get_lexer_by_name(name, stripnl=False, ensurenl=False)
    except ClassNotFound:
        logger.debug(f"No lexer for '{name}', using plain text")
        return _plain_lexer()


@lru_cache(maxsize=None)
def get_code_theme(name: str = CODE_THEME) -> SyntaxTheme:
    return PygmentsSyntaxTheme(name)


def tokenize_line(line: str, lexer: Lexer, theme: SyntaxTheme) -> List[Span]:
    spans: List[Span] = []
    for token_type, value in lexer.get_tokens(line):
        value = value.replace("\n", "")
        if value:
            spans.append((value, theme.get_style_for_token(token_type)))
    return spans


def spans_to_ansi(spans: List[Span]) -> str:
    return "".join(
        style.render(text, color_system=ColorSystem.TRUECOLOR) for text, style in spans
    )


def split_lines(body: str) -> List[str]:
    """Split on line feeds only, dropping a trailing CR from each line."""
    if not body:
        return []
    lines = body.split("\n")
    if body.endswith("\n"):
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def write_code_block(
    stream: IO[str], language: str, body: str, theme: SyntaxTheme | None = None
) -> None:
    """Write a highlighted, indented code block to ``stream``.

    One blank line goes before and after the block. Lines that fail to
    highlight are written unstyled. The terminal reset sequence is always
    written last.
    """
    lexer = resolve_lexer(language)
    if theme is None:
        theme = get_code_theme()
    try:
        stream.write("\n")
        for line in split_lines(body):
            try:
                rendered = spans_to_ansi(tokenize_line(line, lexer, theme))
            except Exception as e:
                logger.debug(f"Highlighting failed for {language or 'plain'} line: {e}")
                rendered = line
            stream.write(CODE_INDENT + rendered + "\n")
        stream.write("\n")
    finally:
        stream.write(RESET)
