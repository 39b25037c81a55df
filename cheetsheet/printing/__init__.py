"""Terminal rendering of markdown prose and highlighted code."""

from .highlight import resolve_lexer, write_code_block
from .markdown_renderer import (
    get_styling_profile,
    make_console,
    render,
    render_document,
)

__all__ = [
    "resolve_lexer",
    "write_code_block",
    "get_styling_profile",
    "make_console",
    "render",
    "render_document",
]
