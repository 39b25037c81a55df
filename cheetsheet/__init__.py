"""cheetsheet - look up markdown cheatsheets and render them in the terminal."""

__version__ = "0.1.0"

from .core.segments import Code, Segment, Text, split
from .printing.markdown_renderer import render, render_document

__all__ = ["Code", "Segment", "Text", "split", "render", "render_document"]
