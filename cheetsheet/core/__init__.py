"""Document model and segment splitting."""

from .segments import Code, Segment, Text, join, split

__all__ = ["Code", "Segment", "Text", "join", "split"]
