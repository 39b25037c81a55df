from __future__ import annotations

from dataclasses import dataclass
from typing import List, Union

FENCE = "```"
CLOSING_FENCE = "\n" + FENCE


@dataclass(frozen=True)
class Text:
    """Prose rendered as styled markdown."""

    content: str


@dataclass(frozen=True)
class Code:
    """A fenced block: language tag (may be empty) and the literal body."""

    language: str
    body: str


Segment = Union[Text, Code]


def _is_bare_fence(content: str, pos: int) -> bool:
    if not content.startswith(FENCE, pos):
        return False
    end = pos + len(FENCE)
    return end == len(content) or content[end] == "\n"


def split(content: str) -> List[Segment]:
    """Split a markdown document into prose and fenced-code segments.

    Single left-to-right pass. A fence is closed only by a line break
    immediately followed by three backticks. When no closing fence exists,
    everything from the opening fence onward is kept verbatim as Text and
    scanning stops there. A block whose first line is a bare fence is empty.
    Never raises; empty input gives an empty list.
    """
    segments: List[Segment] = []
    pos = 0
    length = len(content)

    while pos < length:
        start = content.find(FENCE, pos)
        if start == -1:
            segments.append(Text(content[pos:]))
            break

        if start > pos:
            segments.append(Text(content[pos:start]))

        eol = content.find("\n", start + len(FENCE))
        if eol == -1:
            # Fence on the last line with nothing after it
            segments.append(Text(content[start:]))
            break
        language = content[start + len(FENCE):eol].strip()

        code_start = eol + 1
        while code_start < length and content[code_start] == "\n":
            code_start += 1

        if _is_bare_fence(content, code_start):
            # Empty block: the next line is nothing but the closing fence
            segments.append(Code(language, ""))
            pos = code_start + len(FENCE)
            continue

        close = content.find(CLOSING_FENCE, code_start)
        if close == -1:
            segments.append(Text(content[start:]))
            break

        body = content[code_start:close]
        if body.endswith("\r"):
            body = body[:-1]
        segments.append(Code(language, body))
        pos = close + len(CLOSING_FENCE)

    return segments


def join(segments: List[Segment]) -> str:
    """Rebuild document text from segments, restoring fence markers."""
    parts: List[str] = []
    for segment in segments:
        if isinstance(segment, Text):
            parts.append(segment.content)
        elif isinstance(segment, Code):
            if segment.body:
                parts.append(f"{FENCE}{segment.language}\n{segment.body}{CLOSING_FENCE}")
            else:
                parts.append(f"{FENCE}{segment.language}{CLOSING_FENCE}")
        else:
            raise TypeError(f"Unknown segment type: {type(segment).__name__}")
    return "".join(parts)
