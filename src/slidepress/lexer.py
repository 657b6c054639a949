"""Classify deck source lines for the document parser."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from slidepress.config import SLIDEPRESS_INDENT_WIDTH, SLIDEPRESS_TAB_SIZE


class LineKind(str, Enum):
    """Classification of a single source line."""

    BLANK = "blank"
    COMMENT = "comment"
    FENCE = "fence"
    HEADER = "header"
    BULLET = "bullet"
    DIRECTIVE = "directive"
    PRE = "pre"
    PROSE = "prose"


DIRECTIVE_NAMES: frozenset[str] = frozenset(
    {"image", "video", "background", "iframe", "link", "html", "caption"}
)

HEADER_RE = re.compile(r"^([ \t]*)(#+)\s+(.*?)\s*$")
BULLET_RE = re.compile(r"^(\s*)-\s+(.*?)\s*$")
FENCE_RE = re.compile(r"^\s*(`{3,}|~{3,})\s*(.*?)\s*$")
DIRECTIVE_RE = re.compile(r"^\.([a-z]+)(?:\s+(.*?))?\s*$")
COMMENT_RE = re.compile(r"^//")


@dataclass(frozen=True)
class ClassifiedLine:
    """A source line together with its classification and captured fields.

    Attributes:
        kind: The line classification.
        line_number: 1-based position in the source.
        text: The raw line without its trailing newline.
        depth: Header depth (indentation level plus number of ``#``) or bullet
            indentation level.
        content: Header title, bullet text, or prose text.
        directive: Directive name for ``DIRECTIVE`` lines.
        arguments: Raw, unvalidated directive argument text.
        fence: Fence marker (backticks or tildes) for ``FENCE`` lines.
        info: Fence info string (language hint and flags).
    """

    kind: LineKind
    line_number: int
    text: str
    depth: int = 0
    content: str = ""
    directive: str | None = None
    arguments: str = ""
    fence: str = ""
    info: str = ""


def indentation_width(line: str, *, tab_size: int = SLIDEPRESS_TAB_SIZE) -> int:
    """Return the column width of the leading whitespace run."""
    stripped = line.lstrip(" \t")
    leading = line[: len(line) - len(stripped)]
    return len(leading.expandtabs(tab_size))


def classify_line(
    text: str,
    line_number: int,
    *,
    indent_width: int = SLIDEPRESS_INDENT_WIDTH,
    tab_size: int = SLIDEPRESS_TAB_SIZE,
) -> ClassifiedLine:
    """Classify one raw line.

    Classification never raises: directive arguments are captured verbatim
    and validated by the parser, and unrecognized lines fall back to prose.
    """
    if not text.strip():
        return ClassifiedLine(LineKind.BLANK, line_number, text)

    if COMMENT_RE.match(text):
        return ClassifiedLine(LineKind.COMMENT, line_number, text)

    match = FENCE_RE.match(text)
    if match:
        return ClassifiedLine(
            LineKind.FENCE,
            line_number,
            text,
            fence=match.group(1),
            info=match.group(2),
        )

    match = HEADER_RE.match(text)
    if match:
        # Each indentation level adds one to the depth given by the hashes,
        # so "  # Sub" and "## Sub" both open a depth-2 section.
        level = indentation_width(match.group(1), tab_size=tab_size) // max(indent_width, 1)
        return ClassifiedLine(
            LineKind.HEADER,
            line_number,
            text,
            depth=level + len(match.group(2)),
            content=match.group(3),
        )

    match = BULLET_RE.match(text)
    if match:
        width = indentation_width(match.group(1), tab_size=tab_size)
        return ClassifiedLine(
            LineKind.BULLET,
            line_number,
            text,
            depth=width // max(indent_width, 1),
            content=match.group(2),
        )

    match = DIRECTIVE_RE.match(text)
    if match and match.group(1) in DIRECTIVE_NAMES:
        return ClassifiedLine(
            LineKind.DIRECTIVE,
            line_number,
            text,
            directive=match.group(1),
            arguments=match.group(2) or "",
        )

    if text[0] in " \t":
        return ClassifiedLine(LineKind.PRE, line_number, text)

    return ClassifiedLine(LineKind.PROSE, line_number, text, content=text.strip())


def classify_lines(
    source: str,
    *,
    indent_width: int = SLIDEPRESS_INDENT_WIDTH,
    tab_size: int = SLIDEPRESS_TAB_SIZE,
) -> Iterator[tuple[ClassifiedLine, ClassifiedLine | None]]:
    """Yield each classified line paired with the next one as lookahead."""
    previous: ClassifiedLine | None = None
    for index, raw in enumerate(source.splitlines(), start=1):
        current = classify_line(
            raw, index, indent_width=indent_width, tab_size=tab_size
        )
        if previous is not None:
            yield previous, current
        previous = current
    if previous is not None:
        yield previous, None
