"""Build elements from directive lines."""

from __future__ import annotations

import shlex
from typing import Callable

from pydantic import ValidationError

from slidepress.exceptions import StructuralParseError
from slidepress.lexer import ClassifiedLine, LineKind
from slidepress.schemas import (
    BackgroundElement,
    CaptionElement,
    Element,
    HTMLElement,
    IframeElement,
    ImageElement,
    LinkElement,
    VideoElement,
)

_ABSENT = "_"

DirectiveBuilder = Callable[[ClassifiedLine], Element]


def build_directive(line: ClassifiedLine) -> Element:
    """Turn a ``DIRECTIVE`` line into its element.

    Raises:
        StructuralParseError: If required arguments are missing or malformed.
    """
    if line.kind is not LineKind.DIRECTIVE or line.directive is None:
        raise StructuralParseError(line.line_number, "not a directive line")
    builder = _BUILDERS.get(line.directive)
    if builder is None:
        raise StructuralParseError(
            line.line_number, f"unknown directive .{line.directive}"
        )
    try:
        return builder(line)
    except ValidationError as exc:
        error = exc.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or "arguments"
        raise StructuralParseError(
            line.line_number,
            f".{line.directive}: invalid {field}: {error['msg']}",
        ) from exc


def _split_arguments(line: ClassifiedLine, *, keep_rest: bool = False) -> list[str]:
    """Split directive arguments like a shell.

    With ``keep_rest`` only the first argument is tokenized; the remainder of
    the line is returned untouched as a second item so inline markup and
    backslashes survive.
    """
    lexer = shlex.shlex(line.arguments, posix=True)
    lexer.whitespace_split = True
    lexer.commenters = ""
    try:
        if not keep_rest:
            return list(lexer)
        first = lexer.get_token()
        if first is None:
            return []
        rest = lexer.instream.read().strip()
        return [first, rest] if rest else [first]
    except ValueError as exc:
        raise StructuralParseError(
            line.line_number, f".{line.directive}: malformed arguments: {exc}"
        ) from exc


def _require(line: ClassifiedLine, args: list[str], count: int, names: str) -> None:
    if len(args) < count:
        raise StructuralParseError(
            line.line_number, f".{line.directive}: missing required {names}"
        )


def _dimension(line: ClassifiedLine, value: str | None, name: str) -> int | None:
    """Parse an optional height/width argument; ``_`` or absence means None."""
    if value is None or value == _ABSENT:
        return None
    number = int(value) if value.isascii() and value.isdigit() else 0
    if number <= 0:
        raise StructuralParseError(
            line.line_number,
            f".{line.directive}: {name} must be a positive integer, got {value!r}",
        )
    return number


def _dimensions(
    line: ClassifiedLine, args: list[str], offset: int
) -> dict[str, int | None]:
    if len(args) > offset + 2:
        raise StructuralParseError(
            line.line_number, f".{line.directive}: too many arguments"
        )
    height = args[offset] if len(args) > offset else None
    width = args[offset + 1] if len(args) > offset + 1 else None
    return {
        "height": _dimension(line, height, "height"),
        "width": _dimension(line, width, "width"),
    }


def _build_image(line: ClassifiedLine) -> Element:
    args = _split_arguments(line)
    _require(line, args, 1, "URL")
    return ImageElement(url=args[0], **_dimensions(line, args, 1))


def _build_background(line: ClassifiedLine) -> Element:
    args = _split_arguments(line)
    _require(line, args, 1, "URL")
    return BackgroundElement(url=args[0], **_dimensions(line, args, 1))


def _build_iframe(line: ClassifiedLine) -> Element:
    args = _split_arguments(line)
    _require(line, args, 1, "URL")
    return IframeElement(url=args[0], **_dimensions(line, args, 1))


def _build_video(line: ClassifiedLine) -> Element:
    args = _split_arguments(line)
    _require(line, args, 1, "URL")
    _require(line, args, 2, "source type")
    return VideoElement(
        url=args[0], source_type=args[1], **_dimensions(line, args, 2)
    )


def _build_link(line: ClassifiedLine) -> Element:
    # Only the URL is tokenized; the label keeps its raw inline markup.
    parts = _split_arguments(line, keep_rest=True)
    _require(line, parts, 1, "URL")
    label = parts[1] if len(parts) > 1 else ""
    return LinkElement(url=parts[0], label=label)


def _build_caption(line: ClassifiedLine) -> Element:
    if not line.arguments.strip():
        raise StructuralParseError(line.line_number, ".caption: missing required text")
    return CaptionElement(text=line.arguments.strip())


def _build_html(line: ClassifiedLine) -> Element:
    if not line.arguments.strip():
        raise StructuralParseError(line.line_number, ".html: missing required payload")
    return HTMLElement(html=line.arguments)


_BUILDERS: dict[str, DirectiveBuilder] = {
    "image": _build_image,
    "video": _build_video,
    "background": _build_background,
    "iframe": _build_iframe,
    "link": _build_link,
    "caption": _build_caption,
    "html": _build_html,
}
