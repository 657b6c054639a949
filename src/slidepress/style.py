"""Inline style processing for prose strings."""

from __future__ import annotations

import re
import warnings

from markupsafe import Markup, escape

from slidepress.exceptions import StyleEngineWarning

_SPANS = {"*": "b", "_": "i"}
_ESCAPABLE = frozenset("*_`[]\\")
_LINK_RE = re.compile(r"\[\[([^\]\s]+)\](?:\[([^\]]*)\])?\]")


def style(text: str) -> Markup:
    """Convert a raw prose string into styled, escaped HTML.

    Supported markup:
        ``*bold*``, ``_italic_``, ```code```, ``[[url]]``, ``[[url][label]]``
        and backslash escapes for the delimiters themselves.

    Unterminated spans and malformed links are kept as literal text and
    reported with a ``StyleEngineWarning``. Callers must apply this exactly
    once per raw string; feeding it its own output double-escapes.
    """
    return Markup("".join(_render(text)))


def _render(text: str) -> list[str]:
    parts: list[str] = []
    literal: list[str] = []
    i = 0
    length = len(text)

    def flush() -> None:
        if literal:
            parts.append(str(escape("".join(literal))))
            literal.clear()

    while i < length:
        char = text[i]

        if char == "\\" and i + 1 < length and text[i + 1] in _ESCAPABLE:
            literal.append(text[i + 1])
            i += 2
            continue

        if char == "[" and text.startswith("[[", i):
            match = _LINK_RE.match(text, i)
            if match is None:
                _warn(f"malformed link at column {i + 1}: {text[i:i + 20]!r}")
                literal.append("[[")
                i += 2
                continue
            flush()
            url, label = match.group(1), match.group(2)
            inner = "".join(_render(label)) if label else str(escape(url))
            parts.append(f'<a href="{escape(url)}" target="_blank">{inner}</a>')
            i = match.end()
            continue

        if (char in _SPANS or char == "`") and _opens(text, i):
            end = _find_close(text, i, char)
            if end is None:
                _warn(f"unterminated {char!r} span at column {i + 1}")
                literal.append(char)
                i += 1
                continue
            flush()
            content = text[i + 1 : end]
            if char == "`":
                parts.append(f"<code>{escape(content)}</code>")
            else:
                tag = _SPANS[char]
                parts.append(f"<{tag}>{''.join(_render(content))}</{tag}>")
            i = end + 1
            continue

        literal.append(char)
        i += 1

    flush()
    return parts


def _opens(text: str, i: int) -> bool:
    """Return True if the delimiter at ``i`` starts a word."""
    if i + 1 >= len(text) or text[i + 1].isspace():
        return False
    return i == 0 or not text[i - 1].isalnum()


def _closes(text: str, j: int) -> bool:
    if text[j - 1].isspace():
        return False
    return j + 1 == len(text) or not text[j + 1].isalnum()


def _find_close(text: str, start: int, delimiter: str) -> int | None:
    j = start + 1
    while j < len(text):
        if delimiter != "`" and text[j] == "\\":
            j += 2
            continue
        if text[j] == delimiter and j > start + 1 and _closes(text, j):
            return j
        j += 1
    return None


def _warn(message: str) -> None:
    warnings.warn(message, StyleEngineWarning, stacklevel=4)
