"""Custom exceptions for slidepress."""

from __future__ import annotations

from typing import Iterable


class SlidepressError(Exception):
    """Base exception for slidepress operations."""


class ParseError(SlidepressError):
    """Error during deck parsing."""


class StructuralParseError(ParseError):
    """Deck text is malformed; the whole parse is aborted.

    Attributes:
        line_number: 1-based line number the error refers to.
        reason: Human-readable description of the problem.
    """

    def __init__(self, line_number: int, reason: str) -> None:
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"line {line_number}: {reason}")


class ConfigurationError(SlidepressError):
    """Renderer rules do not match the set of renderable kinds.

    Attributes:
        kinds: Sorted kind names at fault, either kinds lacking a rule or
            rule keys that name no kind.
    """

    def __init__(self, message: str, kinds: Iterable[str] = ()) -> None:
        self.kinds = tuple(sorted(kinds))
        if self.kinds:
            message = f"{message}: {', '.join(self.kinds)}"
        super().__init__(message)


class StyleEngineWarning(UserWarning):
    """Inline markup could not be interpreted and was kept as literal text."""
