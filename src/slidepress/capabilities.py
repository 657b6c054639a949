"""Capability queries the renderer asks about individual nodes."""

from __future__ import annotations

from typing import Callable

from slidepress.schemas import CodeElement

PlayableQuery = Callable[[CodeElement], bool]


def never_playable(code: CodeElement) -> bool:
    """Default query: no code block is playable without an execution service."""
    return False


def playable_languages(*languages: str) -> PlayableQuery:
    """Build a query that accepts non-empty code tagged with one of ``languages``.

    The comparison is case-insensitive. Code without a language hint is
    never playable.
    """
    accepted = frozenset(language.lower() for language in languages)

    def is_playable(code: CodeElement) -> bool:
        if not code.text.strip() or not code.language:
            return False
        return code.language.lower() in accepted

    return is_playable


def has_edit_flag(code: CodeElement) -> bool:
    """Return True if the block was marked editable with ``-edit``."""
    return code.edit
