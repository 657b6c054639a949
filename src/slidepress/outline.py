"""Summaries of a parsed deck: counts, section tree and table of contents."""

from __future__ import annotations

from typing import Iterable

from slidepress.schemas import Document, Section


def count_sections(sections: Iterable[Section]) -> int:
    """Count total sections in the tree."""
    total = 0
    for section in sections:
        total += 1
        total += count_sections(section.sections)
    return total


def count_elements(sections: Iterable[Section]) -> int:
    """Count elements across all sections in the tree."""
    total = 0
    for section in sections:
        total += len(section.elements)
        total += count_elements(section.sections)
    return total


def format_sections_tree(document: Document) -> str:
    """Render numbered section titles, indented by depth."""
    return "Sections:\n" + _create_sections_tree(document.sections)


def format_toc(document: Document) -> str:
    """Render a Markdown bullet list of section titles."""
    return _render_toc(document.sections)


def _create_sections_tree(sections: list[Section], indent: int = 0) -> str:
    lines: list[str] = []
    for section in sections:
        lines.append(" " * (indent * 4) + f"{section.formatted_number} {section.title}")
        if section.sections:
            lines.append(_create_sections_tree(section.sections, indent + 1))
    return "\n".join(lines)


def _render_toc(sections: list[Section], indent: int = 0) -> str:
    lines: list[str] = []
    for section in sections:
        prefix = "  " * indent + "- "
        lines.append(prefix + section.title)
        if section.sections:
            lines.append(_render_toc(section.sections, indent + 1))
    return "\n".join(lines)
