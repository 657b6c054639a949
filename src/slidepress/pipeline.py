"""Parse-then-render pipeline for slide decks."""

from __future__ import annotations

from typing import Mapping

from slidepress.html_rules import html_rules
from slidepress.outline import count_elements, count_sections, format_sections_tree
from slidepress.parser import ParseOptions, parse_deck
from slidepress.renderer import Renderer, RenderOptions, Rule
from slidepress.schemas import RenderResult


def render_deck(
    text: str,
    rules: Mapping[str, Rule] | None = None,
    *,
    parse_options: ParseOptions | None = None,
    render_options: RenderOptions | None = None,
) -> RenderResult:
    """Parse deck text and render it.

    The whole deck is parsed before any rule runs, so a malformed deck
    raises ``StructuralParseError`` without producing partial output.

    Args:
        text: Deck source.
        rules: Render rules per kind. Defaults to ``html_rules()``.
        parse_options: Parser settings.
        render_options: Renderer settings.

    Returns:
        RenderResult with a summary, the section outline and rendered content.
    """
    document = parse_deck(text, parse_options)
    renderer = Renderer.from_options(
        rules if rules is not None else html_rules(),
        render_options or RenderOptions(),
    )
    content = renderer.render(document)

    summary_lines = []
    if document.sections:
        summary_lines.append(f"Title: {document.sections[0].title}")
    summary_lines.append(f"Sections: {count_sections(document.sections)}")
    summary_lines.append(f"Elements: {count_elements(document.sections)}")

    return RenderResult(
        summary="\n".join(summary_lines),
        outline=format_sections_tree(document),
        content=content,
    )
