"""Rule-driven rendering of a parsed deck."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Mapping

from markupsafe import Markup, escape

from slidepress.capabilities import PlayableQuery, has_edit_flag, never_playable
from slidepress.config import SLIDEPRESS_RENDER_WORKERS
from slidepress.exceptions import ConfigurationError
from slidepress.schemas import (
    RULE_KINDS,
    SECTION_KIND,
    CaptionElement,
    CodeElement,
    Document,
    Element,
    LinkElement,
    ListElement,
    Section,
    TextElement,
)
from slidepress.style import style

logger = logging.getLogger(__name__)

Rule = Callable[[dict[str, Any]], str]


@dataclass
class RenderOptions:
    """Options for deck rendering.

    Attributes:
        workers: Number of threads used to render top-level sections. With
            one worker everything renders on the calling thread.
        is_playable: Query deciding whether a code block is playable.
    """

    workers: int = SLIDEPRESS_RENDER_WORKERS
    is_playable: PlayableQuery = never_playable


def observed_kinds(document: Document) -> set[str]:
    """Return every rule kind needed to render ``document``."""
    kinds: set[str] = set()

    def visit(sections: Iterable[Section]) -> None:
        for section in sections:
            kinds.add(SECTION_KIND)
            kinds.update(element.kind for element in section.elements)
            visit(section.sections)

    visit(document.sections)
    return kinds


class Renderer:
    """Render a ``Document`` by dispatching each node to its kind's rule.

    A rule receives a context dict and returns a markup string. Every
    element context holds ``kind``, ``node`` and the node's fields, plus
    computed fields (styled text, capability flags). Section contexts carry
    numbering, heading level and the already rendered ``body``.

    The tree is only read, never modified, so sibling top-level sections
    may render on separate threads; output is always joined in document
    order.
    """

    def __init__(
        self,
        rules: Mapping[str, Rule],
        *,
        is_playable: PlayableQuery = never_playable,
        workers: int = SLIDEPRESS_RENDER_WORKERS,
    ) -> None:
        unknown = set(rules) - RULE_KINDS
        if unknown:
            raise ConfigurationError("render rules given for unknown kinds", unknown)
        self.rules = dict(rules)
        self.is_playable = is_playable
        self.workers = max(workers, 1)

    @classmethod
    def from_options(cls, rules: Mapping[str, Rule], options: RenderOptions) -> Renderer:
        return cls(rules, is_playable=options.is_playable, workers=options.workers)

    def check(self, kinds: Iterable[str] = RULE_KINDS) -> None:
        """Raise ``ConfigurationError`` if any of ``kinds`` has no rule."""
        missing = set(kinds) - set(self.rules)
        if missing:
            raise ConfigurationError("no render rule for kinds", missing)

    def render(self, document: Document) -> str:
        """Render the whole document into one string."""
        return "".join(self.iter_render(document))

    def iter_render(self, document: Document) -> Iterator[str]:
        """Validate the rules, then yield one fragment per top-level section.

        Raises:
            ConfigurationError: Before anything is rendered, if a kind that
                occurs in the document has no rule.
        """
        self.check(observed_kinds(document))
        logger.debug(
            "Rendering %d top-level sections with %d worker(s)",
            len(document.sections),
            self.workers,
        )
        return self._iter_sections(document.sections)

    def _iter_sections(self, sections: list[Section]) -> Iterator[str]:
        if self.workers == 1 or len(sections) < 2:
            for section in sections:
                yield self.render_section(section)
            return
        with ThreadPoolExecutor(max_workers=self.workers) as pool:
            # map() yields in submission order, not completion order.
            yield from pool.map(self.render_section, sections)

    def render_section(self, section: Section) -> str:
        """Render one section and everything beneath it."""
        parts = [self.render_element(element) for element in section.elements]
        parts.extend(self.render_section(child) for child in section.sections)
        context = {
            "kind": SECTION_KIND,
            "node": section,
            "number": list(section.number),
            "formatted_number": section.formatted_number,
            "depth": section.depth,
            "heading_level": min(section.depth, 6),
            "title": section.title,
            "styled_title": style(section.title),
            "body": Markup("".join(parts)),
        }
        return self.rules[SECTION_KIND](context)

    def render_element(self, element: Element) -> str:
        """Render a single element with its kind's rule."""
        context: dict[str, Any] = {"node": element, **element.model_dump()}
        context.update(self._computed(element))
        return Markup(self.rules[element.kind](context))

    def _computed(self, element: Element) -> dict[str, Any]:
        if isinstance(element, ListElement):
            return {"styled_bullets": [style(bullet) for bullet in element.bullets]}
        if isinstance(element, TextElement):
            if element.pre:
                return {"styled_lines": list(element.lines)}
            return {"styled_lines": [style(line) for line in element.lines]}
        if isinstance(element, CodeElement):
            return {
                "playable": bool(self.is_playable(element)),
                "edit": has_edit_flag(element),
            }
        if isinstance(element, LinkElement):
            styled = style(element.label) if element.label else escape(element.url)
            return {"display_label": element.display_label, "styled_label": styled}
        if isinstance(element, CaptionElement):
            return {"styled_text": style(element.text)}
        return {}
