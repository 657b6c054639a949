"""slidepress: parse slide-deck text and render it through per-kind rules."""

from slidepress.capabilities import has_edit_flag, never_playable, playable_languages
from slidepress.exceptions import (
    ConfigurationError,
    ParseError,
    SlidepressError,
    StructuralParseError,
    StyleEngineWarning,
)
from slidepress.html_rules import html_rules
from slidepress.parser import DocumentParser, ParseOptions, parse_deck
from slidepress.pipeline import render_deck
from slidepress.renderer import Renderer, RenderOptions
from slidepress.schemas import Document, RenderResult, Section
from slidepress.style import style

__all__ = [
    "ConfigurationError",
    "Document",
    "DocumentParser",
    "ParseError",
    "ParseOptions",
    "RenderOptions",
    "RenderResult",
    "Renderer",
    "Section",
    "SlidepressError",
    "StructuralParseError",
    "StyleEngineWarning",
    "has_edit_flag",
    "html_rules",
    "never_playable",
    "parse_deck",
    "playable_languages",
    "render_deck",
    "style",
]
