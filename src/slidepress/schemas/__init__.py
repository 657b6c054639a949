"""Shared schemas for slidepress."""

from slidepress.schemas.document import Document, Section
from slidepress.schemas.elements import (
    ELEMENT_KINDS,
    RULE_KINDS,
    SECTION_KIND,
    BackgroundElement,
    CaptionElement,
    CodeElement,
    Element,
    HTMLElement,
    IframeElement,
    ImageElement,
    LinkElement,
    ListElement,
    TextElement,
    VideoElement,
)
from slidepress.schemas.result import RenderResult

__all__ = [
    "ELEMENT_KINDS",
    "RULE_KINDS",
    "SECTION_KIND",
    "BackgroundElement",
    "CaptionElement",
    "CodeElement",
    "Document",
    "Element",
    "HTMLElement",
    "IframeElement",
    "ImageElement",
    "LinkElement",
    "ListElement",
    "RenderResult",
    "Section",
    "TextElement",
    "VideoElement",
]
