"""Element models: one pydantic model per element kind."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class ListElement(BaseModel):
    """A run of bullets at one indentation level."""

    kind: Literal["list"] = "list"
    bullets: list[str] = Field(default_factory=list)
    level: int = Field(default=0, ge=0)


class TextElement(BaseModel):
    """Prose or preformatted text.

    Attributes:
        pre: If True, lines are emitted verbatim with whitespace preserved.
            Otherwise each line is styled and lines are separated by an
            explicit line break.
        lines: Raw source lines in order.
    """

    kind: Literal["text"] = "text"
    pre: bool = False
    lines: list[str] = Field(default_factory=list)


class CodeElement(BaseModel):
    """A fenced code block."""

    kind: Literal["code"] = "code"
    text: str
    edit: bool = False
    language: str | None = None
    numbers: bool = False


class _Media(BaseModel):
    url: str = Field(..., min_length=1)
    height: int | None = Field(default=None, gt=0)
    width: int | None = Field(default=None, gt=0)


class ImageElement(_Media):
    """An embedded image."""

    kind: Literal["image"] = "image"


class VideoElement(_Media):
    """An embedded video with its MIME type."""

    kind: Literal["video"] = "video"
    source_type: str = Field(..., min_length=1)


class BackgroundElement(_Media):
    """A full-slide background image."""

    kind: Literal["background"] = "background"


class IframeElement(_Media):
    """An embedded iframe."""

    kind: Literal["iframe"] = "iframe"


class LinkElement(BaseModel):
    """A standalone link line."""

    kind: Literal["link"] = "link"
    url: str = Field(..., min_length=1)
    label: str = ""

    @property
    def display_label(self) -> str:
        """Label to show; falls back to the URL when no label was given."""
        return self.label or self.url


class HTMLElement(BaseModel):
    """Raw HTML passthrough.

    The payload is trusted: it is never escaped or sanitized by slidepress.
    Callers that accept untrusted decks must sanitize before rendering.
    """

    kind: Literal["html"] = "html"
    html: str


class CaptionElement(BaseModel):
    """Caption text; belongs to the preceding media element by position only."""

    kind: Literal["caption"] = "caption"
    text: str


Element = Annotated[
    Union[
        ListElement,
        TextElement,
        CodeElement,
        ImageElement,
        VideoElement,
        BackgroundElement,
        IframeElement,
        LinkElement,
        HTMLElement,
        CaptionElement,
    ],
    Field(discriminator="kind"),
]

ELEMENT_KINDS: frozenset[str] = frozenset(
    {
        "list",
        "text",
        "code",
        "image",
        "video",
        "background",
        "iframe",
        "link",
        "html",
        "caption",
    }
)
SECTION_KIND = "section"
RULE_KINDS: frozenset[str] = ELEMENT_KINDS | {SECTION_KIND}
