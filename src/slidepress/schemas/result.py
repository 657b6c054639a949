"""Render pipeline output model."""

from __future__ import annotations

from pydantic import BaseModel


class RenderResult(BaseModel):
    """Final render output."""

    summary: str
    outline: str
    content: str
