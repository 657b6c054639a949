"""Section tree models."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from slidepress.schemas.elements import Element


class Section(BaseModel):
    """A numbered, titled slide or sub-slide."""

    number: list[int] = Field(..., min_length=1)
    title: str
    elements: list[Element] = Field(default_factory=list)
    sections: list["Section"] = Field(default_factory=list)

    @field_validator("number")
    @classmethod
    def validate_number(cls, v: list[int]) -> list[int]:
        """Validate that every number component is positive."""
        if any(n < 1 for n in v):
            err = "section number components must be positive"
            raise ValueError(err)
        return v

    @property
    def depth(self) -> int:
        """Nesting depth; top-level sections have depth 1."""
        return len(self.number)

    @property
    def formatted_number(self) -> str:
        """Display form of the number, e.g. ``2.1``."""
        return ".".join(str(n) for n in self.number)


class Document(BaseModel):
    """Root of a parsed deck."""

    sections: list[Section] = Field(default_factory=list)
