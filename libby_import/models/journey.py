"""Canonical reading-journey models."""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class Bookmark(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["bookmark"] = "bookmark"
    timestamp: int = Field(ge=0)  # epoch milliseconds
    percent: float = Field(ge=0, le=1)
    chapter_label: str = ""

    @property
    def display_text(self) -> str:
        return self.chapter_label


class Highlight(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["highlight"] = "highlight"
    timestamp: int = Field(ge=0)
    percent: float = Field(ge=0, le=1)
    chapter_label: str = ""
    quote_text: str = ""
    color_symbol: str

    @property
    def display_text(self) -> str:
        return self.quote_text


TimelineEvent = Annotated[Bookmark | Highlight, Field(discriminator="kind")]


class CirculationEntry(BaseModel):
    """One step of the loan lifecycle (borrowed, renewed, returned...)."""

    model_config = ConfigDict(frozen=True)

    timestamp: int = Field(ge=0)
    activity_label: str = ""
    detail_text: str | None = None
    source_label: str = ""


class BookRecord(BaseModel):
    """Normalized export: book metadata, merged timeline and loan history."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    author: str = ""
    publisher: str = ""
    isbn: str = ""
    format_label: str = ""
    overall_percent: float = Field(ge=0, le=100)
    timeline: tuple[TimelineEvent, ...] = ()
    circulation: tuple[CirculationEntry, ...] = Field(min_length=1)

    @property
    def source_label(self) -> str:
        """Library the book was first borrowed from."""
        return self.circulation[0].source_label
