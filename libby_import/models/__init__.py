"""Data models for Libby Import."""

from libby_import.models.enums import ConflictPolicy
from libby_import.models.journey import (
    Bookmark,
    BookRecord,
    CirculationEntry,
    Highlight,
    TimelineEvent,
)

__all__ = [
    "Bookmark",
    "BookRecord",
    "CirculationEntry",
    "ConflictPolicy",
    "Highlight",
    "TimelineEvent",
]
