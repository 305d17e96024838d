"""Record normalization: validate a raw export and build a BookRecord."""

import logging
from typing import Any

from pydantic import ValidationError

from libby_import.exceptions import SchemaError
from libby_import.models.journey import Bookmark, BookRecord, CirculationEntry, Highlight
from libby_import.normalization.colors import resolve_color

logger = logging.getLogger(__name__)

SUPPORTED_VERSION = 1
REQUIRED_SECTIONS = ("readingJourney", "circulation")


def supports_version(version: int | None) -> bool:
    """Whether this package understands the given export format version.

    Exports without a version tag are treated as supported.
    """
    return version is None or version <= SUPPORTED_VERSION


class RecordNormalizer:
    """Reshapes a decoded Libby export into a canonical BookRecord."""

    def normalize(self, raw: Any) -> BookRecord:
        """Validate the export structure and build an immutable BookRecord."""
        self._validate(raw)
        journey = raw["readingJourney"]

        bookmarks = [self._bookmark(item) for item in raw.get("bookmarks") or []]
        highlights = [self._highlight(item) for item in raw.get("highlights") or []]
        # Stable sort: on equal timestamps bookmarks stay ahead of highlights
        timeline = sorted([*bookmarks, *highlights], key=lambda event: event.timestamp)
        circulation = [self._circulation_entry(item) for item in raw["circulation"]]

        logger.debug(
            "Normalized %d bookmarks, %d highlights, %d circulation entries",
            len(bookmarks),
            len(highlights),
            len(circulation),
        )

        try:
            return BookRecord(
                title=_text(journey.get("title")),
                author=journey.get("author") or "",
                publisher=journey.get("publisher") or "",
                isbn=journey.get("isbn") or "",
                format_label=_text(journey.get("cover"), key="format"),
                overall_percent=_fraction(journey.get("percent")) * 100,
                timeline=tuple(timeline),
                circulation=tuple(circulation),
            )
        except ValidationError as exc:
            raise SchemaError(f"invalid reading journey: {exc}") from exc

    @staticmethod
    def _validate(raw: Any) -> None:
        if not isinstance(raw, dict) or any(raw.get(section) is None for section in REQUIRED_SECTIONS):
            raise SchemaError("not a recognized export")
        if not isinstance(raw["readingJourney"], dict) or not isinstance(raw["circulation"], list):
            raise SchemaError("not a recognized export")
        if not raw["circulation"]:
            raise SchemaError("no circulation history")
        for section in ("bookmarks", "highlights", "circulation"):
            items = raw.get(section) or []
            if not isinstance(items, list) or not all(isinstance(item, dict) for item in items):
                raise SchemaError(f"'{section}' must be a list of objects")

    # --- Converters ---

    @staticmethod
    def _bookmark(item: dict) -> Bookmark:
        try:
            return Bookmark(
                timestamp=item["timestamp"],
                percent=item.get("percent") or 0,
                chapter_label=item.get("chapter") or "",
            )
        except (KeyError, ValidationError) as exc:
            raise SchemaError(f"invalid bookmark: {exc}") from exc

    @staticmethod
    def _highlight(item: dict) -> Highlight:
        try:
            return Highlight(
                timestamp=item["timestamp"],
                percent=item.get("percent") or 0,
                chapter_label=item.get("chapter") or "",
                quote_text=item.get("quote") or "",
                color_symbol=resolve_color(item.get("color")),
            )
        except (KeyError, ValidationError) as exc:
            raise SchemaError(f"invalid highlight: {exc}") from exc

    @staticmethod
    def _circulation_entry(item: dict) -> CirculationEntry:
        try:
            return CirculationEntry(
                timestamp=item["timestamp"],
                activity_label=item.get("activity") or "",
                detail_text=item.get("details"),
                source_label=_text(item.get("library")),
            )
        except (KeyError, ValidationError) as exc:
            raise SchemaError(f"invalid circulation entry: {exc}") from exc


def _text(node: Any, key: str = "text") -> str:
    """Read a Libby label: either an object like {"text": ...} or a bare string."""
    if isinstance(node, dict):
        node = node.get(key)
    if node is None:
        return ""
    if not isinstance(node, str):
        raise SchemaError(f"expected a text label, got {node!r}")
    return node


def _fraction(value: Any) -> float:
    """Overall progress as a number; absent progress counts as zero."""
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SchemaError(f"invalid reading journey: percent must be a number, got {value!r}")
    return value


def normalize(raw: Any) -> BookRecord:
    """Normalize a decoded export. Raises SchemaError on malformed input."""
    return RecordNormalizer().normalize(raw)
