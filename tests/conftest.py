"""Shared test fixtures for Libby Import."""

import copy
import json
from datetime import timezone
from pathlib import Path

import pytest

from libby_import.models.journey import Bookmark, BookRecord, CirculationEntry, Highlight

# 2024-03-09T16:00:00Z
MARCH_9 = 1_710_000_000_000
DAY_MS = 86_400_000

SAMPLE_EXPORT = {
    "version": 1,
    "readingJourney": {
        "title": {"text": "The Left Hand of Darkness"},
        "author": "Ursula K. Le Guin",
        "publisher": "Ace Books",
        "isbn": "9780441478125",
        "percent": 0.42,
        "cover": {"format": "ebook"},
    },
    "bookmarks": [
        {"chapter": "3", "timestamp": MARCH_9 + DAY_MS, "percent": 0.2},
        {"chapter": "1", "timestamp": MARCH_9, "percent": 0.05},
    ],
    "highlights": [
        {
            "quote": "Light is the left hand of darkness",
            "timestamp": MARCH_9 + DAY_MS,
            "percent": 0.25,
            "chapter": "3",
            "color": "#DFC",
        },
        {
            "quote": "The only thing that makes life possible is permanent, intolerable uncertainty",
            "timestamp": MARCH_9 + 60_000,
            "percent": 0.1,
            "chapter": "1",
            "color": "#FFB",
        },
    ],
    "circulation": [
        {
            "timestamp": MARCH_9 - DAY_MS,
            "activity": "Borrowed",
            "details": " 21 days ",
            "library": {"text": "Springfield Public Library"},
        },
        {
            "timestamp": MARCH_9 + 3 * DAY_MS,
            "activity": "Returned",
            "library": {"text": "Springfield Public Library"},
        },
    ],
}


@pytest.fixture
def raw_export() -> dict:
    return copy.deepcopy(SAMPLE_EXPORT)


@pytest.fixture
def export_file(tmp_path: Path, raw_export: dict) -> Path:
    f = tmp_path / "libbytimeline-activities.json"
    f.write_text(json.dumps(raw_export), encoding="utf-8")
    return f


@pytest.fixture
def utc() -> timezone:
    return timezone.utc


@pytest.fixture
def sample_record() -> BookRecord:
    return BookRecord(
        title="Piranesi",
        author="Susanna Clarke",
        publisher="Bloomsbury",
        isbn="9781526622433",
        format_label="ebook",
        overall_percent=100.0,
        timeline=(
            Bookmark(timestamp=MARCH_9, percent=0.5, chapter_label="Part 2"),
            Highlight(
                timestamp=MARCH_9 + DAY_MS,
                percent=0.876,
                chapter_label="Part 5",
                quote_text="The Beauty of the House is immeasurable",
                color_symbol="\U0001F497",
            ),
        ),
        circulation=(
            CirculationEntry(
                timestamp=MARCH_9 - DAY_MS,
                activity_label="Borrowed",
                detail_text="14 days",
                source_label="Brooklyn Public Library",
            ),
        ),
    )
