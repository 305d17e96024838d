"""Note file name templating."""

import re
from datetime import date, datetime, timezone

from libby_import.models.journey import BookRecord

DEFAULT_NAME_TEMPLATE = "{{title}} - {{author}}"

_UNSAFE_CHARS = re.compile(r'[\\/:*?"<>|]')


def _iso_day(timestamp_ms: int) -> str:
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc).date().isoformat()


def format_file_name(book: BookRecord, template: str = DEFAULT_NAME_TEMPLATE, today: date | None = None) -> str:
    """Expand a file name template for a book and strip path-unsafe characters.

    Supported variables: {{title}}, {{author}}, {{publisher}}, {{format}},
    {{ISBN}}, {{dateImported}} and {{dateBorrowed}} (ISO dates, UTC).
    """
    if today is None:
        today = datetime.now(timezone.utc).date()

    replacements = {
        "{{title}}": book.title,
        "{{author}}": book.author,
        "{{publisher}}": book.publisher,
        "{{format}}": book.format_label,
        "{{ISBN}}": book.isbn,
        "{{dateImported}}": today.isoformat(),
        "{{dateBorrowed}}": _iso_day(book.circulation[0].timestamp) if book.circulation[0].timestamp else "",
    }

    name = template
    for key, value in replacements.items():
        name = name.replace(key, value)
    return _UNSAFE_CHARS.sub("-", name)
