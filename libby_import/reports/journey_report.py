"""Reading journey Markdown report generator."""

import logging
from collections.abc import Iterable, Sequence
from datetime import tzinfo
from functools import partial
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from libby_import.models.journey import BookRecord, TimelineEvent
from libby_import.reports.formatting import detail_suffix, fraction_percent, long_date, round_percent

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"


class JourneyReportGenerator:
    """Renders a BookRecord as a Markdown note.

    Sections: title and author, book details, the reading timeline grouped
    by calendar day, circulation history and the library attribution.
    """

    def __init__(self, tz: tzinfo | None = None) -> None:
        self.tz = tz
        self.env = Environment(
            loader=FileSystemLoader(str(TEMPLATE_DIR)),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["percent"] = round_percent
        self.env.filters["fraction_percent"] = fraction_percent
        self.env.filters["long_date"] = partial(long_date, tz=tz)
        self.env.filters["detail"] = detail_suffix

    def group_by_day(self, events: Iterable[TimelineEvent]) -> list[tuple[str, list[TimelineEvent]]]:
        """Group events under their long-form date, in first-seen order."""
        grouped: dict[str, list[TimelineEvent]] = {}
        for event in events:
            grouped.setdefault(long_date(event.timestamp, self.tz), []).append(event)
        return list(grouped.items())

    def render(self, book: BookRecord) -> str:
        """Render the reading journey note using the Jinja2 template."""
        days: Sequence[tuple[str, list[TimelineEvent]]] = self.group_by_day(book.timeline)
        logger.debug("Rendering %r: %d timeline days", book.title, len(days))
        template = self.env.get_template("journey.md")
        return template.render(book=book, days=days)


def render(book: BookRecord, tz: tzinfo | None = None) -> str:
    """Render a BookRecord to Markdown text."""
    return JourneyReportGenerator(tz=tz).render(book)
