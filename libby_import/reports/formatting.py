"""Value formatting shared by the report templates."""

from datetime import datetime, tzinfo
from decimal import ROUND_HALF_UP, Decimal

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def round_percent(value: float) -> int:
    """Round a percentage to the nearest integer, halves rounding up."""
    return int(Decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def fraction_percent(fraction: float) -> int:
    """Render a [0, 1] progress fraction as a whole percentage."""
    return round_percent(fraction * 100)


def long_date(timestamp_ms: int, tz: tzinfo | None = None) -> str:
    """Format an epoch-millisecond timestamp as "Month Day, Year".

    With no tz the local timezone decides the calendar day.
    """
    moment = datetime.fromtimestamp(timestamp_ms / 1000, tz=tz)
    return f"{MONTH_NAMES[moment.month - 1]} {moment.day}, {moment.year}"


def detail_suffix(detail: str | None) -> str:
    """Parenthesized circulation detail, or nothing when there is none."""
    if not detail:
        return ""
    return f" ({detail.strip()})"
