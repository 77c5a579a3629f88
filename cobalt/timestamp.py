"""Timezone-aware date-times as used in frontmatter and file names."""

from __future__ import annotations

from datetime import date, datetime, timezone

_DISPLAY_FORMAT = "%Y-%m-%d %H:%M:%S %z"

_PARSE_FORMATS = (
    "%Y-%m-%d %H:%M:%S %z",
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%d %H:%M:%S%z",
    "%d %B %Y %H:%M:%S %z",
    "%a, %d %b %Y %H:%M:%S %z",
)

_DATE_ONLY_FORMAT = "%Y-%m-%d"


def _with_timezone(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def from_ymd(year: int, month: int, day: int) -> datetime:
    """Midnight UTC on the given day; raises ValueError for an invalid date."""
    return datetime(year, month, day, tzinfo=timezone.utc)


def now() -> datetime:
    """The current instant in UTC."""
    return datetime.now(timezone.utc)


def format_datetime(value: datetime) -> str:
    """Render a date-time as ``YYYY-MM-DD HH:MM:SS +ZZZZ``."""
    return _with_timezone(value).strftime(_DISPLAY_FORMAT)


def parse_datetime(text: str | datetime | date) -> datetime:
    """Parse a date-time; naive and date-only values are taken as UTC."""
    if isinstance(text, datetime):
        return _with_timezone(text)
    if isinstance(text, date):
        return from_ymd(text.year, text.month, text.day)
    if not isinstance(text, str):
        raise ValueError(f"invalid date-time: {text!r}")

    candidate = text.strip()
    for fmt in _PARSE_FORMATS:
        try:
            return datetime.strptime(candidate, fmt)
        except ValueError:
            continue
    try:
        day = datetime.strptime(candidate, _DATE_ONLY_FORMAT)
    except ValueError:
        raise ValueError(f"invalid date-time: {text!r}") from None
    return day.replace(tzinfo=timezone.utc)