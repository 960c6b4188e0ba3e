from __future__ import annotations

from datetime import date, datetime, timedelta

ISO_DATE_FORMAT = "%Y-%m-%d"


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, ISO_DATE_FORMAT).date()


def to_iso(value: date) -> str:
    # Year is always zero-padded to four digits.
    return value.isoformat()


def today_local() -> date:
    """Current local date.

    Note: Wrapped so services can take it as an injectable clock.
    """
    return date.today()


def trailing_days(end: date, count: int) -> list[date]:
    """`count` consecutive days ending at `end` inclusive, oldest first."""
    return [end - timedelta(days=offset) for offset in range(count - 1, -1, -1)]


def month_day_label(iso_date: str) -> str:
    """Chart label for an ISO date: '2024-01-10' -> '01-10'."""
    return iso_date[5:]
