from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional

from ..core.exceptions import ValidationError

WEEKDAYS_DE = ("Montag", "Dienstag", "Mittwoch", "Donnerstag", "Freitag", "Samstag", "Sonntag")
MONTHS_DE = (
    "Januar", "Februar", "März", "April", "Mai", "Juni",
    "Juli", "August", "September", "Oktober", "November", "Dezember",
)


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError(f"Ungültiges Datum: {value!r}")


def parse_optional_date(value: Optional[str]) -> Optional[date]:
    value = (value or "").strip()
    return parse_iso_date(value) if value else None


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch it.
    """
    return date.today()


def weekday_de(d: date) -> str:
    return WEEKDAYS_DE[d.weekday()]


def format_date_de(d: date) -> str:
    """Short Austrian/German format, e.g. 01.05.2024."""
    return d.strftime("%d.%m.%Y")


def format_date_long_de(d: date) -> str:
    """Long format used in headings, e.g. Mittwoch, 1. Mai 2024."""
    return f"{weekday_de(d)}, {d.day}. {MONTHS_DE[d.month - 1]} {d.year}"


def relative_day_label(d: date, today: date) -> Optional[str]:
    if d == today:
        return "Heute"
    if d == today + timedelta(days=1):
        return "Morgen"
    return None
