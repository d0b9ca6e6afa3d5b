from __future__ import annotations

from datetime import date
from typing import Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} darf nicht leer sein")
    return value.strip()


def optional_text(value: Optional[str]) -> Optional[str]:
    """Trim free text; blank input is stored as NULL."""
    return (value or "").strip() or None


def require_date_range(start: Optional[date], end: Optional[date]) -> tuple[date, date]:
    if not start or not end:
        raise ValidationError("Bitte Start- und Enddatum auswählen")
    if start > end:
        raise ValidationError("Das Startdatum liegt nach dem Enddatum")
    return start, end


def check_optional_range(start: Optional[date], end: Optional[date]) -> None:
    if start and end and start > end:
        raise ValidationError("Das Startdatum liegt nach dem Enddatum")
