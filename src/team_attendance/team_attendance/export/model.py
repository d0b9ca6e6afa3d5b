from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Sequence, Tuple

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@dataclass(frozen=True)
class SheetData:
    """One worksheet as plain rows plus column width hints (in characters)."""

    name: str
    rows: Tuple[Tuple[Any, ...], ...]
    column_widths: Tuple[int, ...] = ()


@dataclass(frozen=True)
class ExportWorkbook:
    start: date
    end: date
    sheets: Sequence[SheetData]

    @property
    def filename(self) -> str:
        return export_filename(self.start, self.end)


def export_filename(start: date, end: date) -> str:
    return f"Anwesenheit_{start.isoformat()}_bis_{end.isoformat()}.xlsx"
