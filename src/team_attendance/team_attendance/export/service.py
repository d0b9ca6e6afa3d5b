from __future__ import annotations

from datetime import date
from typing import Any, List, Optional, Sequence, Tuple

from ..common.datetime_utils import format_date_de, weekday_de
from ..common.validators import require_date_range
from ..core.constants import EMPTY_CELL, PRESENT_MARK
from ..core.exceptions import NoDataError
from ..roster.model import Player
from ..roster.repository import PlayerRepository
from ..statistics.service import attendance_percentage
from ..trainings.model import TrainingDetail
from ..trainings.repository import TrainingRepository
from .model import ExportWorkbook, SheetData
from .writer import ExcelWorkbookWriter

ATTENDANCE_SHEET = "Übersicht"
STATISTICS_SHEET = "Statistik"


class ExportService:
    """Use case: build the attendance workbook for a date range.

    Both sheets are synthesized here from the fetched rows; only the xlsx
    encoding is delegated to the writer.
    """

    def __init__(
        self,
        trainings: TrainingRepository,
        players: PlayerRepository,
        *,
        writer: Optional[ExcelWorkbookWriter] = None,
        team_name: str = "",
    ):
        self._trainings = trainings
        self._players = players
        self._writer = writer or ExcelWorkbookWriter()
        self._team_name = (team_name or "").strip()

    def build(self, *, start: Optional[date], end: Optional[date]) -> ExportWorkbook:
        start, end = require_date_range(start, end)

        players = list(self._players.list_active())
        trainings = list(self._trainings.list_range(start=start, end=end))
        if not trainings:
            raise NoDataError("Keine Trainings im ausgewählten Zeitraum gefunden")

        return ExportWorkbook(
            start=start,
            end=end,
            sheets=(
                self._attendance_sheet(start, end, players, trainings),
                self._statistics_sheet(players, trainings),
            ),
        )

    def export(self, *, start: Optional[date], end: Optional[date]) -> Tuple[str, bytes]:
        """Returns (filename, xlsx bytes)."""

        workbook = self.build(start=start, end=end)
        return workbook.filename, self._writer.write(workbook)

    def _attendance_sheet(
        self,
        start: date,
        end: date,
        players: Sequence[Player],
        trainings: Sequence[TrainingDetail],
    ) -> SheetData:
        title = "ANWESENHEITSLISTE"
        if self._team_name:
            title = f"{title} {self._team_name.upper()}"

        rows: List[Tuple[Any, ...]] = [
            (title,),
            (f"Zeitraum: {format_date_de(start)} bis {format_date_de(end)}",),
            ("",),
            ("Datum", "Wochentag", "Beschreibung", "Trainer", *[p.name for p in players]),
        ]

        for t in trainings:
            coaches = ", ".join(t.present_coach_names) or EMPTY_CELL
            marks = [PRESENT_MARK if t.is_player_present(p.player_id) else "" for p in players]
            rows.append(
                (
                    format_date_de(t.training_date),
                    weekday_de(t.training_date),
                    t.description or EMPTY_CELL,
                    coaches,
                    *marks,
                )
            )

        return SheetData(
            name=ATTENDANCE_SHEET,
            rows=tuple(rows),
            column_widths=(12, 12, 25, 20, *[4 for _ in players]),
        )

    def _statistics_sheet(self, players: Sequence[Player], trainings: Sequence[TrainingDetail]) -> SheetData:
        total = len(trainings)
        stats = []
        for p in players:
            count = sum(1 for t in trainings if t.is_player_present(p.player_id))
            stats.append((p.name, count, attendance_percentage(count, total)))
        stats.sort(key=lambda s: s[1], reverse=True)

        rows: List[Tuple[Any, ...]] = [
            ("TRAININGS-STATISTIK",),
            (f"Gesamtanzahl Trainings: {total}",),
            ("",),
            ("Name", "Anwesend", "Quote (%)"),
        ]
        rows.extend((name, count, f"{pct}%") for name, count, pct in stats)

        return SheetData(name=STATISTICS_SHEET, rows=tuple(rows), column_widths=(20, 10, 10))
