from __future__ import annotations

from datetime import date
from typing import Optional

from ..attendance.model import CoachPresenceCount
from ..attendance.repository import AttendanceRepository
from ..common.validators import check_optional_range
from ..roster.repository import CoachRepository, PlayerRepository
from ..trainings.repository import TrainingRepository
from .model import CoachStats, PlayerStats, StatisticsReport


def attendance_percentage(count: int, total: int) -> int:
    """round(count / total * 100) with halves rounded up; 0 when there were no trainings."""

    if total <= 0:
        return 0
    # integer form of floor(count * 100 / total + 0.5)
    return (200 * int(count) + int(total)) // (2 * int(total))


class StatisticsService:
    def __init__(
        self,
        trainings: TrainingRepository,
        attendance: AttendanceRepository,
        players: PlayerRepository,
        coaches: CoachRepository,
    ):
        self._trainings = trainings
        self._attendance = attendance
        self._players = players
        self._coaches = coaches

    def build(self, *, start: Optional[date] = None, end: Optional[date] = None) -> StatisticsReport:
        check_optional_range(start, end)

        total = self._trainings.count_in_range(start=start, end=end)
        player_counts = self._attendance.count_present_by_player(start=start, end=end) if total else {}
        coach_counts = self._attendance.count_present_by_coach(start=start, end=end) if total else {}

        players = [
            PlayerStats(
                player_id=p.player_id,
                name=p.name,
                attendance_count=player_counts.get(p.player_id, 0),
                percentage=attendance_percentage(player_counts.get(p.player_id, 0), total),
            )
            for p in self._players.list_active()
        ]
        # list.sort is stable: equal counts keep the alphabetical order from the query
        players.sort(key=lambda s: s.attendance_count, reverse=True)

        coaches = []
        for c in self._coaches.list_active():
            counts = coach_counts.get(c.coach_id, CoachPresenceCount())
            coaches.append(
                CoachStats(
                    coach_id=c.coach_id,
                    name=c.name,
                    role=c.role,
                    mandatory_count=counts.mandatory,
                    additional_count=counts.additional,
                    percentage=attendance_percentage(counts.total, total),
                )
            )
        coaches.sort(key=lambda s: s.total, reverse=True)

        return StatisticsReport(
            start=start,
            end=end,
            total_trainings=total,
            players=tuple(players),
            coaches=tuple(coaches),
        )
