from __future__ import annotations

from datetime import date
from typing import Mapping, Optional, Protocol, Sequence

from .model import CoachAssignment, CoachAttendance, CoachPresenceCount, PlayerAttendance


class AttendanceRepository(Protocol):
    def list_player_rows(self, training_id: int) -> Sequence[PlayerAttendance]:
        raise NotImplementedError

    def list_coach_rows(self, training_id: int) -> Sequence[CoachAttendance]:
        raise NotImplementedError

    def replace_for_training(
        self,
        *,
        training_id: int,
        player_marks: Mapping[int, bool],
        coach_assignments: Sequence[CoachAssignment],
    ) -> None:
        """Replace the rows of active players and coaches with the given ones.

        Rows of deactivated players/coaches are kept; the capture form never
        offers them. Runs as one transaction: either the old rows or the new
        rows survive.
        """

        raise NotImplementedError

    def update_presence(self, *, attendance_id: int, is_present: bool) -> bool:
        raise NotImplementedError

    def count_present_by_player(self, *, start: Optional[date], end: Optional[date]) -> Mapping[int, int]:
        """player_id -> number of present rows at trainings in range."""

        raise NotImplementedError

    def count_present_by_coach(
        self, *, start: Optional[date], end: Optional[date]
    ) -> Mapping[int, CoachPresenceCount]:
        raise NotImplementedError
