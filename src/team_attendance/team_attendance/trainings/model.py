from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Tuple

from ..attendance.model import CoachAttendance, PlayerAttendance
from ..core.enums import CoachClassification


@dataclass(frozen=True)
class Training:
    """Domain entity: one dated session (aggregation root of attendance rows)."""

    training_id: int
    training_date: date
    description: Optional[str] = None
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class TrainingDetail:
    """Read-model: a training joined with its attendance and coach rows."""

    training: Training
    attendance: Tuple[PlayerAttendance, ...] = ()
    coach_attendance: Tuple[CoachAttendance, ...] = ()

    @property
    def training_id(self) -> int:
        return self.training.training_id

    @property
    def training_date(self) -> date:
        return self.training.training_date

    @property
    def description(self) -> Optional[str]:
        return self.training.description

    @property
    def present_count(self) -> int:
        return sum(1 for a in self.attendance if a.is_present)

    @property
    def total_count(self) -> int:
        return len(self.attendance)

    def is_player_present(self, player_id: int) -> bool:
        return any(a.player_id == player_id and a.is_present for a in self.attendance)

    def present_coaches(self, classification: Optional[CoachClassification] = None) -> Tuple[CoachAttendance, ...]:
        return tuple(
            ca
            for ca in self.coach_attendance
            if ca.is_present and (classification is None or ca.classification == classification)
        )

    @property
    def present_coach_names(self) -> Tuple[str, ...]:
        return tuple(ca.coach_name for ca in self.present_coaches() if ca.coach_name)
