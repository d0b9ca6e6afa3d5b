from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple


@dataclass(frozen=True)
class PlayerStats:
    player_id: int
    name: str
    attendance_count: int
    percentage: int

    @property
    def band(self) -> str:
        """Colour band used by the statistics bar chart."""

        if self.percentage >= 75:
            return "high"
        if self.percentage >= 50:
            return "good"
        if self.percentage >= 25:
            return "low"
        return "poor"


@dataclass(frozen=True)
class CoachStats:
    coach_id: int
    name: str
    role: Optional[str]
    mandatory_count: int
    additional_count: int
    percentage: int

    @property
    def total(self) -> int:
        return self.mandatory_count + self.additional_count


@dataclass(frozen=True)
class StatisticsReport:
    start: Optional[date]
    end: Optional[date]
    total_trainings: int
    players: Tuple[PlayerStats, ...] = ()
    coaches: Tuple[CoachStats, ...] = ()

    @property
    def is_empty(self) -> bool:
        return self.total_trainings == 0
