from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..attendance.model import CoachAssignment
from .model import Training, TrainingDetail


class TrainingRepository(Protocol):
    def get_by_id(self, training_id: int) -> Optional[Training]:
        raise NotImplementedError

    def get_by_date(self, training_date: date) -> Optional[Training]:
        raise NotImplementedError

    def create(
        self,
        *,
        training_date: date,
        description: Optional[str],
        coach_assignments: Sequence[CoachAssignment] = (),
    ) -> int:
        """Insert a training together with its coach rows; returns training_id.

        Raises ValidationError when the date already has a training.
        """

        raise NotImplementedError

    def update(
        self,
        *,
        training_id: int,
        description: Optional[str],
        coach_assignments: Optional[Sequence[CoachAssignment]] = None,
    ) -> None:
        """Set the description; when coach_assignments is given, replace the coach rows of active coaches too."""

        raise NotImplementedError

    def delete(self, *, training_id: int) -> bool:
        raise NotImplementedError

    def list_recent(self, *, limit: int, on_date: Optional[date] = None) -> Sequence[TrainingDetail]:
        """Newest first (date, then created_at)."""

        raise NotImplementedError

    def list_from(self, *, start: date) -> Sequence[TrainingDetail]:
        """Trainings on or after start, ascending."""

        raise NotImplementedError

    def list_range(self, *, start: date, end: date) -> Sequence[TrainingDetail]:
        raise NotImplementedError

    def count_in_range(self, *, start: Optional[date], end: Optional[date]) -> int:
        raise NotImplementedError
