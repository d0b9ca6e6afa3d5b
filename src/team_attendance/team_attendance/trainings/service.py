from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Sequence, Tuple

from ..attendance.model import CoachAssignment, CoachSelection
from ..common.validators import optional_text
from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..core.exceptions import NotFoundError, ValidationError
from ..roster.repository import CoachRepository
from .model import Training, TrainingDetail
from .repository import TrainingRepository


class TrainingService:
    """Use cases around the training record: planner, history listing, delete."""

    def __init__(
        self,
        trainings: TrainingRepository,
        coaches: CoachRepository,
        *,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
    ):
        self._trainings = trainings
        self._coaches = coaches
        self._history_limit = int(history_limit)

    def get(self, training_id: int) -> Training:
        training = self._trainings.get_by_id(int(training_id))
        if not training:
            raise NotFoundError("Training nicht gefunden")
        return training

    def list_upcoming(self, today: date) -> Sequence[TrainingDetail]:
        return self._trainings.list_from(start=today)

    def list_history(self, *, limit: Optional[int] = None, on_date: Optional[date] = None) -> Sequence[TrainingDetail]:
        return self._trainings.list_recent(limit=int(limit or self._history_limit), on_date=on_date)

    def plan(
        self,
        *,
        training_date: Optional[date],
        description: Optional[str] = None,
        mandatory_coach_ids: Iterable[int] = (),
        additional_coach_ids: Iterable[int] = (),
    ) -> int:
        if not training_date:
            raise ValidationError("Bitte Datum auswählen")

        selection = CoachSelection.from_ids(mandatory_coach_ids, additional_coach_ids)
        if self._trainings.get_by_date(training_date):
            raise ValidationError("Für dieses Datum existiert bereits ein Training")

        return self._trainings.create(
            training_date=training_date,
            description=optional_text(description),
            coach_assignments=self._assignments(selection),
        )

    def update_plan(
        self,
        *,
        training_id: int,
        description: Optional[str] = None,
        mandatory_coach_ids: Iterable[int] = (),
        additional_coach_ids: Iterable[int] = (),
    ) -> None:
        selection = CoachSelection.from_ids(mandatory_coach_ids, additional_coach_ids)
        self.get(training_id)
        self._trainings.update(
            training_id=int(training_id),
            description=optional_text(description),
            coach_assignments=self._assignments(selection),
        )

    def _assignments(self, selection: CoachSelection) -> Tuple[CoachAssignment, ...]:
        # only active coaches are offered by the planner; rows of deactivated ones are kept as they are
        active = {c.coach_id for c in self._coaches.list_active()}
        return tuple(a for a in selection.assignments() if a.coach_id in active)

    def delete(self, training_id: int) -> None:
        """Remove a training with all of its attendance and coach rows."""

        if not self._trainings.delete(training_id=int(training_id)):
            raise NotFoundError("Training nicht gefunden")
