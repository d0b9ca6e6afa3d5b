from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Mapping, Optional, Sequence

from ..common.validators import optional_text
from ..core.constants import SPONTANEOUS_TRAINING_DESCRIPTION
from ..core.exceptions import NotFoundError
from ..roster.model import Coach, Player
from ..roster.repository import CoachRepository, PlayerRepository
from ..trainings.model import Training
from ..trainings.repository import TrainingRepository
from .model import CoachSelection
from .repository import AttendanceRepository


@dataclass(frozen=True)
class CaptureState:
    """Everything the capture screen needs for one date."""

    on_date: date
    players: Sequence[Player]
    coaches: Sequence[Coach]
    training: Optional[Training] = None
    player_marks: Mapping[int, bool] = field(default_factory=dict)
    coach_selection: CoachSelection = field(default_factory=CoachSelection)

    @property
    def is_editing(self) -> bool:
        """True when attendance for an existing training is being edited in place."""

        return self.training is not None


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        trainings: TrainingRepository,
        players: PlayerRepository,
        coaches: CoachRepository,
    ):
        self._attendance = attendance
        self._trainings = trainings
        self._players = players
        self._coaches = coaches

    def load_capture(self, on_date: date) -> CaptureState:
        players = self._players.list_active()
        coaches = self._coaches.list_active()

        training = self._trainings.get_by_date(on_date)
        if not training:
            return CaptureState(on_date=on_date, players=players, coaches=coaches)

        player_ids = {p.player_id for p in players}
        coach_ids = {c.coach_id for c in coaches}
        marks = {
            a.player_id: a.is_present
            for a in self._attendance.list_player_rows(training.training_id)
            if a.player_id in player_ids
        }
        selection = CoachSelection.from_rows(
            r for r in self._attendance.list_coach_rows(training.training_id) if r.coach_id in coach_ids
        )
        return CaptureState(
            on_date=on_date,
            players=players,
            coaches=coaches,
            training=training,
            player_marks=marks,
            coach_selection=selection,
        )

    def start_training(self, on_date: date, description: Optional[str] = None) -> int:
        """Create the training for a date on demand ("spontaneous training")."""

        existing = self._trainings.get_by_date(on_date)
        if existing:
            return existing.training_id

        return self._trainings.create(
            training_date=on_date,
            description=optional_text(description) or SPONTANEOUS_TRAINING_DESCRIPTION,
        )

    def save(
        self,
        *,
        training_id: int,
        player_marks: Mapping[int, bool],
        coach_selection: CoachSelection,
        description: Optional[str] = None,
    ) -> None:
        """Replace the attendance of active players and coaches with the given selection.

        An empty selection is a valid save meaning "nobody was there". Rows of
        deactivated players and coaches stay untouched, and marks for them are
        ignored.
        """

        training = self._trainings.get_by_id(int(training_id))
        if not training:
            raise NotFoundError("Training nicht gefunden")

        # Selections built from form data never went through select_mandatory().
        selection = CoachSelection.from_ids(coach_selection.mandatory, coach_selection.additional)
        active_players = {p.player_id for p in self._players.list_active()}
        active_coaches = {c.coach_id for c in self._coaches.list_active()}
        marks: Dict[int, bool] = {
            int(pid): bool(present) for pid, present in player_marks.items() if int(pid) in active_players
        }

        self._attendance.replace_for_training(
            training_id=training.training_id,
            player_marks=marks,
            coach_assignments=tuple(a for a in selection.assignments() if a.coach_id in active_coaches),
        )

        if description is not None:
            new_description = optional_text(description)
            if new_description != training.description:
                self._trainings.update(training_id=training.training_id, description=new_description)

    def update_presence(self, changes: Mapping[int, bool]) -> int:
        """Apply history edits row by row; returns the number of rows updated."""

        updated = 0
        for attendance_id, is_present in changes.items():
            if not self._attendance.update_presence(attendance_id=int(attendance_id), is_present=bool(is_present)):
                raise NotFoundError("Anwesenheitseintrag nicht gefunden")
            updated += 1
        return updated
