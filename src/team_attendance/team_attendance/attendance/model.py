from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from ..core.constants import MAX_MANDATORY_COACHES
from ..core.enums import CoachClassification
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class PlayerAttendance:
    """Domain entity: presence of one player at one training."""

    attendance_id: int
    training_id: int
    player_id: int
    is_present: bool
    player_name: Optional[str] = None

    @property
    def label(self) -> str:
        return "Anwesend" if self.is_present else "Abwesend"


@dataclass(frozen=True)
class CoachAttendance:
    """Domain entity: presence and classification of one coach at one training."""

    coach_attendance_id: int
    training_id: int
    coach_id: int
    is_present: bool
    classification: CoachClassification
    coach_name: Optional[str] = None
    coach_role: Optional[str] = None


@dataclass(frozen=True)
class CoachAssignment:
    """Row to write into coach_attendance (always is_present=1)."""

    coach_id: int
    classification: CoachClassification


@dataclass(frozen=True)
class CoachPresenceCount:
    """Read-model for statistics: present rows of a coach split by classification."""

    mandatory: int = 0
    additional: int = 0

    @property
    def total(self) -> int:
        return self.mandatory + self.additional


@dataclass
class CoachSelection:
    """Working set of coaches for one training.

    A coach is either mandatory, additional or not selected; at most
    MAX_MANDATORY_COACHES can be mandatory.
    """

    mandatory: List[int] = field(default_factory=list)
    additional: List[int] = field(default_factory=list)

    @classmethod
    def from_ids(cls, mandatory: Iterable[int] = (), additional: Iterable[int] = ()) -> "CoachSelection":
        mandatory_ids = list(dict.fromkeys(int(c) for c in mandatory))
        additional_ids = list(dict.fromkeys(int(c) for c in additional))

        if len(mandatory_ids) > MAX_MANDATORY_COACHES:
            raise ValidationError(f"Maximal {MAX_MANDATORY_COACHES} Pflicht-Trainer pro Training")
        if set(mandatory_ids) & set(additional_ids):
            raise ValidationError("Ein Trainer kann nicht gleichzeitig Pflicht- und Zusatz-Trainer sein")

        return cls(mandatory=mandatory_ids, additional=additional_ids)

    @classmethod
    def from_rows(cls, rows: Iterable[CoachAttendance]) -> "CoachSelection":
        selection = cls()
        for row in rows:
            if not row.is_present:
                continue
            if row.classification == CoachClassification.MANDATORY and len(selection.mandatory) < MAX_MANDATORY_COACHES:
                selection.mandatory.append(row.coach_id)
            else:
                # legacy rows beyond the cap are kept as additional
                selection.additional.append(row.coach_id)
        return selection

    def select_mandatory(self, coach_id: int) -> None:
        coach_id = int(coach_id)
        if coach_id in self.mandatory:
            return
        if len(self.mandatory) >= MAX_MANDATORY_COACHES:
            raise ValidationError(f"Maximal {MAX_MANDATORY_COACHES} Pflicht-Trainer pro Training")
        if coach_id in self.additional:
            self.additional.remove(coach_id)
        self.mandatory.append(coach_id)

    def select_additional(self, coach_id: int) -> None:
        coach_id = int(coach_id)
        if coach_id in self.additional:
            return
        if coach_id in self.mandatory:
            self.mandatory.remove(coach_id)
        self.additional.append(coach_id)

    def deselect(self, coach_id: int) -> None:
        coach_id = int(coach_id)
        if coach_id in self.mandatory:
            self.mandatory.remove(coach_id)
        if coach_id in self.additional:
            self.additional.remove(coach_id)

    def classification_of(self, coach_id: int) -> Optional[CoachClassification]:
        if coach_id in self.mandatory:
            return CoachClassification.MANDATORY
        if coach_id in self.additional:
            return CoachClassification.ADDITIONAL
        return None

    @property
    def is_mandatory_full(self) -> bool:
        return len(self.mandatory) >= MAX_MANDATORY_COACHES

    def assignments(self) -> Tuple[CoachAssignment, ...]:
        return tuple(
            [CoachAssignment(c, CoachClassification.MANDATORY) for c in self.mandatory]
            + [CoachAssignment(c, CoachClassification.ADDITIONAL) for c in self.additional]
        )
