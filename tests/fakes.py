from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime, timedelta
from typing import Dict, Optional

from werkzeug.security import generate_password_hash

from src.team_attendance.team_attendance.attendance.model import (
    CoachAttendance,
    CoachPresenceCount,
    PlayerAttendance,
)
from src.team_attendance.team_attendance.auth.model import Account
from src.team_attendance.team_attendance.container import build_services
from src.team_attendance.team_attendance.core.enums import CoachClassification
from src.team_attendance.team_attendance.core.exceptions import ValidationError
from src.team_attendance.team_attendance.roster.model import Coach, Player
from src.team_attendance.team_attendance.trainings.model import Training, TrainingDetail


class InMemoryAccounts:
    def __init__(self):
        self._by_email: dict[str, Account] = {}

    def add(self, email: str, password: str, display_name: str = "Trainer", is_active: bool = True) -> Account:
        account = Account(
            account_id=len(self._by_email) + 1,
            email=email,
            password_hash=generate_password_hash(password),
            display_name=display_name,
            is_active=is_active,
        )
        self._by_email[email] = account
        return account

    def get_by_email(self, email: str) -> Optional[Account]:
        return self._by_email.get(email)


class InMemoryPlayers:
    def __init__(self):
        self.rows: dict[int, Player] = {}

    def list_all(self):
        return sorted(self.rows.values(), key=lambda p: (not p.active, p.name))

    def list_active(self):
        return sorted((p for p in self.rows.values() if p.active), key=lambda p: p.name)

    def get_by_id(self, player_id: int) -> Optional[Player]:
        return self.rows.get(int(player_id))

    def create(self, *, name: str) -> int:
        pid = len(self.rows) + 1
        self.rows[pid] = Player(player_id=pid, name=name)
        return pid

    def rename(self, *, player_id: int, name: str) -> bool:
        if player_id not in self.rows:
            return False
        self.rows[player_id] = replace(self.rows[player_id], name=name)
        return True

    def set_active(self, *, player_id: int, active: bool) -> bool:
        if player_id not in self.rows:
            return False
        self.rows[player_id] = replace(self.rows[player_id], active=active)
        return True


class InMemoryCoaches:
    def __init__(self):
        self.rows: dict[int, Coach] = {}

    def list_all(self):
        return sorted(self.rows.values(), key=lambda c: (not c.active, c.name))

    def list_active(self):
        return sorted((c for c in self.rows.values() if c.active), key=lambda c: c.name)

    def get_by_id(self, coach_id: int) -> Optional[Coach]:
        return self.rows.get(int(coach_id))

    def create(self, *, name: str, role: Optional[str]) -> int:
        cid = len(self.rows) + 1
        self.rows[cid] = Coach(coach_id=cid, name=name, role=role)
        return cid

    def update(self, *, coach_id: int, name: str, role: Optional[str]) -> bool:
        if coach_id not in self.rows:
            return False
        self.rows[coach_id] = replace(self.rows[coach_id], name=name, role=role)
        return True

    def set_active(self, *, coach_id: int, active: bool) -> bool:
        if coach_id not in self.rows:
            return False
        self.rows[coach_id] = replace(self.rows[coach_id], active=active)
        return True


class InMemoryStore:
    """Shared tables behind the training and attendance fakes."""

    def __init__(self, players: InMemoryPlayers, coaches: InMemoryCoaches):
        self.players = players
        self.coaches = coaches
        self.trainings: Dict[int, Training] = {}
        self.player_rows: Dict[int, PlayerAttendance] = {}
        self.coach_rows: Dict[int, CoachAttendance] = {}
        self._ids = {"training": 0, "attendance": 0, "coach_attendance": 0}
        self._clock = datetime(2024, 1, 1, 12, 0, 0)

    def next_id(self, table: str) -> int:
        self._ids[table] += 1
        return self._ids[table]

    def tick(self) -> datetime:
        self._clock += timedelta(seconds=1)
        return self._clock

    def write_coach_rows(self, training_id: int, assignments) -> None:
        stale = [
            k for k, r in self.coach_rows.items() if r.training_id == training_id and self.is_active_coach(r.coach_id)
        ]
        for rid in stale:
            del self.coach_rows[rid]
        for a in assignments:
            rid = self.next_id("coach_attendance")
            self.coach_rows[rid] = CoachAttendance(
                coach_attendance_id=rid,
                training_id=training_id,
                coach_id=a.coach_id,
                is_present=True,
                classification=a.classification,
            )

    def is_active_player(self, player_id: int) -> bool:
        player = self.players.get_by_id(player_id)
        return bool(player and player.active)

    def is_active_coach(self, coach_id: int) -> bool:
        coach = self.coaches.get_by_id(coach_id)
        return bool(coach and coach.active)

    def player_rows_of(self, training_id: int):
        rows = []
        for r in self.player_rows.values():
            if r.training_id != training_id:
                continue
            player = self.players.get_by_id(r.player_id)
            rows.append(replace(r, player_name=player.name if player else None))
        return sorted(rows, key=lambda r: (r.player_name or "", r.attendance_id))

    def coach_rows_of(self, training_id: int):
        rows = []
        for r in self.coach_rows.values():
            if r.training_id != training_id:
                continue
            coach = self.coaches.get_by_id(r.coach_id)
            rows.append(
                replace(r, coach_name=coach.name if coach else None, coach_role=coach.role if coach else None)
            )
        return sorted(
            rows, key=lambda r: (r.classification != CoachClassification.MANDATORY, r.coach_name or "")
        )

    def detail(self, training: Training) -> TrainingDetail:
        return TrainingDetail(
            training=training,
            attendance=tuple(self.player_rows_of(training.training_id)),
            coach_attendance=tuple(self.coach_rows_of(training.training_id)),
        )

    def in_range(self, d: date, start: Optional[date], end: Optional[date]) -> bool:
        return (start is None or d >= start) and (end is None or d <= end)


class InMemoryTrainings:
    def __init__(self, store: InMemoryStore):
        self._store = store

    def get_by_id(self, training_id: int) -> Optional[Training]:
        return self._store.trainings.get(int(training_id))

    def get_by_date(self, training_date: date) -> Optional[Training]:
        for t in self._store.trainings.values():
            if t.training_date == training_date:
                return t
        return None

    def create(self, *, training_date: date, description: Optional[str], coach_assignments=()) -> int:
        if self.get_by_date(training_date):
            raise ValidationError("Für dieses Datum existiert bereits ein Training")
        tid = self._store.next_id("training")
        self._store.trainings[tid] = Training(
            training_id=tid,
            training_date=training_date,
            description=description,
            created_at=self._store.tick(),
        )
        self._store.write_coach_rows(tid, coach_assignments)
        return tid

    def update(self, *, training_id: int, description: Optional[str], coach_assignments=None) -> None:
        t = self._store.trainings[training_id]
        self._store.trainings[training_id] = replace(t, description=description)
        if coach_assignments is not None:
            self._store.write_coach_rows(training_id, coach_assignments)

    def delete(self, *, training_id: int) -> bool:
        if training_id not in self._store.trainings:
            return False
        for table in (self._store.player_rows, self._store.coach_rows):
            for rid in [k for k, r in table.items() if r.training_id == training_id]:
                del table[rid]
        del self._store.trainings[training_id]
        return True

    def list_recent(self, *, limit: int, on_date: Optional[date] = None):
        items = [t for t in self._store.trainings.values() if on_date is None or t.training_date == on_date]
        items.sort(key=lambda t: (t.training_date, t.created_at), reverse=True)
        return [self._store.detail(t) for t in items[:limit]]

    def list_from(self, *, start: date):
        items = [t for t in self._store.trainings.values() if t.training_date >= start]
        items.sort(key=lambda t: (t.training_date, t.created_at))
        return [self._store.detail(t) for t in items]

    def list_range(self, *, start: date, end: date):
        items = [t for t in self._store.trainings.values() if start <= t.training_date <= end]
        items.sort(key=lambda t: (t.training_date, t.created_at))
        return [self._store.detail(t) for t in items]

    def count_in_range(self, *, start: Optional[date], end: Optional[date]) -> int:
        return sum(1 for t in self._store.trainings.values() if self._store.in_range(t.training_date, start, end))


class InMemoryAttendance:
    def __init__(self, store: InMemoryStore):
        self._store = store

    def list_player_rows(self, training_id: int):
        return self._store.player_rows_of(training_id)

    def list_coach_rows(self, training_id: int):
        return self._store.coach_rows_of(training_id)

    def replace_for_training(self, *, training_id: int, player_marks, coach_assignments) -> None:
        rows = self._store.player_rows
        stale = [
            k for k, r in rows.items() if r.training_id == training_id and self._store.is_active_player(r.player_id)
        ]
        for rid in stale:
            del rows[rid]
        for player_id, present in player_marks.items():
            rid = self._store.next_id("attendance")
            rows[rid] = PlayerAttendance(
                attendance_id=rid, training_id=training_id, player_id=player_id, is_present=bool(present)
            )
        self._store.write_coach_rows(training_id, coach_assignments)

    def update_presence(self, *, attendance_id: int, is_present: bool) -> bool:
        row = self._store.player_rows.get(attendance_id)
        if not row:
            return False
        self._store.player_rows[attendance_id] = replace(row, is_present=is_present)
        return True

    def _training_ids(self, start, end) -> set[int]:
        return {
            t.training_id
            for t in self._store.trainings.values()
            if self._store.in_range(t.training_date, start, end)
        }

    def count_present_by_player(self, *, start, end):
        ids = self._training_ids(start, end)
        counts: dict[int, int] = {}
        for r in self._store.player_rows.values():
            if r.is_present and r.training_id in ids:
                counts[r.player_id] = counts.get(r.player_id, 0) + 1
        return counts

    def count_present_by_coach(self, *, start, end):
        ids = self._training_ids(start, end)
        counts: dict[int, CoachPresenceCount] = {}
        for r in self._store.coach_rows.values():
            if not r.is_present or r.training_id not in ids:
                continue
            c = counts.get(r.coach_id, CoachPresenceCount())
            if r.classification == CoachClassification.MANDATORY:
                c = CoachPresenceCount(mandatory=c.mandatory + 1, additional=c.additional)
            else:
                c = CoachPresenceCount(mandatory=c.mandatory, additional=c.additional + 1)
            counts[r.coach_id] = c
        return counts


class FakeTeam:
    """All in-memory repositories wired into a service container."""

    def __init__(self, *, team_name: str = "Testverein", history_limit: int = 50):
        self.accounts = InMemoryAccounts()
        self.players = InMemoryPlayers()
        self.coaches = InMemoryCoaches()
        self.store = InMemoryStore(self.players, self.coaches)
        self.trainings = InMemoryTrainings(self.store)
        self.attendance = InMemoryAttendance(self.store)
        self.container = build_services(
            accounts=self.accounts,
            players=self.players,
            coaches=self.coaches,
            trainings=self.trainings,
            attendance=self.attendance,
            team_name=team_name,
            history_limit=history_limit,
        )
