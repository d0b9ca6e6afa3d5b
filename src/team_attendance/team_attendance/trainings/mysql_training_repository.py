from __future__ import annotations

from datetime import date
from typing import List, Optional, Sequence

import mysql.connector

from ..attendance.model import CoachAssignment
from ..attendance.mysql_attendance_repository import load_coach_rows, load_player_rows, write_coach_rows
from ..core.exceptions import ValidationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import date_range_where, db_cursor, fetchall, fetchone
from .model import Training, TrainingDetail
from .repository import TrainingRepository

_COLUMNS = "training_id, training_date, description, created_at"

# MySQL ER_DUP_ENTRY
DUPLICATE_ENTRY = 1062
DUPLICATE_DATE_MESSAGE = "Für dieses Datum existiert bereits ein Training"


def _to_training(r: dict) -> Training:
    return Training(
        training_id=int(r["training_id"]),
        training_date=r["training_date"],
        description=r.get("description"),
        created_at=r.get("created_at"),
    )


def _with_details(cur, trainings: List[Training]) -> List[TrainingDetail]:
    ids = [t.training_id for t in trainings]
    players = load_player_rows(cur, ids)
    coaches = load_coach_rows(cur, ids)
    return [
        TrainingDetail(
            training=t,
            attendance=tuple(players.get(t.training_id, [])),
            coach_attendance=tuple(coaches.get(t.training_id, [])),
        )
        for t in trainings
    ]


class MySQLTrainingRepository(TrainingRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, training_id: int) -> Optional[Training]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM trainings WHERE training_id=%s", (int(training_id),))
            r = fetchone(cur)
            return _to_training(r) if r else None

    def get_by_date(self, training_date: date) -> Optional[Training]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM trainings
                WHERE training_date=%s
                ORDER BY created_at DESC
                LIMIT 1
                """,
                (training_date,),
            )
            r = fetchone(cur)
            return _to_training(r) if r else None

    def create(
        self,
        *,
        training_date: date,
        description: Optional[str],
        coach_assignments: Sequence[CoachAssignment] = (),
    ) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "INSERT INTO trainings(training_date, description) VALUES(%s, %s)",
                    (training_date, description),
                )
                training_id = int(cur.lastrowid)
                if coach_assignments:
                    write_coach_rows(cur, training_id, coach_assignments)
                return training_id
        except mysql.connector.IntegrityError as e:
            if e.errno == DUPLICATE_ENTRY and "uq_trainings_date" in str(e):
                raise ValidationError(DUPLICATE_DATE_MESSAGE) from e
            raise

    def update(
        self,
        *,
        training_id: int,
        description: Optional[str],
        coach_assignments: Optional[Sequence[CoachAssignment]] = None,
    ) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE trainings SET description=%s WHERE training_id=%s",
                (description, int(training_id)),
            )
            if coach_assignments is not None:
                write_coach_rows(cur, training_id, coach_assignments)

    def delete(self, *, training_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            # Child rows first; ON DELETE CASCADE covers the same rows.
            cur.execute("DELETE FROM attendance WHERE training_id=%s", (int(training_id),))
            cur.execute("DELETE FROM coach_attendance WHERE training_id=%s", (int(training_id),))
            cur.execute("DELETE FROM trainings WHERE training_id=%s", (int(training_id),))
            return cur.rowcount > 0

    def list_recent(self, *, limit: int, on_date: Optional[date] = None) -> Sequence[TrainingDetail]:
        where = "WHERE training_date=%s" if on_date else ""
        params: list[object] = [on_date] if on_date else []
        params.append(int(limit))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM trainings
                {where}
                ORDER BY training_date DESC, created_at DESC
                LIMIT %s
                """,
                tuple(params),
            )
            trainings = [_to_training(r) for r in fetchall(cur)]
            return _with_details(cur, trainings)

    def list_from(self, *, start: date) -> Sequence[TrainingDetail]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM trainings
                WHERE training_date >= %s
                ORDER BY training_date ASC, created_at ASC
                """,
                (start,),
            )
            trainings = [_to_training(r) for r in fetchall(cur)]
            return _with_details(cur, trainings)

    def list_range(self, *, start: date, end: date) -> Sequence[TrainingDetail]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM trainings
                WHERE training_date BETWEEN %s AND %s
                ORDER BY training_date ASC, created_at ASC
                """,
                (start, end),
            )
            trainings = [_to_training(r) for r in fetchall(cur)]
            return _with_details(cur, trainings)

    def count_in_range(self, *, start: Optional[date], end: Optional[date]) -> int:
        clauses, params = date_range_where("training_date", start=start, end=end)
        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT COUNT(*) AS total FROM trainings {where}", tuple(params))
            r = fetchone(cur)
            return int(r["total"]) if r else 0
