from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Dict, List, Mapping, Optional, Sequence

from ..core.enums import CoachClassification
from ..database.connection import DatabaseConnection
from ..database.mysql_base import date_range_where, db_cursor, fetchall, in_clause
from .model import CoachAssignment, CoachAttendance, CoachPresenceCount, PlayerAttendance
from .repository import AttendanceRepository


def load_player_rows(cur, training_ids: Sequence[int]) -> Dict[int, List[PlayerAttendance]]:
    """training_id -> attendance rows joined with player names, ordered by name."""

    out: Dict[int, List[PlayerAttendance]] = defaultdict(list)
    if not training_ids:
        return out

    cur.execute(
        f"""
        SELECT a.attendance_id, a.training_id, a.player_id, a.is_present, p.name AS player_name
        FROM attendance a
        LEFT JOIN players p ON p.player_id = a.player_id
        WHERE a.training_id IN ({in_clause(training_ids)})
        ORDER BY p.name ASC, a.attendance_id ASC
        """,
        tuple(int(t) for t in training_ids),
    )
    for r in fetchall(cur):
        out[int(r["training_id"])].append(
            PlayerAttendance(
                attendance_id=int(r["attendance_id"]),
                training_id=int(r["training_id"]),
                player_id=int(r["player_id"]),
                is_present=bool(r["is_present"]),
                player_name=r.get("player_name"),
            )
        )
    return out


def load_coach_rows(cur, training_ids: Sequence[int]) -> Dict[int, List[CoachAttendance]]:
    """training_id -> coach rows, mandatory first, then by name."""

    out: Dict[int, List[CoachAttendance]] = defaultdict(list)
    if not training_ids:
        return out

    cur.execute(
        f"""
        SELECT ca.coach_attendance_id, ca.training_id, ca.coach_id, ca.is_present, ca.classification,
               c.name AS coach_name, c.role AS coach_role
        FROM coach_attendance ca
        LEFT JOIN coaches c ON c.coach_id = ca.coach_id
        WHERE ca.training_id IN ({in_clause(training_ids)})
        ORDER BY ca.classification = 'mandatory' DESC, c.name ASC
        """,
        tuple(int(t) for t in training_ids),
    )
    for r in fetchall(cur):
        out[int(r["training_id"])].append(
            CoachAttendance(
                coach_attendance_id=int(r["coach_attendance_id"]),
                training_id=int(r["training_id"]),
                coach_id=int(r["coach_id"]),
                is_present=bool(r["is_present"]),
                classification=CoachClassification(r["classification"]),
                coach_name=r.get("coach_name"),
                coach_role=r.get("coach_role"),
            )
        )
    return out


def write_coach_rows(cur, training_id: int, coach_assignments: Sequence[CoachAssignment]) -> None:
    """Replace coach_attendance rows of active coaches inside the caller's transaction."""

    cur.execute(
        """
        DELETE FROM coach_attendance
        WHERE training_id=%s
          AND coach_id IN (SELECT coach_id FROM coaches WHERE active=1)
        """,
        (int(training_id),),
    )
    if not coach_assignments:
        return
    cur.executemany(
        """
        INSERT INTO coach_attendance(training_id, coach_id, is_present, classification)
        VALUES(%s, %s, 1, %s)
        """,
        [(int(training_id), int(a.coach_id), a.classification.value) for a in coach_assignments],
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_player_rows(self, training_id: int) -> Sequence[PlayerAttendance]:
        with db_cursor(self._conn_factory) as (_, cur):
            return load_player_rows(cur, [training_id]).get(int(training_id), [])

    def list_coach_rows(self, training_id: int) -> Sequence[CoachAttendance]:
        with db_cursor(self._conn_factory) as (_, cur):
            return load_coach_rows(cur, [training_id]).get(int(training_id), [])

    def replace_for_training(
        self,
        *,
        training_id: int,
        player_marks: Mapping[int, bool],
        coach_assignments: Sequence[CoachAssignment],
    ) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                DELETE FROM attendance
                WHERE training_id=%s
                  AND player_id IN (SELECT player_id FROM players WHERE active=1)
                """,
                (int(training_id),),
            )
            if player_marks:
                cur.executemany(
                    "INSERT INTO attendance(training_id, player_id, is_present) VALUES(%s, %s, %s)",
                    [(int(training_id), int(pid), int(bool(present))) for pid, present in player_marks.items()],
                )
            write_coach_rows(cur, training_id, coach_assignments)

    def update_presence(self, *, attendance_id: int, is_present: bool) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT attendance_id FROM attendance WHERE attendance_id=%s",
                (int(attendance_id),),
            )
            if not fetchall(cur):
                return False
            cur.execute(
                "UPDATE attendance SET is_present=%s WHERE attendance_id=%s",
                (int(bool(is_present)), int(attendance_id)),
            )
            return True

    def count_present_by_player(self, *, start: Optional[date], end: Optional[date]) -> Mapping[int, int]:
        clauses, params = date_range_where("t.training_date", start=start, end=end)
        where = " AND ".join(["a.is_present=1", *clauses])

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT a.player_id, COUNT(*) AS attended
                FROM attendance a
                JOIN trainings t ON t.training_id = a.training_id
                WHERE {where}
                GROUP BY a.player_id
                """,
                tuple(params),
            )
            return {int(r["player_id"]): int(r["attended"]) for r in fetchall(cur)}

    def count_present_by_coach(
        self, *, start: Optional[date], end: Optional[date]
    ) -> Mapping[int, CoachPresenceCount]:
        clauses, params = date_range_where("t.training_date", start=start, end=end)
        where = " AND ".join(["ca.is_present=1", *clauses])

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT ca.coach_id,
                       SUM(CASE WHEN ca.classification='mandatory' THEN 1 ELSE 0 END) AS mandatory_count,
                       SUM(CASE WHEN ca.classification='additional' THEN 1 ELSE 0 END) AS additional_count
                FROM coach_attendance ca
                JOIN trainings t ON t.training_id = ca.training_id
                WHERE {where}
                GROUP BY ca.coach_id
                """,
                tuple(params),
            )
            return {
                int(r["coach_id"]): CoachPresenceCount(
                    mandatory=int(r["mandatory_count"] or 0),
                    additional=int(r["additional_count"] or 0),
                )
                for r in fetchall(cur)
            }
