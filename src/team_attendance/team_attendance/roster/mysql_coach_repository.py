from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Coach
from .repository import CoachRepository


def _to_coach(r: dict) -> Coach:
    return Coach(
        coach_id=int(r["coach_id"]),
        name=r["name"],
        role=r.get("role"),
        active=bool(r["active"]),
        created_at=r.get("created_at"),
    )


class MySQLCoachRepository(CoachRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Coach]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT coach_id, name, role, active, created_at
                FROM coaches
                ORDER BY active DESC, name ASC
                """
            )
            return [_to_coach(r) for r in fetchall(cur)]

    def list_active(self) -> Sequence[Coach]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT coach_id, name, role, active, created_at
                FROM coaches
                WHERE active=1
                ORDER BY name ASC
                """
            )
            return [_to_coach(r) for r in fetchall(cur)]

    def get_by_id(self, coach_id: int) -> Optional[Coach]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT coach_id, name, role, active, created_at FROM coaches WHERE coach_id=%s",
                (int(coach_id),),
            )
            r = fetchone(cur)
            return _to_coach(r) if r else None

    def create(self, *, name: str, role: Optional[str]) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("INSERT INTO coaches(name, role, active) VALUES(%s, %s, 1)", (name, role))
            return int(cur.lastrowid)

    def update(self, *, coach_id: int, name: str, role: Optional[str]) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE coaches SET name=%s, role=%s WHERE coach_id=%s",
                (name, role, int(coach_id)),
            )
            return cur.rowcount > 0

    def set_active(self, *, coach_id: int, active: bool) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE coaches SET active=%s WHERE coach_id=%s", (int(active), int(coach_id)))
            return cur.rowcount > 0
