from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Player
from .repository import PlayerRepository


def _to_player(r: dict) -> Player:
    return Player(
        player_id=int(r["player_id"]),
        name=r["name"],
        active=bool(r["active"]),
        created_at=r.get("created_at"),
    )


class MySQLPlayerRepository(PlayerRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Player]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT player_id, name, active, created_at
                FROM players
                ORDER BY active DESC, name ASC
                """
            )
            return [_to_player(r) for r in fetchall(cur)]

    def list_active(self) -> Sequence[Player]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT player_id, name, active, created_at
                FROM players
                WHERE active=1
                ORDER BY name ASC
                """
            )
            return [_to_player(r) for r in fetchall(cur)]

    def get_by_id(self, player_id: int) -> Optional[Player]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT player_id, name, active, created_at FROM players WHERE player_id=%s",
                (int(player_id),),
            )
            r = fetchone(cur)
            return _to_player(r) if r else None

    def create(self, *, name: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("INSERT INTO players(name, active) VALUES(%s, 1)", (name,))
            return int(cur.lastrowid)

    def rename(self, *, player_id: int, name: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE players SET name=%s WHERE player_id=%s", (name, int(player_id)))
            return cur.rowcount > 0

    def set_active(self, *, player_id: int, active: bool) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE players SET active=%s WHERE player_id=%s", (int(active), int(player_id)))
            return cur.rowcount > 0
