from __future__ import annotations

from typing import Optional, Sequence

from ..common.validators import optional_text, require_non_empty
from ..core.exceptions import NotFoundError
from .model import Coach, Player
from .repository import CoachRepository, PlayerRepository


class RosterService:
    """Use case: maintain the player and coach lists.

    "Deleting" an entry only clears its active flag; rows are never removed so
    historical attendance keeps its names.
    """

    def __init__(self, players: PlayerRepository, coaches: CoachRepository):
        self._players = players
        self._coaches = coaches

    # ---- players ----

    def list_players(self) -> Sequence[Player]:
        return self._players.list_all()

    def list_active_players(self) -> Sequence[Player]:
        return self._players.list_active()

    def create_player(self, name: str) -> int:
        return self._players.create(name=require_non_empty(name, "Name"))

    def _require_player(self, player_id: int) -> Player:
        player = self._players.get_by_id(int(player_id))
        if not player:
            raise NotFoundError("Spieler nicht gefunden")
        return player

    def rename_player(self, player_id: int, name: str) -> None:
        name = require_non_empty(name, "Name")
        self._require_player(player_id)
        # MySQL reports 0 affected rows for an unchanged name, so the result is not checked.
        self._players.rename(player_id=int(player_id), name=name)

    def toggle_player_active(self, player_id: int) -> bool:
        player = self._require_player(player_id)
        active = not player.active
        self._players.set_active(player_id=player.player_id, active=active)
        return active

    # ---- coaches ----

    def list_coaches(self) -> Sequence[Coach]:
        return self._coaches.list_all()

    def list_active_coaches(self) -> Sequence[Coach]:
        return self._coaches.list_active()

    def create_coach(self, name: str, role: Optional[str] = None) -> int:
        return self._coaches.create(name=require_non_empty(name, "Name"), role=optional_text(role))

    def _require_coach(self, coach_id: int) -> Coach:
        coach = self._coaches.get_by_id(int(coach_id))
        if not coach:
            raise NotFoundError("Trainer nicht gefunden")
        return coach

    def update_coach(self, coach_id: int, name: str, role: Optional[str] = None) -> None:
        name = require_non_empty(name, "Name")
        self._require_coach(coach_id)
        self._coaches.update(coach_id=int(coach_id), name=name, role=optional_text(role))

    def toggle_coach_active(self, coach_id: int) -> bool:
        coach = self._require_coach(coach_id)
        active = not coach.active
        self._coaches.set_active(coach_id=coach.coach_id, active=active)
        return active
