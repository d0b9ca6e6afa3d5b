from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Coach, Player


class PlayerRepository(Protocol):
    def list_all(self) -> Sequence[Player]:
        """All players, active first, then by name."""

        raise NotImplementedError

    def list_active(self) -> Sequence[Player]:
        raise NotImplementedError

    def get_by_id(self, player_id: int) -> Optional[Player]:
        raise NotImplementedError

    def create(self, *, name: str) -> int:
        raise NotImplementedError

    def rename(self, *, player_id: int, name: str) -> bool:
        raise NotImplementedError

    def set_active(self, *, player_id: int, active: bool) -> bool:
        raise NotImplementedError


class CoachRepository(Protocol):
    def list_all(self) -> Sequence[Coach]:
        """All coaches, active first, then by name."""

        raise NotImplementedError

    def list_active(self) -> Sequence[Coach]:
        raise NotImplementedError

    def get_by_id(self, coach_id: int) -> Optional[Coach]:
        raise NotImplementedError

    def create(self, *, name: str, role: Optional[str]) -> int:
        raise NotImplementedError

    def update(self, *, coach_id: int, name: str, role: Optional[str]) -> bool:
        raise NotImplementedError

    def set_active(self, *, coach_id: int, active: bool) -> bool:
        raise NotImplementedError
