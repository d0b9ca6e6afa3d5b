from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Player:
    """Domain entity: a squad member. Never deleted, only deactivated."""

    player_id: int
    name: str
    active: bool = True
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class Coach:
    """Domain entity: a trainer, with an optional free-text role label."""

    coach_id: int
    name: str
    role: Optional[str] = None
    active: bool = True
    created_at: Optional[datetime] = None

    @property
    def label(self) -> str:
        return f"{self.name} ({self.role})" if self.role else self.name
