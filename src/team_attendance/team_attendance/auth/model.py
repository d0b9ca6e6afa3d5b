from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class Account:
    """Domain entity: a coach login (credential pair)."""

    account_id: int
    email: str
    password_hash: str
    display_name: str
    is_active: bool = True
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class SessionUser:
    """What we store into the Flask session after login."""

    account_id: int
    email: str
    display_name: str

    def to_session(self) -> dict:
        return {"account_id": self.account_id, "email": self.email, "name": self.display_name}


@dataclass(frozen=True)
class SessionContext:
    """Read-only view of the current login, rebuilt for every request.

    Views receive it through `flask.g.session_ctx`; only the auth controller
    changes the underlying cookie session.
    """

    user: Optional[SessionUser] = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    @classmethod
    def from_session(cls, session: Mapping[str, Any]) -> "SessionContext":
        if "account_id" not in session:
            return cls()
        return cls(
            user=SessionUser(
                account_id=int(session["account_id"]),
                email=str(session.get("email") or ""),
                display_name=str(session.get("name") or ""),
            )
        )
