from __future__ import annotations

from typing import Callable, List, Optional

from werkzeug.security import check_password_hash

from ..core.enums import AuthEvent
from ..core.exceptions import AuthenticationError
from .model import SessionUser
from .repository import AccountRepository

AuthListener = Callable[[AuthEvent, Optional[SessionUser]], None]


class AuthService:
    """Use case: sign a coach in and out, and tell listeners about it."""

    def __init__(self, accounts: AccountRepository):
        self._accounts = accounts
        self._listeners: List[AuthListener] = []

    def on_auth_state_change(self, listener: AuthListener) -> Callable[[], None]:
        """Register a listener; returns a callable that unsubscribes it."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self, event: AuthEvent, user: Optional[SessionUser]) -> None:
        for listener in list(self._listeners):
            listener(event, user)

    def authenticate(self, email: str, password: str) -> SessionUser:
        email = (email or "").strip().lower()
        account = self._accounts.get_by_email(email) if email else None
        if not account or not account.is_active:
            raise AuthenticationError("E-Mail oder Passwort ist falsch")

        try:
            ok = check_password_hash(account.password_hash, password or "")
        except ValueError:
            # placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            raise AuthenticationError("E-Mail oder Passwort ist falsch")

        return SessionUser(account_id=account.account_id, email=account.email, display_name=account.display_name)

    def sign_in(self, email: str, password: str) -> SessionUser:
        user = self.authenticate(email, password)
        self._emit(AuthEvent.SIGNED_IN, user)
        return user

    def sign_out(self, user: Optional[SessionUser]) -> None:
        self._emit(AuthEvent.SIGNED_OUT, user)
