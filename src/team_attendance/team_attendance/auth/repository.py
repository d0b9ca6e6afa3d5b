from __future__ import annotations

from typing import Optional, Protocol

from .model import Account


class AccountRepository(Protocol):
    """Repository interface for login accounts.

    Note (DIP): the service layer depends on this interface, not on a concrete DB.
    """

    def get_by_email(self, email: str) -> Optional[Account]:
        raise NotImplementedError
