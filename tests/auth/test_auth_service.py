from __future__ import annotations

import pytest

from src.team_attendance.team_attendance.auth.model import SessionContext
from src.team_attendance.team_attendance.core.enums import AuthEvent
from src.team_attendance.team_attendance.core.exceptions import AuthenticationError


def test_sign_in_normalizes_email(team):
    team.accounts.add("trainer@example.com", "secret", display_name="Trainer Demo")

    user = team.container.auth_service.sign_in("  Trainer@Example.com ", "secret")

    assert user.display_name == "Trainer Demo"
    assert user.to_session()["email"] == "trainer@example.com"


@pytest.mark.parametrize("email,password", [("trainer@example.com", "wrong"), ("nobody@example.com", "secret"), ("", "")])
def test_wrong_credentials_are_rejected(team, email, password):
    team.accounts.add("trainer@example.com", "secret")

    with pytest.raises(AuthenticationError):
        team.container.auth_service.authenticate(email, password)


def test_inactive_account_is_rejected(team):
    team.accounts.add("trainer@example.com", "secret", is_active=False)

    with pytest.raises(AuthenticationError):
        team.container.auth_service.authenticate("trainer@example.com", "secret")


def test_listeners_receive_sign_in_and_out(team):
    team.accounts.add("trainer@example.com", "secret")
    auth = team.container.auth_service
    events = []
    unsubscribe = auth.on_auth_state_change(lambda event, user: events.append((event, user.email)))

    user = auth.sign_in("trainer@example.com", "secret")
    auth.sign_out(user)
    unsubscribe()
    auth.sign_in("trainer@example.com", "secret")

    assert events == [(AuthEvent.SIGNED_IN, "trainer@example.com"), (AuthEvent.SIGNED_OUT, "trainer@example.com")]


def test_failed_sign_in_does_not_notify(team):
    events = []
    team.container.auth_service.on_auth_state_change(lambda event, user: events.append(event))

    with pytest.raises(AuthenticationError):
        team.container.auth_service.sign_in("x@example.com", "nope")
    assert events == []


def test_session_context_round_trip():
    ctx = SessionContext.from_session({"account_id": "3", "email": "a@b.c", "name": "Anna"})

    assert ctx.is_authenticated
    assert ctx.user.account_id == 3
    assert not SessionContext.from_session({}).is_authenticated
