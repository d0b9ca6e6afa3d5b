from __future__ import annotations

import pytest

from src.team_attendance.team_attendance.main import create_app

from tests.fakes import FakeTeam


@pytest.fixture()
def team():
    return FakeTeam()


@pytest.fixture()
def app(team):
    app = create_app(team.container, settings_module="config.testing")
    app.config.update(TESTING=True)
    return app


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def logged_in_client(team, client):
    team.accounts.add("trainer@example.com", "trainer123", display_name="Trainer Demo")
    resp = client.post("/login", data={"email": "trainer@example.com", "password": "trainer123"})
    assert resp.status_code == 302
    return client
