from __future__ import annotations

from datetime import date

import pytest

from src.team_attendance.team_attendance.attendance.model import CoachSelection
from src.team_attendance.team_attendance.core.enums import CoachClassification
from src.team_attendance.team_attendance.core.exceptions import NotFoundError, ValidationError


def test_plan_stores_coaches_with_classification(team):
    roster = team.container.roster_service
    c1 = roster.create_coach("Max")
    c2 = roster.create_coach("Eva")

    tid = team.container.training_service.plan(
        training_date=date(2024, 6, 3),
        description="Aufschlag",
        mandatory_coach_ids=[c1],
        additional_coach_ids=[c2],
    )

    [detail] = team.container.training_service.list_upcoming(date(2024, 6, 1))
    assert detail.training_id == tid
    assert [c.coach_name for c in detail.present_coaches(CoachClassification.MANDATORY)] == ["Max"]
    assert [c.coach_name for c in detail.present_coaches(CoachClassification.ADDITIONAL)] == ["Eva"]


def test_plan_requires_date(team):
    with pytest.raises(ValidationError):
        team.container.training_service.plan(training_date=None)


def test_plan_rejects_second_training_on_same_date(team):
    svc = team.container.training_service
    svc.plan(training_date=date(2024, 6, 3))

    with pytest.raises(ValidationError):
        svc.plan(training_date=date(2024, 6, 3))
    assert len(team.store.trainings) == 1


def test_plan_rejects_three_mandatory_coaches(team):
    with pytest.raises(ValidationError):
        team.container.training_service.plan(training_date=date(2024, 6, 3), mandatory_coach_ids=[1, 2, 3])
    assert team.store.trainings == {}


def test_upcoming_excludes_past_and_sorts_ascending(team):
    svc = team.container.training_service
    svc.plan(training_date=date(2024, 6, 10))
    svc.plan(training_date=date(2024, 5, 30))
    svc.plan(training_date=date(2024, 6, 1))

    upcoming = svc.list_upcoming(date(2024, 6, 1))

    assert [t.training_date for t in upcoming] == [date(2024, 6, 1), date(2024, 6, 10)]


def test_history_newest_first_with_limit(team):
    svc = team.container.training_service
    for day in (1, 2, 3):
        svc.plan(training_date=date(2024, 5, day))

    history = svc.list_history(limit=2)

    assert [t.training_date for t in history] == [date(2024, 5, 3), date(2024, 5, 2)]


def test_update_plan_replaces_coaches_and_description(team):
    roster = team.container.roster_service
    c1 = roster.create_coach("Max")
    c2 = roster.create_coach("Eva")
    svc = team.container.training_service
    tid = svc.plan(training_date=date(2024, 6, 3), mandatory_coach_ids=[c1])

    svc.update_plan(training_id=tid, description="Taktik", additional_coach_ids=[c2])

    [detail] = svc.list_upcoming(date(2024, 6, 3))
    assert detail.description == "Taktik"
    assert detail.present_coach_names == ("Eva",)


def test_update_plan_unknown_training_raises(team):
    with pytest.raises(NotFoundError):
        team.container.training_service.update_plan(training_id=5)


def test_delete_removes_training_from_history_and_planner(team):
    player = team.container.roster_service.create_player("Anna")
    coach = team.container.roster_service.create_coach("Max")
    svc = team.container.training_service
    tid = svc.plan(training_date=date(2024, 6, 3), mandatory_coach_ids=[coach])
    team.container.attendance_service.save(
        training_id=tid, player_marks={player: True}, coach_selection=CoachSelection.from_ids([coach])
    )

    svc.delete(tid)

    assert svc.list_history() == []
    assert svc.list_upcoming(date(2024, 6, 1)) == []
    assert team.store.player_rows == {}
    assert team.store.coach_rows == {}


def test_delete_unknown_training_raises(team):
    with pytest.raises(NotFoundError):
        team.container.training_service.delete(123)


def test_update_plan_keeps_deactivated_coach(team):
    roster = team.container.roster_service
    max_ = roster.create_coach("Max")
    eva = roster.create_coach("Eva")
    svc = team.container.training_service
    tid = svc.plan(training_date=date(2024, 6, 3), mandatory_coach_ids=[max_, eva])
    roster.toggle_coach_active(eva)

    svc.update_plan(training_id=tid, mandatory_coach_ids=[max_])

    [detail] = svc.list_upcoming(date(2024, 6, 3))
    assert sorted(detail.present_coach_names) == ["Eva", "Max"]


def test_plan_ignores_inactive_coach_ids(team):
    roster = team.container.roster_service
    max_ = roster.create_coach("Max")
    roster.toggle_coach_active(max_)

    team.container.training_service.plan(training_date=date(2024, 6, 3), mandatory_coach_ids=[max_])

    assert team.store.coach_rows == {}
