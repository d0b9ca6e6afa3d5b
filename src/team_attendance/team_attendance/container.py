from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.service import AttendanceService
from .auth.mysql_account_repository import MySQLAccountRepository
from .auth.service import AuthService
from .core.constants import DEFAULT_HISTORY_LIMIT
from .database.connection import DBConfig, DatabaseConnection
from .export.service import ExportService
from .roster.mysql_coach_repository import MySQLCoachRepository
from .roster.mysql_player_repository import MySQLPlayerRepository
from .roster.service import RosterService
from .statistics.service import StatisticsService
from .trainings.mysql_training_repository import MySQLTrainingRepository
from .trainings.service import TrainingService


@dataclass(frozen=True)
class Container:
    auth_service: AuthService
    roster_service: RosterService
    training_service: TrainingService
    attendance_service: AttendanceService
    statistics_service: StatisticsService
    export_service: ExportService


def build_services(
    *,
    accounts,
    players,
    coaches,
    trainings,
    attendance,
    team_name: str = "",
    history_limit: int = DEFAULT_HISTORY_LIMIT,
) -> Container:
    """Wire services onto any repository implementations (MySQL or in-memory)."""

    return Container(
        auth_service=AuthService(accounts),
        roster_service=RosterService(players, coaches),
        training_service=TrainingService(trainings, coaches, history_limit=history_limit),
        attendance_service=AttendanceService(attendance, trainings, players, coaches),
        statistics_service=StatisticsService(trainings, attendance, players, coaches),
        export_service=ExportService(trainings, players, team_name=team_name),
    )


def build_container(
    *,
    db_config: dict,
    team_name: str = "",
    history_limit: int = DEFAULT_HISTORY_LIMIT,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return build_services(
        accounts=MySQLAccountRepository(conn),
        players=MySQLPlayerRepository(conn),
        coaches=MySQLCoachRepository(conn),
        trainings=MySQLTrainingRepository(conn),
        attendance=MySQLAttendanceRepository(conn),
        team_name=team_name,
        history_limit=history_limit,
    )
