from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .auth.controller import register as register_auth
from .common.datetime_utils import format_date_de, format_date_long_de, weekday_de
from .container import Container, build_container
from .core.constants import DEFAULT_HISTORY_LIMIT
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_demo_account, list_tables
from .database.connection import DBConfig
from .export.controller import register as register_export
from .roster.controller import register as register_roster
from .statistics.controller import register as register_statistics
from .trainings.controller import register as register_trainings

REPO_ROOT = Path(__file__).resolve().parents[3]


def create_app(container: Optional[Container] = None, *, settings_module: Optional[str] = None) -> Flask:
    """Application factory.

    Pass a prebuilt container (e.g. backed by in-memory repositories) to skip
    all database setup.
    """

    load_dotenv(override=False)
    app = Flask(__name__, template_folder=str(REPO_ROOT / "templates"), static_folder=str(REPO_ROOT / "static"))

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["TEAM_NAME"] = getattr(settings, "TEAM_NAME", "")
    app.logger.setLevel(logging.DEBUG if app.config["DEBUG"] else logging.INFO)

    app.jinja_env.filters["date_de"] = format_date_de
    app.jinja_env.filters["date_long_de"] = format_date_long_de
    app.jinja_env.filters["weekday_de"] = weekday_de

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        app.logger.info("settings=%s db=%s", settings_module, DBConfig.from_dict(db_config).describe())

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
            app.logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
            ensure_demo_account(
                db_config,
                email=getattr(settings, "DEMO_ACCOUNT_EMAIL"),
                password=getattr(settings, "DEMO_ACCOUNT_PASSWORD"),
            )
            app.logger.info("demo seed ready")

        container = build_container(
            db_config=db_config,
            team_name=app.config["TEAM_NAME"],
            history_limit=int(getattr(settings, "HISTORY_LIMIT", DEFAULT_HISTORY_LIMIT)),
        )

    register_auth(app, container)
    register_attendance(app, container)
    register_trainings(app, container)
    register_roster(app, container)
    register_statistics(app, container)
    register_export(app, container)

    return app
