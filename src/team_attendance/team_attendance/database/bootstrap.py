from __future__ import annotations

import re
from pathlib import Path
from typing import Iterator, List, Optional

from werkzeug.security import generate_password_hash

from .connection import DBConfig, DatabaseConnection
from .mysql_base import db_cursor, fetchall, fetchone

_CREATE_DATABASE = re.compile(r"(?im)^\s*(CREATE\s+DATABASE|USE)\b[^;]*;\s*$")
_LINE_COMMENT = re.compile(r"(?m)^\s*--.*$")


def _clean(sql: str) -> str:
    # schema.sql may name a database; the configured one always wins
    return _LINE_COMMENT.sub("", _CREATE_DATABASE.sub("", sql))


def iter_sql_statements(sql: str) -> Iterator[str]:
    """Split a script on ';' outside of quoted strings."""

    quote: Optional[str] = None
    start = 0
    i = 0
    while i < len(sql):
        ch = sql[i]
        if quote:
            if ch == "\\":
                i += 1
            elif ch == quote:
                quote = None
        elif ch in ("'", '"', "`"):
            quote = ch
        elif ch == ";":
            stmt = sql[start:i].strip()
            if stmt:
                yield stmt
            start = i + 1
        i += 1

    tail = sql[start:].strip()
    if tail:
        yield tail


def _factory(db_config: dict) -> DatabaseConnection:
    return DatabaseConnection(DBConfig.from_dict(db_config))


def _run_script(db_config: dict, path: str | Path) -> int:
    statements: List[str] = list(iter_sql_statements(_clean(Path(path).read_text(encoding="utf-8"))))
    with db_cursor(_factory(db_config), dictionary=False) as (_, cur):
        for stmt in statements:
            cur.execute(stmt)
    return len(statements)


def ensure_database_exists(db_config: dict) -> None:
    factory = _factory(db_config)
    conn = factory.connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{factory.config.database}` "
            "CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> int:
    """Create the database if needed and run schema.sql; returns the statement count."""

    ensure_database_exists(db_config)
    return _run_script(db_config, schema_path)


def apply_seed_sql(db_config: dict, *, seed_path: str | Path) -> int:
    return _run_script(db_config, seed_path)


def ensure_demo_account(db_config: dict, *, email: str, password: str, display_name: str = "Trainer Demo") -> None:
    """Create or refresh the demo sign-in account with a freshly hashed password."""

    email = email.strip().lower()
    password_hash = generate_password_hash(password)
    with db_cursor(_factory(db_config)) as (_, cur):
        cur.execute("SELECT account_id FROM accounts WHERE email=%s", (email,))
        if fetchone(cur):
            cur.execute(
                "UPDATE accounts SET password_hash=%s, display_name=%s, is_active=1 WHERE email=%s",
                (password_hash, display_name, email),
            )
        else:
            cur.execute(
                "INSERT INTO accounts(email, password_hash, display_name) VALUES(%s, %s, %s)",
                (email, password_hash, display_name),
            )


def list_tables(db_config: dict) -> List[str]:
    with db_cursor(_factory(db_config), dictionary=False) as (_, cur):
        cur.execute("SHOW TABLES")
        return sorted(row[0] for row in fetchall(cur))
