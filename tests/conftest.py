"""Shared test fixtures."""

from __future__ import annotations

import sqlite3
from pathlib import Path

import pytest

from contact_store.core.connection import ConnectionConfig
from contact_store.models import Contact

CONTACT_DDL = (
    "CREATE TABLE contact (id INTEGER PRIMARY KEY, firstname TEXT, lastname TEXT, "
    "phone TEXT, email TEXT)"
)


@pytest.fixture
def sqlite_dsn(tmp_path: Path) -> str:
    """DSN for a fresh SQLite file holding an empty contact table."""
    db_path = tmp_path / "contacts.db"
    conn = sqlite3.connect(db_path)
    conn.execute(CONTACT_DDL)
    conn.commit()
    conn.close()
    return f"sqlite:///{db_path}"


@pytest.fixture
def sqlite_config(sqlite_dsn: str) -> ConnectionConfig:
    return ConnectionConfig.from_dsn(sqlite_dsn)


@pytest.fixture
def contact() -> Contact:
    return Contact(
        id=13,
        firstname="first",
        lastname="second",
        phone="0123456789",
        email="e@mail.com",
    )


@pytest.fixture
def tmp_sql_dir(tmp_path: Path) -> Path:
    """Temporary directory for SQL files."""
    return tmp_path / "sql"


@pytest.fixture
def write_sql(tmp_sql_dir: Path):
    """Helper to write SQL files into the temp directory.

    Usage:
        write_sql("contact/get_by_id.sql", "SELECT * FROM contact WHERE id = :id")
    """

    def _write(relative_path: str, content: str) -> Path:
        file_path = tmp_sql_dir / relative_path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content, encoding="utf-8")
        return file_path

    return _write
