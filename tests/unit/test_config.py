"""Unit tests for ConnectionConfig."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from contact_store.core.connection import DSN_ENV_VAR, ConnectionConfig
from contact_store.core.enums import DatabaseBackend


class TestFromDsn:
    def test_key_value_dsn_is_postgresql(self) -> None:
        dsn = "host=postgresql user=test password=test dbname=test"
        config = ConnectionConfig.from_dsn(dsn)
        assert config.driver is DatabaseBackend.POSTGRESQL
        assert config.conninfo() == dsn

    def test_uri_dsn_is_postgresql(self) -> None:
        config = ConnectionConfig.from_dsn("postgresql://test:test@db:5432/test")
        assert config.driver is DatabaseBackend.POSTGRESQL

    def test_sqlite_dsn(self) -> None:
        config = ConnectionConfig.from_dsn("sqlite:///contacts.db")
        assert config.driver is DatabaseBackend.SQLITE

    def test_overrides(self) -> None:
        config = ConnectionConfig.from_dsn("sqlite://", keepalive_interval=5)
        assert config.keepalive_interval == 5

    def test_explicit_driver_wins(self) -> None:
        config = ConnectionConfig.from_dsn("sqlite:///contacts.db", driver="postgresql")
        assert config.driver is DatabaseBackend.POSTGRESQL
        assert config.dsn == "sqlite:///contacts.db"


class TestSqliteDatabase:
    @pytest.mark.parametrize(
        ("dsn", "expected"),
        [
            ("sqlite:///contacts.db", "contacts.db"),
            ("sqlite:////tmp/contacts.db", "/tmp/contacts.db"),
            ("sqlite://", ":memory:"),
            ("sqlite:///:memory:", ":memory:"),
        ],
    )
    def test_paths(self, dsn: str, expected: str) -> None:
        assert ConnectionConfig.from_dsn(dsn).sqlite_database() == expected

    def test_database_field_without_dsn(self) -> None:
        config = ConnectionConfig(driver="sqlite", database="x.db")
        assert config.sqlite_database() == "x.db"


class TestConninfo:
    def test_built_from_fields(self) -> None:
        config = ConnectionConfig(
            driver="postgresql",
            host="localhost",
            port=5432,
            user="test",
            password="secret",
            database="test",
        )
        assert config.conninfo() == (
            "host=localhost port=5432 user=test password=secret dbname=test"
        )


class TestFromEnv:
    def test_reads_variable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(DSN_ENV_VAR, "sqlite://")
        assert ConnectionConfig.from_env().driver is DatabaseBackend.SQLITE

    def test_missing_variable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(DSN_ENV_VAR, raising=False)
        with pytest.raises(ValueError, match=DSN_ENV_VAR):
            ConnectionConfig.from_env()


class TestValidation:
    def test_keepalive_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            ConnectionConfig(driver="sqlite", keepalive_interval=0)

    def test_unknown_driver(self) -> None:
        with pytest.raises(ValidationError):
            ConnectionConfig(driver="mysql")
