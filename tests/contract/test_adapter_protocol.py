"""Contract tests for adapter protocol compliance."""

from __future__ import annotations

import sqlite3

import pytest

from contact_store.adapters.protocol import AsyncAdapter
from contact_store.adapters.sqlite import SqliteAsyncAdapter
from contact_store.core.connection import ConnectionConfig
from contact_store.core.exceptions import DriverError


class TestSqliteAsyncAdapterProtocol:
    def test_implements_async_protocol(self) -> None:
        assert isinstance(SqliteAsyncAdapter(), AsyncAdapter)

    def test_paramstyle(self) -> None:
        assert SqliteAsyncAdapter().paramstyle == "named"

    def test_errors_cover_driver_and_closed_connection(self) -> None:
        errors = SqliteAsyncAdapter().errors
        assert sqlite3.Error in errors
        assert ValueError in errors

    async def test_lifecycle(self) -> None:
        adapter = SqliteAsyncAdapter()
        conn = await adapter.connect(ConnectionConfig.from_dsn("sqlite://"))

        cursor = await adapter.execute(conn, "SELECT :v AS val", {"v": 1})
        row = await cursor.fetchone()
        assert row["val"] == 1

        await adapter.ping(conn)
        await adapter.close(conn)

        with pytest.raises(adapter.errors):
            await adapter.ping(conn)

    async def test_autocommit(self, sqlite_config: ConnectionConfig) -> None:
        adapter = SqliteAsyncAdapter()
        writer = await adapter.connect(sqlite_config)
        reader = await adapter.connect(sqlite_config)

        await adapter.execute(
            writer,
            "INSERT INTO contact (id, firstname, lastname, phone, email) "
            "VALUES (1, 'a', 'b', 'c', 'd')",
        )
        cursor = await adapter.execute(reader, "SELECT COUNT(*) FROM contact")
        assert (await cursor.fetchone())[0] == 1

        await adapter.close(writer)
        await adapter.close(reader)


class TestPostgresqlAsyncAdapterProtocol:
    def test_implements_async_protocol(self) -> None:
        from contact_store.adapters.postgresql import PostgresqlAsyncAdapter

        assert isinstance(PostgresqlAsyncAdapter(), AsyncAdapter)

    def test_paramstyle(self) -> None:
        from contact_store.adapters.postgresql import PostgresqlAsyncAdapter

        assert PostgresqlAsyncAdapter().paramstyle == "pyformat"

    def test_errors(self) -> None:
        psycopg = pytest.importorskip("psycopg")
        from contact_store.adapters.postgresql import PostgresqlAsyncAdapter

        assert PostgresqlAsyncAdapter().errors == (psycopg.Error,)

    async def test_unreachable_server_raises_driver_error(self) -> None:
        pytest.importorskip("psycopg")
        from contact_store.repository.sql import SqlContactRepository

        with pytest.raises(DriverError, match="Failed to connect to postgresql") as exc_info:
            await SqlContactRepository.connect(
                "host=127.0.0.1 port=1 user=test dbname=test", connect_timeout=2
            )
        assert exc_info.value.cause is not None

    def test_packaged_queries_bind_in_pyformat(self) -> None:
        from contact_store.core.connection import AsyncConnectionManager
        from contact_store.core.engine import AsyncEngine
        from contact_store.core.registry import default_registry

        manager = AsyncConnectionManager(ConnectionConfig.from_dsn("host=localhost dbname=test"))
        engine = AsyncEngine(manager, default_registry())
        assert engine._sql("contact.get_by_id").endswith("WHERE id = %(id)s")
        assert "%(firstname)s" in engine._sql("contact.insert")
        assert ":" not in engine._sql("contact.insert")
