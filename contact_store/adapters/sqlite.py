"""SQLite adapter - async using aiosqlite."""

from __future__ import annotations

import sqlite3
from typing import Any

from contact_store.core.connection import ConnectionConfig


class SqliteAsyncAdapter:
    """Asynchronous SQLite adapter using aiosqlite.

    aiosqlite runs every statement on one worker thread per connection, so
    statements from concurrent callers are executed one at a time.
    """

    @property
    def paramstyle(self) -> str:
        return "named"

    @property
    def errors(self) -> tuple[type[BaseException], ...]:
        # aiosqlite raises ValueError once its connection is closed; sqlite3
        # raises OverflowError for ints outside the signed 64-bit range
        return (sqlite3.Error, ValueError, OverflowError)

    async def connect(self, config: ConnectionConfig) -> Any:
        """Open an autocommit connection."""
        import aiosqlite

        kwargs: dict[str, Any] = dict(config.extra)
        if config.connect_timeout is not None:
            kwargs["timeout"] = config.connect_timeout
        conn = await aiosqlite.connect(
            config.sqlite_database(), isolation_level=None, **kwargs
        )
        conn.row_factory = aiosqlite.Row
        return conn

    async def close(self, connection: Any) -> None:
        await connection.close()

    async def ping(self, connection: Any) -> None:
        cursor = await connection.execute("SELECT 1")
        await cursor.close()

    async def execute(
        self,
        connection: Any,
        sql: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Execute SQL asynchronously and return a cursor."""
        return await connection.execute(sql, params or {})
