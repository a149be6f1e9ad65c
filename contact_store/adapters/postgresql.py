"""PostgreSQL adapter - async using psycopg (v3+)."""

from __future__ import annotations

from typing import Any

from contact_store.core.connection import ConnectionConfig


class PostgresqlAsyncAdapter:
    """Asynchronous PostgreSQL adapter using psycopg (v3+) async support."""

    @property
    def paramstyle(self) -> str:
        return "pyformat"

    @property
    def errors(self) -> tuple[type[BaseException], ...]:
        import psycopg

        return (psycopg.Error,)

    async def connect(self, config: ConnectionConfig) -> Any:
        import psycopg
        import psycopg.rows

        kwargs: dict[str, Any] = dict(config.extra)
        if config.connect_timeout is not None:
            kwargs["connect_timeout"] = config.connect_timeout
        return await psycopg.AsyncConnection.connect(
            config.conninfo(),
            autocommit=True,
            row_factory=psycopg.rows.dict_row,
            **kwargs,
        )

    async def close(self, connection: Any) -> None:
        await connection.close()

    async def ping(self, connection: Any) -> None:
        await connection.execute("SELECT 1")

    async def execute(
        self,
        connection: Any,
        sql: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        return await connection.execute(sql, params)
