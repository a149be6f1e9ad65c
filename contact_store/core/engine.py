"""Query execution engine.

The AsyncEngine resolves named queries from the SQLRegistry, binds parameters,
executes them on the single managed connection, and optionally applies a
mapper to the results. Driver exceptions never leave the engine unwrapped.
"""

from __future__ import annotations

from typing import Any

from contact_store.core.connection import AsyncConnectionManager, ConnectionConfig
from contact_store.core.exceptions import DriverError
from contact_store.core.params import to_paramstyle
from contact_store.core.registry import SQLRegistry


async def _rows_to_dicts(cursor: Any) -> list[dict[str, Any]]:
    """Fetch all cursor rows as dicts keyed by column name.

    Handles both tuple-like rows and dict-like rows from different adapters.
    """
    if cursor.description is None:
        return []
    columns = [desc[0] for desc in cursor.description]
    rows = await cursor.fetchall()
    if rows and isinstance(rows[0], dict):
        return [dict(row) for row in rows]
    return [dict(zip(columns, row, strict=True)) for row in rows]


class AsyncEngine:
    """Asynchronous query execution engine."""

    def __init__(
        self,
        connection_manager: AsyncConnectionManager,
        registry: SQLRegistry,
    ) -> None:
        self._connection_manager = connection_manager
        self._registry = registry
        self._paramstyle = connection_manager.adapter.paramstyle

    @classmethod
    async def connect(
        cls,
        config: ConnectionConfig,
        registry: SQLRegistry,
    ) -> AsyncEngine:
        """Open a connection for *config* and return an engine bound to it.

        Raises:
            DriverError: If the connection cannot be established.
        """
        connection_manager = AsyncConnectionManager(config)
        await connection_manager.open()
        return cls(connection_manager, registry)

    @property
    def connection_manager(self) -> AsyncConnectionManager:
        return self._connection_manager

    @property
    def healthy(self) -> bool:
        return self._connection_manager.healthy

    def _sql(self, query_name: str) -> str:
        return to_paramstyle(self._registry.get(query_name), self._paramstyle)

    async def fetch_all(
        self,
        query_name: str,
        params: dict[str, Any] | None = None,
        *,
        mapper: Any | None = None,
    ) -> Any:
        """Fetch all matching rows."""
        sql = self._sql(query_name)
        adapter = self._connection_manager.adapter
        conn = self._connection_manager.connection
        try:
            cursor = await adapter.execute(conn, sql, params)
            rows = await _rows_to_dicts(cursor)
        except adapter.errors as e:
            raise DriverError(f"'{query_name}' failed: {e}", e) from e

        if mapper is not None:
            return mapper.map_many(rows)
        return rows

    async def fetch_first(
        self,
        query_name: str,
        params: dict[str, Any] | None = None,
        *,
        mapper: Any | None = None,
    ) -> Any:
        """Fetch the first matching row, or None if there is none.

        Additional rows are discarded rather than reported.
        """
        rows = await self.fetch_all(query_name, params)
        if not rows:
            return None
        if mapper is not None:
            return mapper.map_one(rows[0])
        return rows[0]

    async def execute(
        self,
        query_name: str,
        params: dict[str, Any] | None = None,
    ) -> int:
        """Execute a write query. Returns the affected row count."""
        sql = self._sql(query_name)
        adapter = self._connection_manager.adapter
        conn = self._connection_manager.connection
        try:
            cursor = await adapter.execute(conn, sql, params)
        except adapter.errors as e:
            raise DriverError(f"'{query_name}' failed: {e}", e) from e
        return int(cursor.rowcount)

    async def close(self) -> None:
        """Close the underlying connection."""
        await self._connection_manager.close()
