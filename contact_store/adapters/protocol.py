"""Database adapter protocol.

Every adapter module MUST implement this protocol so that the connection
manager and engine stay backend-agnostic.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from contact_store.core.connection import ConnectionConfig


@runtime_checkable
class AsyncAdapter(Protocol):
    """Asynchronous database adapter protocol."""

    @property
    def paramstyle(self) -> str:
        """Parameter binding style: 'named' (:name) or 'pyformat' (%(name)s)."""
        ...

    @property
    def errors(self) -> tuple[type[BaseException], ...]:
        """Exception types raised by the driver and its transport."""
        ...

    async def connect(self, config: ConnectionConfig) -> Any:
        """Open a single autocommit connection."""
        ...

    async def close(self, connection: Any) -> None:
        """Close the connection."""
        ...

    async def ping(self, connection: Any) -> None:
        """Run one cheap round trip on the connection."""
        ...

    async def execute(
        self,
        connection: Any,
        sql: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Execute SQL asynchronously and return a cursor-like object."""
        ...
