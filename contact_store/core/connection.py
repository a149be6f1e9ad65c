"""Connection configuration and management.

ConnectionConfig is a Pydantic model for type-safe connection config.
AsyncConnectionManager owns exactly one connection plus the background task
that keeps a round trip going on it for as long as it is open.
"""

from __future__ import annotations

import asyncio
import importlib
import logging
import os
from typing import Any

from pydantic import BaseModel, Field

from contact_store.core.enums import DatabaseBackend
from contact_store.core.exceptions import DriverError

logger = logging.getLogger(__name__)

DSN_ENV_VAR = "CONTACT_STORE_DSN"


class ConnectionConfig(BaseModel):
    """Configuration for the store connection."""

    driver: DatabaseBackend
    dsn: str | None = None
    host: str | None = None
    port: int | None = None
    user: str | None = None
    password: str | None = None
    database: str | None = None
    keepalive_interval: float = Field(default=30.0, gt=0)
    connect_timeout: int | None = None
    extra: dict[str, Any] = {}

    @classmethod
    def from_dsn(cls, dsn: str, **overrides: Any) -> ConnectionConfig:
        """Build a config from a connection string.

        ``sqlite:`` URLs select the SQLite backend; anything else is handed to
        libpq as a PostgreSQL ``key=value`` string or URI. An explicit
        ``driver`` override takes precedence.
        """
        if dsn.startswith("sqlite:"):
            overrides.setdefault("driver", DatabaseBackend.SQLITE)
        else:
            overrides.setdefault("driver", DatabaseBackend.POSTGRESQL)
        return cls(dsn=dsn, **overrides)

    @classmethod
    def from_env(cls, var: str = DSN_ENV_VAR, **overrides: Any) -> ConnectionConfig:
        """Build a config from the DSN held in environment variable *var*."""
        dsn = os.getenv(var)
        if not dsn:
            raise ValueError(f"{var} is not set")
        return cls.from_dsn(dsn, **overrides)

    def conninfo(self) -> str:
        """Return the libpq connection string: the DSN verbatim, or built from fields."""
        if self.dsn is not None:
            return self.dsn
        parts: list[str] = []
        if self.host is not None:
            parts.append(f"host={self.host}")
        if self.port is not None:
            parts.append(f"port={self.port}")
        if self.user is not None:
            parts.append(f"user={self.user}")
        if self.password is not None:
            parts.append(f"password={self.password}")
        if self.database is not None:
            parts.append(f"dbname={self.database}")
        return " ".join(parts)

    def sqlite_database(self) -> str:
        """Return the SQLite database path.

        Follows the usual URL convention: ``sqlite:///rel.db`` is relative,
        ``sqlite:////abs.db`` is absolute and a bare ``sqlite://`` is in-memory.
        """
        if self.dsn is None:
            return self.database or ":memory:"
        path = self.dsn.removeprefix("sqlite:").removeprefix("//")
        if path.startswith("/"):
            path = path[1:]
        return path or ":memory:"


# Adapter module mapping: backend -> (module_path, class_name)
_ADAPTER_MAP: dict[DatabaseBackend, tuple[str, str]] = {
    DatabaseBackend.SQLITE: ("contact_store.adapters.sqlite", "SqliteAsyncAdapter"),
    DatabaseBackend.POSTGRESQL: (
        "contact_store.adapters.postgresql",
        "PostgresqlAsyncAdapter",
    ),
}


def _load_adapter(driver: DatabaseBackend) -> Any:
    """Load the async adapter for a backend."""
    module_path, cls_name = _ADAPTER_MAP[driver]
    module = importlib.import_module(module_path)
    return getattr(module, cls_name)()


class AsyncConnectionManager:
    """Single-connection manager using the AsyncAdapter protocol.

    The connection is the only serialization point: statements issued by
    concurrent callers queue on it rather than running in parallel.
    """

    def __init__(self, config: ConnectionConfig) -> None:
        self.config = config
        self._adapter = _load_adapter(config.driver)
        self._connection: Any = None
        self._keepalive_task: asyncio.Task[None] | None = None
        self._keepalive_stop = asyncio.Event()
        self._healthy = False

    @property
    def adapter(self) -> Any:
        return self._adapter

    @property
    def connection(self) -> Any:
        """The live connection handle.

        Raises:
            DriverError: If the manager has not been opened or was closed.
        """
        if self._connection is None:
            raise DriverError("connection is not open")
        return self._connection

    @property
    def healthy(self) -> bool:
        """False once the keepalive task has seen the connection fail."""
        return self._connection is not None and self._healthy

    async def open(self) -> Any:
        """Connect and start the keepalive task.

        Raises:
            DriverError: If the driver cannot establish the connection.
        """
        if self._connection is not None:
            return self._connection
        try:
            connection = await self._adapter.connect(self.config)
        except self._adapter.errors as e:
            raise DriverError(f"Failed to connect to {self.config.driver.value}: {e}", e) from e

        self._connection = connection
        self._healthy = True
        self._keepalive_stop = asyncio.Event()
        self._keepalive_task = asyncio.create_task(
            self._keepalive(connection, self._keepalive_stop), name="contact-store-keepalive"
        )
        logger.debug("Opened %s connection", self.config.driver.value)
        return connection

    async def _keepalive(self, connection: Any, stop: asyncio.Event) -> None:
        """Drive one round trip per interval until stopped or the connection fails.

        A ping already in flight always runs to completion; ``stop`` is only
        checked between pings.
        """
        logger.debug("Keepalive started (interval=%ss)", self.config.keepalive_interval)
        while True:
            try:
                await asyncio.wait_for(stop.wait(), timeout=self.config.keepalive_interval)
            except asyncio.TimeoutError:
                pass
            else:
                return
            try:
                await self._adapter.ping(connection)
            except Exception as e:
                self._healthy = False
                logger.error("connection error: %s", e)
                return

    async def close(self) -> None:
        """Stop the keepalive task and close the connection."""
        task, self._keepalive_task = self._keepalive_task, None
        if task is not None:
            self._keepalive_stop.set()
            await task
            logger.debug("Keepalive stopped")

        connection, self._connection = self._connection, None
        self._healthy = False
        if connection is None:
            return
        try:
            await self._adapter.close(connection)
        except self._adapter.errors as e:
            raise DriverError(f"Failed to close connection: {e}", e) from e
        logger.debug("Closed %s connection", self.config.driver.value)
