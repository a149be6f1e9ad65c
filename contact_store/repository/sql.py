"""Store-backed Contact repository."""

from __future__ import annotations

import dataclasses
from typing import Any

from contact_store.core.connection import ConnectionConfig
from contact_store.core.engine import AsyncEngine
from contact_store.core.exceptions import DriverError, NotFoundError
from contact_store.core.registry import SQLRegistry, default_registry
from contact_store.mapping.model import ModelMapper
from contact_store.models import Contact
from contact_store.repository.base import ContactRepository


class SqlContactRepository(ContactRepository):
    """ContactRepository over a single SQL connection.

    Works against any backend with an adapter (PostgreSQL via psycopg,
    SQLite via aiosqlite); the backend is chosen from the DSN.
    """

    def __init__(self, engine: AsyncEngine) -> None:
        self.engine = engine
        self.mapper: ModelMapper[Contact] = ModelMapper(Contact)

    @classmethod
    async def connect(cls, dsn: str, **overrides: Any) -> SqlContactRepository:
        return await cls.from_config(ConnectionConfig.from_dsn(dsn, **overrides))

    @classmethod
    async def from_config(
        cls,
        config: ConnectionConfig,
        registry: SQLRegistry | None = None,
    ) -> SqlContactRepository:
        """Connect using an explicit config (and optionally a custom query registry)."""
        engine = await AsyncEngine.connect(config, registry or default_registry())
        return cls(engine)

    @property
    def healthy(self) -> bool:
        return self.engine.healthy

    async def get(self, contact_id: int) -> Contact:
        try:
            contact = await self.engine.fetch_first(
                "contact.get_by_id", {"id": contact_id}, mapper=self.mapper
            )
        except DriverError as e:
            # no stored row can hold an id the store cannot represent
            if isinstance(e.cause, OverflowError):
                raise NotFoundError(contact_id) from e
            raise
        if contact is None:
            raise NotFoundError(contact_id)
        return contact

    async def save(self, contact: Contact) -> int:
        return await self.engine.execute("contact.insert", dataclasses.asdict(contact))

    async def close(self) -> None:
        await self.engine.close()
