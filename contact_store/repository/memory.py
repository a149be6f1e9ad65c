"""In-memory Contact repository for tests and local wiring."""

from __future__ import annotations

import asyncio
import dataclasses

from contact_store.core.exceptions import DriverError, NotFoundError
from contact_store.models import Contact
from contact_store.repository.base import ContactRepository

# Widest integer column the SQL backends accept (signed 64-bit)
MIN_ID = -(2**63)
MAX_ID = 2**63 - 1


class InMemoryContactRepository(ContactRepository):
    """ContactRepository backed by a dict keyed on id.

    Mirrors the store's behaviour: a duplicate id or one outside the signed
    64-bit range fails with DriverError, and a closed repository rejects
    every call.
    """

    def __init__(self) -> None:
        self._rows: dict[int, Contact] = {}
        self._lock = asyncio.Lock()
        self._closed = False

    @classmethod
    async def connect(cls, dsn: str = "memory://") -> InMemoryContactRepository:
        return cls()

    @property
    def healthy(self) -> bool:
        return not self._closed

    def _check_open(self) -> None:
        if self._closed:
            raise DriverError("connection is not open")

    async def get(self, contact_id: int) -> Contact:
        async with self._lock:
            self._check_open()
            try:
                row = self._rows[contact_id]
            except KeyError:
                raise NotFoundError(contact_id) from None
            return dataclasses.replace(row)

    async def save(self, contact: Contact) -> int:
        async with self._lock:
            self._check_open()
            if not MIN_ID <= contact.id <= MAX_ID:
                raise DriverError(f"integer out of range: id={contact.id}")
            if contact.id in self._rows:
                raise DriverError(f"duplicate key value violates unique constraint: id={contact.id}")
            self._rows[contact.id] = dataclasses.replace(contact)
            return 1

    async def close(self) -> None:
        self._closed = True
