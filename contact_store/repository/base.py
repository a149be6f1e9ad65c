"""Repository interface.

Callers depend on ContactRepository only; the store-backed and in-memory
implementations are interchangeable behind it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, TypeVar

from contact_store.models import Contact

R = TypeVar("R", bound="ContactRepository")


class ContactRepository(ABC):
    """Async get/save access to Contact records.

    Every operation either returns its value or raises a ContactStoreError:
    DriverError for anything the store or its transport reports,
    NotFoundError when a looked-up id has no row.
    """

    @classmethod
    @abstractmethod
    async def connect(cls: type[R], dsn: str) -> R:
        """Establish the connection described by *dsn* and return a ready repository.

        Raises:
            DriverError: If the connection cannot be established.
        """

    @abstractmethod
    async def get(self, contact_id: int) -> Contact:
        """Return a fresh Contact for *contact_id*.

        Raises:
            NotFoundError: If no row has that id.
            DriverError: On any store failure.
        """

    @abstractmethod
    async def save(self, contact: Contact) -> int:
        """Insert *contact* and return the affected row count.

        An existing id is never overwritten: the insert fails with DriverError.
        """

    @abstractmethod
    async def close(self) -> None:
        """Release the connection. Later calls raise DriverError."""

    @property
    @abstractmethod
    def healthy(self) -> bool:
        """False once the connection is known to be unusable."""

    async def __aenter__(self: R) -> R:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        await self.close()
