"""contact_store - async Contact persistence over a single SQL connection."""

from __future__ import annotations

from contact_store.core.connection import AsyncConnectionManager, ConnectionConfig
from contact_store.core.engine import AsyncEngine
from contact_store.core.enums import DatabaseBackend
from contact_store.core.exceptions import (
    ColumnMismatchError,
    ContactStoreError,
    DriverError,
    DuplicateQueryError,
    NotFoundError,
    QueryNotFoundError,
)
from contact_store.core.registry import SQLRegistry, default_registry
from contact_store.mapping.model import ModelMapper
from contact_store.models import Contact
from contact_store.repository import (
    ContactRepository,
    InMemoryContactRepository,
    SqlContactRepository,
)

__all__ = [
    # Entity
    "Contact",
    # Repository
    "ContactRepository",
    "SqlContactRepository",
    "InMemoryContactRepository",
    # Connection
    "ConnectionConfig",
    "AsyncConnectionManager",
    # Engine
    "AsyncEngine",
    # Registry
    "SQLRegistry",
    "default_registry",
    # Mapping
    "ModelMapper",
    # Enums
    "DatabaseBackend",
    # Exceptions
    "ContactStoreError",
    "DriverError",
    "NotFoundError",
    "QueryNotFoundError",
    "DuplicateQueryError",
    "ColumnMismatchError",
]
