"""Repository layer - Contact persistence behind one interface."""

from __future__ import annotations

from contact_store.repository.base import ContactRepository
from contact_store.repository.memory import InMemoryContactRepository
from contact_store.repository.sql import SqlContactRepository

__all__ = [
    "ContactRepository",
    "SqlContactRepository",
    "InMemoryContactRepository",
]
