"""Domain entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Contact:
    """A contact record.

    ``id`` is assigned by the caller; its uniqueness is enforced by the store.
    Text fields are stored as given, without format validation.
    """

    id: int
    firstname: str
    lastname: str
    phone: str
    email: str
