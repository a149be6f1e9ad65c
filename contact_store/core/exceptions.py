"""contact_store exception hierarchy.

Store outcomes derive from ContactStoreError. Raw driver exceptions are never
raised to callers; they travel on DriverError.cause.
"""

from __future__ import annotations


class ContactStoreError(Exception):
    """Base exception for all store outcomes."""


class DriverError(ContactStoreError):
    """Raised on any failure originating in the database driver or its transport.

    Covers network faults, protocol errors, constraint violations and closed
    connections alike. The original exception is kept unchanged on ``cause``.
    """

    def __init__(self, detail: str, cause: BaseException | None = None) -> None:
        self.cause = cause
        super().__init__(detail)


class NotFoundError(ContactStoreError):
    """Raised when a lookup by id returns zero rows."""

    def __init__(self, contact_id: int) -> None:
        self.contact_id = contact_id
        super().__init__(f"no record with id {contact_id}")


# --- Packaging faults ---


class QueryNotFoundError(LookupError):
    """Raised when a named query cannot be found in the registry."""

    def __init__(self, query_name: str) -> None:
        self.query_name = query_name
        super().__init__(f"Query not found: '{query_name}'")


class DuplicateQueryError(ValueError):
    """Raised when two SQL files resolve to the same namespace key."""

    def __init__(self, query_name: str, path_a: str, path_b: str) -> None:
        self.query_name = query_name
        super().__init__(f"Duplicate query name '{query_name}': {path_a} and {path_b}")


class ColumnMismatchError(LookupError):
    """Raised when required fields cannot be mapped from row columns."""

    def __init__(self, target_class: str, missing_fields: list[str]) -> None:
        self.target_class = target_class
        self.missing_fields = missing_fields
        super().__init__(f"Cannot map to {target_class}: missing fields {missing_fields}")
