"""Mapping layer - transform row dicts into typed objects."""

from __future__ import annotations

from contact_store.mapping.model import ModelMapper

__all__ = [
    "ModelMapper",
]
