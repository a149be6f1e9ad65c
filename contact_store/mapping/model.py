"""Row-to-model mapper for dataclasses.

Columns are matched to fields by name, so the order of a query's
projection never affects the result.
"""

from __future__ import annotations

import dataclasses
from typing import Any, Generic, TypeVar

from contact_store.core.exceptions import ColumnMismatchError

T = TypeVar("T")


class ModelMapper(Generic[T]):
    """Map row dicts onto a dataclass by column name.

    Columns without a matching field are ignored.

    Args:
        target_class: The dataclass to construct from row data.
        aliases: Optional column-name to field-name mapping.
    """

    def __init__(
        self,
        target_class: type[T],
        aliases: dict[str, str] | None = None,
    ) -> None:
        if not dataclasses.is_dataclass(target_class):
            raise TypeError(f"{target_class.__name__} is not a dataclass")
        self._target_class = target_class
        self._aliases = aliases
        self._field_names = [f.name for f in dataclasses.fields(target_class) if f.init]

    def _apply_aliases(self, row: dict[str, Any]) -> dict[str, Any]:
        """Apply column aliases to the row."""
        if not self._aliases:
            return row
        return {self._aliases.get(key, key): value for key, value in row.items()}

    def map_one(self, row: dict[str, Any]) -> T:
        """Map a single row to a target_class instance."""
        row = self._apply_aliases(row)
        missing = [name for name in self._field_names if name not in row]
        if missing:
            raise ColumnMismatchError(self._target_class.__name__, missing)
        return self._target_class(**{name: row[name] for name in self._field_names})

    def map_many(self, rows: list[dict[str, Any]]) -> list[T]:
        """Map all rows via map_one."""
        return [self.map_one(row) for row in rows]
