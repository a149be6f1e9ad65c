"""Packaged SQL queries.

Each ``.sql`` file below ``sql/`` is one named query, keyed by its path:
    sql/contact/get_by_id.sql -> "contact.get_by_id"
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import lru_cache
from pathlib import Path

from contact_store.core.exceptions import DuplicateQueryError, QueryNotFoundError

SQL_DIR = Path(__file__).resolve().parent.parent / "sql"

CONTACT_QUERIES = ("contact.get_by_id", "contact.insert")


def _load(root_dir: Path) -> dict[str, str]:
    queries: dict[str, str] = {}
    sources: dict[str, Path] = {}
    for sql_file in sorted(root_dir.rglob("*.sql")):
        query_name = ".".join(sql_file.relative_to(root_dir).with_suffix("").parts)
        if query_name in queries:
            raise DuplicateQueryError(query_name, str(sources[query_name]), str(sql_file))
        queries[query_name] = sql_file.read_text(encoding="utf-8").strip()
        sources[query_name] = sql_file
    return queries


class SQLRegistry:
    """Named SQL text read once from a directory tree.

    Args:
        root_dir: Directory holding the ``.sql`` files.
        required: Query names that must be present.

    Raises:
        DuplicateQueryError: If two files resolve to the same name.
        QueryNotFoundError: If a required query is missing.
    """

    def __init__(self, root_dir: Path | str, required: Iterable[str] = ()) -> None:
        self._queries = _load(Path(root_dir))
        for query_name in required:
            self.get(query_name)

    def get(self, query_name: str) -> str:
        """Return the SQL text for *query_name*.

        Raises:
            QueryNotFoundError: If no file provides that name.
        """
        try:
            return self._queries[query_name]
        except KeyError:
            raise QueryNotFoundError(query_name) from None


@lru_cache(maxsize=1)
def default_registry() -> SQLRegistry:
    """Registry over the queries shipped with the package, loaded once."""
    return SQLRegistry(SQL_DIR, required=CONTACT_QUERIES)
