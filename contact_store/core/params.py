"""Placeholder rewriting for packaged queries.

Queries under ``sql/`` name their parameters ``:name``, which SQLite binds
directly. psycopg wants ``%(name)s`` instead.
"""

from __future__ import annotations

import re

_PLACEHOLDER = re.compile(r"(?<![:\w]):([a-zA-Z_]\w*)")


def to_paramstyle(sql: str, paramstyle: str) -> str:
    """Rewrite ``:name`` placeholders for a driver's paramstyle.

    Raises:
        ValueError: For a paramstyle no adapter uses.
    """
    if paramstyle == "named":
        return sql
    if paramstyle == "pyformat":
        return _PLACEHOLDER.sub(r"%(\1)s", sql)
    raise ValueError(f"Unsupported paramstyle: {paramstyle}")
