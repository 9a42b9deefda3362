"""Synthetic ``run_query`` results - no database is ever contacted."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# Values returned for any query that selects the ``status`` column
STATUS_VALUES = ("completed", "refunded", "canceled")


@dataclass(frozen=True)
class QueryColumn:
    """One result column, shaped like an agate column (``col.values()``)."""

    name: str
    data: tuple[Any, ...] = ()

    def values(self) -> list[Any]:
        return list(self.data)


@dataclass(frozen=True)
class QueryResult:
    """Result table returned by ``run_query``."""

    columns: list[QueryColumn] = field(default_factory=list)
    rows: list[list[Any]] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.rows)


def simulate_query(sql: str) -> QueryResult:
    """Answer a query with canned data.

    Queries selecting ``status`` get three order statuses; everything else
    gets an empty ``result`` column.
    """
    normalized = sql.lower()

    if "select" in normalized and "status" in normalized:
        return QueryResult(
            columns=[QueryColumn(name="status", data=STATUS_VALUES)],
            rows=[[v] for v in STATUS_VALUES],
        )

    return QueryResult(columns=[QueryColumn(name="result")], rows=[])
