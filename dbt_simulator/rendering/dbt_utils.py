"""The ``dbt_utils`` namespace available inside templates."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from dbt_simulator.rendering.query import QueryResult

SURROGATE_KEY_DELIMITER = "'|'"
HASH_FUNCTION = "md5"


class DbtUtils:
    """
    A small, deterministic subset of dbt-utils.

    Supports:
    - surrogate_key / generate_surrogate_key
    - star (with except/exclude)
    - get_column_values (through the synthetic run_query)
    """

    def __init__(self, run_query: Callable[[str], QueryResult]) -> None:
        self._run_query = run_query

    def surrogate_key(self, field_list: Any = None, *fields: Any) -> str:
        """
        Hash a list of columns into one key expression.

        ``surrogate_key(['a', 'b'])`` renders
        ``md5(coalesce(cast(a as string), '') || '|' || coalesce(cast(b as string), ''))``.
        """
        if isinstance(field_list, (list, tuple)):
            columns = list(field_list)
        elif isinstance(field_list, str):
            columns = [field_list, *fields]
        else:
            columns = []

        expressions = [
            f"coalesce(cast({col} as string), '')" for col in map(str, columns) if col
        ]
        if not expressions:
            return f"{HASH_FUNCTION}('')"
        joined = f" || {SURROGATE_KEY_DELIMITER} || ".join(expressions)
        return f"{HASH_FUNCTION}({joined})"

    def generate_surrogate_key(self, field_list: Any = None) -> str:
        return self.surrogate_key(field_list)

    def star(self, *args: Any, **kwargs: Any) -> str:
        """``*``, annotated with the excluded columns when any are given."""
        excluded = kwargs.get("except") or kwargs.get("exclude")
        if excluded is None and len(args) > 1:
            excluded = args[1]
        if isinstance(excluded, (list, tuple)) and excluded:
            return f"* /* except: {', '.join(map(str, excluded))} */"
        return "*"

    def get_column_values(self, *args: Any, **kwargs: Any) -> list[Any]:
        """Distinct values of ``column`` in ``table`` via run_query."""
        table = kwargs.get("table", args[0] if args else None)
        column = kwargs.get("column", args[1] if len(args) > 1 else None)
        if not table or not column:
            return []

        result = self._run_query(f"select distinct {column} as {column} from {table}")
        if not result.columns:
            return []
        return result.columns[0].values()
