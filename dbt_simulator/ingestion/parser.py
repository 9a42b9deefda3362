"""Heuristic model parser - refs, materialization and output columns.

This is a best-effort scanner over raw model text, not a SQL or Jinja
grammar. Anything it cannot recognize yields an empty list or the default
value; ``parse_sql_model`` never raises. Callers only depend on the
``ParsedSql`` shape, so a real parser can replace the regexes later.
"""

from __future__ import annotations

import re

from dbt_simulator.domain import ParsedSql

DEFAULT_MATERIALIZATION = "view"

REF_PATTERN = re.compile(r"ref\(\s*['\"]([\w\-]+)['\"]\s*\)", re.IGNORECASE)
MATERIALIZATION_PATTERN = re.compile(r"materialized\s*=\s*['\"](\w+)['\"]", re.IGNORECASE)
SELECT_PATTERN = re.compile(r"select([\s\S]*?)from", re.IGNORECASE)
ALIAS_PATTERN = re.compile(r"\s+as\s+(\w+)", re.IGNORECASE)


def parse_sql_model(sql: str) -> ParsedSql:
    """
    Parse one model's raw text.

    Example:
        {{ config(materialized='table') }}
        select o.order_id, {{ cents('o.total') }} as total_dollars
        from {{ ref('stg_orders') }} as o

    Returns:
        ParsedSql(refs=['stg_orders'], materialization='table',
                  columns=['o.order_id', 'total_dollars'])
    """
    return ParsedSql(
        refs=extract_refs(sql),
        materialization=detect_materialization(sql),
        columns=detect_columns(sql),
    )


def extract_refs(sql: str) -> list[str]:
    """All ``ref('name')`` targets in order of appearance, duplicates kept."""
    return REF_PATTERN.findall(sql)


def detect_materialization(sql: str) -> str:
    match = MATERIALIZATION_PATTERN.search(sql)
    if not match:
        return DEFAULT_MATERIALIZATION
    return match.group(1).lower()


def detect_columns(sql: str) -> list[str]:
    """Output column names of the first select list."""
    select_match = SELECT_PATTERN.search(sql)
    if not select_match:
        return []

    candidates = [s.strip() for s in select_match.group(1).split(",")]

    aliases: list[str] = []
    for column in candidates:
        if not column:
            continue
        alias_match = ALIAS_PATTERN.search(column)
        if alias_match:
            aliases.append(alias_match.group(1))
            continue
        # Bare column: first token, quoting stripped
        bare = re.sub(r"[\"`]", "", column).split()
        if bare:
            aliases.append(bare[0])

    return list(dict.fromkeys(a for a in aliases if a))
