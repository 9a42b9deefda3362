"""CLI utilities for dbt-simulator.

Rich-based formatting helpers and Click command classes shared by the
commands in ``dbt_simulator.cli.commands``.
"""

from __future__ import annotations

from dbt_simulator.cli.formatting import (
    format_error,
    format_success,
    format_warning,
    syntax_highlight_sql,
)
from dbt_simulator.cli.help_formatter import RichCommand, RichGroup

__all__ = [
    "format_error",
    "format_success",
    "format_warning",
    "syntax_highlight_sql",
    "RichCommand",
    "RichGroup",
]
