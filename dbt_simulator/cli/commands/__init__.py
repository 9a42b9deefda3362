"""CLI commands for dbt-simulator.

Commands are registered on the group in ``dbt_simulator.__main__``.
"""

from __future__ import annotations

from dbt_simulator.cli.commands.exec_cmd import exec_command
from dbt_simulator.cli.commands.init_cmd import init
from dbt_simulator.cli.commands.shell import shell
from dbt_simulator.cli.commands.show import show
from dbt_simulator.cli.commands.tree import tree
from dbt_simulator.cli.commands.validate import validate

__all__ = [
    "exec_command",
    "init",
    "shell",
    "show",
    "tree",
    "validate",
]
