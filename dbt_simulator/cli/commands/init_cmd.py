"""Init command for dbt-simulator CLI."""

from __future__ import annotations

from pathlib import Path

import click

from dbt_simulator.cli import RichCommand
from dbt_simulator.cli.utils import console

CONFIG_TEMPLATE = """\
# dbt-simulator configuration

# Project name used in node ids (default: name in dbt_project.yml)
# project: my_dbt_project

dbt_version: 1.8.0
root: /dbt-project

target:
  name: dev
  schema: analytics
  database: warehouse
  type: simulator

paths:
  models: models
  macros: macros
  target: target

# Test names recognized in schema YAML files
test_keywords:
  - unique
  - not_null
  - relationships
  - accepted_values

# Values returned by var() in templates
# vars:
#   start_date: "2024-01-01"
"""


@click.command(cls=RichCommand)
def init() -> None:
    """Create a sim.yml config file.

    Generates a starter config file in the current directory with the
    default settings spelled out.

    Examples:

        dbt-sim init
    """
    config_path = Path("sim.yml")

    if config_path.exists():
        console.print(f"[yellow]{config_path} already exists[/yellow]")
        raise click.ClickException("Config file already exists")

    config_path.write_text(CONFIG_TEMPLATE, encoding="utf-8")
    console.print(f"[green]Created {config_path}[/green]")
