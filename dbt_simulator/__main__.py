"""Command-line interface for dbt-simulator."""

from __future__ import annotations

import click

from dbt_simulator.cli import RichGroup
from dbt_simulator.cli.commands import exec_command, init, shell, show, tree, validate


@click.group(cls=RichGroup)
@click.version_option(package_name="dbt-simulator")
def cli() -> None:
    """Run dbt commands against an in-memory project - no warehouse needed.

    Interactive:

        $ dbt-sim shell

    One-shot:

        $ dbt-sim exec dbt compile --select marts.*
    """


cli.add_command(shell)
cli.add_command(exec_command, name="exec")
cli.add_command(show)
cli.add_command(tree)
cli.add_command(validate)
cli.add_command(init)


if __name__ == "__main__":
    cli()
