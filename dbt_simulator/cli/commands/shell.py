"""Interactive shell command for dbt-simulator CLI."""

from __future__ import annotations

import asyncio
from pathlib import Path

import click

from dbt_simulator.cli import RichCommand
from dbt_simulator.cli.utils import configure_logging, console, load_inputs, project_options
from dbt_simulator.interpreter import Interpreter, Session

EXIT_WORDS = ("exit", "quit")


@click.command(cls=RichCommand)
@project_options
def shell(config: Path | None, project: Path | None, verbose: bool, debug: bool) -> None:
    """Start an interactive simulator shell.

    Supports ls, cd, cat, pwd, help and the dbt subcommands ls, compile,
    run, test and docs generate. Type exit or quit to leave, clear to clear
    the screen.

    Examples:

        # Explore the built-in sample project
        dbt-sim shell

        # Load your own project into memory (nothing is written back)
        dbt-sim shell --project ./jaffle_shop
    """
    configure_logging(verbose)
    cfg, vfs = load_inputs(config, project, debug=debug)

    interpreter = Interpreter(cfg)
    session = Session(interpreter, interpreter.initial_state(vfs))

    console.print("[bold]dbt Core Simulator[/bold]", highlight=False)
    console.print(
        "[dim]Try: ls, cat dbt_project.yml, dbt ls, dbt compile, dbt test, "
        "dbt docs generate[/dim]"
    )
    console.print()

    while True:
        try:
            line = console.input(
                f"[dim]{session.state.working_directory}[/dim] [yellow]$[/yellow] "
            )
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        stripped = line.strip()
        if stripped in EXIT_WORDS:
            break
        if stripped == "clear":
            console.clear()
            continue

        result = asyncio.run(session.submit(line))
        if result is not None:
            console.print(result.output, end="", markup=False, highlight=False, soft_wrap=True)
