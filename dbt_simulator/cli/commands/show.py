"""Show command for dbt-simulator CLI."""

from __future__ import annotations

from pathlib import Path

import click

from dbt_simulator.cli import RichCommand, format_error, syntax_highlight_sql
from dbt_simulator.cli.utils import configure_logging, console, load_inputs, project_options
from dbt_simulator.interpreter import Interpreter


@click.command(cls=RichCommand)
@project_options
@click.argument("model")
def show(
    config: Path | None, project: Path | None, verbose: bool, debug: bool, model: str
) -> None:
    """Compile one model and print its SQL with syntax highlighting.

    Examples:

        dbt-sim show fct_orders
    """
    configure_logging(verbose)
    cfg, vfs = load_inputs(config, project, debug=debug)

    interpreter = Interpreter(cfg)
    result = interpreter.execute(interpreter.initial_state(vfs), f"dbt compile --select {model}")

    compiled_path = f"{cfg.paths.target}/compiled/{model}.sql"
    compiled = result.vfs.read(compiled_path) if result.vfs is not None else None
    if compiled is None:
        console.print(format_error(f"Model not found: {model}", "List models with: dbt-sim exec dbt ls"))
        raise click.ClickException(f"Model '{model}' not found")

    console.print(f"[dim]{compiled_path}[/dim]")
    console.print(syntax_highlight_sql(compiled.rstrip()))
