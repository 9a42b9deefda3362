"""Exec command for dbt-simulator CLI."""

from __future__ import annotations

from pathlib import Path

import click

from dbt_simulator.cli import RichCommand, format_success
from dbt_simulator.cli.utils import configure_logging, console, load_inputs, project_options
from dbt_simulator.ingestion import write_files
from dbt_simulator.interpreter import Interpreter


def _join_command(words: tuple[str, ...]) -> str:
    """Rebuild a command line, re-quoting words that contain whitespace.

    A single word is taken as the whole line, so `exec "dbt ls -s marts"` works.
    """
    if len(words) == 1:
        return words[0]
    return " ".join(f'"{w}"' if any(c.isspace() for c in w) else w for w in words)


@click.command(
    cls=RichCommand,
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
)
@project_options
@click.option(
    "--write",
    is_flag=True,
    help="Write generated target/ artifacts back to the --project directory",
)
@click.argument("command", nargs=-1, required=True, type=click.UNPROCESSED)
@click.pass_context
def exec_command(
    ctx: click.Context,
    config: Path | None,
    project: Path | None,
    verbose: bool,
    debug: bool,
    write: bool,
    command: tuple[str, ...],
) -> None:
    """Run one simulator command and exit with its exit code.

    Examples:

        dbt-sim exec dbt ls --select marts.*

        dbt-sim exec "dbt compile -s stg_orders"

        # Compile a real project and keep the artifacts
        dbt-sim exec --project ./jaffle_shop --write dbt compile
    """
    configure_logging(verbose)
    if write and project is None:
        raise click.UsageError("--write requires --project")

    cfg, vfs = load_inputs(config, project, debug=debug)
    interpreter = Interpreter(cfg)
    result = interpreter.execute(interpreter.initial_state(vfs), _join_command(command))

    console.print(result.output, end="", markup=False, highlight=False, soft_wrap=True)

    if write and project is not None and result.vfs is not None:
        prefix = f"{cfg.paths.target}/"
        artifacts = {
            key: content
            for key, content in result.vfs.items()
            if key.startswith(prefix) and vfs.get(key) != content
        }
        written = write_files(project, artifacts)
        console.print(format_success(f"Wrote {len(written)} artifacts", str(project / cfg.paths.target)))

    ctx.exit(result.exit_code)
