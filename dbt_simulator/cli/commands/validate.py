"""Validate command for dbt-simulator CLI."""

from __future__ import annotations

from pathlib import Path

import click

from dbt_simulator.cli import RichCommand, format_warning
from dbt_simulator.cli.utils import configure_logging, console, load_inputs, project_options
from dbt_simulator.graph import unordered_models
from dbt_simulator.ingestion import (
    build_macro_prelude,
    discover_models,
    parse_schema_tests,
    resolve_project_name,
)


@click.command(cls=RichCommand)
@project_options
@click.option("--strict", is_flag=True, help="Fail when any warning is reported")
def validate(
    config: Path | None, project: Path | None, verbose: bool, debug: bool, strict: bool
) -> None:
    """Validate configuration and the project's models.

    Checks that:
    - sim.yml is valid
    - The project contains models
    - Every ref() points at a known model
    - The models can be ordered without a cycle

    Examples:

        dbt-sim validate --project ./jaffle_shop

        dbt-sim validate --strict && dbt-sim exec dbt compile
    """
    configure_logging(verbose)
    cfg, vfs = load_inputs(config, project, debug=debug)
    console.print(f"[green]Config valid[/green] [dim](root {cfg.root})[/dim]")

    models = discover_models(vfs, cfg)
    if not models:
        console.print(f"[red]No models found under {cfg.paths.models}/[/red]")
        raise click.ClickException("No models found")

    project_name = resolve_project_name(vfs, cfg)
    prelude = build_macro_prelude(vfs, cfg)
    tests = parse_schema_tests(vfs, cfg.test_keywords)
    console.print(
        f"[green]Project {project_name}:[/green] {len(models)} models, "
        f"{prelude.macro_count} macro files, {len(tests)} schema tests"
    )

    warnings: list[str] = []
    names = {m.name for m in models}
    for model in models:
        for ref in model.unique_refs:
            if ref not in names:
                warnings.append(f"{model.path}: ref('{ref}') does not match any model")

    seen: dict[str, str] = {}
    for model in models:
        if model.name in seen:
            warnings.append(
                f"{model.path}: model name '{model.name}' also used by {seen[model.name]}"
            )
        seen[model.name] = model.path

    unordered = unordered_models(models)
    if unordered:
        warnings.append(
            f"Dependency cycle involving {', '.join(unordered)}; "
            "build order falls back to file path order"
        )

    for message in warnings:
        console.print(format_warning(message))

    if warnings and strict:
        raise click.ClickException(f"{len(warnings)} warnings")

    if warnings:
        console.print(f"\n[bold yellow]Checks passed with {len(warnings)} warnings[/bold yellow]")
    else:
        console.print("\n[bold green]All checks passed[/bold green]")
