"""Tree command for dbt-simulator CLI."""

from __future__ import annotations

from pathlib import Path

import click

from dbt_simulator.cli import RichCommand
from dbt_simulator.cli.utils import (
    build_vfs_tree,
    configure_logging,
    console,
    load_inputs,
    project_options,
)


@click.command(cls=RichCommand)
@project_options
def tree(config: Path | None, project: Path | None, verbose: bool, debug: bool) -> None:
    """Print the project's virtual file system as a tree."""
    configure_logging(verbose)
    cfg, vfs = load_inputs(config, project, debug=debug)
    console.print(build_vfs_tree(vfs, cfg.root, cfg.paths.target))
    console.print(f"\n[dim]{len(vfs)} files[/dim]")
