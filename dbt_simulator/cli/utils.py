"""CLI utility functions for dbt-simulator."""

from __future__ import annotations

import logging
import traceback
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any, TypeVar

import click
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.tree import Tree

from dbt_simulator.config import SimConfig, load_config
from dbt_simulator.errors import ProjectLoadError
from dbt_simulator.ingestion import ProjectLoader
from dbt_simulator.seed import default_vfs
from dbt_simulator.vfs import VirtualFileSystem

console = Console()

F = TypeVar("F", bound=Callable[..., Any])


def configure_logging(verbose: bool) -> None:
    """Route library logs through Rich; DEBUG with --verbose, else WARNING."""
    root = logging.getLogger("dbt_simulator")
    root.handlers = [RichHandler(console=console, show_path=False, show_time=False)]
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    root.propagate = False


def load_inputs(
    config: Path | None, project: Path | None, debug: bool = False
) -> tuple[SimConfig, VirtualFileSystem]:
    """Load config and the project VFS, turning failures into ClickExceptions.

    Without ``project`` the built-in sample project is used.
    """
    try:
        cfg = load_config(config)
    except FileNotFoundError as e:
        _report(debug, "Config file not found", e)
        raise click.ClickException(str(e))
    except yaml.YAMLError as e:
        _report(debug, "YAML parsing error", e)
        raise click.ClickException(str(e))
    except ValidationError as e:
        _report(debug, "Config validation error", e)
        raise click.ClickException(str(e))

    if project is None:
        return cfg, default_vfs()

    try:
        vfs = ProjectLoader.from_directory(project).load()
    except ProjectLoadError as e:
        _report(debug, "Project load error", e)
        raise click.ClickException(str(e))
    return cfg, vfs


def _report(debug: bool, label: str, error: Exception) -> None:
    if debug:
        console.print(traceback.format_exc())
    console.print(f"[red]{label}:[/red] {error}")


def build_vfs_tree(vfs: Mapping[str, str], root: str, target_prefix: str = "target") -> Tree:
    """Build a Rich Tree from VFS keys.

    Args:
        vfs: File system to display
        root: Simulator root shown as the tree label
        target_prefix: Prefix of generated artifacts (dimmed)

    Returns:
        Rich Tree object for display
    """
    tree = Tree(f"[bold]{root}/[/bold]")
    nodes: dict[str, Tree] = {}

    # Directories first at every level, like ls
    def sort_key(path: str) -> tuple[str, ...]:
        parts = path.split("/")
        return tuple(f"0{p}" for p in parts[:-1]) + (f"1{parts[-1]}",)

    for path in sorted(vfs, key=sort_key):
        parts = path.split("/")
        parent = tree

        for i, part in enumerate(parts[:-1]):
            key = "/".join(parts[: i + 1])
            if key not in nodes:
                nodes[key] = parent.add(f"[blue]{part}/[/blue]")
            parent = nodes[key]

        fname = parts[-1]
        if parts[0] == target_prefix:
            parent.add(f"[dim]{fname}[/dim]")
        elif fname.endswith(".sql"):
            parent.add(f"[green]{fname}[/green]")
        elif fname.endswith((".yml", ".yaml")):
            parent.add(f"[yellow]{fname}[/yellow]")
        else:
            parent.add(fname)

    return tree


def project_options(func: F) -> F:
    """Attach the options every simulator command shares."""
    options = [
        click.option(
            "--config",
            "-c",
            type=click.Path(exists=True, dir_okay=False, path_type=Path),
            help="Path to sim.yml config file (auto-detected if not specified)",
        ),
        click.option(
            "--project",
            "-p",
            type=click.Path(exists=True, file_okay=False, path_type=Path),
            help="dbt project directory to load (default: built-in sample project)",
        ),
        click.option("--verbose", "-v", is_flag=True, help="Show debug logging"),
        click.option(
            "--debug",
            is_flag=True,
            help="Show full exception stacktraces for troubleshooting",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func
