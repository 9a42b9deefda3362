"""Click command classes with a wider help layout.

Help is rendered with plain Click formatting; only the width changes, so
long option descriptions and dbt examples don't wrap awkwardly.
"""

from __future__ import annotations

import click

HELP_WIDTH = 88


def _wide_help(command: click.Command, ctx: click.Context) -> str:
    formatter = click.HelpFormatter(width=HELP_WIDTH)
    command.format_help(ctx, formatter)
    return formatter.getvalue()


class RichCommand(click.Command):
    """Click command with wide help output."""

    def get_help(self, ctx: click.Context) -> str:
        return _wide_help(self, ctx)


class RichGroup(click.Group):
    """Click group with wide help output; subcommands default to RichCommand."""

    command_class = RichCommand

    def get_help(self, ctx: click.Context) -> str:
        return _wide_help(self, ctx)
