"""Parsed simulator commands.

``parse_command`` turns a raw line into exactly one variant of ``Command``;
the interpreter handles every variant, so adding one without a handler is a
type error rather than a silent fall-through.
"""

from __future__ import annotations

from dataclasses import dataclass

from dbt_simulator.interpreter.tokenizer import split_args
from dbt_simulator.selector import parse_selector_args

DBT_LIST_ALIASES = ("ls", "list")


@dataclass(frozen=True)
class EmptyCommand:
    pass


@dataclass(frozen=True)
class HelpCommand:
    pass


@dataclass(frozen=True)
class PwdCommand:
    pass


@dataclass(frozen=True)
class LsCommand:
    path: str = "."


@dataclass(frozen=True)
class CdCommand:
    path: str | None = None  # None means the project root


@dataclass(frozen=True)
class CatCommand:
    path: str | None = None


@dataclass(frozen=True)
class UnknownCommand:
    name: str


@dataclass(frozen=True)
class DbtHelpCommand:
    pass


@dataclass(frozen=True)
class DbtListCommand:
    select: tuple[str, ...] = ()


@dataclass(frozen=True)
class DbtCompileCommand:
    select: tuple[str, ...] = ()


@dataclass(frozen=True)
class DbtRunCommand:
    select: tuple[str, ...] = ()


@dataclass(frozen=True)
class DbtTestCommand:
    select: tuple[str, ...] = ()


@dataclass(frozen=True)
class DbtDocsGenerateCommand:
    select: tuple[str, ...] = ()


@dataclass(frozen=True)
class DbtUnknownCommand:
    subcommand: str


@dataclass(frozen=True)
class DbtDocsUnknownCommand:
    subcommand: str


Command = (
    EmptyCommand
    | HelpCommand
    | PwdCommand
    | LsCommand
    | CdCommand
    | CatCommand
    | UnknownCommand
    | DbtHelpCommand
    | DbtListCommand
    | DbtCompileCommand
    | DbtRunCommand
    | DbtTestCommand
    | DbtDocsGenerateCommand
    | DbtUnknownCommand
    | DbtDocsUnknownCommand
)


def parse_command(line: str) -> Command:
    """Parse one command line into its Command variant."""
    tokens = split_args(line.strip())
    if not tokens:
        return EmptyCommand()

    name, args = tokens[0], tokens[1:]

    if name == "help":
        return HelpCommand()
    if name == "pwd":
        return PwdCommand()
    if name == "ls":
        return LsCommand(path=args[0] if args else ".")
    if name == "cd":
        return CdCommand(path=args[0] if args else None)
    if name == "cat":
        return CatCommand(path=args[0] if args else None)
    if name == "dbt":
        return _parse_dbt(args)
    return UnknownCommand(name=name)


def _parse_dbt(args: list[str]) -> Command:
    if not args:
        return DbtHelpCommand()

    sub, rest = args[0], args[1:]
    select = tuple(parse_selector_args(rest))

    if sub in DBT_LIST_ALIASES:
        return DbtListCommand(select=select)
    if sub == "compile":
        return DbtCompileCommand(select=select)
    if sub == "run":
        return DbtRunCommand(select=select)
    if sub == "test":
        return DbtTestCommand(select=select)
    if sub == "docs":
        action = rest[0] if rest and not rest[0].startswith("-") else None
        if action is None or action == "generate":
            return DbtDocsGenerateCommand(select=select)
        return DbtDocsUnknownCommand(subcommand=action)
    return DbtUnknownCommand(subcommand=sub)
