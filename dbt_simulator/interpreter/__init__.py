"""Interpreter layer - command parsing, execution and session gating."""

from dbt_simulator.interpreter.commands import Command, parse_command
from dbt_simulator.interpreter.interpreter import (
    EXIT_COMMAND_NOT_FOUND,
    EXIT_NAVIGATION_ERROR,
    EXIT_OK,
    EXIT_USAGE_ERROR,
    CommandResult,
    Interpreter,
    InterpreterState,
)
from dbt_simulator.interpreter.session import Session
from dbt_simulator.interpreter.tokenizer import split_args

__all__ = [
    "EXIT_COMMAND_NOT_FOUND",
    "EXIT_NAVIGATION_ERROR",
    "EXIT_OK",
    "EXIT_USAGE_ERROR",
    "Command",
    "CommandResult",
    "Interpreter",
    "InterpreterState",
    "Session",
    "parse_command",
    "split_args",
]
