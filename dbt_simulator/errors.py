"""Simulator exceptions.

Only host-level problems (a missing seed directory, a broken template) are
raised. Everything a user can trigger from the command line is returned as a
``CommandResult`` value by the interpreter.
"""

from __future__ import annotations


class SimulatorError(Exception):
    """Base class for simulator errors."""


class RenderError(SimulatorError):
    """A model or macro template failed to render."""

    def __init__(self, message: str, model: str | None = None) -> None:
        super().__init__(message)
        self.model = model


class ProjectLoadError(SimulatorError):
    """A project directory could not be loaded into the virtual file system."""
