"""Session - single-writer command submission over an interpreter."""

from __future__ import annotations

import logging

from dbt_simulator.interpreter.interpreter import (
    CommandResult,
    Interpreter,
    InterpreterState,
)

logger = logging.getLogger(__name__)


class Session:
    """
    Own the interpreter state for one front end.

    While a submitted command is unresolved the session is busy and further
    submissions are ignored (returned as None, not queued), so every command
    sees a complete state snapshot. Each finished command replaces the state
    with a new value; nothing is mutated in place.
    """

    def __init__(self, interpreter: Interpreter, state: InterpreterState) -> None:
        self.interpreter = interpreter
        self._state = state
        self._busy = False
        self.history: list[str] = []

    @property
    def state(self) -> InterpreterState:
        return self._state

    @property
    def busy(self) -> bool:
        return self._busy

    async def submit(self, line: str) -> CommandResult | None:
        """Run ``line`` unless another command is in flight.

        Returns:
            The command's result, or None when the submission was ignored
        """
        if self._busy:
            logger.debug("Ignoring %r: a command is already running", line)
            return None

        self._busy = True
        try:
            snapshot = self._state
            result = await self.interpreter.execute_async(snapshot, line)
            self._state = snapshot.apply(result)
        finally:
            self._busy = False

        stripped = line.strip()
        if stripped:
            self.history = [h for h in self.history if h != stripped][-99:] + [stripped]
        return result
