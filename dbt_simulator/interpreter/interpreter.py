"""Command interpreter - the shell and dbt command surface over a VFS.

Every command reads one ``InterpreterState`` and returns a ``CommandResult``.
Failures are results with a non-zero exit code, never exceptions:

    0    success
    1    navigation error (cd, unreadable file)
    2    listing error, missing operand, unknown dbt subcommand
    127  unknown command
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass, replace

from typing_extensions import assert_never

from dbt_simulator.config import SimConfig
from dbt_simulator.domain import Model
from dbt_simulator.errors import RenderError
from dbt_simulator.graph import topological_sort
from dbt_simulator.ingestion.project import (
    build_macro_prelude,
    discover_models,
    resolve_project_name,
)
from dbt_simulator.ingestion.schema_tests import parse_schema_tests
from dbt_simulator.interpreter.commands import (
    CatCommand,
    CdCommand,
    Command,
    DbtCompileCommand,
    DbtDocsGenerateCommand,
    DbtDocsUnknownCommand,
    DbtHelpCommand,
    DbtListCommand,
    DbtRunCommand,
    DbtTestCommand,
    DbtUnknownCommand,
    EmptyCommand,
    HelpCommand,
    LsCommand,
    PwdCommand,
    UnknownCommand,
    parse_command,
)
from dbt_simulator.manifest import Catalog, Clock, Manifest, utc_now
from dbt_simulator.rendering import QueryResult, TemplateRenderer, simulate_query
from dbt_simulator.selector import filter_models
from dbt_simulator.vfs import (
    VirtualFileSystem,
    exists,
    list_directory,
    to_absolute,
    to_key,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NAVIGATION_ERROR = 1
EXIT_USAGE_ERROR = 2
EXIT_COMMAND_NOT_FOUND = 127

HELP_TEXT = """\
Commands:
  ls [path]                 List files
  cd <path>                 Change directory
  cat <file>                Print file contents
  pwd                       Print working directory
  dbt ls                    List models
  dbt compile               Compile models (renders Jinja)
  dbt run                   Simulate model build order
  dbt test                  Simulate schema tests
  dbt docs generate         Simulate docs generation

Select models with --select/-s, e.g. dbt compile -s staging.*,path:marts
"""


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one command.

    ``working_directory`` and ``vfs`` are set only when the command produced
    a new value for them.
    """

    output: str
    exit_code: int = EXIT_OK
    working_directory: str | None = None
    vfs: VirtualFileSystem | None = None

    @property
    def ok(self) -> bool:
        return self.exit_code == EXIT_OK


@dataclass(frozen=True)
class InterpreterState:
    """The only state a command can observe."""

    working_directory: str
    vfs: VirtualFileSystem

    def apply(self, result: CommandResult) -> InterpreterState:
        """The state after ``result``; self is left untouched."""
        return replace(
            self,
            working_directory=result.working_directory or self.working_directory,
            vfs=result.vfs if result.vfs is not None else self.vfs,
        )


class Interpreter:
    """
    Execute simulator commands.

    The interpreter holds configuration only; all mutable state travels in
    the ``InterpreterState`` passed to ``execute`` and comes back through
    ``CommandResult``.
    """

    def __init__(
        self,
        config: SimConfig | None = None,
        clock: Clock = utc_now,
        run_query: Callable[[str], QueryResult] = simulate_query,
    ) -> None:
        self.config = config or SimConfig()
        self.clock = clock
        self.run_query = run_query

    @property
    def root(self) -> str:
        return self.config.root

    def initial_state(self, vfs: VirtualFileSystem) -> InterpreterState:
        return InterpreterState(working_directory=self.root, vfs=vfs)

    def execute(self, state: InterpreterState, line: str) -> CommandResult:
        """Parse and run one command line."""
        command = parse_command(line)
        logger.debug("Executing %r as %s", line, type(command).__name__)
        return self.dispatch(state, command)

    async def execute_async(self, state: InterpreterState, line: str) -> CommandResult:
        """Awaitable ``execute``; yields once so callers can serialize on it."""
        await asyncio.sleep(0)
        return self.execute(state, line)

    def dispatch(self, state: InterpreterState, command: Command) -> CommandResult:
        if isinstance(command, EmptyCommand):
            return CommandResult(output="")
        if isinstance(command, HelpCommand):
            return CommandResult(output=HELP_TEXT)
        if isinstance(command, PwdCommand):
            return CommandResult(output=f"{state.working_directory}\n")
        if isinstance(command, LsCommand):
            return self._ls(state, command)
        if isinstance(command, CdCommand):
            return self._cd(state, command)
        if isinstance(command, CatCommand):
            return self._cat(state, command)
        if isinstance(command, UnknownCommand):
            return CommandResult(
                output=f"{command.name}: command not found\n",
                exit_code=EXIT_COMMAND_NOT_FOUND,
            )
        if isinstance(command, DbtHelpCommand):
            return CommandResult(output=self._dbt_usage())
        if isinstance(command, DbtListCommand):
            return self._dbt_list(state, command)
        if isinstance(command, DbtCompileCommand):
            return self._dbt_compile(state, command)
        if isinstance(command, DbtRunCommand):
            return self._dbt_run(state, command)
        if isinstance(command, DbtTestCommand):
            return self._dbt_test(state, command)
        if isinstance(command, DbtDocsGenerateCommand):
            return self._dbt_docs(state, command)
        if isinstance(command, DbtUnknownCommand):
            return CommandResult(
                output=f"Unknown dbt command: {command.subcommand}\n\n{self._dbt_usage()}",
                exit_code=EXIT_USAGE_ERROR,
            )
        if isinstance(command, DbtDocsUnknownCommand):
            return CommandResult(
                output=f"Unknown dbt docs command: {command.subcommand}\n",
                exit_code=EXIT_USAGE_ERROR,
            )
        assert_never(command)

    # Shell builtins

    def _ls(self, state: InterpreterState, command: LsCommand) -> CommandResult:
        target = command.path
        key = to_key(to_absolute(state.working_directory, target, self.root), self.root)
        not_found = CommandResult(
            output=f"ls: cannot access '{target}': No such file or directory\n",
            exit_code=EXIT_USAGE_ERROR,
        )
        if key is None:
            return not_found

        entries = list_directory(state.vfs, key)
        if not entries:
            if key in state.vfs:
                # ls on a file prints the file name
                return CommandResult(output=f"{target}\n")
            if not exists(state.vfs, key):
                return not_found

        output = "\n".join(e.display_name for e in entries)
        return CommandResult(output=f"{output}\n")

    def _cd(self, state: InterpreterState, command: CdCommand) -> CommandResult:
        target = command.path or self.root
        absolute = to_absolute(state.working_directory, target, self.root)
        key = to_key(absolute, self.root)

        if key is None:
            return CommandResult(
                output=f"cd: {target}: Permission denied\n",
                exit_code=EXIT_NAVIGATION_ERROR,
            )
        if key in state.vfs:
            return CommandResult(
                output=f"cd: {target}: Not a directory\n",
                exit_code=EXIT_NAVIGATION_ERROR,
            )
        if not exists(state.vfs, key):
            return CommandResult(
                output=f"cd: {target}: No such file or directory\n",
                exit_code=EXIT_NAVIGATION_ERROR,
            )
        return CommandResult(output="", working_directory=absolute)

    def _cat(self, state: InterpreterState, command: CatCommand) -> CommandResult:
        target = command.path
        if not target:
            return CommandResult(output="cat: missing file operand\n", exit_code=EXIT_USAGE_ERROR)

        key = to_key(to_absolute(state.working_directory, target, self.root), self.root)
        if key is not None and key not in state.vfs and exists(state.vfs, key):
            return CommandResult(
                output=f"cat: {target}: Is a directory\n",
                exit_code=EXIT_NAVIGATION_ERROR,
            )
        contents = state.vfs.read(key) if key is not None else None
        if contents is None:
            return CommandResult(
                output=f"cat: {target}: No such file or directory\n",
                exit_code=EXIT_NAVIGATION_ERROR,
            )
        return CommandResult(output=f"{contents.strip()}\n")

    # dbt

    def _dbt_usage(self) -> str:
        return (
            f"dbt simulator (dbt={self.config.dbt_version})\n"
            "Supported subcommands: ls, compile, run, test, docs generate\n"
        )

    def _header(self, *lines: str) -> list[str]:
        return [f"Running with dbt={self.config.dbt_version}", *lines, ""]

    def _select(self, state: InterpreterState, select: tuple[str, ...]) -> tuple[list[Model], list[Model]]:
        """(all models, selected models), both in path order."""
        models = discover_models(state.vfs, self.config)
        return models, filter_models(models, select)

    def _artifact_path(self, *parts: str) -> str:
        return "/".join((self.config.paths.target, *parts))

    def _dbt_list(self, state: InterpreterState, command: DbtListCommand) -> CommandResult:
        _, models = self._select(state, command.select)
        project = resolve_project_name(state.vfs, self.config)
        lines = [
            *self._header(f"Found {len(models)} models"),
            *(m.qualified_id(project) for m in models),
            "",
        ]
        return CommandResult(output="\n".join(lines))

    def _dbt_compile(self, state: InterpreterState, command: DbtCompileCommand) -> CommandResult:
        all_models, selected = self._select(state, command.select)
        models = topological_sort(selected)
        project = resolve_project_name(state.vfs, self.config)
        prelude = build_macro_prelude(state.vfs, self.config)
        renderer = TemplateRenderer(
            target=self.config.target,
            execute=True,
            run_query=self.run_query,
            project_vars=self.config.vars,
        )

        written: dict[str, str] = {}
        blocks: list[str] = []
        total = len(models)
        for idx, model in enumerate(models, start=1):
            try:
                compiled = renderer.render_model(model.raw_sql, prelude, model_name=model.name)
            except RenderError as e:
                logger.debug("Compilation error in %s: %s", model.name, e)
                compiled = f"-- Compilation error: {' '.join(str(e).split())}"

            compiled_path = self._artifact_path("compiled", f"{model.name}.sql")
            written[compiled_path] = f"{compiled}\n"
            blocks.append(
                "\n".join(
                    [
                        f"{idx} of {total} compiled model {model.qualified_id(project)}",
                        "--- RAW (TEMPLATE) ---",
                        model.raw_sql.strip(),
                        "",
                        "--- COMPILED SQL ---",
                        compiled,
                        "",
                        f"Wrote: {compiled_path}",
                        "",
                    ]
                )
            )

        manifest_path = self._artifact_path("manifest.json")
        manifest = Manifest.create(
            models, all_models, project, self.config.dbt_version, self.clock
        )
        written[manifest_path] = manifest.to_json()

        output = "\n".join(self._header(f"Found {total} models"))
        output += "\n".join(blocks)
        output += f"\nWrote: {manifest_path}\n"
        return CommandResult(output=output, vfs=state.vfs.with_files(written))

    def _dbt_run(self, state: InterpreterState, command: DbtRunCommand) -> CommandResult:
        _, selected = self._select(state, command.select)
        models = topological_sort(selected)
        schema = self.config.target.schema_name

        total = len(models)
        lines = self._header(f"Found {total} models")
        for idx, model in enumerate(models, start=1):
            relation = f"{model.materialization} model {schema}.{model.name}"
            lines.append(f"{idx} of {total} START sql {relation}")
            lines.append(f"{idx} of {total} OK created sql {relation}")
            lines.append("")
        lines.append("Completed successfully in 0.00s")
        lines.append(f"Done. PASS={total} WARN=0 ERROR=0 SKIP=0 TOTAL={total}")
        lines.append("")
        return CommandResult(output="\n".join(lines))

    def _dbt_test(self, state: InterpreterState, command: DbtTestCommand) -> CommandResult:
        _, models = self._select(state, command.select)
        selected_names = {m.name for m in models}
        tests = [
            t
            for t in parse_schema_tests(state.vfs, self.config.test_keywords)
            if t.model_name in selected_names
        ]

        total = len(tests)
        lines = self._header(f"Found {len(models)} models, {total} tests")
        if not tests:
            lines.append("No tests found for the selected models.")
            lines.append("")
            return CommandResult(output="\n".join(lines))

        for idx, test in enumerate(tests, start=1):
            lines.append(f"{idx} of {total} START test {test.unique_id}")
            lines.append(f"{idx} of {total} PASS test {test.unique_id}")
            lines.append("")
        lines.append("All tests passed!")
        lines.append("")
        return CommandResult(output="\n".join(lines))

    def _dbt_docs(self, state: InterpreterState, command: DbtDocsGenerateCommand) -> CommandResult:
        all_models, models = self._select(state, command.select)
        project = resolve_project_name(state.vfs, self.config)
        version = self.config.dbt_version

        manifest_path = self._artifact_path("manifest.json")
        catalog_path = self._artifact_path("catalog.json")
        written = {
            manifest_path: Manifest.create(models, all_models, project, version, self.clock).to_json(),
            catalog_path: Catalog.create(models, project, version, self.clock).to_json(),
        }

        lines = [
            *self._header(f"Found {len(models)} models"),
            "Catalog generated (simulated).",
            f"Docs would be available at {catalog_path} and "
            f"{self._artifact_path('index.html')} in a real project.",
            "",
            f"Wrote: {manifest_path}",
            f"Wrote: {catalog_path}",
            "",
        ]
        return CommandResult(output="\n".join(lines), vfs=state.vfs.with_files(written))
