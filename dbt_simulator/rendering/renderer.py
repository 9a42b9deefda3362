"""Jinja rendering of models and macros with a dbt-like context."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from jinja2 import Environment, TemplateError
from jinja2.sandbox import SandboxedEnvironment

from dbt_simulator.config import TargetConfig
from dbt_simulator.errors import RenderError
from dbt_simulator.ingestion.project import MacroPrelude
from dbt_simulator.rendering.dbt_utils import DbtUtils
from dbt_simulator.rendering.query import QueryResult, simulate_query

logger = logging.getLogger(__name__)

# Python errors a template can trigger from inside a macro or global call.
# RuntimeError covers RecursionError from self-calling macros.
TEMPLATE_RUNTIME_ERRORS = (
    TemplateError,
    RuntimeError,
    TypeError,
    ValueError,
    LookupError,
    ArithmeticError,
    AttributeError,
)


def postprocess(rendered: str) -> str:
    """Drop blank lines and trim the result."""
    return "\n".join(line for line in rendered.splitlines() if line.strip()).strip()


def _as_bool(value: Any) -> bool:
    return bool(value)


def _as_number(value: Any) -> float | int:
    if isinstance(value, (int, float)):
        return value
    text = str(value).strip()
    try:
        return int(text)
    except ValueError:
        return float(text)


class TemplateRenderer:
    """
    Render dbt model templates without a warehouse.

    Context available to every template:
    - target, execute
    - ref(model), source(source, table), config(...)
    - var(name, default), env_var(name, default)
    - run_query(sql) returning a synthetic result
    - dbt_utils.surrogate_key / star / get_column_values
    - filters: as_bool, as_number
    """

    def __init__(
        self,
        target: TargetConfig | None = None,
        execute: bool = True,
        run_query: Callable[[str], QueryResult] = simulate_query,
        project_vars: Mapping[str, Any] | None = None,
    ) -> None:
        self.target = target or TargetConfig()
        self.execute = execute
        self.run_query = run_query
        self.project_vars = dict(project_vars or {})
        self.env = self._build_environment()

    def _build_environment(self) -> Environment:
        # Unsafe attribute access raises SecurityError, a TemplateError
        env = SandboxedEnvironment(autoescape=False, trim_blocks=True, lstrip_blocks=True)

        schema = self.target.schema_name
        project_vars = self.project_vars

        def ref(model_name: str) -> str:
            return f"{schema}.{model_name}"

        def source(source_name: str, table_name: str) -> str:
            return f"{source_name}.{table_name}"

        # Materialization is read by the parser, never at render time
        def config(*_args: Any, **_kwargs: Any) -> str:
            return ""

        def var(name: str, default: Any = None) -> Any:
            return project_vars.get(name, default)

        def env_var(_name: str, default: Any = None) -> Any:
            return default

        env.globals.update(
            target=self.target.as_context(),
            execute=self.execute,
            ref=ref,
            source=source,
            config=config,
            var=var,
            env_var=env_var,
            run_query=self.run_query,
            dbt_utils=DbtUtils(self.run_query),
        )
        env.filters["as_bool"] = _as_bool
        env.filters["as_number"] = _as_number
        return env

    def render(self, template: str, context: Mapping[str, Any] | None = None) -> str:
        """Render raw template text.

        Raises:
            RenderError: If the template fails to parse or evaluate
        """
        try:
            return self.env.from_string(template).render(dict(context or {}))
        except TEMPLATE_RUNTIME_ERRORS as e:
            raise RenderError(str(e) or type(e).__name__) from e

    def render_model(
        self, raw_sql: str, prelude: MacroPrelude, model_name: str | None = None
    ) -> str:
        """Render one model with the macro prelude in front, post-processed.

        Raises:
            RenderError: If the model or any macro fails to render
        """
        template = f"{prelude.text}\n{raw_sql}"
        try:
            rendered = self.render(template)
        except RenderError as e:
            logger.debug("Render failed for %s: %s", model_name or "<template>", e)
            raise RenderError(str(e), model=model_name) from e.__cause__
        return postprocess(rendered)
