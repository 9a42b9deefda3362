"""Rendering layer - Jinja evaluation of models against a simulated dbt context."""

from dbt_simulator.rendering.dbt_utils import DbtUtils
from dbt_simulator.rendering.query import QueryColumn, QueryResult, simulate_query
from dbt_simulator.rendering.renderer import TemplateRenderer, postprocess

__all__ = [
    "DbtUtils",
    "QueryColumn",
    "QueryResult",
    "TemplateRenderer",
    "postprocess",
    "simulate_query",
]
