"""Domain layer - models and tests as the simulator sees them."""

from dbt_simulator.domain.model import Model, ParsedSql, SchemaTest

__all__ = [
    "Model",
    "ParsedSql",
    "SchemaTest",
]
