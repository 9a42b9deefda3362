"""Ingestion layer - turn VFS text into models, tests and a macro prelude."""

from dbt_simulator.ingestion.loader import ProjectLoader, write_files
from dbt_simulator.ingestion.parser import parse_sql_model
from dbt_simulator.ingestion.project import (
    MacroPrelude,
    build_macro_prelude,
    discover_models,
    model_name_from_path,
    resolve_project_name,
)
from dbt_simulator.ingestion.schema_tests import parse_schema_tests, scan_schema_file

__all__ = [
    "MacroPrelude",
    "ProjectLoader",
    "build_macro_prelude",
    "discover_models",
    "model_name_from_path",
    "parse_schema_tests",
    "parse_sql_model",
    "resolve_project_name",
    "scan_schema_file",
    "write_files",
]
