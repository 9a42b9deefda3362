"""Project discovery - models, macro prelude and project name from a VFS."""

from __future__ import annotations

import logging
from collections.abc import Mapping

import yaml
from pydantic import BaseModel

from dbt_simulator.config import DEFAULT_PROJECT_NAME, SimConfig
from dbt_simulator.domain import Model
from dbt_simulator.ingestion.parser import parse_sql_model
from dbt_simulator.vfs import VirtualFileSystem

logger = logging.getLogger(__name__)

MODEL_SUFFIX = ".sql"
PROJECT_FILE = "dbt_project.yml"


class MacroPrelude(BaseModel):
    """
    Every macro file, concatenated in path order.

    Built once per command and handed to the renderer, which prepends it to
    each model so macros are visible without an import.
    """

    paths: list[str]
    text: str

    model_config = {"frozen": True}

    @property
    def macro_count(self) -> int:
        return len(self.paths)


def model_name_from_path(path: str) -> str:
    """The model name is the file name without its extension."""
    filename = path.rsplit("/", 1)[-1]
    if filename.endswith(MODEL_SUFFIX):
        return filename[: -len(MODEL_SUFFIX)]
    return filename


def discover_models(vfs: VirtualFileSystem, config: SimConfig) -> list[Model]:
    """Every ``.sql`` file under the models prefix, sorted by path."""
    prefix = config.paths.models
    models = [_build_model(path, vfs[path]) for path in vfs.paths(prefix, (MODEL_SUFFIX,))]
    logger.debug("Discovered %d models under %s/", len(models), prefix)
    return models


def _build_model(path: str, raw_sql: str) -> Model:
    parsed = parse_sql_model(raw_sql)
    return Model(
        name=model_name_from_path(path),
        path=path,
        raw_sql=raw_sql,
        refs=parsed.refs,
        materialization=parsed.materialization,
        columns=parsed.columns,
    )


def build_macro_prelude(vfs: VirtualFileSystem, config: SimConfig) -> MacroPrelude:
    paths = vfs.paths(config.paths.macros, (MODEL_SUFFIX,))
    return MacroPrelude(paths=paths, text="\n".join(vfs[p] for p in paths))


def resolve_project_name(vfs: Mapping[str, str], config: SimConfig) -> str:
    """
    Project name used in qualified ids.

    Resolution order:
    1. ``project`` in sim.yml
    2. ``name`` in dbt_project.yml
    3. ``my_dbt_project``
    """
    if config.project:
        return config.project

    content = vfs.get(PROJECT_FILE)
    if content:
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError:
            logger.debug("Could not parse %s, using default project name", PROJECT_FILE)
            data = None
        if isinstance(data, dict) and isinstance(data.get("name"), str) and data["name"]:
            return data["name"]

    return DEFAULT_PROJECT_NAME
