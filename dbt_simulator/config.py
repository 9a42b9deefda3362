"""Configuration schema for dbt-simulator.

Defines the sim.yml configuration file format using Pydantic models.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

DEFAULT_PROJECT_NAME = "my_dbt_project"
DEFAULT_TEST_KEYWORDS = ["unique", "not_null", "relationships", "accepted_values"]


class TargetConfig(BaseModel):
    """The dbt target exposed to templates as ``target``."""

    name: str = "dev"
    schema_name: str = Field(default="analytics", alias="schema")
    database: str = "warehouse"
    type: str = "simulator"

    model_config = {"frozen": True, "populate_by_name": True}

    def as_context(self) -> dict[str, str]:
        """Template-facing view of the target."""
        return {
            "name": self.name,
            "schema": self.schema_name,
            "database": self.database,
            "type": self.type,
        }


class PathsConfig(BaseModel):
    """Project-relative prefixes the simulator scans and writes."""

    models: str = "models"
    macros: str = "macros"
    target: str = "target"

    model_config = {"frozen": True}

    @field_validator("models", "macros", "target")
    @classmethod
    def strip_slashes(cls, v: str) -> str:
        """Prefixes are stored without leading or trailing slashes."""
        v = v.strip().strip("/")
        if not v:
            raise ValueError("Path prefix cannot be empty")
        return v


class SimConfig(BaseModel):
    """
    Root configuration for dbt-simulator.

    This is the schema for sim.yml files. Every field is optional.

    Example:
        project: jaffle_shop   # Defaults to name: in dbt_project.yml
        dbt_version: 1.8.0
        root: /dbt-project

        target:
          name: dev
          schema: analytics
          database: warehouse

        paths:
          models: models
          macros: macros
          target: target

        test_keywords: [unique, not_null]

        vars:
          start_date: "2024-01-01"
    """

    project: str | None = None
    dbt_version: str = "1.8.0"
    root: str = "/dbt-project"

    target: TargetConfig = Field(default_factory=TargetConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)
    test_keywords: list[str] = Field(default_factory=lambda: list(DEFAULT_TEST_KEYWORDS))
    vars: dict[str, Any] = Field(default_factory=dict)

    model_config = {"frozen": True}

    @field_validator("root")
    @classmethod
    def validate_root(cls, v: str) -> str:
        """Root must be absolute and carry no trailing slash."""
        v = v.strip()
        if not v.startswith("/"):
            raise ValueError(f"root must be an absolute path, got '{v}'")
        v = "/" + "/".join(part for part in v.split("/") if part)
        if v == "/":
            raise ValueError("root cannot be '/'")
        return v

    @field_validator("test_keywords")
    @classmethod
    def validate_test_keywords(cls, v: list[str]) -> list[str]:
        """Keywords must be plain identifiers."""
        for keyword in v:
            if not keyword.replace("_", "").isalnum():
                raise ValueError(f"Invalid test keyword '{keyword}'")
        return v

    @classmethod
    def from_yaml(cls, content: str) -> SimConfig:
        """Parse config from YAML string."""
        data = yaml.safe_load(content)
        if data is None:
            return cls()
        return cls.model_validate(data)

    @classmethod
    def from_file(cls, path: Path | str) -> SimConfig:
        """Load config from a YAML file."""
        path = Path(path)
        content = path.read_text(encoding="utf-8")
        return cls.from_yaml(content)


# Config file discovery
CONFIG_FILENAMES = ["sim.yml", "sim.yaml", ".sim.yml", ".sim.yaml"]


def find_config(start_dir: Path | str | None = None) -> Path | None:
    """
    Find sim.yml config file.

    Searches in:
    1. start_dir (if provided)
    2. Current working directory
    3. Parent directories up to root

    Args:
        start_dir: Directory to start search from

    Returns:
        Path to config file, or None if not found
    """
    if start_dir is None:
        start_dir = Path.cwd()
    else:
        start_dir = Path(start_dir)

    current = start_dir.resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def load_config(path: Path | str | None = None) -> SimConfig:
    """
    Load configuration from file.

    If path is not provided, searches for sim.yml in current and parent
    directories and falls back to the defaults when none exists.

    Args:
        path: Explicit path to config file

    Returns:
        Parsed SimConfig

    Raises:
        FileNotFoundError: If an explicit path does not exist
        ValueError: If config is invalid
    """
    if path is None:
        path = find_config()
        if path is None:
            return SimConfig()
    else:
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"Config file not found: {path}")

    return SimConfig.from_file(path)
