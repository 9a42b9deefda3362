"""Tests for sim.yml configuration."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from dbt_simulator.config import (
    DEFAULT_TEST_KEYWORDS,
    PathsConfig,
    SimConfig,
    TargetConfig,
    find_config,
    load_config,
)


class TestSimConfig:
    """Tests for SimConfig parsing and validation."""

    def test_defaults(self) -> None:
        config = SimConfig()
        assert config.project is None
        assert config.dbt_version == "1.8.0"
        assert config.root == "/dbt-project"
        assert config.target.schema_name == "analytics"
        assert config.paths.models == "models"
        assert config.test_keywords == DEFAULT_TEST_KEYWORDS
        assert config.vars == {}

    def test_from_yaml(self) -> None:
        config = SimConfig.from_yaml(
            """
project: jaffle_shop
dbt_version: 1.7.4
root: /work/jaffle/
target:
  name: prod
  schema: reporting
paths:
  models: /dbt_models/
test_keywords: [unique]
vars:
  start_date: "2024-01-01"
"""
        )
        assert config.project == "jaffle_shop"
        assert config.dbt_version == "1.7.4"
        assert config.root == "/work/jaffle"
        assert config.target.name == "prod"
        assert config.target.schema_name == "reporting"
        assert config.paths.models == "dbt_models"
        assert config.paths.target == "target"
        assert config.test_keywords == ["unique"]
        assert config.vars == {"start_date": "2024-01-01"}

    def test_empty_yaml(self) -> None:
        assert SimConfig.from_yaml("") == SimConfig()

    @pytest.mark.parametrize("root", ["relative/path", "/", "///"])
    def test_invalid_root(self, root: str) -> None:
        with pytest.raises(ValidationError):
            SimConfig(root=root)

    def test_invalid_test_keyword(self) -> None:
        with pytest.raises(ValidationError):
            SimConfig(test_keywords=["not null"])

    def test_empty_path_prefix(self) -> None:
        with pytest.raises(ValidationError):
            PathsConfig(models="/")

    def test_frozen(self) -> None:
        config = SimConfig()
        with pytest.raises(ValidationError):
            config.root = "/elsewhere"  # type: ignore[misc]

    def test_target_context(self) -> None:
        target = TargetConfig(schema="dbt_alice")
        assert target.as_context() == {
            "name": "dev",
            "schema": "dbt_alice",
            "database": "warehouse",
            "type": "simulator",
        }


class TestLoadConfig:
    """Tests for config discovery and loading."""

    def test_find_in_parent(self, tmp_path: Path) -> None:
        (tmp_path / "sim.yml").write_text("project: found\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config(nested) == tmp_path / "sim.yml"

    def test_load_explicit(self, tmp_path: Path) -> None:
        path = tmp_path / "custom.yml"
        path.write_text("project: explicit\n")
        assert load_config(path).project == "explicit"

    def test_explicit_missing(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yml")

    def test_defaults_when_absent(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("dbt_simulator.config.find_config", lambda: None)
        assert load_config() == SimConfig()
