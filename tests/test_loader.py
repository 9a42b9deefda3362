"""Tests for loading a project directory into the VFS."""

from pathlib import Path

import pytest

from dbt_simulator.errors import ProjectLoadError
from dbt_simulator.ingestion import ProjectLoader, write_files


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    files = {
        "dbt_project.yml": "name: loaded\n",
        "models/staging/stg_orders.sql": "select 1\n",
        "macros/util.sql": "{% macro noop() %}{% endmacro %}\n",
        "target/manifest.json": "{}",
        "dbt_packages/dbt_utils/macros/x.sql": "select 2\n",
        ".git/HEAD": "ref: refs/heads/main\n",
        "models/.hidden.sql": "select 3\n",
    }
    for key, content in files.items():
        path = tmp_path / key
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    (tmp_path / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n\xff\xfe")
    return tmp_path


class TestProjectLoader:
    """Tests for ProjectLoader."""

    def test_loads_project_files(self, project_dir: Path) -> None:
        vfs = ProjectLoader(project_dir).load()
        assert sorted(vfs) == [
            "dbt_project.yml",
            "macros/util.sql",
            "models/staging/stg_orders.sql",
        ]
        assert vfs["models/staging/stg_orders.sql"] == "select 1\n"

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(ProjectLoadError, match="not found"):
            ProjectLoader(tmp_path / "missing").load()

    def test_from_directory(self, project_dir: Path) -> None:
        assert ProjectLoader.from_directory(project_dir).base_path == project_dir


class TestWriteFiles:
    """Tests for write_files()."""

    def test_writes_nested(self, tmp_path: Path) -> None:
        written = write_files(
            tmp_path,
            {"target/manifest.json": "{}\n", "target/compiled/a.sql": "select 1\n"},
        )
        assert written == [
            tmp_path / "target/compiled/a.sql",
            tmp_path / "target/manifest.json",
        ]
        assert (tmp_path / "target/compiled/a.sql").read_text() == "select 1\n"
