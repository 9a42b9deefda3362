"""Tests for the virtual file system and path resolution in vfs.py."""

import pytest

from dbt_simulator.vfs import (
    DirEntry,
    EntryType,
    VirtualFileSystem,
    exists,
    list_directory,
    normalize,
    resolve,
    to_absolute,
    to_key,
)

ROOT = "/dbt-project"


@pytest.fixture
def vfs() -> VirtualFileSystem:
    return VirtualFileSystem(
        {
            "dbt_project.yml": "name: demo\n",
            "models/staging/stg_orders.sql": "select 1",
            "models/marts/fct_orders.sql": "select 2",
            "models/schema.yml": "version: 2\n",
            "macros/cents.sql": "{% macro cents(x) %}{{ x }}{% endmacro %}",
        }
    )


class TestNormalize:
    """Tests for normalize()."""

    @pytest.mark.parametrize(
        "path,expected",
        [
            ("a/b/c", "/a/b/c"),
            ("/a//b/", "/a/b"),
            ("/a/./b", "/a/b"),
            ("/a/b/../c", "/a/c"),
            ("/../../a", "/a"),
            ("", "/"),
            ("/", "/"),
        ],
    )
    def test_normalize(self, path: str, expected: str) -> None:
        assert normalize(path) == expected


class TestResolve:
    """Tests for resolve() and the root-aware helpers."""

    def test_relative_target_joins_base(self) -> None:
        assert resolve("/dbt-project/models", "staging") == "/dbt-project/models/staging"

    def test_absolute_target_ignores_base(self) -> None:
        assert resolve("/dbt-project/models", "/tmp/x") == "/tmp/x"

    def test_parent_segments(self) -> None:
        assert resolve("/dbt-project/models/staging", "../marts") == "/dbt-project/models/marts"

    def test_to_key_strips_root(self) -> None:
        assert to_key("/dbt-project/models/a.sql", ROOT) == "models/a.sql"
        assert to_key(ROOT, ROOT) == ""

    def test_to_key_outside_root(self) -> None:
        assert to_key("/etc/passwd", ROOT) is None
        assert to_key("/dbt-projectx", ROOT) is None

    def test_to_absolute_prefixes_root_for_foreign_absolute_paths(self) -> None:
        assert to_absolute(ROOT, "/models", ROOT) == "/dbt-project/models"
        assert to_absolute(ROOT, "/dbt-project/models", ROOT) == "/dbt-project/models"

    def test_to_absolute_relative(self) -> None:
        assert to_absolute("/dbt-project/models", "..", ROOT) == ROOT


class TestListDirectory:
    """Tests for list_directory() and exists()."""

    def test_root_listing_directories_first(self, vfs: VirtualFileSystem) -> None:
        entries = list_directory(vfs, "")
        assert [e.display_name for e in entries] == ["macros/", "models/", "dbt_project.yml"]

    def test_nested_listing(self, vfs: VirtualFileSystem) -> None:
        entries = list_directory(vfs, "models")
        assert entries == [
            DirEntry(name="marts", type=EntryType.DIRECTORY),
            DirEntry(name="staging", type=EntryType.DIRECTORY),
            DirEntry(name="schema.yml", type=EntryType.FILE),
        ]

    def test_missing_directory_is_empty(self, vfs: VirtualFileSystem) -> None:
        assert list_directory(vfs, "seeds") == []

    def test_exists(self, vfs: VirtualFileSystem) -> None:
        assert exists(vfs, "")
        assert exists(vfs, "models")
        assert exists(vfs, "models/staging")
        assert not exists(vfs, "models/staging/stg_orders.sql")
        assert not exists(vfs, "mod")


class TestVirtualFileSystem:
    """Tests for the immutable VirtualFileSystem mapping."""

    def test_keys_are_normalized(self) -> None:
        vfs = VirtualFileSystem({"/models//a.sql": "x", "./b.sql": "y"})
        assert sorted(vfs) == ["b.sql", "models/a.sql"]

    def test_with_files_returns_new_instance(self, vfs: VirtualFileSystem) -> None:
        updated = vfs.with_files({"target/manifest.json": "{}"})

        assert "target/manifest.json" in updated
        assert "target/manifest.json" not in vfs
        assert len(updated) == len(vfs) + 1

    def test_with_files_overwrites(self, vfs: VirtualFileSystem) -> None:
        updated = vfs.with_files({"dbt_project.yml": "name: other\n"})
        assert updated["dbt_project.yml"] == "name: other\n"
        assert vfs["dbt_project.yml"] == "name: demo\n"

    def test_read_missing_returns_none(self, vfs: VirtualFileSystem) -> None:
        assert vfs.read("nope.sql") is None

    def test_paths_filter(self, vfs: VirtualFileSystem) -> None:
        assert vfs.paths("models", (".sql",)) == [
            "models/marts/fct_orders.sql",
            "models/staging/stg_orders.sql",
        ]

    def test_equality_with_dict(self, vfs: VirtualFileSystem) -> None:
        assert VirtualFileSystem({"a.sql": "1"}) == {"a.sql": "1"}
