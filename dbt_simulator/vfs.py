"""In-memory virtual file system with POSIX-style path resolution.

Keys are normalized paths relative to the project root (``models/x.sql``).
Directories are never stored; they exist because some key has them as a
prefix.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from enum import Enum

from pydantic import BaseModel


class EntryType(str, Enum):
    """Kind of a directory listing entry."""

    DIRECTORY = "directory"
    FILE = "file"


class DirEntry(BaseModel):
    """One entry of a directory listing."""

    name: str
    type: EntryType

    model_config = {"frozen": True}

    @property
    def is_directory(self) -> bool:
        return self.type == EntryType.DIRECTORY

    @property
    def display_name(self) -> str:
        """Name as printed by ``ls`` (directories get a trailing slash)."""
        return f"{self.name}/" if self.is_directory else self.name


class VirtualFileSystem(Mapping[str, str]):
    """Read-only path -> text mapping.

    Every change goes through ``with_files``, which returns a new instance,
    so a snapshot handed to a caller never changes underneath it.
    """

    def __init__(self, files: Mapping[str, str] | None = None) -> None:
        self._files: dict[str, str] = {}
        for path, content in (files or {}).items():
            self._files[normalize_key(path)] = content

    def __getitem__(self, key: str) -> str:
        return self._files[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._files)

    def __len__(self) -> int:
        return len(self._files)

    def __repr__(self) -> str:
        return f"VirtualFileSystem({len(self._files)} files)"

    def read(self, key: str) -> str | None:
        """Return file content, or None when the key is not a file."""
        return self._files.get(key)

    def with_files(self, updates: Mapping[str, str]) -> VirtualFileSystem:
        """Return a new file system with ``updates`` written over this one."""
        merged = dict(self._files)
        for path, content in updates.items():
            merged[normalize_key(path)] = content
        return VirtualFileSystem(merged)

    def paths(self, prefix: str = "", suffixes: tuple[str, ...] = ()) -> list[str]:
        """Sorted keys under ``prefix`` ending in one of ``suffixes``."""
        start = f"{prefix}/" if prefix else ""
        return sorted(
            path
            for path in self._files
            if path.startswith(start) and (not suffixes or path.endswith(suffixes))
        )


def normalize(path: str) -> str:
    """Collapse ``.``, ``..`` and duplicate slashes into an absolute path."""
    parts: list[str] = []
    for part in path.split("/"):
        if not part or part == ".":
            continue
        if part == "..":
            if parts:
                parts.pop()
            continue
        parts.append(part)
    return "/" + "/".join(parts)


def normalize_key(path: str) -> str:
    """Normalize a path into the relative key form used by the file system."""
    return normalize(path)[1:]


def resolve(base: str, target: str) -> str:
    """Resolve ``target`` against ``base`` (absolute targets ignore the base)."""
    if target.startswith("/"):
        return normalize(target)
    return normalize(f"{base}/{target}")


def list_directory(vfs: Mapping[str, str], key: str) -> list[DirEntry]:
    """List the direct children of ``key`` (``""`` is the root).

    Directories sort before files, then by name.
    """
    prefix = f"{key}/" if key else ""
    entries: dict[str, EntryType] = {}

    for path in vfs:
        if not path.startswith(prefix):
            continue
        first, sep, _rest = path[len(prefix) :].partition("/")
        if not first:
            continue
        if sep or entries.get(first) == EntryType.DIRECTORY:
            entries[first] = EntryType.DIRECTORY
        else:
            entries[first] = EntryType.FILE

    return sorted(
        (DirEntry(name=name, type=kind) for name, kind in entries.items()),
        key=lambda e: (not e.is_directory, e.name),
    )


def exists(vfs: Mapping[str, str], key: str) -> bool:
    """True when ``key`` is a directory, i.e. some file lives below it."""
    if not key:
        return True
    prefix = f"{key}/"
    return any(path.startswith(prefix) for path in vfs)


def to_key(absolute_path: str, root: str) -> str | None:
    """Strip the simulator root from an absolute path.

    Returns ``""`` for the root itself and None for paths outside it.
    """
    if absolute_path == root:
        return ""
    prefix = f"{root}/"
    if not absolute_path.startswith(prefix):
        return None
    return absolute_path[len(prefix) :]


def to_absolute(base: str, target: str, root: str) -> str:
    """Resolve a user-supplied path the way the shell builtins do.

    Absolute paths that do not already start with the root are treated as
    relative to it, so ``/models`` means ``<root>/models``.
    """
    if target.startswith("/"):
        if target == root or target.startswith(f"{root}/"):
            return normalize(target)
        return normalize(f"{root}{target}")
    return resolve(base, target)
