"""ProjectLoader - seeds a virtual file system from a dbt project directory."""

from __future__ import annotations

import logging
from pathlib import Path

from dbt_simulator.errors import ProjectLoadError
from dbt_simulator.vfs import VirtualFileSystem

logger = logging.getLogger(__name__)

# Build output and installed packages are never part of the seed
SKIPPED_DIRECTORIES = frozenset({"target", "dbt_packages", "logs", "node_modules"})


class ProjectLoader:
    """
    Load a dbt project into memory.

    Handles:
    - Finding all files recursively (skipping build output and dot-dirs)
    - Reading them as UTF-8 text, skipping anything binary
    - Keying them by POSIX path relative to the project directory
    """

    def __init__(self, base_path: str | Path) -> None:
        self.base_path = Path(base_path)

    def load(self) -> VirtualFileSystem:
        """Read the project into a new VirtualFileSystem."""
        if not self.base_path.is_dir():
            raise ProjectLoadError(f"Project directory not found: {self.base_path}")

        files: dict[str, str] = {}
        for file_path in self._find_files():
            content = self._read_file(file_path)
            if content is None:
                continue
            files[file_path.relative_to(self.base_path).as_posix()] = content

        logger.debug("Loaded %d files from %s", len(files), self.base_path)
        return VirtualFileSystem(files)

    def _find_files(self) -> list[Path]:
        """Find all project files recursively."""
        files: list[Path] = []
        for path in self.base_path.rglob("*"):
            if not path.is_file():
                continue
            rel_parts = path.relative_to(self.base_path).parts
            if any(part.startswith(".") for part in rel_parts):
                continue
            if rel_parts[0] in SKIPPED_DIRECTORIES:
                continue
            files.append(path)
        # Sort for deterministic ordering
        return sorted(files)

    def _read_file(self, file_path: Path) -> str | None:
        """Read a single file, or None when it is not UTF-8 text."""
        try:
            return file_path.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            logger.debug("Skipping non-text file %s", file_path)
            return None

    @classmethod
    def from_directory(cls, path: str | Path) -> ProjectLoader:
        """Create loader from directory path."""
        return cls(path)


def write_files(base_path: str | Path, files: dict[str, str]) -> list[Path]:
    """Write VFS entries to disk below ``base_path``.

    Returns:
        The written file paths, sorted
    """
    base = Path(base_path)
    written: list[Path] = []
    for key in sorted(files):
        dest = base / key
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(files[key], encoding="utf-8")
        written.append(dest)
    return written
