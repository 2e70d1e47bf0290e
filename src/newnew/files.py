"""Filesystem primitives used by copy steps and template installation."""

import shutil
from pathlib import Path


class FileSystem:
    """Blocking local filesystem operations."""

    def read_text(self, path: Path) -> str:
        """Read a whole text file."""
        return path.read_text(encoding="utf-8")

    def write_text(self, path: Path, content: str) -> None:
        """Write a whole text file, creating parent directories."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")

    def copy_tree(self, source: Path, destination: Path) -> None:
        """Recursively copy a directory, merging into an existing destination."""
        shutil.copytree(source, destination, dirs_exist_ok=True)
