"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Protocol

from asset_fingerprint.types import ReadableBinary


class AssetFileSystem(Protocol):
    """Read the source tree and write the output tree."""

    def is_dir(self, path: Path) -> bool:
        """Return whether ``path`` is an existing directory."""

    def walk_files(self, root: Path) -> Iterator[Path]:
        """Yield every regular file below ``root``; raise ``OSError`` on walk errors."""

    def read_bytes(self, path: Path) -> bytes:
        """Read full file content."""

    def write_bytes(self, path: Path, data: bytes, mode: int) -> None:
        """Write ``data`` to ``path`` with permission bits ``mode``."""

    def make_dirs(self, path: Path) -> None:
        """Create ``path`` and any missing parents."""

    def remove_tree(self, path: Path) -> None:
        """Delete ``path`` recursively; a missing path is not an error."""


class FileSource(Protocol):
    """Read-only hierarchical file source addressed by slash-separated names."""

    def open(self, name: str) -> ReadableBinary:
        """Open ``name`` for binary reading; raise ``OSError`` if unavailable."""
