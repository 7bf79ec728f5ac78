"""Local disk implementation of the asset filesystem port."""

from __future__ import annotations

import os
import shutil
from collections.abc import Iterator
from pathlib import Path


def _raise_walk_error(exc: OSError) -> None:
    raise exc


class LocalAssetFileSystem:
    """Asset filesystem backed by the host operating system."""

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def walk_files(self, root: Path) -> Iterator[Path]:
        """Yield every non-directory entry below ``root``.

        Directory symlinks are not followed. Unreadable directories raise
        ``OSError`` instead of being skipped.
        """
        for dirpath, _dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
            for filename in filenames:
                yield Path(dirpath) / filename

    def read_bytes(self, path: Path) -> bytes:
        return path.read_bytes()

    def write_bytes(self, path: Path, data: bytes, mode: int) -> None:
        path.write_bytes(data)
        os.chmod(path, mode)

    def make_dirs(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)

    def remove_tree(self, path: Path) -> None:
        if path.is_symlink() or path.is_file():
            path.unlink()
        elif path.exists():
            shutil.rmtree(path)
