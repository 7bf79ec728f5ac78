"""Shared pytest configuration, marker assignment and filesystem fakes."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


class MemoryFileSystem:
    """In-memory stand-in for the asset filesystem port."""

    def __init__(self) -> None:
        self.files: dict[Path, bytes] = {}
        self.modes: dict[Path, int] = {}
        self.dirs: set[Path] = set()
        self.unreadable: set[Path] = set()
        self.unwritable: set[Path] = set()
        self.removed: list[Path] = []

    def add(self, path: str | Path, data: bytes | str) -> Path:
        target = Path(path)
        self.make_dirs(target.parent)
        self.files[target] = data.encode("utf-8") if isinstance(data, str) else data
        return target

    def files_under(self, root: str | Path) -> dict[str, bytes]:
        base = Path(root)
        return {
            path.relative_to(base).as_posix(): data
            for path, data in self.files.items()
            if base in path.parents
        }

    def is_dir(self, path: Path) -> bool:
        return path in self.dirs

    def walk_files(self, root: Path) -> Iterator[Path]:
        for path in list(self.files):
            if root in path.parents:
                yield path

    def read_bytes(self, path: Path) -> bytes:
        if path in self.unreadable:
            raise PermissionError(f"permission denied: {path}")
        try:
            return self.files[path]
        except KeyError as exc:
            raise FileNotFoundError(str(path)) from exc

    def write_bytes(self, path: Path, data: bytes, mode: int) -> None:
        if path in self.unwritable or path.parent in self.unwritable:
            raise PermissionError(f"permission denied: {path}")
        if path.parent not in self.dirs:
            raise FileNotFoundError(f"no such directory: {path.parent}")
        self.files[path] = data
        self.modes[path] = mode

    def make_dirs(self, path: Path) -> None:
        if path in self.unwritable:
            raise PermissionError(f"permission denied: {path}")
        self.dirs.add(path)
        self.dirs.update(path.parents)

    def remove_tree(self, path: Path) -> None:
        if path in self.unwritable:
            raise PermissionError(f"permission denied: {path}")
        self.removed.append(path)
        for file_path in [p for p in self.files if p == path or path in p.parents]:
            del self.files[file_path]
            self.modes.pop(file_path, None)
        self.dirs = {d for d in self.dirs if d != path and path not in d.parents}


@pytest.fixture
def memory_fs() -> MemoryFileSystem:
    """Empty in-memory filesystem."""
    return MemoryFileSystem()
