"""Read-only file sources used to load manifests at serve time."""

from __future__ import annotations

from pathlib import Path

from asset_fingerprint.types import ReadableBinary


def _validate_name(name: str) -> None:
    """Reject names that could escape the source root.

    Raises
    ------
    FileNotFoundError
        For empty, absolute, backslash-separated, or dot-segment names.
    """
    if not name or name.startswith("/") or "\\" in name:
        raise FileNotFoundError(f"invalid file source name: {name!r}")
    if any(part in {"", ".", ".."} for part in name.split("/")):
        raise FileNotFoundError(f"invalid file source name: {name!r}")


class DirectoryFileSource:
    """File source rooted at a directory on local disk."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def open(self, name: str) -> ReadableBinary:
        """Open ``name`` below the root for binary reading."""
        _validate_name(name)
        return self.root.joinpath(*name.split("/")).open("rb")

    def __repr__(self) -> str:
        return f"DirectoryFileSource({str(self.root)!r})"
