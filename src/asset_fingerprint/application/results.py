"""Application-layer record and result objects."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class FileRecord:
    """One processed source file, alive only until it is written out."""

    relative_path: str
    source_path: Path
    digest: str
    fingerprint: str
    extension: str
    content: bytes
    fingerprinted_path: str


@dataclass(frozen=True)
class BuildResult:
    """Structured build outcome."""

    source_dir: Path
    output_dir: Path
    manifest_path: Path
    assets: Mapping[str, str]
