"""Typed option objects shared across build use-cases."""

from __future__ import annotations

from dataclasses import dataclass

from asset_fingerprint.fingerprint import DEFAULT_HASH_LENGTH
from asset_fingerprint.manifest import MANIFEST_FILENAME

DEFAULT_FILE_MODE = 0o644


@dataclass(frozen=True)
class BuildOptions:
    """Shared build options passed through use-cases."""

    hash_length: int = DEFAULT_HASH_LENGTH
    workers: int = 1
    manifest_name: str = MANIFEST_FILENAME
    file_mode: int = DEFAULT_FILE_MODE
