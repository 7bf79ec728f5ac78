"""Shared type aliases used across pipeline and resolver modules."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol

type AssetMap = Mapping[str, str]
type MutableAssetMap = dict[str, str]


class ReadableBinary(Protocol):
    """Minimal binary stream returned by file sources."""

    def read(self, size: int = -1, /) -> bytes: ...

    def close(self) -> None: ...
