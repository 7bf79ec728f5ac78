"""Transform protocol applied to asset content before it is written."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class AssetTransform(Protocol):
    """Pure ``bytes -> bytes`` content transform."""

    name: str

    def transform(self, data: bytes) -> bytes:
        """Transform asset content.

        Parameters
        ----------
        data : bytes
            Source file content as read from disk.

        Returns
        -------
        bytes
            Content to write to the fingerprinted output path.

        Raises
        ------
        TransformError
            If the input cannot be processed.
        """
