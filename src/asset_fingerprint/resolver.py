"""Serve-time resolution of original asset paths to fingerprinted URLs."""

from __future__ import annotations

import posixpath
from contextlib import closing
from pathlib import Path
from types import MappingProxyType

from asset_fingerprint.adapters.file_sources import DirectoryFileSource
from asset_fingerprint.application.ports import FileSource
from asset_fingerprint.errors import ManifestMissingError
from asset_fingerprint.manifest import MANIFEST_FILENAME, decode_manifest
from asset_fingerprint.types import AssetMap

DEFAULT_MOUNT_PREFIX = "/dist"


def _normalize_prefix(mount_prefix: str) -> str:
    cleaned = mount_prefix.strip() or "/"
    if not cleaned.startswith("/"):
        cleaned = f"/{cleaned}"
    return posixpath.normpath(cleaned)


class AssetResolver:
    """Immutable snapshot of a manifest answering path lookups.

    The snapshot is taken once at construction and never re-read, so a single
    instance can be shared by any number of concurrent readers without
    locking.

    Parameters
    ----------
    assets : Mapping[str, str]
        Original relative path to fingerprinted relative path.
    mount_prefix : str, default="/dist"
        URL prefix the output directory is served under.
    """

    __slots__ = ("_assets", "_mount_prefix")

    def __init__(
        self,
        assets: AssetMap,
        mount_prefix: str = DEFAULT_MOUNT_PREFIX,
    ) -> None:
        self._assets: AssetMap = MappingProxyType(dict(assets))
        self._mount_prefix = _normalize_prefix(mount_prefix)

    @classmethod
    def load(
        cls,
        file_source: FileSource,
        manifest_path: str = MANIFEST_FILENAME,
        mount_prefix: str = DEFAULT_MOUNT_PREFIX,
    ) -> AssetResolver:
        """Load a manifest through ``file_source`` and return a ready resolver.

        Parameters
        ----------
        file_source : FileSource
            Read-only file source containing the manifest.
        manifest_path : str, default="manifest.json"
            Slash-separated manifest name inside ``file_source``.
        mount_prefix : str, default="/dist"
            URL prefix joined with every resolved path.

        Raises
        ------
        ManifestMissingError
            If the manifest cannot be opened or read.
        ManifestMalformedError
            If the manifest is not valid JSON of the expected shape.
        """
        try:
            with closing(file_source.open(manifest_path)) as handle:
                raw = handle.read()
        except OSError as exc:
            raise ManifestMissingError(
                f"unable to read manifest {manifest_path!r} from {file_source!r}: {exc}"
            ) from exc
        return cls(decode_manifest(raw), mount_prefix=mount_prefix)

    @classmethod
    def from_directory(
        cls,
        directory: Path,
        manifest_path: str = MANIFEST_FILENAME,
        mount_prefix: str = DEFAULT_MOUNT_PREFIX,
    ) -> AssetResolver:
        """Load the manifest from a build output directory on local disk."""
        return cls.load(
            DirectoryFileSource(directory),
            manifest_path=manifest_path,
            mount_prefix=mount_prefix,
        )

    @property
    def assets(self) -> AssetMap:
        """Read-only view of the loaded manifest entries."""
        return self._assets

    @property
    def mount_prefix(self) -> str:
        return self._mount_prefix

    def path(self, asset_path: str) -> str:
        """Return the served URL path for ``asset_path``; never fails.

        Mapped assets resolve to their fingerprinted name. Unmapped assets fall
        back to the original path so they are served as-is.
        """
        target = self._assets.get(asset_path, asset_path)
        return posixpath.normpath(posixpath.join(self._mount_prefix, target.lstrip("/")))

    def __contains__(self, asset_path: object) -> bool:
        return asset_path in self._assets

    def __len__(self) -> int:
        return len(self._assets)

    def __repr__(self) -> str:
        return f"AssetResolver(assets={len(self._assets)}, mount_prefix={self._mount_prefix!r})"
