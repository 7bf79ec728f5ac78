"""Top-level API for static asset fingerprinting and manifest resolution."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from asset_fingerprint.application.results import BuildResult
from asset_fingerprint.resolver import AssetResolver

__version__ = "0.1.0"


def fingerprint_directory(
    source_dir: Path,
    output_dir: Path,
    hash_length: int = 8,
    workers: int = 1,
    transform_modules: Iterable[str] | None = None,
) -> BuildResult:
    """Fingerprint, minify and manifest every file under ``source_dir``.

    Parameters
    ----------
    source_dir : Path
        Root of the asset tree.
    output_dir : Path
        Directory that is deleted, recreated and filled with fingerprinted
        files plus ``manifest.json``.
    hash_length : int, default=8
        Number of hex digest characters inserted into each file name.
    workers : int, default=1
        Threads used to read, hash and transform files.
    transform_modules : Iterable[str] | None, optional
        Extra modules registering per-extension transforms.

    Returns
    -------
    BuildResult
        Output locations and manifest entries.
    """
    from .api import fingerprint_directory as _impl

    return _impl(
        source_dir=source_dir,
        output_dir=output_dir,
        hash_length=hash_length,
        workers=workers,
        transform_modules=transform_modules,
    )


def load_resolver(
    output_dir: Path,
    manifest_name: str = "manifest.json",
    mount_prefix: str = "/dist",
) -> AssetResolver:
    """Load an :class:`AssetResolver` from a build output directory.

    Parameters
    ----------
    output_dir : Path
        Directory holding ``manifest_name``.
    manifest_name : str, default="manifest.json"
        Manifest file name inside ``output_dir``.
    mount_prefix : str, default="/dist"
        URL prefix the output directory is served under.
    """
    from .api import load_resolver as _impl

    return _impl(
        output_dir=output_dir,
        manifest_name=manifest_name,
        mount_prefix=mount_prefix,
    )


__all__ = [
    "AssetResolver",
    "BuildResult",
    "fingerprint_directory",
    "load_resolver",
]
