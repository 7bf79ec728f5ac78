"""Application-layer use-cases and option objects."""

from __future__ import annotations

from pathlib import Path

from asset_fingerprint.application.options import BuildOptions
from asset_fingerprint.application.ports import AssetFileSystem, FileSource
from asset_fingerprint.application.results import BuildResult, FileRecord
from asset_fingerprint.transforms.registry import TransformRegistry


def build_build_options(
    *,
    hash_length: int = 8,
    workers: int = 1,
    manifest_name: str = "manifest.json",
    file_mode: int = 0o644,
) -> BuildOptions:
    """Build typed build options via lazy use-case import."""
    from asset_fingerprint.application.use_cases import build_build_options as _impl

    return _impl(
        hash_length=hash_length,
        workers=workers,
        manifest_name=manifest_name,
        file_mode=file_mode,
    )


def build_assets(
    *,
    source_dir: Path,
    output_dir: Path,
    options: BuildOptions,
    filesystem: AssetFileSystem | None = None,
    transforms: TransformRegistry | None = None,
) -> BuildResult:
    """Fingerprint an asset tree via lazy use-case import."""
    from asset_fingerprint.application.use_cases import build_assets as _impl

    return _impl(
        source_dir=source_dir,
        output_dir=output_dir,
        options=options,
        filesystem=filesystem,
        transforms=transforms,
    )


__all__ = [
    "AssetFileSystem",
    "BuildOptions",
    "BuildResult",
    "FileRecord",
    "FileSource",
    "build_assets",
    "build_build_options",
]
