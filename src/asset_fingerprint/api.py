"""Public file-based fingerprinting API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable
from typing import Optional

from asset_fingerprint.application.results import BuildResult
from asset_fingerprint.application.use_cases import build_assets
from asset_fingerprint.application.use_cases import build_build_options
from asset_fingerprint.resolver import DEFAULT_MOUNT_PREFIX
from asset_fingerprint.resolver import AssetResolver
from asset_fingerprint.transforms.registry import create_default_registry


def fingerprint_directory(
    source_dir: Path,
    output_dir: Path,
    hash_length: int = 8,
    workers: int = 1,
    transform_modules: Optional[Iterable[str]] = None,
) -> BuildResult:
    """Fingerprint every file under ``source_dir`` into a fresh ``output_dir``."""
    options = build_build_options(hash_length=hash_length, workers=workers)
    return build_assets(
        source_dir=source_dir,
        output_dir=output_dir,
        options=options,
        transforms=create_default_registry(extra_modules=transform_modules),
    )


def load_resolver(
    output_dir: Path,
    manifest_name: str = "manifest.json",
    mount_prefix: str = DEFAULT_MOUNT_PREFIX,
) -> AssetResolver:
    """Load a resolver from a previously built output directory."""
    return AssetResolver.from_directory(
        output_dir,
        manifest_path=manifest_name,
        mount_prefix=mount_prefix,
    )
