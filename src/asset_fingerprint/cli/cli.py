#!/usr/bin/env python3
"""
asset_fingerprint.cli.cli

Typer-based CLI that fingerprints a static asset tree.

Every file below ``--source`` is hashed, ``.js`` files are minified, and the
results are written to a freshly rebuilt ``--output`` directory together with
``manifest.json``.

Examples
--------
Install core + CLI:

    uv pip install -e ".[cli]"

Build with defaults (``src`` -> ``dist``):

    fingerprint-assets

Build with explicit directories and 12-character fingerprints:

    fingerprint-assets --source web/static --output web/dist --hash-length 12
"""

from __future__ import annotations

import logging
import traceback
from pathlib import Path
from typing import TYPE_CHECKING

import typer

from asset_fingerprint.errors import AssetError, TransformRegistryError
from asset_fingerprint.fingerprint import (
    DEFAULT_HASH_LENGTH,
    MAX_HASH_LENGTH,
    MIN_HASH_LENGTH,
)

if TYPE_CHECKING:
    from asset_fingerprint.transforms.registry import TransformRegistry

app = typer.Typer(
    name="fingerprint-assets",
    help="Fingerprint static assets by content hash and write an asset manifest.",
    add_completion=False,
)

LOG_FORMAT = "%(levelname)s: %(message)s"


def _print_build_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly build error.

    Parameters
    ----------
    exc : Exception
        Exception raised during the build.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"✗ {type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    return 1


def _configure_logging(verbose: bool) -> None:
    """Route per-file progress logs to stderr when ``verbose`` is set."""
    if verbose:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)


def _load_transforms(transform_modules: list[str] | None) -> TransformRegistry:
    """Create the transform registry, surfacing module errors as CLI errors."""
    from asset_fingerprint.transforms.registry import create_default_registry

    try:
        return create_default_registry(extra_modules=transform_modules)
    except TransformRegistryError as exc:
        raise typer.BadParameter(str(exc), param_hint="--transform-module") from exc


@app.command()
def build_cmd(
    source: Path = typer.Option(
        Path("src"),
        "--source",
        help="Source directory containing assets.",
    ),
    output: Path = typer.Option(
        Path("dist"),
        "--output",
        help=(
            "Directory to output fingerprinted assets (deleted and rebuilt). "
            "Defaults to dist; the source directory or any of its parents is rejected."
        ),
    ),
    hash_length: int = typer.Option(
        DEFAULT_HASH_LENGTH,
        "--hash-length",
        min=MIN_HASH_LENGTH,
        max=MAX_HASH_LENGTH,
        help="Number of hash characters inserted into each file name.",
    ),
    workers: int = typer.Option(
        1, "--workers", min=1, help="Threads used to read, hash and minify files."
    ),
    transform_module: list[str] | None = typer.Option(
        None,
        "--transform-module",
        help="Module import path or file path registering extra transforms (repeatable).",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every processed file."),
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
) -> None:
    """Fingerprint every file under SOURCE into a fresh OUTPUT directory.

    Parameters
    ----------
    source : Path
        Directory tree to fingerprint.
    output : Path
        Output directory; removed and recreated on every run.
    hash_length : int, default=8
        Fingerprint width in hex characters.
    workers : int, default=1
        Worker threads for hashing and minification.

    Notes
    -----
    - ``.js`` files are minified with rjsmin; every other file is copied as-is.
    - Any failure aborts the whole run with exit code 1.
    """
    _configure_logging(verbose)
    transforms = _load_transforms(transform_module)

    try:
        from asset_fingerprint.application.use_cases import (
            build_assets,
            build_build_options,
        )

        result = build_assets(
            source_dir=source,
            output_dir=output,
            options=build_build_options(hash_length=hash_length, workers=workers),
            transforms=transforms,
        )
        typer.echo(
            f"✓ Fingerprinted {len(result.assets)} assets into {result.output_dir}"
        )
        typer.echo(f"✓ Manifest: {result.manifest_path}")
    except AssetError as exc:
        raise typer.Exit(code=_print_build_error(exc, debug))
    except Exception as exc:
        # Unexpected crash: still show a clean message; debug prints traceback.
        raise typer.Exit(code=_print_build_error(exc, debug))


def main() -> None:
    """Console-script entrypoint."""
    app(prog_name="fingerprint-assets")


if __name__ == "__main__":
    main()
