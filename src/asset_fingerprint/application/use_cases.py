"""Application use-cases orchestrating the fingerprinting pipeline."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator, Iterable
from concurrent.futures import ThreadPoolExecutor
from contextlib import closing
from pathlib import Path

from pydantic import ValidationError

from asset_fingerprint.adapters.filesystem import LocalAssetFileSystem
from asset_fingerprint.application.options import DEFAULT_FILE_MODE, BuildOptions
from asset_fingerprint.application.ports import AssetFileSystem
from asset_fingerprint.application.results import BuildResult, FileRecord
from asset_fingerprint.errors import (
    BuildConfigError,
    OutputUnwritableError,
    SourceUnreadableError,
    TransformError,
)
from asset_fingerprint.fingerprint import (
    DEFAULT_HASH_LENGTH,
    asset_extension,
    digest_bytes,
    fingerprinted_path,
    output_location,
    relative_asset_path,
    truncate_digest,
)
from asset_fingerprint.manifest import MANIFEST_FILENAME, AssetManifest, encode_manifest
from asset_fingerprint.schemas import BuildConfig
from asset_fingerprint.transforms.registry import TransformRegistry, create_default_registry

logger = logging.getLogger(__name__)


def build_assets(
    *,
    source_dir: Path,
    output_dir: Path,
    options: BuildOptions,
    filesystem: AssetFileSystem | None = None,
    transforms: TransformRegistry | None = None,
) -> BuildResult:
    """Use-case: fingerprint every file under ``source_dir`` into ``output_dir``.

    The output directory is deleted and recreated first, so a completed run
    leaves exactly one fingerprinted file per source file plus the manifest.
    Any failure aborts the run; partially written output is left in place.

    Parameters
    ----------
    source_dir : Path
        Root of the asset tree; manifest keys are relative to it.
    output_dir : Path
        Directory to rebuild with fingerprinted files and the manifest.
    options : BuildOptions
        Hash length, worker count, manifest name and output file mode.
    filesystem : AssetFileSystem | None, optional
        I/O port; defaults to local disk.
    transforms : TransformRegistry | None, optional
        Per-extension transforms; defaults to minifying ``.js`` only.

    Returns
    -------
    BuildResult
        Output locations and the manifest entries written.

    Raises
    ------
    BuildConfigError
        If the parameters fail validation.
    SourceUnreadableError
        If the source tree or one of its files cannot be read, or a file name
        is not valid UTF-8.
    OutputUnwritableError
        If the output tree cannot be removed, created, or written.
    TransformError
        If a transform rejects a file.
    ManifestEncodeError
        If the manifest cannot be serialized.
    """
    try:
        config = BuildConfig(
            source_dir=source_dir,
            output_dir=output_dir,
            hash_length=options.hash_length,
            workers=options.workers,
            manifest_name=options.manifest_name,
        )
    except ValidationError as exc:
        raise BuildConfigError(f"Invalid build parameters: {exc}") from exc

    if filesystem is None:
        filesystem = LocalAssetFileSystem()
    if transforms is None:
        transforms = create_default_registry()

    if not filesystem.is_dir(config.source_dir):
        raise SourceUnreadableError(
            f"source directory {config.source_dir} does not exist or is not a directory"
        )

    _reset_output_dir(filesystem, config.output_dir)
    sources = _list_sources(filesystem, config.source_dir)

    manifest = AssetManifest()

    def process(source_path: Path) -> FileRecord:
        return _process_file(
            filesystem,
            transforms,
            source_root=config.source_dir,
            source_path=source_path,
            hash_length=config.hash_length,
        )

    with closing(_iter_records(process, sources, workers=config.workers)) as records:
        for record in records:
            manifest.add(record.relative_path, record.fingerprinted_path)
            _write_record(filesystem, config.output_dir, record, options.file_mode)
            logger.info(
                "Processed: %s -> %s", record.relative_path, record.fingerprinted_path
            )

    manifest_path = config.output_dir / config.manifest_name
    payload = encode_manifest(manifest.as_dict())
    try:
        filesystem.write_bytes(manifest_path, payload, options.file_mode)
    except OSError as exc:
        raise OutputUnwritableError(
            f"failed to write manifest {manifest_path}: {exc}"
        ) from exc
    logger.info("Asset manifest written to: %s", manifest_path)

    return BuildResult(
        source_dir=config.source_dir,
        output_dir=config.output_dir,
        manifest_path=manifest_path,
        assets=manifest.as_dict(),
    )


def _reset_output_dir(filesystem: AssetFileSystem, output_dir: Path) -> None:
    try:
        filesystem.remove_tree(output_dir)
    except OSError as exc:
        raise OutputUnwritableError(
            f"failed to remove output directory {output_dir}: {exc}"
        ) from exc
    try:
        filesystem.make_dirs(output_dir)
    except OSError as exc:
        raise OutputUnwritableError(
            f"failed to create output directory {output_dir}: {exc}"
        ) from exc


def _list_sources(filesystem: AssetFileSystem, source_dir: Path) -> list[Path]:
    # Snapshot before writing so a nested output directory is never walked.
    try:
        return sorted(filesystem.walk_files(source_dir))
    except OSError as exc:
        raise SourceUnreadableError(
            f"failed to walk source directory {source_dir}: {exc}"
        ) from exc


def _process_file(
    filesystem: AssetFileSystem,
    transforms: TransformRegistry,
    *,
    source_root: Path,
    source_path: Path,
    hash_length: int,
) -> FileRecord:
    """Read, hash and transform one source file."""
    relative_path = relative_asset_path(source_path, source_root)
    try:
        relative_path.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise SourceUnreadableError(
            f"source file name {source_path!r} is not valid UTF-8"
        ) from exc
    try:
        raw = filesystem.read_bytes(source_path)
    except OSError as exc:
        raise SourceUnreadableError(
            f"failed to read source file {source_path}: {exc}"
        ) from exc

    digest = digest_bytes(raw)
    fingerprint = truncate_digest(digest, hash_length)
    extension = asset_extension(relative_path)
    transform = transforms.get(extension)
    try:
        content = transform.transform(raw)
    except TransformError as exc:
        raise TransformError(
            f"failed to transform {relative_path} with {transform.name}: {exc}"
        ) from exc

    return FileRecord(
        relative_path=relative_path,
        source_path=source_path,
        digest=digest,
        fingerprint=fingerprint,
        extension=extension,
        content=content,
        fingerprinted_path=fingerprinted_path(relative_path, fingerprint),
    )


def _iter_records(
    process: Callable[[Path], FileRecord],
    sources: Iterable[Path],
    *,
    workers: int,
) -> Generator[FileRecord, None, None]:
    """Yield records in source order, computing them on a pool when ``workers > 1``."""
    if workers <= 1:
        for source_path in sources:
            yield process(source_path)
        return

    executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="assets")
    try:
        yield from executor.map(process, sources)
    finally:
        executor.shutdown(wait=True, cancel_futures=True)


def _write_record(
    filesystem: AssetFileSystem,
    output_dir: Path,
    record: FileRecord,
    file_mode: int,
) -> None:
    target = output_location(output_dir, record.fingerprinted_path)
    try:
        filesystem.make_dirs(target.parent)
    except OSError as exc:
        raise OutputUnwritableError(
            f"failed to create directory {target.parent}: {exc}"
        ) from exc
    try:
        filesystem.write_bytes(target, record.content, file_mode)
    except OSError as exc:
        raise OutputUnwritableError(f"failed to write {target}: {exc}") from exc


def build_build_options(
    *,
    hash_length: int = DEFAULT_HASH_LENGTH,
    workers: int = 1,
    manifest_name: str = MANIFEST_FILENAME,
    file_mode: int = DEFAULT_FILE_MODE,
) -> BuildOptions:
    """Build typed option object from command/API params."""
    return BuildOptions(
        hash_length=hash_length,
        workers=workers,
        manifest_name=manifest_name,
        file_mode=file_mode,
    )
