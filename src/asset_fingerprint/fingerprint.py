"""Content hashing and fingerprinted path construction."""

from __future__ import annotations

import posixpath
from pathlib import Path, PurePath

import xxhash

DEFAULT_HASH_LENGTH = 8
MIN_HASH_LENGTH = 4
MAX_HASH_LENGTH = 16
FINGERPRINT_SEPARATOR = "-"


def digest_bytes(data: bytes) -> str:
    """Compute the full-width XXH3 64-bit hex digest for a byte payload.

    Parameters
    ----------
    data : bytes
        Exact file content, before any transform is applied.

    Returns
    -------
    str
        Sixteen lower-case hex characters.
    """
    return xxhash.xxh3_64(data).hexdigest()


def fingerprint_bytes(data: bytes, length: int = DEFAULT_HASH_LENGTH) -> str:
    """Return the digest of ``data`` truncated to ``length`` hex characters.

    Parameters
    ----------
    data : bytes
        Exact file content, before any transform is applied.
    length : int, default=8
        Number of leading digest characters to keep.

    Raises
    ------
    ValueError
        If ``length`` is outside ``MIN_HASH_LENGTH..MAX_HASH_LENGTH``.
    """
    return truncate_digest(digest_bytes(data), length)


def truncate_digest(digest: str, length: int) -> str:
    """Truncate a full digest to the configured fingerprint length."""
    if not MIN_HASH_LENGTH <= length <= MAX_HASH_LENGTH:
        raise ValueError(
            f"hash length must be between {MIN_HASH_LENGTH} and {MAX_HASH_LENGTH}"
        )
    return digest[:length]


def relative_asset_path(path: PurePath, root: PurePath) -> str:
    """Return ``path`` relative to ``root`` with forward-slash separators.

    Parameters
    ----------
    path : PurePath
        File path located under ``root``.
    root : PurePath
        Source directory the manifest keys are relative to.

    Returns
    -------
    str
        POSIX-style relative path usable as a manifest key.
    """
    return path.relative_to(root).as_posix()


def fingerprinted_path(relative_path: str, fingerprint: str) -> str:
    """Insert ``-<fingerprint>`` before the extension of the final path segment.

    ``js/app.js`` becomes ``js/app-a1b2c3d4.js``. Names without an extension
    (including dot-files such as ``.nojekyll``) get the fingerprint appended.
    Only the last suffix counts as the extension, so ``app.min.js`` becomes
    ``app.min-a1b2c3d4.js``.
    """
    directory, basename = posixpath.split(relative_path)
    stem, extension = posixpath.splitext(basename)
    renamed = f"{stem}{FINGERPRINT_SEPARATOR}{fingerprint}{extension}"
    return posixpath.join(directory, renamed) if directory else renamed


def asset_extension(relative_path: str) -> str:
    """Return the lower-cased extension of a relative asset path."""
    return posixpath.splitext(relative_path)[1].lower()


def output_location(output_dir: Path, fingerprinted: str) -> Path:
    """Map a POSIX fingerprinted path onto the host output directory."""
    return output_dir.joinpath(*fingerprinted.split("/"))
