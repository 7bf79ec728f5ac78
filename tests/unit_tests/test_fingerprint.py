"""Unit tests for content hashing and fingerprinted naming."""

from __future__ import annotations

import os
import string
from pathlib import PurePosixPath, PureWindowsPath

import pytest
from hypothesis import assume, given, settings
from hypothesis import strategies as st

from asset_fingerprint.fingerprint import (
    asset_extension,
    digest_bytes,
    fingerprint_bytes,
    fingerprinted_path,
    relative_asset_path,
    truncate_digest,
)

_HYPOTHESIS_MAX_EXAMPLES = int(os.getenv("HYPOTHESIS_MAX_EXAMPLES", "200"))


def test_digest_is_sixteen_lowercase_hex_chars() -> None:
    """Digest is the full 64-bit XXH3 value in hex."""
    digest = digest_bytes(b"test content for hashing")
    assert len(digest) == 16
    assert set(digest) <= set(string.hexdigits.lower())


def test_digest_is_stable_for_known_input() -> None:
    """Empty input hashes to the published XXH3-64 value."""
    assert digest_bytes(b"") == "2d06800538d394c2"


@settings(max_examples=_HYPOTHESIS_MAX_EXAMPLES)
@given(data=st.binary(max_size=4096))
def test_digest_is_deterministic(data: bytes) -> None:
    """Hashing the same content twice yields the same fingerprint."""
    assert digest_bytes(data) == digest_bytes(bytes(data))
    assert fingerprint_bytes(data) == fingerprint_bytes(data)


@settings(max_examples=_HYPOTHESIS_MAX_EXAMPLES)
@given(first=st.binary(max_size=2048), second=st.binary(max_size=2048))
def test_distinct_content_yields_distinct_digests(first: bytes, second: bytes) -> None:
    """Different byte buffers produce different full-width digests."""
    assume(first != second)
    assert digest_bytes(first) != digest_bytes(second)


def test_fingerprint_defaults_to_eight_characters() -> None:
    data = b"const app = {};"
    assert fingerprint_bytes(data) == digest_bytes(data)[:8]


@pytest.mark.parametrize("length", [4, 12, 16])
def test_fingerprint_honours_configured_length(length: int) -> None:
    assert len(fingerprint_bytes(b"payload", length)) == length


@pytest.mark.parametrize("length", [0, 3, 17])
def test_truncate_rejects_out_of_range_lengths(length: int) -> None:
    with pytest.raises(ValueError, match="hash length"):
        truncate_digest("0123456789abcdef", length)


@pytest.mark.parametrize(
    ("relative", "expected"),
    [
        ("app.js", "app-a1b2c3d4.js"),
        ("js/vendor/lib.js", "js/vendor/lib-a1b2c3d4.js"),
        ("css/site.css", "css/site-a1b2c3d4.css"),
        ("app.min.js", "app.min-a1b2c3d4.js"),
        ("LICENSE", "LICENSE-a1b2c3d4"),
        (".nojekyll", ".nojekyll-a1b2c3d4"),
        ("v1.2/app", "v1.2/app-a1b2c3d4"),
    ],
)
def test_fingerprinted_path_inserts_hash_before_extension(
    relative: str, expected: str
) -> None:
    assert fingerprinted_path(relative, "a1b2c3d4") == expected


def test_relative_path_uses_forward_slashes_for_windows_paths() -> None:
    """Manifest keys are POSIX-style regardless of host path conventions."""
    root = PureWindowsPath(r"C:\build\src")
    path = PureWindowsPath(r"C:\build\src\js\app.js")
    assert relative_asset_path(path, root) == "js/app.js"


def test_relative_path_for_posix_paths() -> None:
    root = PurePosixPath("/srv/src")
    assert relative_asset_path(PurePosixPath("/srv/src/a/b.css"), root) == "a/b.css"


@pytest.mark.parametrize(
    ("relative", "expected"),
    [("app.js", ".js"), ("APP.JS", ".js"), ("style.css", ".css"), ("README", "")],
)
def test_asset_extension_is_lower_cased(relative: str, expected: str) -> None:
    assert asset_extension(relative) == expected
