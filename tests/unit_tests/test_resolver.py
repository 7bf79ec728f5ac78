"""Unit tests for serve-time asset path resolution."""

from __future__ import annotations

import io
import json
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest

from asset_fingerprint.errors import (
    ManifestLoadError,
    ManifestMalformedError,
    ManifestMissingError,
)
from asset_fingerprint.resolver import AssetResolver


class _MapFileSource:
    """Read-only file source backed by a dict, counting opens."""

    def __init__(self, files: dict[str, bytes]) -> None:
        self.files = files
        self.opened: list[str] = []

    def open(self, name: str) -> io.BytesIO:
        self.opened.append(name)
        try:
            return io.BytesIO(self.files[name])
        except KeyError as exc:
            raise FileNotFoundError(name) from exc


def _manifest(assets: dict[str, str]) -> bytes:
    return json.dumps({"assets": assets}).encode("utf-8")


def test_load_valid_manifest() -> None:
    source = _MapFileSource(
        {
            "manifest.json": (
                b'{"assets":{"app.js":"app-12345678.js","style.css":"style-87654321.css"}}'
            )
        }
    )

    resolver = AssetResolver.load(source, "manifest.json")

    assert dict(resolver.assets) == {
        "app.js": "app-12345678.js",
        "style.css": "style-87654321.css",
    }
    assert len(resolver) == 2


def test_path_returns_fingerprinted_name_under_mount_prefix() -> None:
    resolver = AssetResolver.load(
        _MapFileSource({"manifest.json": _manifest({"app.js": "app-deadbeef.js"})})
    )
    assert resolver.path("app.js") == "/dist/app-deadbeef.js"


def test_path_falls_back_to_original_for_unmapped_asset() -> None:
    resolver = AssetResolver.load(
        _MapFileSource({"manifest.json": _manifest({"app.js": "app-deadbeef.js"})})
    )
    assert resolver.path("missing.js") == "/dist/missing.js"
    assert resolver.path("nested/dir/missing.css") == "/dist/nested/dir/missing.css"


def test_path_handles_nested_and_leading_slash_assets() -> None:
    resolver = AssetResolver({"js/app.js": "js/app-deadbeef.js"})
    assert resolver.path("js/app.js") == "/dist/js/app-deadbeef.js"
    assert resolver.path("/other.js") == "/dist/other.js"


@pytest.mark.parametrize(
    ("prefix", "expected"),
    [
        ("/dist", "/dist/app-1.js"),
        ("/dist/", "/dist/app-1.js"),
        ("static/assets", "/static/assets/app-1.js"),
        ("/", "/app-1.js"),
        ("", "/app-1.js"),
    ],
)
def test_mount_prefix_is_normalized(prefix: str, expected: str) -> None:
    resolver = AssetResolver({"app.js": "app-1.js"}, mount_prefix=prefix)
    assert resolver.path("app.js") == expected


@pytest.mark.parametrize(
    ("files", "error"),
    [
        ({}, ManifestMissingError),
        ({"manifest.json": b'{"assets":invalid_json}'}, ManifestMalformedError),
        ({"manifest.json": b'{"assets": "not-an-object"}'}, ManifestMalformedError),
        ({"manifest.json": b'{"other": {}}'}, ManifestMalformedError),
    ],
)
def test_load_failures_return_no_resolver(
    files: dict[str, bytes], error: type[ManifestLoadError]
) -> None:
    with pytest.raises(error):
        AssetResolver.load(_MapFileSource(files), "manifest.json")


def test_load_reads_manifest_exactly_once() -> None:
    """The resolver keeps a snapshot and never re-reads the source."""
    source = _MapFileSource({"manifest.json": _manifest({"app.js": "app-1.js"})})
    resolver = AssetResolver.load(source)

    source.files["manifest.json"] = _manifest({"app.js": "app-2.js"})

    assert resolver.path("app.js") == "/dist/app-1.js"
    assert resolver.path("app.js") == "/dist/app-1.js"
    assert source.opened == ["manifest.json"]


def test_assets_view_is_read_only() -> None:
    resolver = AssetResolver({"app.js": "app-1.js"})
    with pytest.raises(TypeError):
        resolver.assets["app.js"] = "hijacked.js"  # type: ignore[index]


def test_constructor_copies_input_mapping() -> None:
    assets = {"app.js": "app-1.js"}
    resolver = AssetResolver(assets)
    assets["app.js"] = "app-2.js"
    assert resolver.path("app.js") == "/dist/app-1.js"


def test_from_directory_reads_build_output(tmp_path: Path) -> None:
    (tmp_path / "manifest.json").write_bytes(_manifest({"app.js": "app-cafe0001.js"}))
    resolver = AssetResolver.from_directory(tmp_path, mount_prefix="/static")
    assert resolver.path("app.js") == "/static/app-cafe0001.js"


def test_from_directory_without_manifest_fails(tmp_path: Path) -> None:
    with pytest.raises(ManifestMissingError):
        AssetResolver.from_directory(tmp_path)


def test_concurrent_path_calls_observe_one_snapshot() -> None:
    """Hundreds of concurrent lookups agree with the single loaded manifest."""
    assets = {f"js/module{i}.js": f"js/module{i}-{i:08x}.js" for i in range(64)}
    resolver = AssetResolver(assets)
    queries = [f"js/module{i % 80}.js" for i in range(1000)]

    with ThreadPoolExecutor(max_workers=32) as pool:
        results = list(pool.map(resolver.path, queries))

    for query, result in zip(queries, results, strict=True):
        expected = assets.get(query, query)
        assert result == f"/dist/{expected}"
