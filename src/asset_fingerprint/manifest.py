"""Manifest accumulator and JSON codec shared by pipeline and resolver."""

from __future__ import annotations

import json

from pydantic import ValidationError

from asset_fingerprint.errors import (
    ManifestEncodeError,
    ManifestMalformedError,
    OutputUnwritableError,
)
from asset_fingerprint.schemas import ManifestDocument
from asset_fingerprint.types import AssetMap, MutableAssetMap

MANIFEST_FILENAME = "manifest.json"


class AssetManifest:
    """Mapping of original relative paths to fingerprinted relative paths.

    One instance is owned by exactly one pipeline run. It is not thread-safe;
    callers that fan work out to threads must insert from a single thread.
    """

    def __init__(self) -> None:
        self._assets: MutableAssetMap = {}
        self._targets: dict[str, str] = {}

    def add(self, original: str, fingerprinted: str) -> None:
        """Record one processed asset.

        Raises
        ------
        ManifestEncodeError
            If ``original`` is already recorded.
        OutputUnwritableError
            If another original already maps to ``fingerprinted``.
        """
        if original in self._assets:
            raise ManifestEncodeError(f"duplicate manifest entry for {original}")
        owner = self._targets.get(fingerprinted)
        if owner is not None:
            raise OutputUnwritableError(
                f"fingerprinted path {fingerprinted} is claimed by both "
                f"{owner} and {original}"
            )
        self._assets[original] = fingerprinted
        self._targets[fingerprinted] = original

    def get(self, original: str) -> str | None:
        return self._assets.get(original)

    def as_dict(self) -> MutableAssetMap:
        """Return a copy of the recorded entries."""
        return dict(self._assets)

    def __contains__(self, original: object) -> bool:
        return original in self._assets

    def __len__(self) -> int:
        return len(self._assets)


def encode_manifest(assets: AssetMap) -> bytes:
    """Serialize assets as indented UTF-8 JSON with sorted keys.

    Raises
    ------
    ManifestEncodeError
        If keys or values are not strings or JSON encoding fails, including
        paths that cannot be encoded as UTF-8.
    """
    for key, value in assets.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise ManifestEncodeError(
                f"manifest entries must be strings, got {key!r}: {value!r}"
            )
    try:
        text = json.dumps(
            {"assets": dict(assets)},
            indent=2,
            sort_keys=True,
            ensure_ascii=False,
        )
        return (text + "\n").encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise ManifestEncodeError(f"failed to encode manifest: {exc}") from exc


def decode_manifest(raw: bytes) -> MutableAssetMap:
    """Decode manifest bytes into a plain ``{original: fingerprinted}`` dict.

    Unknown top-level keys are ignored; ``assets`` must be an object of
    string-to-string pairs.

    Raises
    ------
    ManifestMalformedError
        On invalid UTF-8, invalid JSON, or a schema mismatch.
    """
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ManifestMalformedError(f"manifest is not valid UTF-8: {exc}") from exc
    try:
        document = ManifestDocument.model_validate_json(text)
    except ValidationError as exc:
        raise ManifestMalformedError(f"invalid manifest: {exc}") from exc
    return dict(document.assets)
