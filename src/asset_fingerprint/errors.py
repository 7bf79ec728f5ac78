"""Exception taxonomy for asset fingerprinting and manifest resolution."""

from __future__ import annotations


class AssetError(Exception):
    """Base class for all asset pipeline and resolver failures."""


class BuildConfigError(AssetError):
    """Raised when build parameters fail validation."""


class SourceUnreadableError(AssetError):
    """Raised when the source directory or a contained file cannot be read."""


class OutputUnwritableError(AssetError):
    """Raised when the output tree cannot be removed, created, or written."""


class TransformError(AssetError):
    """Raised when a content transform rejects its input."""


class ManifestEncodeError(AssetError):
    """Raised when the manifest cannot be serialized."""


class ManifestLoadError(AssetError):
    """Base class for resolver load-time failures."""


class ManifestMissingError(ManifestLoadError):
    """Raised when the manifest file cannot be opened."""


class ManifestMalformedError(ManifestLoadError):
    """Raised when the manifest is not valid JSON of the expected shape."""


class TransformRegistryError(AssetError):
    """Raised for invalid transform registrations or transform modules."""


__all__ = [
    "AssetError",
    "BuildConfigError",
    "SourceUnreadableError",
    "OutputUnwritableError",
    "TransformError",
    "ManifestEncodeError",
    "ManifestLoadError",
    "ManifestMissingError",
    "ManifestMalformedError",
    "TransformRegistryError",
]
