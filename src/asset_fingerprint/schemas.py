"""Pydantic schemas for runtime validation of build inputs and manifests."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, model_validator

from asset_fingerprint.fingerprint import MAX_HASH_LENGTH, MIN_HASH_LENGTH


class BuildConfig(BaseModel):
    """Validated input for a single pipeline run."""

    model_config = ConfigDict(extra="forbid")

    source_dir: Path
    output_dir: Path
    hash_length: int = Field(default=8, ge=MIN_HASH_LENGTH, le=MAX_HASH_LENGTH)
    workers: int = Field(default=1, ge=1)
    manifest_name: str = Field(default="manifest.json", min_length=1)

    @model_validator(mode="after")
    def _validate_layout(self) -> BuildConfig:
        source = self.source_dir.resolve()
        output = self.output_dir.resolve()
        if output == source or output in source.parents:
            # The output tree is deleted before the walk starts.
            raise ValueError(
                "output_dir must not be the source directory or one of its parents."
            )
        if "/" in self.manifest_name or "\\" in self.manifest_name:
            raise ValueError("manifest_name must be a plain file name.")
        return self


class ManifestDocument(BaseModel):
    """On-disk manifest shape: ``{"assets": {original: fingerprinted}}``."""

    model_config = ConfigDict(extra="ignore", strict=True)

    assets: dict[str, str]
