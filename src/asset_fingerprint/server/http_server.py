"""HTTP server resolving original asset paths and serving fingerprinted files."""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

from fastapi import FastAPI, Query
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel, ConfigDict

from asset_fingerprint import __version__
from asset_fingerprint.errors import ManifestLoadError
from asset_fingerprint.resolver import DEFAULT_MOUNT_PREFIX, AssetResolver

logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Health response payload."""

    model_config = ConfigDict(extra="forbid")

    status: str


class ReadyResponse(BaseModel):
    """Readiness response payload."""

    model_config = ConfigDict(extra="forbid")

    status: str
    assets: int


class ResolveResponse(BaseModel):
    """Resolved asset URL payload."""

    model_config = ConfigDict(extra="forbid")

    asset: str
    url: str
    fingerprinted: bool


def create_app(resolver: AssetResolver, static_dir: Path | None = None) -> FastAPI:
    """Create the asset HTTP application around a loaded resolver.

    Parameters
    ----------
    resolver : AssetResolver
        Resolver shared by every request; it is never mutated.
    static_dir : Path | None, optional
        Build output directory to serve under ``resolver.mount_prefix``.
    """
    app = FastAPI(
        title="Asset Fingerprint Resolver",
        version=__version__,
        description="Resolve original asset paths to fingerprinted URLs.",
    )

    @app.get("/healthz", response_model=HealthResponse)
    async def healthz() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.get("/readyz", response_model=ReadyResponse)
    async def readyz() -> ReadyResponse:
        return ReadyResponse(status="ready", assets=len(resolver))

    @app.get("/v1/assets/resolve", response_model=ResolveResponse)
    async def resolve_asset(path: str = Query(..., min_length=1)) -> ResolveResponse:
        """Resolve an original asset path to its served URL."""
        return ResolveResponse(
            asset=path,
            url=resolver.path(path),
            fingerprinted=path in resolver,
        )

    if static_dir is not None:
        app.mount(
            resolver.mount_prefix,
            StaticFiles(directory=static_dir),
            name="assets",
        )

    return app


def main() -> None:
    """Run the asset resolver HTTP entrypoint."""
    import uvicorn

    parser = argparse.ArgumentParser(description="Asset fingerprint resolver HTTP server.")
    parser.add_argument(
        "--host",
        default=os.getenv("ASSET_HTTP_HOST", "0.0.0.0"),
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.getenv("ASSET_HTTP_PORT", "8090")),
    )
    parser.add_argument(
        "--dist-dir",
        type=Path,
        default=Path(os.getenv("ASSET_DIST_DIR", "dist")),
    )
    parser.add_argument(
        "--mount-prefix",
        default=os.getenv("ASSET_MOUNT_PREFIX", DEFAULT_MOUNT_PREFIX),
    )
    args = parser.parse_args()

    try:
        resolver = AssetResolver.from_directory(args.dist_dir, mount_prefix=args.mount_prefix)
    except ManifestLoadError as exc:
        parser.exit(status=1, message=f"error: {exc}\n")
    logger.info("Loaded %d manifest entries from %s", len(resolver), args.dist_dir)
    uvicorn.run(
        create_app(resolver, static_dir=args.dist_dir),
        host=args.host,
        port=args.port,
        reload=False,
    )


if __name__ == "__main__":
    main()
