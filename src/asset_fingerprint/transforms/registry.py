"""Transform registry keyed by file extension, plus module discovery helpers."""

from __future__ import annotations

import importlib
import importlib.util
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import ModuleType

from asset_fingerprint.errors import TransformRegistryError
from asset_fingerprint.transforms.base import AssetTransform
from asset_fingerprint.transforms.builtins import JavaScriptMinifier, PassthroughTransform


def normalize_extension(extension: str) -> str:
    """Normalize ``js``/``.JS`` style input to ``.js``.

    Raises
    ------
    TransformRegistryError
        If the extension is empty or contains a path separator.
    """
    cleaned = extension.strip().lower()
    if cleaned and not cleaned.startswith("."):
        cleaned = f".{cleaned}"
    if cleaned in {"", "."} or "/" in cleaned or "\\" in cleaned:
        raise TransformRegistryError(f"Invalid file extension {extension!r}.")
    return cleaned


class TransformRegistry:
    """Registry mapping file extensions to content transforms.

    Extensions without a registration fall back to a passthrough transform,
    so assets such as CSS are fingerprinted but never rewritten.
    """

    def __init__(self, fallback: AssetTransform | None = None) -> None:
        self._transforms: dict[str, AssetTransform] = {}
        self._fallback: AssetTransform = fallback or PassthroughTransform()

    def register(self, extension: str, transform: AssetTransform) -> None:
        """Register ``transform`` for ``extension``, replacing any previous one.

        Parameters
        ----------
        extension : str
            File extension, with or without the leading dot.
        transform : AssetTransform
            Transform instance to apply to matching files.

        Raises
        ------
        TransformRegistryError
            If the extension is invalid or the transform is not usable.
        """
        if not isinstance(transform, AssetTransform):
            raise TransformRegistryError(
                f"Transform for {extension!r} must define 'name' and 'transform'."
            )
        self._transforms[normalize_extension(extension)] = transform

    def extensions(self) -> list[str]:
        """Return registered extensions in sorted order."""
        return sorted(self._transforms.keys())

    def get(self, extension: str) -> AssetTransform:
        """Return the transform for ``extension`` or the passthrough fallback."""
        if not extension:
            return self._fallback
        return self._transforms.get(normalize_extension(extension), self._fallback)

    def load_module(self, module_or_path: str) -> None:
        """Load transform registrations from a module name or file path.

        .. warning::
            This executes code from the specified module. Only load transform
            modules from trusted sources.
        """
        module = _import_module_or_path(module_or_path)
        _register_from_module(module, self)


def _import_module_or_path(module_or_path: str) -> ModuleType:
    """Import module by import path or filesystem path.

    Raises
    ------
    TransformRegistryError
        If import cannot be completed.
    """
    candidate = Path(module_or_path)
    if candidate.exists():
        spec = importlib.util.spec_from_file_location(candidate.stem, candidate)
        if spec is None or spec.loader is None:
            raise TransformRegistryError(
                f"Unable to load transform module from {candidate}."
            )
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module

    try:
        return importlib.import_module(module_or_path)
    except Exception as exc:
        raise TransformRegistryError(
            f"Unable to import transform module '{module_or_path}': {exc}"
        ) from exc


def _register_from_module(module: ModuleType, registry: TransformRegistry) -> None:
    if hasattr(module, "register_transforms"):
        module.register_transforms(registry)
        return

    transforms_obj = getattr(module, "TRANSFORMS", None)
    if isinstance(transforms_obj, Mapping):
        for extension, transform in transforms_obj.items():
            registry.register(extension, transform)
        return

    raise TransformRegistryError(
        "Transform module must expose register_transforms(registry) or a "
        "TRANSFORMS mapping of extension to transform."
    )


def create_default_registry(
    extra_modules: Iterable[str] | None = None,
) -> TransformRegistry:
    """Create the default registry: ``.js`` is minified, everything else passes through.

    Parameters
    ----------
    extra_modules : Iterable[str] | None, optional
        Additional transform modules to load after the built-ins.
    """
    registry = TransformRegistry()
    registry.register(".js", JavaScriptMinifier())
    for module in extra_modules or []:
        registry.load_module(module)
    return registry
