"""Content transforms and the per-extension transform registry."""

from .base import AssetTransform
from .builtins import JavaScriptMinifier, PassthroughTransform
from .registry import TransformRegistry, create_default_registry

__all__ = [
    "AssetTransform",
    "JavaScriptMinifier",
    "PassthroughTransform",
    "TransformRegistry",
    "create_default_registry",
]
