"""Concrete I/O adapters for the application ports."""

from .file_sources import DirectoryFileSource
from .filesystem import LocalAssetFileSystem

__all__ = ["DirectoryFileSource", "LocalAssetFileSystem"]
