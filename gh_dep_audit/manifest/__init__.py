"""Dependency manifest scanning."""

from .scanner import ManifestError, extract_repositories, read_manifest

__all__ = ["ManifestError", "extract_repositories", "read_manifest"]
