"""Credential configuration for GitHub API access."""

from .credentials import Credentials, load_credentials

__all__ = ["Credentials", "load_credentials"]
