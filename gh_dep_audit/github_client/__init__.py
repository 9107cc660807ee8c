"""GitHub client package for API interaction."""

from .client import RepositoryInfoClient
from .models import (
    UNKNOWN_ACTIVITY,
    CommitRecord,
    RepositoryIdentifier,
    RepositoryInfo,
    RepositoryMetadata,
)

__all__ = [
    "RepositoryInfoClient",
    "RepositoryIdentifier",
    "RepositoryInfo",
    "RepositoryMetadata",
    "CommitRecord",
    "UNKNOWN_ACTIVITY",
]
