"""Detect GitHub repository references in dependency manifests.

The manifest format is not parsed; any ``github.com/<org>/<name>`` substring
counts, so go.mod, requirements files and plain READMEs all work.
"""

import re
from pathlib import Path

from ..github_client.models import RepositoryIdentifier

GITHUB_REPO_PATTERN = re.compile(r"github\.com/([a-zA-Z0-9_.-]+)/([a-zA-Z0-9_.-]+)")


class ManifestError(Exception):
    """Raised when a manifest file cannot be read."""


def read_manifest(manifest_path: str | Path) -> str:
    """Read the full text of a manifest file.

    Raises:
        ManifestError: If the file is missing or unreadable
    """
    path = Path(manifest_path)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestError(f"Failed to read manifest {path}: {e}") from e


def extract_repositories(text: str) -> list[RepositoryIdentifier]:
    """Extract repository identifiers in order of appearance.

    Repeated references yield repeated entries.

    Args:
        text: Manifest content to search

    Returns:
        List of RepositoryIdentifier objects, empty if nothing matched
    """
    return [
        RepositoryIdentifier(org=org, name=name)
        for org, name in GITHUB_REPO_PATTERN.findall(text)
    ]
