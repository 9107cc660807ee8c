"""Test configuration and fixtures."""

import json
from pathlib import Path

import pytest

from gh_dep_audit.config.credentials import Credentials


@pytest.fixture
def credentials() -> Credentials:
    """Credentials used for basic auth in client tests."""
    return Credentials(username="octocat", token="ghp_testtoken")


@pytest.fixture
def credential_file(tmp_path: Path) -> Path:
    """Write a valid credential file."""
    path = tmp_path / "credentials.json"
    path.write_text(json.dumps({"username": "octocat", "token": "ghp_testtoken"}))
    return path
