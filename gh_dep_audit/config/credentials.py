"""Load GitHub basic-auth credentials from a local JSON file."""

import json
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, SecretStr

logger = logging.getLogger(__name__)


class Credentials(BaseModel):
    """GitHub username and personal access token.

    The token is kept as a SecretStr so it is masked in reprs and logs.
    """

    model_config = ConfigDict(frozen=True)

    username: str = Field(..., description="GitHub login used for basic auth")
    token: SecretStr = Field(..., description="Personal access token")


def load_credentials(config_path: str | Path) -> Credentials | None:
    """Read credentials from a JSON object with ``username`` and ``token`` keys.

    The file must be a flat mapping of strings; keys other than ``username``
    and ``token`` are allowed but unused.

    Args:
        config_path: Path to the credential file

    Returns:
        Credentials, or None if the file is unreadable, not a JSON object of
        string values, or lacks either field
    """
    path = Path(config_path)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Could not read credential file {path}: {e}")
        return None

    try:
        config = json.loads(content)
    except json.JSONDecodeError as e:
        logger.debug(f"Credential file {path} is not valid JSON: {e}")
        return None

    if not isinstance(config, dict):
        logger.debug(f"Credential file {path} does not contain a JSON object")
        return None

    non_strings = [
        key for key, value in config.items() if not isinstance(value, str)
    ]
    if non_strings:
        logger.debug(f"Credential file {path} has non-string values: {non_strings}")
        return None

    missing = [key for key in ("username", "token") if key not in config]
    if missing:
        logger.debug(f"Credential file {path} lacks fields: {missing}")
        return None

    return Credentials(username=config["username"], token=config["token"])
