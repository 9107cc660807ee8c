"""GitHub REST API client for repository popularity and activity."""

import logging

import httpx

from .. import __version__
from ..config.credentials import Credentials
from .models import (
    UNKNOWN_ACTIVITY,
    CommitRecord,
    RepositoryIdentifier,
    RepositoryInfo,
    RepositoryMetadata,
)

logger = logging.getLogger(__name__)

GITHUB_API_URL = "https://api.github.com"
USER_AGENT = f"gh-dep-audit/{__version__}"


class RepositoryInfoClient:
    """Fetches star counts and last commit timestamps over one HTTP client."""

    def __init__(
        self,
        credentials: Credentials,
        base_url: str = GITHUB_API_URL,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize the client with basic authentication.

        Args:
            credentials: GitHub username and token used for basic auth
            base_url: API root, overridable for tests
            transport: Optional httpx transport, mainly for tests
        """
        self.http = httpx.Client(
            base_url=base_url,
            auth=httpx.BasicAuth(
                credentials.username, credentials.token.get_secret_value()
            ),
            headers={
                "User-Agent": USER_AGENT,
                "Accept": "application/vnd.github+json",
            },
            follow_redirects=True,
            timeout=None,
            transport=transport,
        )

    def __enter__(self) -> "RepositoryInfoClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying connection pool."""
        self.http.close()

    def get_stars(self, repo: RepositoryIdentifier) -> int | None:
        """Get the stargazer count of a repository.

        Returns:
            Star count, or None if the request failed or the body was malformed
        """
        try:
            response = self.http.get(f"/repos/{repo.full_name}")
            response.raise_for_status()
            metadata = RepositoryMetadata.model_validate(response.json())
        except httpx.HTTPStatusError as e:
            logger.warning(
                f"Skipping {repo}: metadata request returned "
                f"{e.response.status_code}"
            )
            return None
        except (httpx.HTTPError, ValueError) as e:
            # ValidationError and JSONDecodeError are both ValueErrors
            logger.warning(f"Skipping {repo}: could not read metadata: {e}")
            return None

        return metadata.stargazers_count

    def get_last_activity(self, repo: RepositoryIdentifier) -> str | None:
        """Get the timestamp of the most recent commit.

        Only the first page with a single record is requested.

        Returns:
            Raw committer date string, or None if unavailable
        """
        try:
            response = self.http.get(
                f"/repos/{repo.full_name}/commits", params={"per_page": 1}
            )
            response.raise_for_status()
            records = response.json()
            if not isinstance(records, list) or not records:
                logger.debug(f"No commit records returned for {repo}")
                return None
            latest = CommitRecord.model_validate(records[0])
        except (httpx.HTTPError, ValueError) as e:
            logger.debug(f"Could not fetch last commit for {repo}: {e}")
            return None

        return latest.commit.committer.date

    def fetch_info(self, repo: RepositoryIdentifier) -> RepositoryInfo | None:
        """Fetch popularity and activity data for one repository.

        The commit lookup is only attempted once the star count is known; a
        failed commit lookup degrades to the 'Unknown' placeholder.

        Args:
            repo: Repository to look up

        Returns:
            RepositoryInfo, or None when the repository metadata is unavailable
        """
        stars = self.get_stars(repo)
        if stars is None:
            return None

        last_activity = self.get_last_activity(repo)
        logger.debug(f"{repo}: {stars} stars, last commit {last_activity}")
        return RepositoryInfo(
            stars=stars, last_activity=last_activity or UNKNOWN_ACTIVITY
        )
