"""Sequential audit of scanned repositories."""

import logging
from collections.abc import Iterable, Iterator
from datetime import datetime

from ..github_client.client import RepositoryInfoClient
from ..github_client.models import RepositoryIdentifier
from .formatter import ReportEntry, build_entry, should_report

logger = logging.getLogger(__name__)


def audit_repositories(
    repositories: Iterable[RepositoryIdentifier],
    client: RepositoryInfoClient,
    max_stars: int,
    now: datetime | None = None,
) -> Iterator[ReportEntry]:
    """Yield report entries for repositories at or below ``max_stars``.

    Each repository is fetched and scored before the next one is requested,
    so entries come out in input order as soon as they are ready.

    Args:
        repositories: Identifiers in scan order
        client: Client used for the API lookups
        max_stars: Inclusive star threshold
        now: Reference time for staleness, defaults to the current time

    Yields:
        ReportEntry for each qualifying repository
    """
    for repository in repositories:
        info = client.fetch_info(repository)
        if info is None:
            continue

        if not should_report(info, max_stars):
            logger.debug(
                f"{repository} has {info.stars} stars, above threshold {max_stars}"
            )
            continue

        yield build_entry(repository, info, now=now)
