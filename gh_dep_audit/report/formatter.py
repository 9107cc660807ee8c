"""Severity classification, threshold filtering and report line rendering."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from ..github_client.models import RepositoryIdentifier, RepositoryInfo
from ..utils.date_parser import is_stale

MEDIUM_SEVERITY_MIN_STARS = 10
LOW_SEVERITY_MIN_STARS = 50


class Severity(str, Enum):
    """How worrying a dependency's star count is."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def marker(self) -> str:
        return SEVERITY_MARKERS[self]


SEVERITY_MARKERS = {
    Severity.HIGH: "🔴",
    Severity.MEDIUM: "🟠",
    Severity.LOW: "🟡",
}
STALE_MARKER = "⚠️  stale"
ACTIVE_MARKER = "active"


class ReportEntry(BaseModel):
    """One repository as shown in the report."""

    repository: RepositoryIdentifier = Field(..., description="Audited repository")
    info: RepositoryInfo = Field(..., description="Fetched popularity/activity data")
    stale: bool = Field(..., description="Last commit older than three years")
    severity: Severity = Field(..., description="Tier derived from the star count")


def classify_severity(stars: int) -> Severity:
    """Map a star count onto its severity tier."""
    if stars < MEDIUM_SEVERITY_MIN_STARS:
        return Severity.HIGH
    if stars < LOW_SEVERITY_MIN_STARS:
        return Severity.MEDIUM
    return Severity.LOW


def should_report(info: RepositoryInfo, max_stars: int) -> bool:
    """Check the inclusive star threshold."""
    return info.stars <= max_stars


def build_entry(
    repository: RepositoryIdentifier,
    info: RepositoryInfo,
    now: datetime | None = None,
) -> ReportEntry:
    """Combine a repository and its info into a report entry.

    Args:
        repository: Audited repository
        info: Data fetched for it
        now: Reference time for the staleness check

    Returns:
        ReportEntry with staleness and severity filled in
    """
    return ReportEntry(
        repository=repository,
        info=info,
        stale=is_stale(info.last_activity, now=now),
        severity=classify_severity(info.stars),
    )


def format_entry(entry: ReportEntry) -> str:
    """Render a report entry as a single line."""
    activity_marker = STALE_MARKER if entry.stale else ACTIVE_MARKER
    return (
        f"{entry.severity.marker} {entry.repository.full_name} has "
        f"{entry.info.stars} stars | {activity_marker} | "
        f"last commit: {entry.info.last_activity}"
    )
