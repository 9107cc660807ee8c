"""Tests for report classification and formatting."""

from datetime import datetime, timezone

import pytest

from gh_dep_audit.github_client.models import (
    UNKNOWN_ACTIVITY,
    RepositoryIdentifier,
    RepositoryInfo,
)
from gh_dep_audit.report.formatter import (
    ReportEntry,
    Severity,
    build_entry,
    classify_severity,
    format_entry,
    should_report,
)

NOW = datetime(2026, 6, 1, tzinfo=timezone.utc)
REPO = RepositoryIdentifier(org="acme", name="widgets")


class TestClassifySeverity:
    """Test severity tiers."""

    @pytest.mark.parametrize(
        "stars, expected",
        [
            (0, Severity.HIGH),
            (9, Severity.HIGH),
            (10, Severity.MEDIUM),
            (49, Severity.MEDIUM),
            (50, Severity.LOW),
            (51, Severity.LOW),
        ],
    )
    def test_tier_boundaries(self, stars: int, expected: Severity) -> None:
        """Test the 10 and 50 star boundaries."""
        assert classify_severity(stars) == expected


class TestShouldReport:
    """Test the inclusive threshold."""

    def test_equal_to_threshold_included(self) -> None:
        """Test that stars equal to the threshold are reported."""
        assert should_report(RepositoryInfo(stars=100), 100)

    def test_above_threshold_excluded(self) -> None:
        """Test that stars above the threshold are not reported."""
        assert not should_report(RepositoryInfo(stars=101), 100)

    def test_zero_threshold(self) -> None:
        """Test a zero threshold only admits unstarred repositories."""
        assert should_report(RepositoryInfo(stars=0), 0)
        assert not should_report(RepositoryInfo(stars=1), 0)


class TestBuildEntry:
    """Test report entry construction."""

    def test_stale_entry(self) -> None:
        """Test an old, unpopular repository."""
        info = RepositoryInfo(stars=3, last_activity="2019-01-01T00:00:00Z")
        entry = build_entry(REPO, info, now=NOW)

        assert entry.stale
        assert entry.severity == Severity.HIGH
        assert entry.repository == REPO
        assert entry.info == info

    def test_unknown_activity_not_stale(self) -> None:
        """Test that the Unknown placeholder is not flagged."""
        info = RepositoryInfo(stars=20, last_activity=UNKNOWN_ACTIVITY)
        entry = build_entry(REPO, info, now=NOW)

        assert not entry.stale
        assert entry.severity == Severity.MEDIUM


class TestFormatEntry:
    """Test report line rendering."""

    def test_stale_line(self) -> None:
        """Test that a stale entry shows every field."""
        entry = ReportEntry(
            repository=REPO,
            info=RepositoryInfo(stars=5, last_activity="2019-01-01T00:00:00Z"),
            stale=True,
            severity=Severity.HIGH,
        )
        line = format_entry(entry)

        assert "\n" not in line
        assert line.startswith(Severity.HIGH.marker)
        assert "acme/widgets" in line
        assert "5 stars" in line
        assert "stale" in line
        assert line.endswith("2019-01-01T00:00:00Z")

    def test_active_line_with_unknown(self) -> None:
        """Test an entry without activity data."""
        entry = ReportEntry(
            repository=REPO,
            info=RepositoryInfo(stars=77),
            stale=False,
            severity=Severity.LOW,
        )
        line = format_entry(entry)

        assert line.startswith(Severity.LOW.marker)
        assert "stale" not in line
        assert line.endswith(UNKNOWN_ACTIVITY)

    def test_markers_are_distinct(self) -> None:
        """Test that each tier renders differently."""
        markers = {severity.marker for severity in Severity}
        assert len(markers) == 3
