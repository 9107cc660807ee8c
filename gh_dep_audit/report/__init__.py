"""Report filtering, formatting and the audit pipeline."""

from .audit import audit_repositories
from .formatter import (
    ReportEntry,
    Severity,
    build_entry,
    classify_severity,
    format_entry,
    should_report,
)

__all__ = [
    "ReportEntry",
    "Severity",
    "audit_repositories",
    "build_entry",
    "classify_severity",
    "format_entry",
    "should_report",
]
