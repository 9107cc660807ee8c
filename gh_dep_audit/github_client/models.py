"""Pydantic models for GitHub repository data.

The wire models map onto the subset of GitHub's REST API v3 responses the
audit reads. API Reference: https://docs.github.com/en/rest/repos
"""

from pydantic import BaseModel, ConfigDict, Field

UNKNOWN_ACTIVITY = "Unknown"


class RepositoryIdentifier(BaseModel):
    """A hosted repository named by its owner and repository name."""

    model_config = ConfigDict(frozen=True)

    org: str = Field(..., description="Organization or user owning the repository")
    name: str = Field(..., description="Repository name")

    @property
    def full_name(self) -> str:
        """Return the ``org/name`` form used by the GitHub API."""
        return f"{self.org}/{self.name}"

    def __str__(self) -> str:
        return self.full_name


class RepositoryInfo(BaseModel):
    """Popularity and activity data fetched for one repository."""

    stars: int = Field(..., ge=0, description="Stargazer count (integer)")
    last_activity: str = Field(
        UNKNOWN_ACTIVITY,
        description="Raw ISO 8601 timestamp of the latest commit, or 'Unknown'",
    )


class RepositoryMetadata(BaseModel):
    """GitHub repository object, reduced to the star count.

    Maps to GitHub REST API Repository object.
    API Reference: https://docs.github.com/en/rest/repos/repos#get-a-repository
    """

    stargazers_count: int = Field(
        ..., ge=0, description="Number of users who starred the repository"
    )


class CommitActor(BaseModel):
    """Git author/committer block nested inside a commit."""

    date: str = Field(..., description="Timestamp of the action (ISO 8601)")


class CommitDetail(BaseModel):
    """Git commit data nested inside a GitHub commit record."""

    committer: CommitActor = Field(..., description="Committer of the commit")


class CommitRecord(BaseModel):
    """GitHub commit list entry.

    API Reference: https://docs.github.com/en/rest/commits/commits#list-commits
    """

    commit: CommitDetail = Field(..., description="Underlying git commit data")
