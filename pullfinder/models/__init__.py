"""Data models for pull requests and listing pages (Pydantic)."""

from pullfinder.models.page import PER_PAGE, PullRequestPage
from pullfinder.models.pr import PullRequest, PullRequestRef

__all__ = ["PER_PAGE", "PullRequest", "PullRequestPage", "PullRequestRef"]
