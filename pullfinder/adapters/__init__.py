"""Git platform adapters (base and implementations)."""

from pullfinder.adapters.base import GitPlatformError, PullRequestSource
from pullfinder.adapters.github import GitHubAdapter

__all__ = ["GitPlatformError", "GitHubAdapter", "PullRequestSource"]
