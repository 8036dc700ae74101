"""Abstract base for Git platform adapters."""

from abc import ABC, abstractmethod

from pullfinder.models import PER_PAGE, PullRequestPage


class GitPlatformError(Exception):
    """Raised when a Git platform API call fails."""

    pass


class PullRequestSource(ABC):
    """Read-only pull request listing on a Git hosting platform.

    Implementations return one page per call; ``page=None`` asks for the
    first page. ``PullRequestPage.next_page`` is 0 when there are no more
    pages.
    """

    @abstractmethod
    def list_pull_requests_with_commit(
        self,
        owner: str,
        repo: str,
        sha: str,
        page: int | None = None,
        per_page: int = PER_PAGE,
    ) -> PullRequestPage:
        """List pull requests associated with a commit."""
        ...

    @abstractmethod
    def list_pull_requests(
        self,
        owner: str,
        repo: str,
        state: str | None = None,
        base: str | None = None,
        page: int | None = None,
        per_page: int = PER_PAGE,
    ) -> PullRequestPage:
        """List pull requests, optionally filtered by state and base branch."""
        ...
