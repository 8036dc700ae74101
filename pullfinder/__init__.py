"""Find open pull requests for a commit SHA or a branch ref."""

from logging import Logger

from pullfinder.adapters import GitHubAdapter, GitPlatformError, PullRequestSource
from pullfinder.config import AppConfig
from pullfinder.finder import PullRequestFinder, PullRequestLookupError, normalize_ref
from pullfinder.logging import FinderLogging
from pullfinder.models import PER_PAGE, PullRequest, PullRequestPage, PullRequestRef


def create_finder(config: AppConfig, log: Logger | None = None) -> PullRequestFinder:
    """Build a finder backed by the GitHub API from config.

    Without an explicit log, the pullfinder logger is configured from
    config.logging and the finder logs to pullfinder.finder.
    """
    client = GitHubAdapter(
        token=config.github_token_resolved,
        api_url=config.github.api_url,
        timeout=config.github.timeout,
    )
    if log is None:
        log = FinderLogging(config.logging).finder_logger()
    return PullRequestFinder(client, log=log)


__all__ = [
    "PER_PAGE",
    "GitHubAdapter",
    "GitPlatformError",
    "PullRequest",
    "PullRequestFinder",
    "PullRequestLookupError",
    "PullRequestPage",
    "PullRequestRef",
    "PullRequestSource",
    "FinderLogging",
    "create_finder",
    "normalize_ref",
]
