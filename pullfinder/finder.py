"""Find open pull requests for a commit SHA or a branch ref.

Two strategies for a SHA:

- commit association: the platform's "pull requests for a commit" listing,
  re-filtered to open PRs whose head is exactly the SHA;
- SHA scan: every open PR of the repository, filtered by head SHA.

The scan is only a fallback for when the association listing finds nothing
(commits pushed from forks are not always associated). For a ref, open PRs
are listed by base branch.
"""

import logging
from typing import Callable, List

from pullfinder.adapters.base import GitPlatformError, PullRequestSource
from pullfinder.models import PER_PAGE, PullRequest, PullRequestPage

BRANCH_REF_PREFIX = "refs/heads/"


class PullRequestLookupError(GitPlatformError):
    """Raised when listing pull requests fails.

    Attributes:
        operation: Lookup that failed (commit_association, sha_scan, for_sha, for_ref).
        owner: Repository owner.
        repo: Repository name.
        cause: Underlying error from the platform client, or the inner
            lookup error when a combined lookup re-raises it.
    """

    def __init__(self, operation: str, owner: str, repo: str, cause: Exception) -> None:
        self.operation = operation
        self.owner = owner
        self.repo = repo
        self.cause = cause
        if isinstance(cause, PullRequestLookupError) and cause.repository == self.repository:
            # inner message already names the repository
            message = f"{operation}: {cause}"
        else:
            message = f"{operation}: failed to list pull requests for repository {owner}/{repo}: {cause}"
        super().__init__(message)

    @property
    def repository(self) -> str:
        return f"{self.owner}/{self.repo}"


def normalize_ref(ref: str) -> str:
    """Strip a leading refs/heads/ so a full ref becomes a branch name.

    Refs without the prefix are returned unchanged.
    """
    if ref.startswith(BRANCH_REF_PREFIX):
        return ref[len(BRANCH_REF_PREFIX) :]
    return ref


class PullRequestFinder:
    """Query helper over a PullRequestSource.

    Every call fetches fresh data, one page at a time, and keeps no state
    between calls.
    """

    def __init__(self, client: PullRequestSource, log: logging.Logger | None = None) -> None:
        self._client = client
        self._log = log or logging.getLogger("pullfinder.finder")

    def _collect(
        self,
        operation: str,
        owner: str,
        repo: str,
        fetch: Callable[[int | None], PullRequestPage],
        keep: Callable[[PullRequest], bool],
    ) -> List[PullRequest]:
        """Fetch pages until next_page is 0, keeping PRs accepted by keep()."""
        results: List[PullRequest] = []
        page: int | None = None
        while True:
            try:
                resp = fetch(page)
            except GitPlatformError as e:
                raise PullRequestLookupError(operation, owner, repo, e) from e
            results.extend(pr for pr in resp.items if keep(pr))
            if resp.next_page == 0:
                return results
            page = resp.next_page

    def find_open_pull_requests_by_commit_association(self, owner: str, repo: str, sha: str) -> List[PullRequest]:
        """Open pull requests whose head is sha, via the commit association
        listing.

        State and head SHA are checked again here: the listing also returns
        closed PRs and PRs that only contain the commit in their history.
        """

        def keep(pr: PullRequest) -> bool:
            if pr.state == "open" and pr.head.sha == sha:
                self._log.debug("Found open pull request with head SHA %s", pr.head.sha)
                return True
            return False

        return self._collect(
            "commit_association",
            owner,
            repo,
            lambda page: self._client.list_pull_requests_with_commit(
                owner, repo, sha, page=page, per_page=PER_PAGE
            ),
            keep,
        )

    def find_open_pull_requests_by_sha_scan(self, owner: str, repo: str, sha: str) -> List[PullRequest]:
        """Open pull requests whose head is sha, by scanning all open PRs.

        The open state is filtered by the server and not checked again.
        """

        def keep(pr: PullRequest) -> bool:
            if pr.head.sha == sha:
                self._log.debug("Found open pull request with head SHA %s", pr.head.sha)
                return True
            return False

        return self._collect(
            "sha_scan",
            owner,
            repo,
            lambda page: self._client.list_pull_requests(
                owner, repo, state="open", page=page, per_page=PER_PAGE
            ),
            keep,
        )

    def find_open_pull_requests_for_sha(self, owner: str, repo: str, sha: str) -> List[PullRequest]:
        """Open pull requests whose head is sha.

        Tries the commit association listing first and scans all open PRs
        only when it finds nothing. Results are never merged.
        """
        try:
            prs = self.find_open_pull_requests_by_commit_association(owner, repo, sha)
        except PullRequestLookupError as e:
            raise PullRequestLookupError("for_sha", owner, repo, e) from e
        if prs:
            return prs

        self._log.debug("No pull requests found via commit association, searching all pull requests by SHA")
        try:
            return self.find_open_pull_requests_by_sha_scan(owner, repo, sha)
        except PullRequestLookupError as e:
            raise PullRequestLookupError("for_sha", owner, repo, e) from e

    def find_open_pull_requests_for_ref(self, owner: str, repo: str, ref: str) -> List[PullRequest]:
        """Open pull requests targeting ref (branch name or refs/heads/ path)."""
        base = normalize_ref(ref)

        def keep(pr: PullRequest) -> bool:
            self._log.debug("Found open pull request with base ref %s", pr.base.ref)
            return True

        return self._collect(
            "for_ref",
            owner,
            repo,
            lambda page: self._client.list_pull_requests(
                owner, repo, state="open", base=base, page=page, per_page=PER_PAGE
            ),
            keep,
        )
