"""GitHub API adapter."""

from typing import Any, Dict
from urllib.parse import parse_qs, urlparse

import requests
from requests.utils import parse_header_links

from pullfinder.adapters.base import GitPlatformError, PullRequestSource
from pullfinder.models import PER_PAGE, PullRequest, PullRequestPage


def _next_page_from_link(link_header: str | None) -> int:
    """Return the page number of the rel="next" link, or 0 when there is
    none."""
    if not link_header:
        return 0
    for link in parse_header_links(link_header):
        if link.get("rel") != "next":
            continue
        values = parse_qs(urlparse(link.get("url", "")).query).get("page")
        if not values:
            return 0
        try:
            return int(values[0])
        except ValueError:
            return 0
    return 0


def _page_from_response(resp: requests.Response) -> PullRequestPage:
    try:
        data = resp.json()
    except ValueError as e:
        raise GitPlatformError(f"Unexpected response: body is not JSON: {e}") from e
    if not isinstance(data, list):
        raise GitPlatformError(f"Unexpected response: expected a list of pull requests, got {type(data).__name__}")
    # pydantic ValidationError is a ValueError; TypeError for non-object entries
    try:
        items = [PullRequest.from_api(d) for d in data]
    except (TypeError, ValueError) as e:
        raise GitPlatformError(f"Unexpected response: invalid pull request: {e}") from e
    return PullRequestPage(
        items=items,
        next_page=_next_page_from_link(resp.headers.get("Link")),
    )


class GitHubAdapter(PullRequestSource):
    """GitHub REST API implementation."""

    def __init__(self, token: str | None = None, api_url: str = "https://api.github.com", timeout: int = 30) -> None:
        self._api_url = api_url.rstrip("/")
        self._timeout = timeout
        self._session = requests.Session()
        if token:
            self._session.headers["Authorization"] = f"token {token}"
        self._session.headers["Accept"] = "application/vnd.github.v3+json"

    def _request(
        self,
        method: str,
        path: str,
        params: Dict[str, Any] | None = None,
    ) -> requests.Response:
        url = f"{self._api_url}{path}" if path.startswith("/") else f"{self._api_url}/{path}"
        try:
            resp = self._session.request(method, url, params=params, timeout=self._timeout)
        except requests.RequestException as e:
            raise GitPlatformError(f"{method} {path}: {e}") from e
        if resp.status_code >= 400:
            msg = resp.text or resp.reason or str(resp.status_code)
            try:
                msg = resp.json().get("message", msg)
            except Exception:
                pass
            raise GitPlatformError(f"{resp.status_code}: {msg}")
        return resp

    def list_pull_requests_with_commit(
        self,
        owner: str,
        repo: str,
        sha: str,
        page: int | None = None,
        per_page: int = PER_PAGE,
    ) -> PullRequestPage:
        params: Dict[str, Any] = {"per_page": per_page}
        if page:
            params["page"] = page
        resp = self._request("GET", f"/repos/{owner}/{repo}/commits/{sha}/pulls", params=params)
        return _page_from_response(resp)

    def list_pull_requests(
        self,
        owner: str,
        repo: str,
        state: str | None = None,
        base: str | None = None,
        page: int | None = None,
        per_page: int = PER_PAGE,
    ) -> PullRequestPage:
        params: Dict[str, Any] = {"per_page": per_page}
        if state:
            params["state"] = state
        if base:
            params["base"] = base
        if page:
            params["page"] = page
        resp = self._request("GET", f"/repos/{owner}/{repo}/pulls", params=params)
        return _page_from_response(resp)
