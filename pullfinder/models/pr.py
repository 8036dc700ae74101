"""Pull request (or merge request) model."""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class PullRequestRef(BaseModel):
    """Branch end of a pull request (head or base)."""

    model_config = ConfigDict(extra="allow")

    ref: str = ""
    sha: str = ""
    label: str | None = None


class PullRequest(BaseModel):
    """Pull request as returned by the hosting API.

    Only state, head.sha and base.ref are read by the finder; all other
    fields from the API are kept as extras.
    """

    model_config = ConfigDict(extra="allow")

    number: int
    state: str = "open"
    title: str = ""
    html_url: str | None = None
    head: PullRequestRef = Field(default_factory=PullRequestRef)
    base: PullRequestRef = Field(default_factory=PullRequestRef)

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "PullRequest":
        """Build from a REST API pull request object."""
        data = dict(data)
        data["head"] = data.get("head") or {}
        data["base"] = data.get("base") or {}
        data["title"] = data.get("title") or ""
        return cls.model_validate(data)
