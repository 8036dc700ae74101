"""One page of a paginated pull request listing."""

from typing import List

from pydantic import BaseModel, Field

from pullfinder.models.pr import PullRequest

# Page size requested from the API on every call
PER_PAGE = 100


class PullRequestPage(BaseModel):
    """Pull requests from one response plus the next page number (0 = last page)."""

    items: List[PullRequest] = Field(default_factory=list)
    next_page: int = 0
