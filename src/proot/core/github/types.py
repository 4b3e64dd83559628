"""Type definitions for pull request data returned by the gh CLI."""

from typing import NamedTuple, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator


class HeadRepositoryOwner(BaseModel):
    """Account owning the repository a PR's head branch lives in."""

    model_config = ConfigDict(strict=True, frozen=True)

    login: str


class PullRequest(BaseModel):
    """A pull request record as emitted by `gh pr list --json ...`.

    Field aliases match the gh JSON field names. Unknown fields are ignored.

    Attributes:
        id: Stable GraphQL node identifier
        number: PR number shown to users
        title: PR title, None when absent or null (distinct from "")
        url: Web URL of the PR
        state: "OPEN", "CLOSED" or "MERGED", kept as an opaque string
        is_cross_repository: True when the head branch lives in a fork
        base_ref_name: Branch the PR targets
        head_ref_name: Branch containing the changes
        head_repository_owner: Owner of the head repository. Required when
            is_cross_repository is True, optional otherwise.
    """

    model_config = ConfigDict(strict=True, frozen=True, populate_by_name=True)

    id: str
    number: int = Field(ge=0)
    title: str | None = None
    url: str
    state: str
    is_cross_repository: bool = Field(alias="isCrossRepository")
    base_ref_name: str = Field(alias="baseRefName")
    head_ref_name: str = Field(alias="headRefName")
    head_repository_owner: HeadRepositoryOwner | None = Field(
        default=None, alias="headRepositoryOwner"
    )

    @model_validator(mode="after")
    def validate_cross_repository_owner(self) -> Self:
        """Cross-repository PRs must carry the fork owner's login."""
        if self.is_cross_repository and self.head_repository_owner is None:
            msg = "headRepositoryOwner.login is required when isCrossRepository is true"
            raise ValueError(msg)
        return self

    @property
    def effective_head_ref_name(self) -> str:
        """Head branch name qualified with the fork owner for cross-repository PRs."""
        if self.is_cross_repository and self.head_repository_owner is not None:
            return f"{self.head_repository_owner.login}/{self.head_ref_name}"
        return self.head_ref_name


class EdgeKey(NamedTuple):
    """Identifies one edge of the PR graph: a head branch stacked on a base branch."""

    head: str
    base: str
