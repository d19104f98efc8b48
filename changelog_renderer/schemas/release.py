"""Pydantic schema for the release and commit data handed to the renderer."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FrozenModel(BaseModel):
    """Base model for immutable input data accepting both field names and aliases."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class GitHubUser(FrozenModel):
    """Pydantic model for a GitHub user credited on an issue or pull request."""

    login: str
    html_url: str
    name: str | None = None


class PullRequestRef(FrozenModel):
    """Pydantic model for the pull request reference attached to an issue."""

    html_url: str | None = None


class Issue(FrozenModel):
    """Pydantic model for a GitHub issue (or pull request) linked to a commit."""

    title: str
    number: int | None = None
    user: GitHubUser
    pull_request: PullRequestRef | None = None


class Commit(FrozenModel):
    """Pydantic model for a commit included in a release."""

    message: str
    commit_sha: str = Field(alias="commitSHA")
    categories: list[str] = Field(default_factory=list)
    packages: list[str] = Field(default_factory=list)
    github_issue: Issue | None = Field(default=None, alias="githubIssue")

    @field_validator("categories", "packages", mode="before")
    @classmethod
    def none_as_empty(cls, value: Any) -> Any:
        """Treat a missing label or package list as empty."""
        return [] if value is None else value


class Release(FrozenModel):
    """Pydantic model for one package version (or the unreleased bucket) and its commits."""

    name: str
    date: str
    commits: list[Commit] = Field(default_factory=list)
