"""Unit tests for the release data schemas."""

import pytest
from pydantic import ValidationError

from changelog_renderer.schemas.release import Commit, Release


def test_commit_accepts_fetch_aliases() -> None:
    """Commits validate from the camelCase payload of the fetch step."""
    commit = Commit.model_validate(
        {
            "message": "fix(table): sorting",
            "commitSHA": "abc1234",
            "categories": None,
            "packages": ["table"],
            "githubIssue": {
                "title": "fix(table): sorting",
                "number": 7,
                "user": {"login": "bob", "html_url": "https://github.com/bob"},
                "pull_request": {"html_url": "https://github.com/org/repo/pull/7"},
            },
        }
    )
    assert commit.commit_sha == "abc1234"
    assert commit.categories == []
    assert commit.packages == ["table"]
    assert commit.github_issue is not None
    assert commit.github_issue.user.name is None
    assert commit.github_issue.pull_request is not None
    assert commit.github_issue.pull_request.html_url == "https://github.com/org/repo/pull/7"


def test_release_defaults_to_no_commits() -> None:
    """A release without commits has an empty commit list."""
    release = Release(name="pkg@1.0.0", date="2024-01-01")
    assert release.commits == []


def test_release_is_immutable() -> None:
    """Releases cannot be modified once built."""
    release = Release(name="pkg@1.0.0", date="2024-01-01")
    with pytest.raises(ValidationError):
        release.name = "pkg@2.0.0"  # type: ignore[misc]


def test_commit_requires_sha() -> None:
    """A commit without a SHA is invalid."""
    with pytest.raises(ValidationError):
        Commit.model_validate({"message": "feat: something"})
