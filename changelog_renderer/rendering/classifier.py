"""Classification of release commits into categories and packages."""

from typing import Iterable, Sequence

import structlog

from ..schemas.release import Commit, Release
from ..utils.constants import OTHER_PACKAGES_LABEL
from ..utils.helpers import derive_release_scope
from .models import CategoryGroup

logger = structlog.get_logger(__name__)


def render_package_names(package_names: Sequence[str]) -> str:
    """Render the label of a package set, e.g. '`a`, `b`', or 'Other' when empty."""
    if not package_names:
        return OTHER_PACKAGES_LABEL
    return ", ".join(f"`{package}`" for package in package_names)


class CommitClassifier:
    """Partitions release commits into category groups and package groups."""

    def __init__(self, categories: Sequence[str], scope_prefix: str | None = None) -> None:
        """Initialize with the ordered category names and the organization prefix of release names."""
        self.categories = list(categories)
        self.scope_prefix = scope_prefix

    def commit_matches_category(self, commit: Commit, category: str, scope: str) -> bool:
        """Check whether a commit belongs to a category.

        A commit matches when it carries the category label explicitly, or when
        its message mentions the release scope and a conventional-commit marker
        like 'fix(' for the category.
        """
        if category in commit.categories:
            return True
        return scope in commit.message and f"{category}(" in commit.message

    def classify_by_category(self, release: Release, category_names: Sequence[str] | None = None) -> list[CategoryGroup]:
        """Group the commits of a release by category.

        One group is returned per category name, in the given order, including
        empty groups. A commit matching several categories appears in each of
        them. Without any category names the whole commit list forms one group.

        Args:
            release: The release whose commits are classified.
            category_names: Ordered category names; defaults to the configured ones.

        Returns:
            The category groups in section order.
        """
        names = self.categories if category_names is None else list(category_names)
        if not names:
            return [CategoryGroup(name=None, commits=list(release.commits))]

        scope = derive_release_scope(release.name, self.scope_prefix)
        groups = [
            CategoryGroup(
                name=name,
                commits=[commit for commit in release.commits if self.commit_matches_category(commit, name, scope)],
            )
            for name in names
        ]
        logger.debug(
            "Classified release commits",
            release=release.name,
            scope=scope,
            counts={group.name: len(group.commits) for group in groups},
        )
        return groups

    def group_by_package(self, commits: Iterable[Commit]) -> dict[str, list[Commit]]:
        """Group commits by the label of the packages they touch.

        Labels keep the order in which they are first encountered and commits
        keep their input order within a label.
        """
        commits_by_package: dict[str, list[Commit]] = {}
        for commit in commits:
            label = render_package_names(commit.packages)
            commits_by_package.setdefault(label, []).append(commit)
        return commits_by_package
