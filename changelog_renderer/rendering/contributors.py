"""Rendering of the contributors credited in a changelog."""

from typing import Iterable, Sequence

import structlog

from ..schemas.release import Commit, GitHubUser

logger = structlog.get_logger(__name__)


def render_contributor(contributor: GitHubUser) -> str:
    """Render a contributor as 'Name ([@login](url))', or '[@login](url)' without a display name."""
    user_name_and_link = f"[@{contributor.login}]({contributor.html_url})"
    if contributor.name:
        return f"{contributor.name} ({user_name_and_link})"
    return user_name_and_link


def contributor_sort_key(contributor: GitHubUser) -> str:
    """Key contributors are listed by: their display name, falling back to the login."""
    return contributor.name or contributor.login


def render_contributor_list(contributors: Sequence[GitHubUser]) -> str:
    """Render a '#### Committers: N' heading followed by one list item per contributor."""
    rendered_contributors = [f"- {render_contributor(contributor)}" for contributor in sorted(contributors, key=contributor_sort_key)]
    return "\n".join([f"#### Committers: {len(contributors)}", *rendered_contributors])


def is_ignored_committer(login: str, ignore_committers: Iterable[str]) -> bool:
    """Check whether a login equals or contains any of the ignored committer names (e.g. "[bot]")."""
    return any(ignored in login for ignored in ignore_committers)


def collect_contributors(commits: Iterable[Commit], ignore_committers: Sequence[str] = ()) -> list[GitHubUser]:
    """Collect the unique authors of the issues linked to commits, in first-seen order."""
    contributors: dict[str, GitHubUser] = {}
    for commit in commits:
        if commit.github_issue is None:
            continue
        user = commit.github_issue.user
        if user.login in contributors:
            continue
        if is_ignored_committer(user.login, ignore_committers):
            logger.debug("Ignoring committer", login=user.login)
            continue
        contributors[user.login] = user
    return list(contributors.values())
