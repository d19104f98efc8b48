"""Markdown rendering of releases, commits and per-group changelog documents."""

import re
from typing import Iterable, Sequence

import structlog

from ..configuration.exceptions import RequiredConfigurationElementError
from ..configuration.models import AggregationPolicy, MissingIssuePolicy, RendererConfig
from ..schemas.release import Commit, Issue, Release
from ..utils.constants import (
    BREAKING_CHANGE_MARKER,
    BUG_MARKER,
    CHANGELOG_DOCUMENT_SUFFIX,
    CHANGELOG_DOCUMENT_TEMPLATE,
    ISSUE_CLOSING_PATTERN,
    RELEASE_CHORE_MARKER,
    SHORT_SHA_LENGTH,
    UNRELEASED_TAG,
)
from ..utils.helpers import derive_release_scope
from ..utils.templates import construct_packaged_template, render_template_with_context
from .classifier import CommitClassifier
from .contributors import collect_contributors, render_contributor_list
from .formatter import MarkdownFormatter, MdformatFormatter
from .models import CategoryGroup
from .sinks import DocumentSink, FileSystemDocumentSink

logger = structlog.get_logger(__name__)


def add_category_marker(line: str) -> str:
    """Put a marker emoji in front of conventional-commit 'feat(' and 'fix(' list items."""
    if line.startswith("- feat("):
        return f"- {BREAKING_CHANGE_MARKER} {line[2:]}"
    if line.startswith("- fix("):
        return f"- {BUG_MARKER} {line[2:]}"
    return line


class MarkdownRenderer:
    """Renders releases into markdown changelogs.

    The renderer classifies the commits of each release, formats every commit
    as a list item and runs each assembled document through the markdown
    formatter. Commits, releases and groups that produce no content are left
    out instead of failing the render; only formatter failures propagate.
    """

    def __init__(
        self,
        config: RendererConfig,
        formatter: MarkdownFormatter | None = None,
        sink: DocumentSink | None = None,
        classifier: CommitClassifier | None = None,
    ) -> None:
        """Initialize with configuration and optional collaborators.

        Args:
            config: Resolved renderer configuration
            formatter: Final formatting pass; defaults to mdformat with the configured print width
            sink: Destination of per-group documents; defaults to files in the current directory
            classifier: Commit classifier; defaults to one built from the configured categories
        """
        if config.on_missing_issue is MissingIssuePolicy.SHA_FALLBACK and not config.repo_url:
            raise RequiredConfigurationElementError(
                name="Repository URL",
                argument_name="repo_url",
                env_name="CHANGELOG_REPO_URL",
            )
        self.config = config
        self.formatter = formatter if formatter is not None else MdformatFormatter(print_width=config.print_width)
        self.sink = sink if sink is not None else FileSystemDocumentSink()
        self.classifier = classifier if classifier is not None else CommitClassifier(config.categories, config.scope_prefix)

    def release_key(self, release: Release) -> str:
        """Key releases are sorted and grouped by."""
        return derive_release_scope(release.name, self.config.scope_prefix)

    def release_title(self, release: Release) -> str:
        """Heading text of a release, with the unreleased bucket shown under its display name."""
        return self.config.unreleased_name if release.name == UNRELEASED_TAG else release.name

    def rewrite_issue_closing_reference(self, title: str) -> str:
        """Replace the first 'Fixes #42'-style reference in a title with a link to the closed issue."""

        def closes_link(match: re.Match[str]) -> str:
            issue_id = match.group(3)
            return f"Closes [#{issue_id}]({self.config.base_issue_url}{issue_id})"

        return ISSUE_CLOSING_PATTERN.sub(closes_link, title, count=1)

    def prepare_issue(self, issue: Issue) -> Issue:
        """Return a copy of the issue whose title carries the rewritten closing reference."""
        title = self.rewrite_issue_closing_reference(issue.title)
        if title == issue.title:
            return issue
        return issue.model_copy(update={"title": title})

    def render_commit_link(self, commit: Commit) -> str | None:
        """Render a commit without a linked issue according to the missing-issue policy."""
        if self.config.on_missing_issue is MissingIssuePolicy.DROP:
            logger.debug("Dropping commit without linked issue", sha=commit.commit_sha)
            return None
        if RELEASE_CHORE_MARKER in commit.message:
            logger.debug("Dropping release chore commit", sha=commit.commit_sha)
            return None

        lines = commit.message.strip().splitlines()
        subject = lines[0].strip() if lines else ""
        repo_url = self.config.repo_url or ""
        commit_url = f"{repo_url.rstrip('/')}/commit/{commit.commit_sha}"
        return f"- {subject} ([{commit.commit_sha[:SHORT_SHA_LENGTH]}]({commit_url}))"

    def render_contribution(self, commit: Commit) -> str | None:
        """Render one commit as a markdown list item.

        Commits with a linked issue render the issue title (closing reference
        rewritten first), the pull request link and the issue author. Other
        commits follow the missing-issue policy.

        Returns:
            The list item, or None when the commit is not rendered.
        """
        if commit.github_issue is None:
            return self.render_commit_link(commit)

        issue = self.prepare_issue(commit.github_issue)
        markdown = add_category_marker(f"- {issue.title}")

        if issue.number and issue.pull_request and issue.pull_request.html_url:
            markdown += f"  [#{issue.number}]({issue.pull_request.html_url}) "
        markdown += f" [@{issue.user.login}]({issue.user.html_url})"
        return markdown if markdown.strip() else None

    def render_contribution_list(self, commits: Iterable[Commit], line_prefix: str = "") -> str:
        """Render commits as list items, skipping commits that render to nothing."""
        rendered = (self.render_contribution(commit) for commit in commits)
        return "\n".join(f"{line_prefix}{line}" for line in rendered if line and line.strip())

    def render_contributions_by_package(self, commits: Iterable[Commit]) -> str:
        """Render commits as a nested list under one item per package label."""
        sections = []
        for package_label, package_commits in self.classifier.group_by_package(commits).items():
            contribution_list = self.render_contribution_list(package_commits, "  ")
            if not contribution_list:
                continue
            sections.append(f"- {package_label}\n{contribution_list}")
        return "\n\n".join(sections)

    def render_category_group(self, group: CategoryGroup) -> str:
        """Render the commits of one category section."""
        if self.config.group_by_package:
            return self.render_contributions_by_package(group.commits)
        return self.render_contribution_list(group.commits)

    def render_release(self, release: Release) -> str:
        """Render a release as a formatted markdown section.

        Returns:
            The formatted markdown, or an empty string when no commit of the
            release renders into any category.

        Raises:
            MarkdownFormattingError: If the formatter rejects the assembled markdown.
        """
        groups = [group for group in self.classifier.classify_by_category(release) if group]
        sections = [section for section in (self.render_category_group(group) for group in groups) if section]
        if not sections:
            logger.debug("Skipping release without rendered commits", release=release.name, commits=len(release.commits))
            return ""

        markdown = f"## {self.release_title(release)}\n"
        markdown += "\n"
        markdown += f"`{release.date}`\n"
        for section in sections:
            markdown += "\n"
            markdown += f"{section}\n"

        return self.formatter.format(markdown, parser="markdown")

    def render_markdown(self, releases: Sequence[Release]) -> str:
        """Render releases according to the configured aggregation policy.

        With the single-document policy, releases are sorted by release key and
        joined into one document. With the per-group policy, documents are
        handed to the sink and an empty string is returned.
        """
        if self.config.aggregation is AggregationPolicy.PER_GROUP:
            self.render_group_documents(releases)
            return ""

        ordered_releases = sorted(releases, key=self.release_key)
        documents = [document for document in (self.render_release(release) for release in ordered_releases) if document]
        output = "\n\n\n".join(documents)
        return f"\n{output}" if output else ""

    def render_group_documents(self, releases: Sequence[Release], sink: DocumentSink | None = None) -> dict[str, str]:
        """Render one changelog document per release group and hand each to the sink.

        Releases are grouped by release key in first-seen order. Each document is
        wrapped in the changelog document template and formatted before being
        written as '<group key>.changelog.md'.

        Args:
            releases: Releases to render
            sink: Destination of the documents; defaults to the renderer's sink

        Returns:
            Mapping of document names to the documents written
        """
        if sink is None:
            sink = self.sink

        releases_by_group: dict[str, list[Release]] = {}
        for release in releases:
            releases_by_group.setdefault(self.release_key(release), []).append(release)

        template = construct_packaged_template(CHANGELOG_DOCUMENT_TEMPLATE)
        documents: dict[str, str] = {}
        for group_key, group_releases in releases_by_group.items():
            if not group_key:
                logger.warning("Skipping releases without a group key", releases=[release.name for release in group_releases])
                continue

            rendered_releases = [document.strip() for document in (self.render_release(release) for release in group_releases) if document]
            if not rendered_releases:
                logger.debug("Skipping group without rendered releases", group=group_key, releases=len(group_releases))
                continue

            group_title = self.config.unreleased_name if group_key == UNRELEASED_TAG else group_key
            markdown = render_template_with_context(
                template,
                group_key=group_key,
                group_title=group_title,
                body="\n\n".join(rendered_releases),
            )
            document = self.formatter.format(markdown, parser="markdown")
            document_name = f"{group_key}{CHANGELOG_DOCUMENT_SUFFIX}"
            sink.write(document_name, document)
            documents[document_name] = document

        logger.info("Rendered changelog documents", documents=list(documents))
        return documents

    def render_committers(self, releases: Sequence[Release]) -> str:
        """Render the committer list for the issue authors credited in the releases."""
        commits = (commit for release in releases for commit in release.commits)
        contributors = collect_contributors(commits, self.config.ignore_committers)
        return render_contributor_list(contributors)
