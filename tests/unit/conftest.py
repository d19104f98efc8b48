"""Fixtures for unit tests."""

from typing import Any, Callable, Generator

import pytest
import structlog

from changelog_renderer.configuration.models import RendererConfig
from changelog_renderer.rendering.formatter import PassthroughFormatter
from changelog_renderer.rendering.markdown import MarkdownRenderer
from changelog_renderer.rendering.sinks import InMemoryDocumentSink
from changelog_renderer.schemas.release import Commit, GitHubUser, Issue, PullRequestRef

BASE_ISSUE_URL = "https://github.com/org/repo/issues/"
REPO_URL = "https://github.com/org/repo"


@pytest.fixture(autouse=True)
def configure_structlog_for_caplog() -> Generator[None, None, None]:
    """Configure structlog for use with caplog."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def make_commit() -> Callable[..., Commit]:
    """Return a factory building commits, optionally linked to an issue."""

    def _make_commit(
        message: str,
        sha: str = "0123456789abcdef",
        categories: list[str] | None = None,
        packages: list[str] | None = None,
        issue_title: str | None = None,
        login: str = "bob",
        number: int | None = None,
        pr_url: str | None = None,
        **issue_fields: Any,
    ) -> Commit:
        issue = None
        if issue_title is not None:
            issue = Issue(
                title=issue_title,
                number=number,
                user=GitHubUser(login=login, html_url=f"https://github.com/{login}", **issue_fields),
                pull_request=PullRequestRef(html_url=pr_url) if pr_url else None,
            )
        return Commit(
            message=message,
            commit_sha=sha,
            categories=categories or [],
            packages=packages or [],
            github_issue=issue,
        )

    return _make_commit


@pytest.fixture
def renderer_config() -> RendererConfig:
    """Renderer configuration with the default categories."""
    return RendererConfig(base_issue_url=BASE_ISSUE_URL, repo_url=REPO_URL)


@pytest.fixture
def document_sink() -> InMemoryDocumentSink:
    """In-memory sink capturing per-group documents."""
    return InMemoryDocumentSink()


@pytest.fixture
def renderer(renderer_config: RendererConfig, document_sink: InMemoryDocumentSink) -> MarkdownRenderer:
    """Renderer that leaves assembled markdown unformatted, for exact comparisons."""
    return MarkdownRenderer(renderer_config, formatter=PassthroughFormatter(), sink=document_sink)
