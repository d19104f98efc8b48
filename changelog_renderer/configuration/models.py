"""Models for the configuration consumed by the changelog renderer."""

from dataclasses import dataclass, field
from enum import Enum

from changelog_renderer.utils.constants import DEFAULT_CATEGORIES, DEFAULT_UNRELEASED_NAME


class MissingIssuePolicy(str, Enum):
    """What to do with commits that have no linked issue."""

    DROP = "drop"
    SHA_FALLBACK = "sha_fallback"


class AggregationPolicy(str, Enum):
    """How a list of releases is turned into documents."""

    SINGLE_DOCUMENT = "single_document"
    PER_GROUP = "per_group"


@dataclass
class RendererConfig:
    """Configuration class for the markdown renderer."""

    base_issue_url: str
    categories: list[str] = field(default_factory=lambda: list(DEFAULT_CATEGORIES))
    repo_url: str | None = None
    unreleased_name: str = DEFAULT_UNRELEASED_NAME
    on_missing_issue: MissingIssuePolicy = MissingIssuePolicy.DROP
    aggregation: AggregationPolicy = AggregationPolicy.SINGLE_DOCUMENT
    scope_prefix: str | None = None
    group_by_package: bool = False
    print_width: int | None = None
    ignore_committers: list[str] = field(default_factory=list)
