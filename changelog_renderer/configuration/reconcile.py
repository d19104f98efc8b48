"""Reconciles renderer configuration between explicit arguments and environment variables."""

import structlog

from changelog_renderer.configuration.config import Settings, settings
from changelog_renderer.configuration.exceptions import InvalidConfigurationError, RequiredConfigurationElementError
from changelog_renderer.configuration.models import AggregationPolicy, MissingIssuePolicy, RendererConfig

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def validate_categories(categories: list[str]) -> list[str]:
    """Validates that category names are non-blank and unique.

    An empty list is allowed and means the whole commit list of a release is
    rendered as a single group.

    Raises:
        InvalidConfigurationError: If a category is blank or listed more than once.
    """
    seen: set[str] = set()
    for category in categories:
        if not category.strip():
            raise InvalidConfigurationError("Category names must not be blank")
        if category in seen:
            raise InvalidConfigurationError(f"Category '{category}' is configured more than once")
        seen.add(category)
    return list(categories)


def reconcile_renderer_configuration(
    base_issue_url: str | None = None,
    categories: list[str] | None = None,
    repo_url: str | None = None,
    unreleased_name: str | None = None,
    on_missing_issue: MissingIssuePolicy | str | None = None,
    aggregation: AggregationPolicy | str | None = None,
    scope_prefix: str | None = None,
    group_by_package: bool | None = None,
    print_width: int | None = None,
    ignore_committers: list[str] | None = None,
    environment: Settings | None = None,
) -> RendererConfig:
    """Reconciles explicit values with environment settings into a RendererConfig.

    Explicit (non-None) arguments take precedence over their CHANGELOG_*
    environment variable counterparts.

    Raises:
        RequiredConfigurationElementError: If the base issue URL is missing, or
            the repository URL is missing while the SHA fallback policy is selected.
        InvalidConfigurationError: If categories or the print width are unusable.

    Returns:
        RendererConfig: The resolved configuration.
    """
    if environment is None:
        environment = settings

    resolved_base_issue_url = base_issue_url if base_issue_url is not None else environment.BASE_ISSUE_URL
    if not resolved_base_issue_url:
        raise RequiredConfigurationElementError(
            name="Base issue URL",
            argument_name="base_issue_url",
            env_name="CHANGELOG_BASE_ISSUE_URL",
        )

    resolved_policy = MissingIssuePolicy(on_missing_issue if on_missing_issue is not None else environment.ON_MISSING_ISSUE)
    resolved_repo_url = repo_url if repo_url is not None else environment.REPO_URL
    if resolved_policy is MissingIssuePolicy.SHA_FALLBACK and not resolved_repo_url:
        raise RequiredConfigurationElementError(
            name="Repository URL",
            argument_name="repo_url",
            env_name="CHANGELOG_REPO_URL",
        )

    resolved_print_width = print_width if print_width is not None else environment.PRINT_WIDTH
    if resolved_print_width is not None and resolved_print_width <= 0:
        raise InvalidConfigurationError(f"Print width must be positive, got {resolved_print_width}")

    config = RendererConfig(
        base_issue_url=resolved_base_issue_url,
        categories=validate_categories(categories if categories is not None else environment.CATEGORIES),
        repo_url=resolved_repo_url,
        unreleased_name=unreleased_name if unreleased_name is not None else environment.UNRELEASED_NAME,
        on_missing_issue=resolved_policy,
        aggregation=AggregationPolicy(aggregation if aggregation is not None else environment.AGGREGATION),
        scope_prefix=scope_prefix if scope_prefix is not None else environment.SCOPE_PREFIX,
        group_by_package=group_by_package if group_by_package is not None else environment.GROUP_BY_PACKAGE,
        print_width=resolved_print_width,
        ignore_committers=list(ignore_committers if ignore_committers is not None else environment.IGNORE_COMMITTERS),
    )
    logger.debug(
        "Reconciled renderer configuration",
        categories=config.categories,
        on_missing_issue=config.on_missing_issue.value,
        aggregation=config.aggregation.value,
    )
    return config
