"""Pydantic Settings model for application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from changelog_renderer.configuration.models import AggregationPolicy, MissingIssuePolicy
from changelog_renderer.utils.constants import DEFAULT_CATEGORIES, DEFAULT_UNRELEASED_NAME


class Settings(BaseSettings):
    """Environment variable settings for the application."""

    model_config = SettingsConfigDict(
        env_prefix="CHANGELOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Classification settings
    CATEGORIES: list[str] = list(DEFAULT_CATEGORIES)
    SCOPE_PREFIX: str | None = None
    GROUP_BY_PACKAGE: bool = False

    # Link settings
    BASE_ISSUE_URL: str | None = None
    REPO_URL: str | None = None

    # Output settings
    UNRELEASED_NAME: str = DEFAULT_UNRELEASED_NAME
    ON_MISSING_ISSUE: MissingIssuePolicy = MissingIssuePolicy.DROP
    AGGREGATION: AggregationPolicy = AggregationPolicy.SINGLE_DOCUMENT
    PRINT_WIDTH: int | None = None
    IGNORE_COMMITTERS: list[str] = []


settings = Settings()
