"""Application settings using Pydantic Settings for environment variable management."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env.local",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    # GitHub Configuration
    # Note: GitHub Actions doesn't allow env var names starting with GITHUB_
    # so the token is read from GH_TOKEN
    github_token: str | None = Field(
        default=None,
        validation_alias="GH_TOKEN",
        description="GitHub token used to read pull requests and reviews",
    )
    github_base_url: str = Field(
        default="https://api.github.com",
        validation_alias="GH_BASE_URL",
        description="GitHub API base URL (override for GitHub Enterprise)",
    )
    github_timeout: int = Field(
        default=15,
        gt=0,
        description="Timeout in seconds for each GitHub API request",
    )
    github_per_page: int = Field(
        default=100,
        ge=1,
        le=100,
        description="Page size used when listing pull request reviews",
    )

    # Gate Policy
    draft_check_enabled: bool = Field(
        default=False,
        description="Exclude draft pull requests (off until draft data is reliable)",
    )
    lgtm_counts_as_approval: bool = Field(
        default=True,
        description="Treat a review body containing 'lgtm' as an approval",
    )

    # Observability
    logfire_token: str | None = Field(
        default=None, description="Pydantic Logfire token for observability"
    )

    # Application Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    environment: Literal["development", "staging", "production"] = Field(
        default="development", description="Application environment"
    )

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loaded on first use.

    Nothing is read from the environment at import time, so the gate can be
    imported by hosts that bring their own fetcher and configuration.
    """
    return Settings()
