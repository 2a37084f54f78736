"""
Application configuration management
"""

import json
from functools import lru_cache
from typing import Annotated, Any, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict, SettingsError

from .exceptions import ConfigurationError


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_parse_none_str="none",
    )

    # GitHub API Configuration
    github_token: Optional[str] = Field(None)
    github_api_base_url: str = Field("https://api.github.com")
    user_agent: str = Field("pr-comment-analyzer/1.0.0")

    # Pagination Configuration
    page_size: int = Field(100, ge=1, le=100)
    max_pages: int = Field(10000, ge=1)
    request_timeout: Optional[float] = Field(30.0)

    # Comment Collection Configuration
    max_workers: int = Field(8, ge=1)
    comment_categories: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["review_comments", "reviews", "issue_comments"],
    )

    # Logging Configuration
    log_level: str = Field("WARNING")
    log_format: str = Field("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    @field_validator("comment_categories", mode="before")
    @classmethod
    def split_categories(cls, value: Any) -> Any:  # noqa: ANN401
        """Accept ``reviews,issue_comments`` as well as a JSON list."""
        if not isinstance(value, str):
            return value
        text = value.strip()
        if text.startswith("["):
            return json.loads(text)
        return [part.strip() for part in text.split(",") if part.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance

    Raises
    ------
        ConfigurationError: If the environment or ``.env`` holds invalid values

    """
    try:
        return Settings()
    except (ValidationError, SettingsError) as e:
        msg = f"Invalid configuration: {e}"
        raise ConfigurationError(msg) from e


def get_github_headers(token: str) -> dict:
    """Get GitHub API headers with authentication"""
    settings = get_settings()
    return {
        "Authorization": f"token {token}",
        "Accept": "application/vnd.github.v3+json",
        "User-Agent": settings.user_agent,
    }
