"""Test configuration and fixtures."""

import logging
import os
from collections.abc import Generator

import pytest

# Set environment variables immediately when this module is imported
# This ensures they're available before any other modules try to load Settings
test_env_vars = {
    "GITHUB_TOKEN": "test_github_token_123",
    "GITHUB_API_BASE_URL": "https://api.github.com",
    "USER_AGENT": "pr-comment-analyzer-test/1.0.0",
    "PAGE_SIZE": "100",
    "MAX_PAGES": "50",
    "REQUEST_TIMEOUT": "5",
    "MAX_WORKERS": "4",
    "LOG_LEVEL": "WARNING",
}

for key, value in test_env_vars.items():
    os.environ[key] = value

API = "https://api.github.com"


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment() -> Generator[None, None, None]:
    """Set up test environment variables."""
    yield

    for key in test_env_vars:
        os.environ.pop(key, None)


@pytest.fixture
def comment_factory():
    """Build minimal GitHub comment payloads."""

    def _make(login: str | None, comment_id: int = 1) -> dict:
        if login is None:
            return {"id": comment_id, "body": "ghost comment", "user": None}
        return {"id": comment_id, "body": f"comment by {login}", "user": {"login": login}}

    return _make


@pytest.fixture(autouse=True)
def reset_package_logger() -> Generator[None, None, None]:
    """Drop handlers installed by ``main`` so each test starts clean."""
    yield

    logger = logging.getLogger("pr_comment_analyzer")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def fresh_settings() -> Generator[None, None, None]:
    """Rebuild settings from the (patched) environment for one test."""
    from pr_comment_analyzer.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
