"""Errors raised while analyzing pull request comments."""

from typing import Optional


class PRCommentAnalyzerError(Exception):
    """Base class for every error the analyzer reports to the user."""


class AuthenticationFailed(PRCommentAnalyzerError):
    """The authenticated user could not be resolved from ``/user``."""


class RepositoryResolutionFailed(PRCommentAnalyzerError):
    """No usable ``owner/repo`` pair could be determined."""


class InvalidTargetFormat(PRCommentAnalyzerError):
    """A pull request number or URL could not be parsed."""

    def __init__(self, value: str, reason: str = "Invalid pull request target") -> None:
        self.value = value
        super().__init__(f"{reason}: {value}")


class RemoteRequestFailed(PRCommentAnalyzerError):
    """A GitHub API request failed or returned a non-2xx status."""

    def __init__(self, status: Optional[int], url: str, detail: Optional[str] = None) -> None:
        self.status = status
        self.url = url
        if status is None:
            message = f"API request to {url} failed"
        else:
            message = f"API request to {url} failed with status {status}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class MalformedResponseBody(PRCommentAnalyzerError):
    """A response body was not the expected JSON array of records."""

    def __init__(self, url: str, detail: str) -> None:
        self.url = url
        super().__init__(f"Malformed response body from {url}: {detail}")


class PaginationError(PRCommentAnalyzerError):
    """Pagination revisited a URL, left the API host or exceeded the page ceiling."""

    def __init__(self, url: str, detail: str) -> None:
        self.url = url
        super().__init__(f"Pagination aborted at {url}: {detail}")


class ConfigurationError(PRCommentAnalyzerError):
    """Settings from the environment or ``.env`` failed validation."""
