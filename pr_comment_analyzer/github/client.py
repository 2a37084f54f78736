"""GitHub API client for collecting pull request comments."""

from typing import Any, Optional
from urllib.parse import urljoin, urlsplit

import requests

from ..config import get_github_headers, get_settings
from ..exceptions import AuthenticationFailed, MalformedResponseBody, PaginationError, RemoteRequestFailed
from ..models import AuthenticatedUser, CommentCategory
from ..utils import get_logger
from .pagination import parse_next_link

logger = get_logger(__name__)


class GitHubAPIClient:
    """GitHub API client that follows Link header pagination.

    A single instance owns one ``requests.Session`` and is shared read-only
    by every worker thread of a run.
    """

    def __init__(
        self,
        access_token: str,
        base_url: Optional[str] = None,
        page_size: Optional[int] = None,
        max_pages: Optional[int] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialize GitHub API client.

        Args:
        ----
            access_token: GitHub personal access token for authentication
            base_url: API root, defaults to the configured GitHub API URL
            page_size: Items requested per page
            max_pages: Ceiling on pages fetched for one collection
            timeout: Per-request timeout in seconds, defaults to the configured timeout
            session: Pre-built session, mostly useful in tests

        """
        settings = get_settings()

        self.access_token = access_token
        self.base_url = (base_url or settings.github_api_base_url).rstrip("/") + "/"
        self.page_size = page_size or settings.page_size
        self.max_pages = max_pages or settings.max_pages
        self.timeout = timeout if timeout is not None else settings.request_timeout

        self.session = session or requests.Session()
        self.session.headers.update(get_github_headers(access_token))

    def _url(self, url: str) -> str:
        if url.startswith(("http://", "https://")):
            return url
        return urljoin(self.base_url, url.lstrip("/"))

    def _same_origin(self, url: str) -> bool:
        base, other = urlsplit(self.base_url), urlsplit(url)
        return (base.scheme, base.netloc) == (other.scheme, other.netloc)

    def _make_request(self, method: str, url: str, **kwargs: Any) -> requests.Response:  # noqa: ANN401
        """Make one HTTP request and fail on non-2xx responses.

        Args:
        ----
            method: HTTP method (GET, POST, etc.)
            url: Request URL or path relative to the API root
            **kwargs: Additional request parameters

        Returns:
        -------
            requests.Response: Response object

        Raises:
        ------
            RemoteRequestFailed: If the request fails or returns a non-2xx status

        """
        url = self._url(url)
        logger.debug("Making %s request to %s", method, url)

        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.warning("Request to %s failed: %s", url, e)
            raise RemoteRequestFailed(None, url, str(e)) from e

        if not response.ok:
            logger.debug("Request to %s returned %d", url, response.status_code)
            raise RemoteRequestFailed(response.status_code, url, response.reason)

        return response

    def get_authenticated_user(self) -> AuthenticatedUser:
        """Get the user that owns the access token.

        Raises
        ------
            AuthenticationFailed: If ``/user`` fails or has no login

        """
        try:
            response = self._make_request("GET", "/user")
        except RemoteRequestFailed as e:
            msg = f"Failed to get user info: {e}"
            raise AuthenticationFailed(msg) from e

        try:
            data = response.json()
        except ValueError as e:
            msg = "Unable to parse user info from API response"
            raise AuthenticationFailed(msg) from e

        user = AuthenticatedUser.from_github_data(data)
        if user is None:
            msg = "Unable to get user login from API response"
            raise AuthenticationFailed(msg)

        logger.info("Authenticated as %s", user.login)
        return user

    def get_paginated_results(self, url: str, params: Optional[dict] = None) -> list[dict]:
        """Get all results from a paginated endpoint.

        The first request carries ``per_page``; later requests follow the
        ``next`` URL from the Link header verbatim since it already holds the
        query string.

        Args:
        ----
            url: API endpoint URL
            params: Extra query parameters for the first request

        Returns:
        -------
            List of all results, in page order

        Raises:
        ------
            RemoteRequestFailed: On any non-2xx page, no partial results
            MalformedResponseBody: If a page is not a JSON array
            PaginationError: On a repeated URL, a foreign host or too many pages

        """
        all_results: list[Any] = []
        current_url: Optional[str] = self._url(url)
        request_params: Optional[dict] = dict(params or {})
        request_params["per_page"] = self.page_size
        visited: set[str] = set()
        pages = 0

        while current_url is not None:
            if pages >= self.max_pages:
                msg = f"exceeded {self.max_pages} pages"
                raise PaginationError(current_url, msg)

            response = self._make_request("GET", current_url, params=request_params)
            visited.update((current_url, response.url))
            pages += 1

            try:
                results = response.json()
            except ValueError as e:
                raise MalformedResponseBody(current_url, "body is not valid JSON") from e

            if not isinstance(results, list):
                raise MalformedResponseBody(current_url, f"expected a JSON array, got {type(results).__name__}")

            all_results.extend(results)

            next_url = parse_next_link(response.headers.get("Link"))
            if next_url is not None:
                next_url = self._url(next_url)
                # Next links must stay on the API host.
                if not self._same_origin(next_url):
                    raise PaginationError(next_url, f"next link leaves {self.base_url}")
                if next_url in visited:
                    raise PaginationError(next_url, "next link points to an already fetched page")

            current_url = next_url
            request_params = None

        logger.debug("Fetched %d items over %d pages from %s", len(all_results), pages, url)
        return all_results

    def get_pull_request_comments(self, owner: str, repo: str, pr_number: int) -> list[dict]:
        """Get review comments (diff line comments) for a pull request.

        Args:
        ----
            owner: Repository owner
            repo: Repository name
            pr_number: Pull request number

        Returns:
        -------
            List of review comment dictionaries

        """
        return self.get_comments(CommentCategory.REVIEW_COMMENTS, owner, repo, pr_number)

    def get_pull_request_reviews(self, owner: str, repo: str, pr_number: int) -> list[dict]:
        """Get review summaries for a pull request."""
        return self.get_comments(CommentCategory.REVIEWS, owner, repo, pr_number)

    def get_issue_comments(self, owner: str, repo: str, issue_number: int) -> list[dict]:
        """Get issue comments for a pull request (treated as issue)."""
        return self.get_comments(CommentCategory.ISSUE_COMMENTS, owner, repo, issue_number)

    def get_comments(self, category: CommentCategory, owner: str, repo: str, pr_number: int) -> list[dict]:
        """Get every comment of one category on a pull request."""
        return self.get_paginated_results(category.path(owner, repo, pr_number))

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "GitHubAPIClient":
        return self

    def __exit__(self, *_exc: object) -> None:
        self.close()
