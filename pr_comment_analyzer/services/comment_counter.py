"""Counting the comments a user authored on pull requests."""

from collections.abc import Iterable, Sequence
from concurrent.futures import FIRST_EXCEPTION, Future, ThreadPoolExecutor, wait
from typing import Any, Optional

from ..github.client import GitHubAPIClient
from ..models import CommentCategory, PrCommentCounts, PullRequestTarget
from ..utils import get_logger

logger = get_logger(__name__)

DEFAULT_CATEGORIES = (
    CommentCategory.REVIEW_COMMENTS,
    CommentCategory.REVIEWS,
    CommentCategory.ISSUE_COMMENTS,
)


def count_by_author(records: Iterable[Any], login: str) -> int:
    """Count records whose ``user.login`` equals ``login`` exactly.

    Records without a ``user`` object or with a non-string login never match.
    """
    count = 0
    for record in records:
        if not isinstance(record, dict):
            continue
        user = record.get("user")
        if not isinstance(user, dict):
            continue
        author = user.get("login")
        if isinstance(author, str) and author == login:
            count += 1
    return count


def _wait_first_failure(futures: Sequence[Future]) -> list:
    """Wait for all futures, re-raising the first exception that completes.

    Futures that have not started yet are cancelled on failure; running ones
    finish in the background and their results are dropped.
    """
    pending = set(futures)
    while pending:
        done, pending = wait(pending, return_when=FIRST_EXCEPTION)
        for future in done:
            error = future.exception()
            if error is not None:
                for other in pending:
                    other.cancel()
                raise error
    return [future.result() for future in futures]


class CommentCounter:
    """Service counting a user's comments per pull request."""

    def __init__(
        self,
        github_client: GitHubAPIClient,
        categories: Optional[Sequence[CommentCategory]] = None,
        max_workers: int = 8,
    ) -> None:
        """Initialize comment counter.

        Args:
        ----
            github_client: Shared API client used by every worker
            categories: Comment categories to fetch, all of them by default
            max_workers: Upper bound on concurrent pull requests

        """
        self.github_client = github_client
        self.categories = tuple(categories) if categories else DEFAULT_CATEGORIES
        self.max_workers = max_workers

    def _count_category(self, category: CommentCategory, target: PullRequestTarget, login: str) -> int:
        records = self.github_client.get_comments(category, target.owner, target.repo, target.number)
        count = count_by_author(records, login)
        logger.debug("%s#%d %s: %d of %d by %s", target.slug, target.number, category.value, count, len(records), login)
        return count

    def count_pull_request(self, target: PullRequestTarget, login: str) -> PrCommentCounts:
        """Count ``login``'s comments on one pull request.

        Categories are fetched concurrently. Any category failure fails the
        whole pull request.
        """
        logger.info("Counting comments on %s", target.html_url)

        with ThreadPoolExecutor(max_workers=len(self.categories)) as executor:
            futures = [
                executor.submit(self._count_category, category, target, login)
                for category in self.categories
            ]
            counts = _wait_first_failure(futures)

        return PrCommentCounts(target=target, counts=dict(zip(self.categories, counts)))

    def count_pull_requests(self, targets: Sequence[PullRequestTarget], login: str) -> list[PrCommentCounts]:
        """Count comments on every target concurrently, one task per pull request.

        Results are returned in the order of ``targets``. The first failing
        pull request aborts the whole run.
        """
        if not targets:
            return []

        logger.info("Counting comments by %s on %d pull requests", login, len(targets))

        with ThreadPoolExecutor(max_workers=min(self.max_workers, len(targets))) as executor:
            futures = [executor.submit(self.count_pull_request, target, login) for target in targets]
            return _wait_first_failure(futures)
