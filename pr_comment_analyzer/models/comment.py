"""Comment categories and per pull request counts."""

from dataclasses import dataclass, field
from enum import Enum

from .target import PullRequestTarget


class CommentCategory(str, Enum):
    """Kinds of comment a pull request can carry on GitHub."""

    REVIEW_COMMENTS = "review_comments"
    REVIEWS = "reviews"
    ISSUE_COMMENTS = "issue_comments"

    @property
    def label(self) -> str:
        """Human readable name used in reports."""
        return {
            CommentCategory.REVIEW_COMMENTS: "PR review comments",
            CommentCategory.REVIEWS: "PR reviews",
            CommentCategory.ISSUE_COMMENTS: "Issue comments",
        }[self]

    def path(self, owner: str, repo: str, number: int) -> str:
        """REST API path listing this category for a pull request."""
        if self is CommentCategory.ISSUE_COMMENTS:
            return f"/repos/{owner}/{repo}/issues/{number}/comments"
        if self is CommentCategory.REVIEWS:
            return f"/repos/{owner}/{repo}/pulls/{number}/reviews"
        return f"/repos/{owner}/{repo}/pulls/{number}/comments"

    @classmethod
    def parse_many(cls, values: list[str]) -> list["CommentCategory"]:
        """Convert names to categories, keeping order and dropping repeats.

        Raises
        ------
            ValueError: If a name is not a known category

        """
        categories: list[CommentCategory] = []
        for value in values:
            category = cls(value.strip().lower())
            if category not in categories:
                categories.append(category)
        return categories


@dataclass
class PrCommentCounts:
    """Comments authored by one user on a single pull request."""

    target: PullRequestTarget
    counts: dict[CommentCategory, int] = field(default_factory=dict)

    @property
    def pr_number(self) -> int:
        return self.target.number

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    def to_dict(self) -> dict:
        """Convert counts to dictionary."""
        return {
            "owner": self.target.owner,
            "repo": self.target.repo,
            "pr_number": self.target.number,
            "counts": {category.value: count for category, count in self.counts.items()},
            "total": self.total,
        }
