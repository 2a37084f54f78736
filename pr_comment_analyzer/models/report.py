"""Final report model."""

from dataclasses import dataclass, field
from typing import Optional

from .comment import PrCommentCounts


@dataclass(frozen=True)
class Report:
    """Totals and the minutes-per-comment ratio for one run."""

    login: str
    pr_counts: list[PrCommentCounts] = field(default_factory=list)
    pr_total: int = 0
    additional: int = 0
    total_comments: int = 0
    minutes: int = 0
    minutes_per_comment: Optional[float] = None

    @property
    def has_comments(self) -> bool:
        return self.total_comments > 0

    def to_dict(self) -> dict:
        """Convert report to dictionary."""
        return {
            "login": self.login,
            "pull_requests": [counts.to_dict() for counts in self.pr_counts],
            "pr_total": self.pr_total,
            "additional": self.additional,
            "total_comments": self.total_comments,
            "minutes": self.minutes,
            "minutes_per_comment": self.minutes_per_comment,
        }
