"""Report aggregation and rendering."""

from collections.abc import Sequence
from typing import Optional

from ..models import CommentCategory, PrCommentCounts, Report


def build_report(
    login: str,
    pr_counts: Sequence[PrCommentCounts],
    additional: int = 0,
    minutes: int = 0,
) -> Report:
    """Sum per pull request totals and compute minutes per comment.

    The ratio is only computed when the total is strictly positive.

    Raises
    ------
        ValueError: If ``additional`` or ``minutes`` is negative

    """
    if additional < 0:
        msg = f"Additional comments must be non-negative, got {additional}"
        raise ValueError(msg)
    if minutes < 0:
        msg = f"Minutes must be non-negative, got {minutes}"
        raise ValueError(msg)

    pr_total = sum(counts.total for counts in pr_counts)
    total_comments = pr_total + additional
    minutes_per_comment = minutes / total_comments if total_comments > 0 else None

    return Report(
        login=login,
        pr_counts=list(pr_counts),
        pr_total=pr_total,
        additional=additional,
        total_comments=total_comments,
        minutes=minutes,
        minutes_per_comment=minutes_per_comment,
    )


def format_report(report: Report, categories: Optional[Sequence[CommentCategory]] = None) -> str:
    """Render a report as the text printed by the command line tool."""
    lines: list[str] = []

    for counts in report.pr_counts:
        lines.append("")
        lines.append(f"Analyzing PR #{counts.pr_number}: {counts.target.html_url}")
        for category in categories or list(counts.counts):
            lines.append(f"  {category.label}: {counts.counts.get(category, 0)}")
        if len(counts.counts) > 1:
            lines.append(f"  Total for this PR: {counts.total}")

    lines.append("")
    lines.append("=== SUMMARY ===")
    lines.append(f"Total comments across all PRs: {report.pr_total}")
    if report.additional > 0:
        lines.append(f"Additional comments: {report.additional}")
        lines.append(f"Total comments (including additional): {report.total_comments}")
    lines.append(f"Total time: {report.minutes} minutes")

    if report.minutes_per_comment is not None:
        lines.append(f"Time per comment: {report.minutes_per_comment:.2f} minutes")
    else:
        lines.append("No comments found for the authenticated user.")

    return "\n".join(lines)
