"""Unit tests for report aggregation and rendering."""

import pytest

from pr_comment_analyzer.models import CommentCategory, PrCommentCounts, PullRequestTarget
from pr_comment_analyzer.services.report import build_report, format_report


def _counts(number: int, review_comments: int, reviews: int = 0, issue_comments: int = 0) -> PrCommentCounts:
    return PrCommentCounts(
        target=PullRequestTarget("acme", "widgets", number),
        counts={
            CommentCategory.REVIEW_COMMENTS: review_comments,
            CommentCategory.REVIEWS: reviews,
            CommentCategory.ISSUE_COMMENTS: issue_comments,
        },
    )


class TestBuildReport:
    """Test report aggregation."""

    def test_sums_prs_and_additional(self) -> None:
        report = build_report("bob", [_counts(7, 2, 1, 0)], additional=2, minutes=50)

        assert report.pr_total == 3
        assert report.total_comments == 5
        assert report.minutes_per_comment == pytest.approx(10.0)

    def test_multiple_prs(self) -> None:
        report = build_report("bob", [_counts(1, 1), _counts(2, 0, 2), _counts(3, 0, 0, 4)], minutes=100)

        assert report.pr_total == 7
        assert report.total_comments == 7
        assert round(report.minutes_per_comment, 2) == 14.29

    def test_no_comments_means_no_ratio(self) -> None:
        report = build_report("bob", [_counts(1, 0)], additional=0, minutes=30)

        assert report.total_comments == 0
        assert report.minutes_per_comment is None
        assert not report.has_comments

    def test_additional_alone_counts(self) -> None:
        report = build_report("bob", [], additional=4, minutes=10)

        assert report.minutes_per_comment == pytest.approx(2.5)

    @pytest.mark.parametrize(("additional", "minutes"), [(-1, 10), (0, -5)])
    def test_rejects_negative_inputs(self, additional, minutes) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            build_report("bob", [], additional=additional, minutes=minutes)

    def test_is_deterministic(self) -> None:
        pr_counts = [_counts(1, 3), _counts(2, 1, 1)]

        assert build_report("bob", pr_counts, 1, 60) == build_report("bob", pr_counts, 1, 60)


class TestFormatReport:
    """Test report rendering."""

    def test_full_report(self) -> None:
        report = build_report("bob", [_counts(7, 2, 1, 0)], additional=2, minutes=50)

        text = format_report(report, list(CommentCategory))

        assert "Analyzing PR #7: https://github.com/acme/widgets/pull/7" in text
        assert "  PR review comments: 2" in text
        assert "  PR reviews: 1" in text
        assert "  Issue comments: 0" in text
        assert "  Total for this PR: 3" in text
        assert "=== SUMMARY ===" in text
        assert "Total comments across all PRs: 3" in text
        assert "Additional comments: 2" in text
        assert "Total comments (including additional): 5" in text
        assert "Total time: 50 minutes" in text
        assert "Time per comment: 10.00 minutes" in text

    def test_no_additional_lines_when_zero(self) -> None:
        report = build_report("bob", [_counts(7, 1)], minutes=5)

        text = format_report(report)

        assert "Additional comments" not in text
        assert "Time per comment: 5.00 minutes" in text

    def test_no_comments_found(self) -> None:
        report = build_report("bob", [_counts(7, 0)], minutes=5)

        text = format_report(report)

        assert "No comments found for the authenticated user." in text
        assert "Time per comment" not in text

    def test_single_category_has_no_pr_total(self) -> None:
        counts = PrCommentCounts(
            target=PullRequestTarget("acme", "widgets", 9),
            counts={CommentCategory.REVIEW_COMMENTS: 4},
        )
        report = build_report("bob", [counts], minutes=8)

        text = format_report(report, [CommentCategory.REVIEW_COMMENTS])

        assert "  PR review comments: 4" in text
        assert "Total for this PR" not in text
        assert "PR reviews" not in text
