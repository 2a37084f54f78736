"""Unit tests for data models."""

import pytest

from pr_comment_analyzer.models import AuthenticatedUser, CommentCategory, PrCommentCounts, PullRequestTarget


class TestPullRequestTarget:
    """Test PullRequestTarget model."""

    def test_urls(self) -> None:
        target = PullRequestTarget("acme", "widgets", 7)

        assert target.slug == "acme/widgets"
        assert target.html_url == "https://github.com/acme/widgets/pull/7"

    @pytest.mark.parametrize("number", [0, -1])
    def test_number_must_be_positive(self, number) -> None:
        with pytest.raises(ValueError, match="positive"):
            PullRequestTarget("acme", "widgets", number)


class TestCommentCategory:
    """Test CommentCategory enum."""

    def test_paths(self) -> None:
        assert CommentCategory.REVIEW_COMMENTS.path("o", "r", 1) == "/repos/o/r/pulls/1/comments"
        assert CommentCategory.REVIEWS.path("o", "r", 1) == "/repos/o/r/pulls/1/reviews"
        assert CommentCategory.ISSUE_COMMENTS.path("o", "r", 1) == "/repos/o/r/issues/1/comments"

    def test_parse_many_keeps_order_and_drops_repeats(self) -> None:
        assert CommentCategory.parse_many(["reviews", " REVIEW_COMMENTS ", "reviews"]) == [
            CommentCategory.REVIEWS,
            CommentCategory.REVIEW_COMMENTS,
        ]

    def test_parse_many_rejects_unknown(self) -> None:
        with pytest.raises(ValueError):
            CommentCategory.parse_many(["commits"])


class TestPrCommentCounts:
    """Test PrCommentCounts model."""

    def test_total_and_to_dict(self) -> None:
        counts = PrCommentCounts(
            target=PullRequestTarget("acme", "widgets", 7),
            counts={CommentCategory.REVIEW_COMMENTS: 2, CommentCategory.ISSUE_COMMENTS: 1},
        )

        assert counts.total == 3
        assert counts.to_dict() == {
            "owner": "acme",
            "repo": "widgets",
            "pr_number": 7,
            "counts": {"review_comments": 2, "issue_comments": 1},
            "total": 3,
        }


class TestAuthenticatedUser:
    """Test AuthenticatedUser model."""

    def test_from_github_data(self) -> None:
        assert AuthenticatedUser.from_github_data({"login": "bob", "id": 1}) == AuthenticatedUser("bob")

    @pytest.mark.parametrize("data", [None, [], {}, {"login": ""}, {"login": 5}])
    def test_from_invalid_data(self, data) -> None:
        assert AuthenticatedUser.from_github_data(data) is None
