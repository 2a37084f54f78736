"""
Data models for PR Comment Analyzer
"""

from .comment import CommentCategory, PrCommentCounts
from .report import Report
from .target import PullRequestTarget, PullRequestUrls, SlugWithNumbers, TargetSpec, UrlWithNumbers
from .user import AuthenticatedUser

__all__ = [
    "AuthenticatedUser",
    "CommentCategory",
    "PrCommentCounts",
    "PullRequestTarget",
    "PullRequestUrls",
    "Report",
    "SlugWithNumbers",
    "TargetSpec",
    "UrlWithNumbers",
]
