"""
Services for resolving targets, counting comments and building reports
"""

from .comment_counter import CommentCounter, count_by_author
from .report import build_report, format_report
from .targets import (
    build_target_spec,
    detect_repository,
    parse_pr_number,
    parse_pr_url,
    parse_repository,
    resolve_targets,
)

__all__ = [
    "CommentCounter",
    "build_report",
    "build_target_spec",
    "count_by_author",
    "detect_repository",
    "format_report",
    "parse_pr_number",
    "parse_pr_url",
    "parse_repository",
    "resolve_targets",
]
