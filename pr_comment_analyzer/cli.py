"""Command line entry point for PR Comment Analyzer."""

import argparse
import json
import sys
from collections.abc import Sequence
from typing import Optional

from . import __version__
from .config import Settings, get_settings
from .exceptions import PRCommentAnalyzerError, RepositoryResolutionFailed
from .github.client import GitHubAPIClient
from .models import CommentCategory, SlugWithNumbers
from .services import CommentCounter, build_report, build_target_spec, format_report, resolve_targets
from .utils import get_logger, setup_logging

logger = get_logger(__name__)


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        msg = f"invalid integer value: {value!r}"
        raise argparse.ArgumentTypeError(msg) from None
    if number < 0:
        msg = f"must be non-negative, got {number}"
        raise argparse.ArgumentTypeError(msg)
    return number


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="pr-comment-analyzer",
        description="Analyzes GitHub PR comments and calculates time per comment",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-t",
        "--token",
        help="GitHub personal access token (defaults to the GITHUB_TOKEN environment variable)",
    )
    parser.add_argument(
        "-m",
        "--minutes",
        type=_non_negative_int,
        required=True,
        help="Total time spent in minutes",
    )
    parser.add_argument(
        "-r",
        "--repository",
        help=(
            "GitHub repository (e.g., owner/repo or https://github.com/owner/repo). "
            "If not provided, auto-detects from git remote."
        ),
    )
    parser.add_argument(
        "-a",
        "--additional",
        type=_non_negative_int,
        default=0,
        help="Additional comment count to add unconditionally to the total",
    )
    parser.add_argument(
        "-c",
        "--category",
        dest="categories",
        action="append",
        choices=[category.value for category in CommentCategory],
        help="Comment category to count (repeatable, defaults to all configured categories)",
    )
    parser.add_argument("--json", action="store_true", help="Print the report as JSON instead of text")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "targets",
        nargs="+",
        metavar="PR",
        help="PR numbers to analyze, or full PR URLs",
    )
    return parser


def run(args: argparse.Namespace, settings: Settings) -> int:
    """Execute one analysis run and print the report."""
    token = args.token or settings.github_token
    if not token:
        msg = "A GitHub token is required. Pass -t/--token or set GITHUB_TOKEN."
        raise PRCommentAnalyzerError(msg)

    try:
        categories = CommentCategory.parse_many(args.categories or settings.comment_categories)
    except ValueError as e:
        msg = f"Invalid comment category configuration: {e}"
        raise PRCommentAnalyzerError(msg) from e

    # JSON output keeps stdout machine readable.
    status = sys.stderr if args.json else sys.stdout

    with GitHubAPIClient(
        token,
        base_url=settings.github_api_base_url,
        page_size=settings.page_size,
        max_pages=settings.max_pages,
        timeout=settings.request_timeout,
    ) as client:
        user = client.get_authenticated_user()
        print(f"Analyzing comments for user: {user.login}", file=status)

        target_spec = build_target_spec(args.repository, args.targets)
        if args.repository is None and isinstance(target_spec, SlugWithNumbers):
            print(f"Auto-detected repository: {target_spec.slug}", file=status)
        targets = resolve_targets(target_spec)

        repositories = sorted({target.slug for target in targets})
        print(f"Repository: {', '.join(repositories)}", file=status)

        counter = CommentCounter(client, categories, max_workers=settings.max_workers)
        pr_counts = counter.count_pull_requests(targets, user.login)

    report = build_report(user.login, pr_counts, additional=args.additional, minutes=args.minutes)
    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
    else:
        print(format_report(report, categories))
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments, run the analysis and map errors to an exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = get_settings()
        setup_logging("DEBUG" if args.verbose else settings.log_level, settings.log_format)
        return run(args, settings)
    except RepositoryResolutionFailed as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.repository is None:
            print("Please specify the repository using -r/--repository flag.", file=sys.stderr)
        return 1
    except PRCommentAnalyzerError as e:
        logger.debug("Run failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
