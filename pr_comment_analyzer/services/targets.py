"""Resolution of repositories and pull request targets from user input."""

import re
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Optional
from urllib.parse import urlsplit

from ..exceptions import InvalidTargetFormat, RepositoryResolutionFailed
from ..models import PullRequestTarget, PullRequestUrls, SlugWithNumbers, TargetSpec, UrlWithNumbers
from ..utils import get_logger

logger = get_logger(__name__)

GITHUB_HOSTS = ("github.com", "www.github.com")
NAME_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")

SSH_REMOTE_PREFIXES = ("git@github.com:", "ssh://git@github.com/")
HTTPS_REMOTE_PREFIXES = ("https://github.com/", "http://github.com/")


def _strip_git_suffix(name: str) -> str:
    return name[:-4] if name.endswith(".git") else name


def _valid_pair(owner: str, repo: str) -> bool:
    return bool(NAME_PATTERN.match(owner)) and bool(NAME_PATTERN.match(repo))


def _github_path_parts(value: str) -> Optional[list[str]]:
    """Split a github.com URL into its path segments, or None for other URLs."""
    parsed = urlsplit(value.strip())
    if parsed.scheme not in ("http", "https") or parsed.hostname not in GITHUB_HOSTS:
        return None
    return [part for part in parsed.path.split("/") if part]


def parse_repository(value: str) -> tuple[str, str]:
    """Parse ``owner/repo`` or ``https://github.com/owner/repo`` into a pair.

    Raises
    ------
        RepositoryResolutionFailed: If the value is neither shape

    """
    value = value.strip()

    if value.startswith("http"):
        parts = _github_path_parts(value)
        if parts is None or len(parts) < 2:
            msg = f"Invalid GitHub repository URL format: {value}. Expected: https://github.com/owner/repo"
            raise RepositoryResolutionFailed(msg)
        owner, repo = parts[0], _strip_git_suffix(parts[1])
    else:
        parts = value.split("/")
        if len(parts) != 2:
            msg = f"Invalid repository format: {value}. Expected: owner/repo or https://github.com/owner/repo"
            raise RepositoryResolutionFailed(msg)
        owner, repo = parts[0], _strip_git_suffix(parts[1])

    if not _valid_pair(owner, repo):
        msg = f"Invalid repository format: {value}. Expected: owner/repo or https://github.com/owner/repo"
        raise RepositoryResolutionFailed(msg)

    return owner, repo


def parse_pr_number(value: str) -> int:
    """Parse a bare pull request number.

    Raises
    ------
        InvalidTargetFormat: If the value is not a positive integer

    """
    text = value.strip()
    if not text.isdecimal():
        raise InvalidTargetFormat(value, "Invalid PR number")
    number = int(text)
    if number <= 0:
        raise InvalidTargetFormat(value, "Invalid PR number")
    return number


def parse_pr_url(value: str) -> PullRequestTarget:
    """Parse ``https://github.com/owner/repo/pull/123`` into a target.

    Trailing path segments such as ``/files``, a query or a fragment are ignored.

    Raises
    ------
        InvalidTargetFormat: If the URL is not a GitHub pull request URL

    """
    parts = _github_path_parts(value)
    if parts is None or len(parts) < 4 or parts[2] != "pull":
        raise InvalidTargetFormat(value, "Invalid PR URL")

    owner, repo, number = parts[0], parts[1], parts[3]
    if not _valid_pair(owner, repo):
        raise InvalidTargetFormat(value, "Invalid PR URL")

    try:
        return PullRequestTarget(owner, repo, parse_pr_number(number))
    except InvalidTargetFormat:
        raise InvalidTargetFormat(value, "Invalid PR URL") from None


def _remote_to_slug(remote_url: str) -> str:
    for prefix in SSH_REMOTE_PREFIXES + HTTPS_REMOTE_PREFIXES:
        if remote_url.startswith(prefix):
            return _strip_git_suffix(remote_url[len(prefix):].rstrip("/"))

    msg = f"Unsupported git remote URL format: {remote_url}. Only GitHub repositories are supported."
    raise RepositoryResolutionFailed(msg)


def detect_repository(cwd: Optional[Path] = None) -> str:
    """Read ``remote.origin.url`` from the local git config as ``owner/repo``.

    Raises
    ------
        RepositoryResolutionFailed: If git is unavailable, there is no origin
            remote, or the remote is not hosted on GitHub

    """
    try:
        result = subprocess.run(
            ["git", "config", "--get", "remote.origin.url"],
            capture_output=True,
            text=True,
            cwd=cwd,
            check=False,
        )
    except OSError as e:
        msg = "Failed to run git command. Make sure git is installed and you're in a git repository."
        raise RepositoryResolutionFailed(msg) from e

    if result.returncode != 0:
        msg = "Failed to get git remote URL. Make sure you're in a git repository with a remote origin."
        raise RepositoryResolutionFailed(msg)

    remote_url = result.stdout.strip()
    if not remote_url:
        msg = "No remote origin URL found in git repository."
        raise RepositoryResolutionFailed(msg)

    slug = _remote_to_slug(remote_url)
    logger.debug("Remote %s resolved to %s", remote_url, slug)
    return slug


def _looks_like_url(value: str) -> bool:
    return value.strip().lower().startswith(("http://", "https://"))


def build_target_spec(
    repository: Optional[str],
    values: Sequence[str],
    cwd: Optional[Path] = None,
) -> TargetSpec:
    """Pick the target specification mode from the command line input.

    All values given as URLs select :class:`PullRequestUrls` and any repository
    is ignored with a warning; otherwise bare numbers are paired with the
    repository, which is detected from git when missing.

    Raises
    ------
        InvalidTargetFormat: If there are no values or URLs and numbers are mixed
        RepositoryResolutionFailed: If the repository cannot be detected

    """
    if not values:
        msg = "At least one pull request is required"
        raise InvalidTargetFormat("", msg)

    url_values = [value for value in values if _looks_like_url(value)]
    if url_values and len(url_values) == len(values):
        if repository is not None:
            logger.warning("Ignoring repository %s: every pull request is given as a full URL", repository)
        return PullRequestUrls(tuple(values))
    if url_values:
        raise InvalidTargetFormat(url_values[0], "Cannot mix PR URLs with PR numbers")

    if repository is None:
        return SlugWithNumbers(detect_repository(cwd), tuple(values))
    if _looks_like_url(repository):
        return UrlWithNumbers(repository, tuple(values))
    return SlugWithNumbers(repository, tuple(values))


def resolve_targets(target_spec: TargetSpec) -> list[PullRequestTarget]:
    """Turn a target specification into concrete pull request targets.

    Order is preserved and repeated pull requests are counted once.
    """
    if isinstance(target_spec, PullRequestUrls):
        targets = [parse_pr_url(url) for url in target_spec.urls]
    elif isinstance(target_spec, (SlugWithNumbers, UrlWithNumbers)):
        repository = target_spec.slug if isinstance(target_spec, SlugWithNumbers) else target_spec.url
        owner, repo = parse_repository(repository)
        targets = [PullRequestTarget(owner, repo, parse_pr_number(value)) for value in target_spec.numbers]
    else:
        msg = f"Unknown target specification: {target_spec!r}"
        raise TypeError(msg)

    unique: list[PullRequestTarget] = []
    for target in targets:
        if target in unique:
            logger.warning("Skipping duplicate pull request %s", target.html_url)
            continue
        unique.append(target)
    return unique
