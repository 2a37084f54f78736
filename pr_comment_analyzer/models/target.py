"""Pull request targets and the ways a user can specify them."""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class PullRequestTarget:
    """One pull request to analyze."""

    owner: str
    repo: str
    number: int

    def __post_init__(self) -> None:
        if self.number <= 0:
            msg = f"Pull request number must be positive, got {self.number}"
            raise ValueError(msg)

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.repo}"

    @property
    def html_url(self) -> str:
        return f"https://github.com/{self.owner}/{self.repo}/pull/{self.number}"


@dataclass(frozen=True)
class SlugWithNumbers:
    """Repository given as ``owner/repo`` plus bare PR numbers."""

    slug: str
    numbers: tuple[str, ...]


@dataclass(frozen=True)
class UrlWithNumbers:
    """Repository given as a full GitHub URL plus bare PR numbers."""

    url: str
    numbers: tuple[str, ...]


@dataclass(frozen=True)
class PullRequestUrls:
    """Every pull request given as its full GitHub URL."""

    urls: tuple[str, ...]


TargetSpec = Union[SlugWithNumbers, UrlWithNumbers, PullRequestUrls]
