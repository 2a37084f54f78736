"""
GitHub REST API access
"""

from .client import GitHubAPIClient
from .pagination import parse_next_link

__all__ = ["GitHubAPIClient", "parse_next_link"]
