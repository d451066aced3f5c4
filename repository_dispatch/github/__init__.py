"""GitHub REST API access."""

from repository_dispatch.github.client import GitHubClient
from repository_dispatch.github.errors import GitHubAPIError

__all__ = ["GitHubAPIError", "GitHubClient"]
