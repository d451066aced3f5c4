"""GitHub REST API errors."""

from __future__ import annotations

import httpx


class GitHubAPIError(Exception):
    """Raised when GitHub answers a request with a non-2xx status."""

    def __init__(self, message: str, *, status: int) -> None:
        self.status = status
        super().__init__(message)

    @classmethod
    def from_response(cls, response: httpx.Response) -> GitHubAPIError:
        """Build an error from GitHub's JSON error body, falling back to the reason phrase."""
        message = ""
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            message = str(body.get("message") or "")
        if not message:
            message = response.reason_phrase or f"HTTP {response.status_code}"
        return cls(message, status=response.status_code)
