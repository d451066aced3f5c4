"""Authenticated GitHub REST client."""

from __future__ import annotations

import logging
from types import TracebackType

import httpx

from repository_dispatch import __version__
from repository_dispatch.config import DEFAULT_API_URL
from repository_dispatch.github.errors import GitHubAPIError
from repository_dispatch.models import DispatchRequest

logger = logging.getLogger(__name__)

_API_VERSION = "2022-11-28"


class GitHubClient:
    """Minimal REST client for the endpoints this action calls."""

    def __init__(
        self,
        token: str,
        api_url: str = DEFAULT_API_URL,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._api_url = api_url.rstrip("/")
        self._headers = {
            "Authorization": f"token {token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": _API_VERSION,
            "User-Agent": f"repository-dispatch/{__version__}",
        }
        self._owns_client = http_client is None
        self._http = http_client if http_client is not None else httpx.AsyncClient()

    async def __aenter__(self) -> GitHubClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    async def create_dispatch_event(self, request: DispatchRequest) -> None:
        """POST /repos/{owner}/{repo}/dispatches.

        GitHub answers 204 No Content on success; any non-2xx status raises
        GitHubAPIError carrying that status.
        """
        url = f"{self._api_url}/repos/{request.owner}/{request.repo}/dispatches"
        resp = await self._http.post(url, json=request.to_body(), headers=self._headers)
        logger.debug("POST %s -> %s", url, resp.status_code)
        if not resp.is_success:
            raise GitHubAPIError.from_response(resp)
