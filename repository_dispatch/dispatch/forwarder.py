"""Dispatch forwarder.

Runs the step end to end:

1. Subscription check (a 403 terminates the process here)
2. Read and log inputs
3. Validate the repository and parse the client payload
4. Create the repository dispatch event
5. Turn any failure into a single failed status
"""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx
from pydantic import SecretStr

from repository_dispatch.actions.status import ActionStatus
from repository_dispatch.config import ActionConfig
from repository_dispatch.github.client import GitHubClient
from repository_dispatch.github.errors import GitHubAPIError
from repository_dispatch.models import DispatchRequest, InvocationInputs
from repository_dispatch.subscription import enforce_subscription, validate_subscription

logger = logging.getLogger(__name__)

_NOT_FOUND = 404

NOT_FOUND_MESSAGE = "Repository not found, OR token has insufficient permissions."
REPOSITORY_FORMAT_MESSAGE = "Repository must be in format owner/repo"
INVALID_PAYLOAD_MESSAGE = "Invalid JSON in client-payload"


class InputValidationError(ValueError):
    """Raised when a step input does not have the expected shape."""


def parse_repository(repository: str) -> tuple[str, str]:
    """Split ``owner/repo`` into its two non-empty segments."""
    owner, _, repo = repository.partition("/")
    if not owner or not repo or "/" in repo:
        raise InputValidationError(REPOSITORY_FORMAT_MESSAGE)
    return owner, repo


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def parse_client_payload(raw: str) -> Any:
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except ValueError as exc:
        raise InputValidationError(INVALID_PAYLOAD_MESSAGE) from exc


def failure_message(error: Exception) -> str:
    """Message reported to the runner for a failed dispatch."""
    if isinstance(error, GitHubAPIError) and error.status == _NOT_FOUND:
        return NOT_FOUND_MESSAGE
    return str(error)


class DispatchForwarder:
    """Forwards the step inputs to GitHub as a repository_dispatch event."""

    def __init__(
        self,
        config: ActionConfig,
        status: ActionStatus | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config
        self.status = status or ActionStatus()
        self._http = http_client

    def read_inputs(self) -> InvocationInputs:
        cfg = self._config
        return InvocationInputs(
            token=SecretStr(cfg.get_input("token")),
            repository=cfg.get_input("repository"),
            event_type=cfg.get_input("event-type"),
            client_payload=cfg.get_input("client-payload"),
        )

    async def run(self) -> None:
        subscription = await validate_subscription(self._config, client=self._http)
        enforce_subscription(subscription)

        try:
            await self._dispatch()
        except Exception as exc:
            logger.debug("%r", exc)
            self.status.set_failed(failure_message(exc))

    async def _dispatch(self) -> None:
        inputs = self.read_inputs()
        logger.debug("Inputs: %r", inputs)

        owner, repo = parse_repository(inputs.repository)

        async with GitHubClient(
            inputs.token.get_secret_value(),
            api_url=self._config.api_url,
            http_client=self._http,
        ) as github:
            request = DispatchRequest(
                owner=owner,
                repo=repo,
                event_type=inputs.event_type,
                client_payload=parse_client_payload(inputs.client_payload),
            )
            await github.create_dispatch_event(request)
