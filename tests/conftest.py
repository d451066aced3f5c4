"""Shared test fixtures for repository-dispatch."""

from __future__ import annotations

import io
import logging
from collections.abc import Callable, Iterator
from typing import Any

import httpx
import pytest

from repository_dispatch.actions.commands import PACKAGE_LOGGER, configure_logging
from repository_dispatch.config import ActionConfig, input_env_name

SUBSCRIPTION_HOST = "agent.api.stepsecurity.io"
CURRENT_REPOSITORY = "acme/ci"


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def command_stream() -> io.StringIO:
    """Route package logs through a workflow command handler into a buffer."""
    stream = io.StringIO()
    configure_logging(stream)
    return stream


# --- Factory functions for test data ---


def make_config(**inputs: str) -> ActionConfig:
    """Factory for ActionConfig; keyword names use underscores for hyphens."""
    defaults: dict[str, str] = {
        "token": "t",
        "repository": "acme/widgets",
        "event_type": "build",
        "client_payload": '{"x": 1}',
    }
    defaults.update(inputs)
    return ActionConfig(
        current_repository=CURRENT_REPOSITORY,
        api_url="https://api.github.test",
        inputs={input_env_name(k.replace("_", "-")): v for k, v in defaults.items()},
    )


class FakeGitHub:
    """Mock transport answering both the subscription and the dispatch endpoints."""

    def __init__(
        self,
        subscription_status: int = 200,
        dispatch_status: int = 204,
        dispatch_json: dict[str, Any] | None = None,
        subscription_error: Callable[[httpx.Request], Exception] | None = None,
        dispatch_error: Callable[[httpx.Request], Exception] | None = None,
    ) -> None:
        self.subscription_status = subscription_status
        self.dispatch_status = dispatch_status
        self.dispatch_json = dispatch_json
        self.subscription_error = subscription_error
        self.dispatch_error = dispatch_error
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.host == SUBSCRIPTION_HOST:
            if self.subscription_error is not None:
                raise self.subscription_error(request)
            return httpx.Response(self.subscription_status)
        if self.dispatch_error is not None:
            raise self.dispatch_error(request)
        if self.dispatch_json is not None:
            return httpx.Response(self.dispatch_status, json=self.dispatch_json)
        return httpx.Response(self.dispatch_status)

    @property
    def subscription_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.host == SUBSCRIPTION_HOST]

    @property
    def dispatch_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.host != SUBSCRIPTION_HOST]

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))
