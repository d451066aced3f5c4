"""Subscription check against the StepSecurity entitlement API.

The check is best effort: only an explicit 403 stops the step. Timeouts,
connection failures and any other error status let the dispatch continue.
"""

from __future__ import annotations

import logging
import sys

import httpx

from repository_dispatch.config import ActionConfig
from repository_dispatch.models import SubscriptionStatus

logger = logging.getLogger(__name__)

_FORBIDDEN = 403

INVALID_SUBSCRIPTION_MESSAGE = "Subscription is not valid. Reach out to support@stepsecurity.io"
UNREACHABLE_MESSAGE = "Timeout or API not reachable. Continuing to next step."


async def validate_subscription(
    config: ActionConfig,
    client: httpx.AsyncClient | None = None,
) -> SubscriptionStatus:
    """Query the subscription endpoint for the current repository."""
    url = config.subscription_url
    try:
        if client is None:
            async with httpx.AsyncClient(
                timeout=config.subscription_timeout_s, follow_redirects=True,
            ) as own_client:
                resp = await own_client.get(url)
        else:
            resp = await client.get(
                url, timeout=config.subscription_timeout_s, follow_redirects=True,
            )
        resp.raise_for_status()
    except httpx.HTTPStatusError as exc:
        if exc.response.status_code == _FORBIDDEN:
            return SubscriptionStatus.INVALID
        logger.info(UNREACHABLE_MESSAGE)
        return SubscriptionStatus.UNREACHABLE
    except (httpx.HTTPError, httpx.InvalidURL):
        logger.info(UNREACHABLE_MESSAGE)
        return SubscriptionStatus.UNREACHABLE
    return SubscriptionStatus.VALID


def enforce_subscription(status: SubscriptionStatus) -> None:
    """Terminate the process when the subscription is explicitly invalid."""
    if status is SubscriptionStatus.INVALID:
        logger.error(INVALID_SUBSCRIPTION_MESSAGE)
        sys.exit(1)
