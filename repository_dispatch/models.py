"""Shared Pydantic data models for repository-dispatch."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, SecretStr

# --- Enums ---


class SubscriptionStatus(str, Enum):
    VALID = "valid"
    INVALID = "invalid"
    UNREACHABLE = "unreachable"


# --- Invocation Models ---


class InvocationInputs(BaseModel):
    """Raw step inputs as read from the runner, before validation."""

    model_config = ConfigDict(frozen=True)

    token: SecretStr = SecretStr("")
    repository: str = ""
    event_type: str = ""
    client_payload: str = ""


class DispatchRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    owner: str
    repo: str
    event_type: str
    client_payload: Any = None

    def to_body(self) -> dict[str, Any]:
        """Render the REST body for POST /repos/{owner}/{repo}/dispatches."""
        return {
            "event_type": self.event_type,
            "client_payload": self.client_payload,
        }
