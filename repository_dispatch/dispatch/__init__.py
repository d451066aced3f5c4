"""Repository dispatch forwarding."""

from repository_dispatch.dispatch.forwarder import (
    NOT_FOUND_MESSAGE,
    DispatchForwarder,
    InputValidationError,
    failure_message,
    parse_client_payload,
    parse_repository,
)

__all__ = [
    "NOT_FOUND_MESSAGE",
    "DispatchForwarder",
    "InputValidationError",
    "failure_message",
    "parse_client_payload",
    "parse_repository",
]
