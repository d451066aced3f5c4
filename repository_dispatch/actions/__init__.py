"""GitHub Actions runner integration: workflow commands and step status."""

from repository_dispatch.actions.commands import WorkflowCommandHandler, configure_logging
from repository_dispatch.actions.status import ActionStatus

__all__ = [
    "ActionStatus",
    "WorkflowCommandHandler",
    "configure_logging",
]
