"""Step outcome reporting."""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class ActionStatus:
    """Tracks whether the step failed and with which message.

    ``set_failed`` records the failure and emits it as an error annotation;
    it does not stop the caller.
    """

    failed: bool = False
    message: str | None = None

    @property
    def exit_code(self) -> int:
        return 1 if self.failed else 0

    def set_failed(self, message: str) -> None:
        self.failed = True
        self.message = message
        logger.error(message)
