"""Workflow command log channel.

Log records are written to stdout as runner workflow commands so the
Actions UI can render them with the right severity:

    DEBUG    ->  ::debug::message
    INFO     ->  message
    WARNING  ->  ::warning::message
    ERROR    ->  ::error::message
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

PACKAGE_LOGGER = "repository_dispatch"

_COMMANDS = {
    logging.DEBUG: "debug",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "error",
}


def escape_data(message: str) -> str:
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def format_command(levelno: int, message: str) -> str:
    command = _COMMANDS.get(levelno)
    if command is None:
        return message
    return f"::{command}::{escape_data(message)}"


class WorkflowCommandHandler(logging.Handler):
    """Logging handler that emits records as workflow commands."""

    def __init__(self, stream: TextIO | None = None) -> None:
        super().__init__(level=logging.DEBUG)
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Looked up per write so a replaced sys.stdout is honoured
        return self._stream if self._stream is not None else sys.stdout

    def emit(self, record: logging.LogRecord) -> None:
        try:
            line = format_command(record.levelno, self.format(record))
            self.stream.write(line + "\n")
            self.stream.flush()
        except Exception:
            self.handleError(record)


def configure_logging(stream: TextIO | None = None) -> WorkflowCommandHandler:
    """Route the package logger through a single workflow command handler."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(logger.handlers):
        if isinstance(existing, WorkflowCommandHandler):
            logger.removeHandler(existing)
    handler = WorkflowCommandHandler(stream)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    return handler
