"""Step outputs and workflow-command logging for GitHub Actions."""

import logging
import secrets
from logging import getLogger
from pathlib import Path

logger = getLogger(__name__)

# Workflow commands for each log level; INFO and below stay plain text
_LEVEL_COMMANDS = {
    logging.DEBUG: "debug",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "error",
}


def escape_command_data(message: str) -> str:
    """Escape a message for use as workflow command data."""
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class WorkflowCommandFormatter(logging.Formatter):
    """Format log records as GitHub Actions workflow commands.

    Warnings and errors become ``::warning::`` / ``::error::`` annotations on
    the job summary, debug lines only show when step debug logging is on.
    """

    def __init__(self) -> None:
        super().__init__("%(message)s")

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        command = _LEVEL_COMMANDS.get(record.levelno)
        if command is None:
            return message
        return f"::{command}::{escape_command_data(message)}"


class StepOutputs:
    """Writer for step outputs consumed by later workflow steps.

    Without an output file (local runs) values are only logged.
    """

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = Path(path) if path else None

    def set(self, name: str, value: object) -> None:
        """Set a single step output."""
        text = str(value)
        logger.debug(f"Output {name}={text}")
        if self.path is None:
            logger.info(f"{name}={text}")
            return

        with self.path.open("a", encoding="utf-8") as fh:
            if "\n" in text or "\r" in text:
                delimiter = f"ghadelimiter_{secrets.token_hex(8)}"
                fh.write(f"{name}<<{delimiter}\n{text}\n{delimiter}\n")
            else:
                fh.write(f"{name}={text}\n")

    def set_many(self, outputs: dict[str, object]) -> None:
        for name, value in outputs.items():
            self.set(name, value)
