"""Workflow run context: repository coordinates and the triggering event."""

import json
from dataclasses import dataclass, field
from logging import getLogger
from pathlib import Path
from typing import Any

from prsizer.conf.github import GitHubSettings

logger = getLogger(__name__)


class ActionContextError(ValueError):
    """Raised when the workflow context cannot be used for a size check."""


class MissingPullRequestError(ActionContextError):
    """Raised when the triggering event carries no pull request."""

    def __init__(self) -> None:
        super().__init__("This action can only be run on pull_request events")


@dataclass(frozen=True)
class ActionContext:
    """Explicit description of the workflow run being handled.

    Everything the size check needs from the runner environment lives here,
    so tests can build one from a literal payload.
    """

    owner: str
    repo: str
    payload: dict[str, Any] = field(default_factory=dict)

    @property
    def pull_request(self) -> dict[str, Any] | None:
        pull_request = self.payload.get("pull_request")
        return pull_request if isinstance(pull_request, dict) else None

    @property
    def pull_request_number(self) -> int:
        """Number of the triggering pull request.

        Raises:
            MissingPullRequestError: If the event is not a pull request event
        """
        pull_request = self.pull_request
        if pull_request is None or pull_request.get("number") is None:
            raise MissingPullRequestError()
        return int(pull_request["number"])

    @classmethod
    def from_repository(cls, repository: str, payload: dict[str, Any]) -> "ActionContext":
        """Build a context from an owner/name string and an event payload."""
        owner, _, repo = repository.partition("/")
        if not owner or not repo:
            raise ActionContextError(f"Invalid repository: {repository}. Expected owner/name")
        return cls(owner=owner, repo=repo, payload=payload)

    @classmethod
    def from_settings(cls, settings: GitHubSettings) -> "ActionContext":
        """Load the context from the runner environment.

        Args:
            settings: Settings carrying GITHUB_REPOSITORY and GITHUB_EVENT_PATH

        Raises:
            ActionContextError: If the repository or event payload is missing or unreadable
        """
        if not settings.github_repository:
            raise ActionContextError("GITHUB_REPOSITORY is not set")
        if not settings.github_event_path:
            raise ActionContextError("GITHUB_EVENT_PATH is not set")

        return cls.from_repository(settings.github_repository, load_event_payload(settings.github_event_path))


def load_event_payload(path: str | Path) -> dict[str, Any]:
    """Read the JSON event payload written by the runner.

    Raises:
        ActionContextError: If the file is missing or not a JSON object
    """
    event_path = Path(path)
    try:
        payload = json.loads(event_path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ActionContextError(f"Event payload not found: {event_path}") from e
    except json.JSONDecodeError as e:
        raise ActionContextError(f"Invalid JSON in event payload {event_path}: {e}") from e

    if not isinstance(payload, dict):
        raise ActionContextError(f"Event payload {event_path} is not a JSON object")

    logger.debug(f"Loaded event payload from {event_path}")
    return payload
