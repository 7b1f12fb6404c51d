from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PullRequestSnapshot:
    """Point-in-time view of a pull request's size and labels.

    Fetched once per run and never refreshed, so it does not reflect label
    changes made afterwards.
    """

    number: int
    additions: int
    deletions: int
    labels: frozenset[str] = frozenset()

    @property
    def total_changes(self) -> int:
        """Lines added plus lines deleted."""
        return self.additions + self.deletions

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "PullRequestSnapshot":
        """Build a snapshot from a GitHub pull request payload."""
        return cls(
            number=data["number"],
            additions=data["additions"],
            deletions=data["deletions"],
            labels=frozenset(label["name"] for label in data.get("labels") or []),
        )


@dataclass(frozen=True)
class IssueComment:
    """Domain model for a comment on an issue or pull request."""

    id: int
    body: str
    author_login: str | None = None
    author_type: str | None = None  # "User", "Bot", "Organization"

    @property
    def is_bot(self) -> bool:
        return self.author_type == "Bot"

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "IssueComment":
        """Build a comment from a GitHub issue comment payload."""
        user = data.get("user") or {}
        return cls(
            id=data["id"],
            body=data.get("body") or "",
            author_login=user.get("login"),
            author_type=user.get("type"),
        )
