import os

# Keep local runs and CI runs identical; these must be cleared BEFORE any prsizer imports
for name in ("GITHUB_ACTIONS", "GITHUB_OUTPUT", "GITHUB_EVENT_PATH", "GITHUB_REPOSITORY"):
    os.environ.pop(name, None)

from typing import Any

import httpx
import pytest
from pydantic import SecretStr

from prsizer.conf.sizing import SizingSettings
from prsizer.services.context import ActionContext
from prsizer.services.github.client import GitHubAPIClient


def http_error(status_code: int, method: str = "GET", url: str = "https://api.github.com/") -> httpx.HTTPStatusError:
    """Build an HTTPStatusError like the one raised by ``raise_for_status``."""
    request = httpx.Request(method, url)
    response = httpx.Response(status_code, request=request)
    return httpx.HTTPStatusError(f"{status_code} error for {url}", request=request, response=response)


class FakeGitHubAPI:
    """In-memory stand-in for GitHubAPIClient holding one repository's labels and comments.

    ``failures`` maps a method name to an exception raised on every call;
    ``remove_failures`` maps a label name to an exception raised when removing it.
    """

    def __init__(
        self,
        additions: int = 0,
        deletions: int = 0,
        number: int = 7,
        labels: list[str] | None = None,
        repo_labels: list[str] | None = None,
        comments: list[dict[str, Any]] | None = None,
    ) -> None:
        self.number = number
        self.additions = additions
        self.deletions = deletions
        self.pr_labels: list[str] = list(labels or [])
        self.repo_labels: dict[str, dict[str, Any]] = {name: {"name": name} for name in (repo_labels or [])}
        self.comments: list[dict[str, Any]] = list(comments or [])
        self.failures: dict[str, Exception] = {}
        self.remove_failures: dict[str, Exception] = {}
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    async def __aenter__(self) -> "FakeGitHubAPI":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        return None

    def _record(self, method: str, *args: Any) -> None:
        self.calls.append((method, args))
        if method in self.failures:
            raise self.failures[method]

    def called(self, method: str) -> list[tuple[Any, ...]]:
        return [args for name, args in self.calls if name == method]

    async def get_pull_request(self, owner: str, repo: str, number: int) -> dict[str, Any]:
        self._record("get_pull_request", owner, repo, number)
        return {
            "number": self.number,
            "additions": self.additions,
            "deletions": self.deletions,
            "labels": [{"name": name} for name in self.pr_labels],
        }

    async def remove_label(self, owner: str, repo: str, number: int, name: str) -> None:
        self._record("remove_label", owner, repo, number, name)
        if name in self.remove_failures:
            raise self.remove_failures[name]
        if name not in self.pr_labels:
            raise http_error(404, "DELETE")
        self.pr_labels.remove(name)

    async def get_label(self, owner: str, repo: str, name: str) -> dict[str, Any]:
        self._record("get_label", owner, repo, name)
        if name not in self.repo_labels:
            raise http_error(404)
        return self.repo_labels[name]

    async def create_label(self, owner: str, repo: str, name: str, color: str, description: str) -> dict[str, Any]:
        self._record("create_label", owner, repo, name, color, description)
        label = {"name": name, "color": color, "description": description}
        self.repo_labels[name] = label
        return label

    async def add_labels(self, owner: str, repo: str, number: int, labels: list[str]) -> list[dict[str, Any]]:
        self._record("add_labels", owner, repo, number, labels)
        for name in labels:
            if name not in self.pr_labels:
                self.pr_labels.append(name)
        return [{"name": name} for name in self.pr_labels]

    async def list_issue_comments(self, owner: str, repo: str, number: int) -> list[dict[str, Any]]:
        self._record("list_issue_comments", owner, repo, number)
        return list(self.comments)

    async def create_issue_comment(self, owner: str, repo: str, number: int, body: str) -> dict[str, Any]:
        self._record("create_issue_comment", owner, repo, number, body)
        comment = {"id": len(self.comments) + 1, "body": body, "user": {"login": "github-actions[bot]", "type": "Bot"}}
        self.comments.append(comment)
        return comment


@pytest.fixture
def mock_client() -> GitHubAPIClient:
    """Create a test GitHub API client for mocking."""
    return GitHubAPIClient(token=SecretStr("test_token"))


@pytest.fixture
def sizing_settings() -> SizingSettings:
    """Thresholds (50, 200, 500) with commenting enabled."""
    return SizingSettings(small_threshold=50, medium_threshold=200, large_threshold=500, comment_on_large=True)


@pytest.fixture
def pr_context() -> ActionContext:
    """Context for a pull_request event on octo/widgets."""
    return ActionContext(
        owner="octo",
        repo="widgets",
        payload={"action": "synchronize", "pull_request": {"number": 7, "labels": []}},
    )


@pytest.fixture
def fake_github() -> type[FakeGitHubAPI]:
    """Factory for in-memory GitHub API fakes."""
    return FakeGitHubAPI


@pytest.fixture
def make_http_error():
    """Factory for httpx status errors."""
    return http_error
