"""Async GitHub API client using httpx."""

import asyncio
import time
from logging import getLogger
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import SecretStr

logger = getLogger(__name__)


class GitHubAPIClient:
    """Async GitHub API client for the pull request, label and comment endpoints."""

    def __init__(self, token: SecretStr, base_url: str = "https://api.github.com") -> None:
        """Initialize GitHub API client.

        Args:
            token: GitHub token (workflow GITHUB_TOKEN or a Personal Access Token)
            base_url: Base URL for GitHub API (default: https://api.github.com)
        """
        self.token = token.get_secret_value()
        self.base_url = base_url.rstrip("/")
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "GitHubAPIClient":
        """Enter async context manager."""
        self._client = httpx.AsyncClient(
            headers={
                "Authorization": f"Bearer {self.token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
            },
            timeout=httpx.Timeout(30.0, connect=10.0),
        )
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Exit async context manager."""
        if self._client:
            await self._client.aclose()

    def _repo_url(self, owner: str, repo: str) -> str:
        return f"{self.base_url}/repos/{owner}/{repo}"

    async def _request_with_retry(
        self,
        method: str,
        url: str,
        max_retries: int = 3,
        retry_count: int = 0,
        **kwargs: Any,
    ) -> httpx.Response:
        """Make HTTP request with automatic retry on timeout and rate limiting.

        Args:
            method: HTTP method (GET, POST, etc.)
            url: URL to request
            max_retries: Maximum number of retries
            retry_count: Current retry attempt (internal use)
            **kwargs: Additional arguments to pass to httpx request

        Returns:
            httpx.Response object

        Raises:
            httpx.HTTPStatusError: If the request fails after retries
            httpx.TimeoutException: If request times out after retries
        """
        if not self._client:
            raise RuntimeError("Client not initialized - use async with context manager")

        try:
            response = await self._client.request(method, url, **kwargs)
            response.raise_for_status()
            return response

        except httpx.TimeoutException:
            # Retry on timeout with exponential backoff
            if retry_count < max_retries:
                wait_time = 2**retry_count  # 1, 2, 4 seconds
                logger.warning(
                    f"Timeout on {method} {url} (attempt {retry_count + 1}/{max_retries}). "
                    f"Waiting {wait_time} seconds before retry..."
                )
                await asyncio.sleep(wait_time)
                return await self._request_with_retry(method, url, max_retries, retry_count + 1, **kwargs)
            logger.error(f"{method} {url} failed after {max_retries} retries due to timeout")
            raise

        except httpx.HTTPStatusError as e:
            # Handle rate limiting (403 or 429)
            if e.response.status_code in (403, 429) and retry_count < max_retries:
                reset_time = e.response.headers.get("X-RateLimit-Reset")
                remaining = e.response.headers.get("X-RateLimit-Remaining", "")
                is_rate_limit = e.response.status_code == 429 or remaining == "0"

                if is_rate_limit:
                    if reset_time:
                        wait_time = min(int(reset_time) - int(time.time()), 60)
                        wait_time = max(wait_time, 1)
                    else:
                        wait_time = 2**retry_count

                    logger.warning(
                        f"Rate limit hit on {method} {url} (attempt {retry_count + 1}/{max_retries}). "
                        f"Waiting {wait_time} seconds before retry..."
                    )
                    await asyncio.sleep(wait_time)
                    return await self._request_with_retry(method, url, max_retries, retry_count + 1, **kwargs)
            raise

    async def get_pull_request(self, owner: str, repo: str, number: int) -> dict[str, Any]:
        """Get a pull request, including its addition and deletion counts.

        Args:
            owner: Repository owner (user or organization)
            repo: Repository name
            number: Pull request number

        Returns:
            Pull request data dictionary

        Raises:
            httpx.HTTPStatusError: If the request fails
        """
        response = await self._request_with_retry("GET", f"{self._repo_url(owner, repo)}/pulls/{number}")
        result: dict[str, Any] = response.json()
        return result

    async def remove_label(self, owner: str, repo: str, number: int, name: str) -> None:
        """Remove a label from an issue or pull request.

        Raises:
            httpx.HTTPStatusError: If the request fails (404 when the label is not applied)
        """
        await self._request_with_retry(
            "DELETE",
            f"{self._repo_url(owner, repo)}/issues/{number}/labels/{quote(name, safe='')}",
        )

    async def get_label(self, owner: str, repo: str, name: str) -> dict[str, Any]:
        """Get a label definition from the repository.

        Raises:
            httpx.HTTPStatusError: If the request fails (404 when the label does not exist)
        """
        response = await self._request_with_retry("GET", f"{self._repo_url(owner, repo)}/labels/{quote(name, safe='')}")
        result: dict[str, Any] = response.json()
        return result

    async def create_label(self, owner: str, repo: str, name: str, color: str, description: str) -> dict[str, Any]:
        """Create a label in the repository.

        Args:
            owner: Repository owner
            repo: Repository name
            name: Label name
            color: Hex color without the leading '#'
            description: Short label description

        Returns:
            Created label data dictionary

        Raises:
            httpx.HTTPStatusError: If the request fails (422 when the label already exists)
        """
        response = await self._request_with_retry(
            "POST",
            f"{self._repo_url(owner, repo)}/labels",
            json={"name": name, "color": color, "description": description},
        )
        result: dict[str, Any] = response.json()
        return result

    async def add_labels(self, owner: str, repo: str, number: int, labels: list[str]) -> list[dict[str, Any]]:
        """Add labels to an issue or pull request.

        Returns:
            The full list of labels now applied

        Raises:
            httpx.HTTPStatusError: If the request fails
        """
        response = await self._request_with_retry(
            "POST",
            f"{self._repo_url(owner, repo)}/issues/{number}/labels",
            json={"labels": labels},
        )
        result: list[dict[str, Any]] = response.json()
        return result

    async def list_issue_comments(self, owner: str, repo: str, number: int) -> list[dict[str, Any]]:
        """Get every comment on an issue or pull request conversation.

        Args:
            owner: Repository owner (user or organization)
            repo: Repository name
            number: Issue or pull request number

        Returns:
            List of comment data dictionaries, oldest first

        Raises:
            httpx.HTTPStatusError: If the request fails
        """
        per_page = 100
        page = 1
        all_comments: list[dict[str, Any]] = []

        while True:
            response = await self._request_with_retry(
                "GET",
                f"{self._repo_url(owner, repo)}/issues/{number}/comments",
                params={"per_page": per_page, "page": page},
            )
            comments: list[dict[str, Any]] = response.json()

            if not comments:
                break

            all_comments.extend(comments)

            # Check if there are more pages
            if len(comments) < per_page:
                break

            page += 1

        return all_comments

    async def create_issue_comment(self, owner: str, repo: str, number: int, body: str) -> dict[str, Any]:
        """Post a comment on an issue or pull request conversation.

        Raises:
            httpx.HTTPStatusError: If the request fails
        """
        response = await self._request_with_retry(
            "POST",
            f"{self._repo_url(owner, repo)}/issues/{number}/comments",
            json={"body": body},
        )
        result: dict[str, Any] = response.json()
        return result
