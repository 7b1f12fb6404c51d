import pytest
from pydantic import SecretStr

from prsizer.conf.github import GitHubSettings
from prsizer.services.github.auth import GitHubClient
from prsizer.services.github.client import GitHubAPIClient


@pytest.fixture
def token_settings() -> GitHubSettings:
    """Create test settings with a token."""
    return GitHubSettings(github_token=SecretStr("test_pat_token"), github_api_url="https://api.github.com")


def test_client_uses_settings_token(token_settings: GitHubSettings) -> None:
    """Test the client is authenticated with the configured token."""
    client = GitHubClient(settings=token_settings).get_authenticated_client()

    assert isinstance(client, GitHubAPIClient)
    assert client.token == "test_pat_token"
    assert client.base_url == "https://api.github.com"


def test_token_override(token_settings: GitHubSettings) -> None:
    """Test using token override instead of settings."""
    client = GitHubClient(settings=token_settings, token_override="override_token").get_authenticated_client()

    assert client.token == "override_token"


def test_enterprise_api_url() -> None:
    """Test the configured API URL is passed to the client."""
    settings = GitHubSettings(github_token=SecretStr("t"), github_api_url="https://ghe.example.com/api/v3/")

    client = GitHubClient(settings=settings).get_authenticated_client()

    assert client.base_url == "https://ghe.example.com/api/v3"


def test_missing_token_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test a clear error when no token is configured."""
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    settings = GitHubSettings(github_token=None)

    with pytest.raises(ValueError, match="GitHub token not configured"):
        GitHubClient(settings=settings).get_authenticated_client()


def test_defaults_to_environment_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test the factory loads settings from the environment when none are given."""
    monkeypatch.setenv("GITHUB_TOKEN", "env_token")

    client = GitHubClient().get_authenticated_client()

    assert client.token == "env_token"
