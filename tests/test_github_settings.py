import pytest
from pydantic import SecretStr, ValidationError

from prsizer.conf.github import GitHubSettings


def test_token_configuration() -> None:
    """Test token configuration."""
    settings = GitHubSettings(github_token=SecretStr("test_token_123"))
    assert settings.github_token is not None
    assert settings.github_token.get_secret_value() == "test_token_123"


def test_token_is_secret() -> None:
    """Test the token is not exposed in reprs."""
    settings = GitHubSettings(github_token=SecretStr("test_token_123"))
    assert "test_token_123" not in repr(settings)


def test_token_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test loading the token from GITHUB_TOKEN."""
    monkeypatch.delenv("INPUT_GITHUB-TOKEN", raising=False)
    monkeypatch.setenv("GITHUB_TOKEN", "env_token_123")

    settings = GitHubSettings()
    assert settings.github_token is not None
    assert settings.github_token.get_secret_value() == "env_token_123"


def test_token_from_action_input(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test loading the token from the action input variable."""
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    monkeypatch.setenv("INPUT_GITHUB-TOKEN", "input_token_123")

    settings = GitHubSettings()
    assert settings.github_token is not None
    assert settings.github_token.get_secret_value() == "input_token_123"


def test_api_url_default(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test the public API is used by default."""
    monkeypatch.delenv("GITHUB_API_URL", raising=False)
    assert GitHubSettings().github_api_url == "https://api.github.com"


def test_api_url_trailing_slash_removed() -> None:
    """Test the API URL is normalized."""
    settings = GitHubSettings(github_api_url="https://ghe.example.com/api/v3/")
    assert settings.github_api_url == "https://ghe.example.com/api/v3"


def test_repository_valid() -> None:
    """Test owner/name repositories are accepted."""
    assert GitHubSettings(github_repository="octo/widgets").github_repository == "octo/widgets"


@pytest.mark.parametrize("repository", ["widgets", "octo/", "/widgets", "octo/widgets/extra"])
def test_repository_invalid(repository: str) -> None:
    """Test malformed repositories are rejected."""
    with pytest.raises(ValidationError, match="owner/name"):
        GitHubSettings(github_repository=repository)
