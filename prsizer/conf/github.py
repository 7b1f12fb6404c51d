from pydantic import AliasChoices, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GitHubSettings(BaseSettings):
    """GitHub API configuration and workflow runner environment."""

    model_config = SettingsConfigDict(populate_by_name=True, env_ignore_empty=True, extra="ignore")

    # Accepts the action input as the runner exports it, or a plain env var
    github_token: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("input_github-token", "github_token"),
        description="GitHub token used to authenticate every API call",
    )

    github_api_url: str = Field(
        default="https://api.github.com",
        description="Base URL for the GitHub REST API (set by the runner on GitHub Enterprise)",
    )

    github_repository: str | None = Field(
        default=None,
        description="Repository running the workflow, in owner/name form",
    )

    github_event_path: str | None = Field(
        default=None,
        description="Path to the JSON payload of the event that triggered the workflow",
    )

    github_output: str | None = Field(
        default=None,
        description="Path to the file collecting step outputs",
    )

    github_actions: bool = Field(
        default=False,
        description="Set by the runner when executing inside a GitHub Actions workflow",
    )

    @field_validator("github_api_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize the API URL so paths can be appended directly."""
        return v.rstrip("/")

    @field_validator("github_repository")
    @classmethod
    def validate_repository(cls, v: str | None) -> str | None:
        """Validate repository is in owner/name form."""
        if v is None:
            return v
        owner, _, name = v.partition("/")
        if not owner or not name or "/" in name:
            raise ValueError("github_repository must be in owner/name form")
        return v
