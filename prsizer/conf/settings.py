from pydantic_settings import SettingsConfigDict

from .github import GitHubSettings
from .sizing import SizingSettings


class Settings(GitHubSettings, SizingSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
        env_ignore_empty=True,
    )

    project_name: str = "prsizer"
    debug: bool = False
