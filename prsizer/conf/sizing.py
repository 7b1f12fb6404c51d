from logging import getLogger
from typing import Any

from pydantic import AliasChoices, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from prsizer.services.pr_size import SizeThresholds

logger = getLogger(__name__)


class SizingSettings(BaseSettings):
    """Size tier thresholds and advisory comment toggle."""

    model_config = SettingsConfigDict(populate_by_name=True, env_ignore_empty=True, extra="ignore")

    small_threshold: int = Field(
        default=50,
        validation_alias=AliasChoices("input_small-threshold", "small_threshold"),
        description="Maximum changed lines (inclusive) for the small tier",
    )
    medium_threshold: int = Field(
        default=200,
        validation_alias=AliasChoices("input_medium-threshold", "medium_threshold"),
        description="Maximum changed lines (inclusive) for the medium tier",
    )
    large_threshold: int = Field(
        default=500,
        validation_alias=AliasChoices("input_large-threshold", "large_threshold"),
        description="Maximum changed lines (inclusive) for the large tier",
    )

    comment_on_large: bool = Field(
        default=True,
        validation_alias=AliasChoices("input_comment-on-large", "comment_on_large"),
        description="Post an advisory comment on large and extra-large pull requests",
    )

    @property
    def thresholds(self) -> SizeThresholds:
        """Tier boundaries as used by the classifier."""
        return SizeThresholds(small=self.small_threshold, medium=self.medium_threshold, large=self.large_threshold)

    @field_validator("comment_on_large", mode="before")
    @classmethod
    def parse_comment_flag(cls, v: Any) -> Any:
        """Only the string "true" enables commenting; any other string disables it."""
        if isinstance(v, str):
            return v.strip().lower() == "true"
        return v

    @model_validator(mode="after")
    def warn_on_misordered_thresholds(self) -> "SizingSettings":
        """Warn, without rejecting, when thresholds are not non-decreasing."""
        if not self.thresholds.is_ordered:
            logger.warning(
                f"Size thresholds are not in ascending order "
                f"(small={self.small_threshold}, medium={self.medium_threshold}, large={self.large_threshold}); "
                "tier boundaries will be inconsistent"
            )
        return self
