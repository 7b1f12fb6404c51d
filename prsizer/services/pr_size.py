"""PR size categorization utilities."""

from dataclasses import dataclass
from enum import Enum
from logging import getLogger

logger = getLogger(__name__)


class SizeTier(str, Enum):
    """Pull request size tiers, ordered from smallest to largest.

    The values double as the label names applied on GitHub, so they must
    stay stable.
    """

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    EXTRA_LARGE = "extra-large"

    @property
    def label_color(self) -> str:
        """Hex color (without '#') used when creating the tier label."""
        return TIER_LABEL_COLORS[self]

    @property
    def description(self) -> str:
        """Description used when creating the tier label."""
        return f"PR size: {self.value}"

    @property
    def is_oversized(self) -> bool:
        """Whether the tier warrants an advisory comment."""
        return self in (SizeTier.LARGE, SizeTier.EXTRA_LARGE)

    def __str__(self) -> str:
        return self.value


TIER_LABEL_COLORS: dict[SizeTier, str] = {
    SizeTier.SMALL: "00ff00",
    SizeTier.MEDIUM: "ffff00",
    SizeTier.LARGE: "ff9900",
    SizeTier.EXTRA_LARGE: "ff0000",
}

TIER_LABEL_NAMES: frozenset[str] = frozenset(tier.value for tier in SizeTier)


@dataclass(frozen=True)
class SizeThresholds:
    """Inclusive upper bounds for the small, medium and large tiers."""

    small: int
    medium: int
    large: int

    @property
    def is_ordered(self) -> bool:
        return self.small <= self.medium <= self.large


def categorize_pr_size(additions: int, deletions: int, thresholds: SizeThresholds) -> SizeTier:
    """Categorize PR size based on total lines changed.

    Args:
        additions: Number of lines added
        deletions: Number of lines deleted
        thresholds: Tier boundaries

    Returns:
        The size tier for ``additions + deletions``

    Boundaries are inclusive and checked in order, so with thresholds
    (50, 200, 500):
        - 0-50 lines: small
        - 51-200 lines: medium
        - 201-500 lines: large
        - 501+ lines: extra-large
    """
    total_lines = additions + deletions

    if total_lines <= thresholds.small:
        return SizeTier.SMALL
    elif total_lines <= thresholds.medium:
        return SizeTier.MEDIUM
    elif total_lines <= thresholds.large:
        return SizeTier.LARGE
    else:
        return SizeTier.EXTRA_LARGE
