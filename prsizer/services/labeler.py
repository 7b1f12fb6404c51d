"""Size label reconciliation for pull requests."""

from dataclasses import dataclass, field
from logging import getLogger

import httpx

from .github.client import GitHubAPIClient
from .github.models import PullRequestSnapshot
from .pr_size import TIER_LABEL_NAMES, SizeTier

logger = getLogger(__name__)


@dataclass
class LabelChanges:
    """Label mutations made while reconciling a pull request."""

    removed: list[str] = field(default_factory=list)
    failed_removals: list[str] = field(default_factory=list)
    created: bool = False
    added: bool = False


def applied_tier_labels(labels: frozenset[str]) -> frozenset[str]:
    """Tier labels among ``labels``."""
    return labels & TIER_LABEL_NAMES


def stale_tier_labels(labels: frozenset[str], tier: SizeTier) -> list[str]:
    """Return applied tier labels that no longer match ``tier``, in tier order."""
    applied = applied_tier_labels(labels)
    return [t.value for t in SizeTier if t.value in applied and t is not tier]


async def ensure_label_exists(client: GitHubAPIClient, owner: str, repo: str, tier: SizeTier) -> bool:
    """Make sure the tier label is defined in the repository.

    Lookup and creation failures, including unreadable response bodies, are
    logged and swallowed; attaching the label afterwards is what decides
    whether the run fails.

    Returns:
        True if the label had to be created
    """
    try:
        await client.get_label(owner, repo, tier.value)
        return False
    except (httpx.HTTPError, ValueError):
        logger.debug(f"Label {tier.value} not found in {owner}/{repo}, creating it")

    try:
        await client.create_label(owner, repo, tier.value, color=tier.label_color, description=tier.description)
    except (httpx.HTTPError, ValueError) as e:
        logger.warning(f"Failed to create label {tier.value}: {e}")
        return False

    logger.info(f"Created label: {tier.value}")
    return True


async def sync_size_label(
    client: GitHubAPIClient,
    owner: str,
    repo: str,
    pull_request: PullRequestSnapshot,
    tier: SizeTier,
) -> LabelChanges:
    """Converge the pull request's tier labels to exactly ``tier``.

    Stale tier labels are removed one at a time and a failed removal (HTTP
    error or an unreadable response body) does not stop the others. Attaching
    the new label is not guarded.

    Raises:
        httpx.HTTPError: If attaching the tier label fails
    """
    changes = LabelChanges()

    for name in stale_tier_labels(pull_request.labels, tier):
        try:
            await client.remove_label(owner, repo, pull_request.number, name)
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Failed to remove label {name}: {e}")
            changes.failed_removals.append(name)
            continue
        logger.info(f"Removed label: {name}")
        changes.removed.append(name)

    if tier.value in pull_request.labels:
        logger.info(f"Label {tier.value} already applied")
        return changes

    changes.created = await ensure_label_exists(client, owner, repo, tier)

    await client.add_labels(owner, repo, pull_request.number, [tier.value])
    logger.info(f"Added label: {tier.value}")
    changes.added = True

    return changes
