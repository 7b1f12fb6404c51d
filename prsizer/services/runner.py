"""Pull request size check: classify, label, and advise."""

from dataclasses import dataclass, field
from logging import getLogger

from prsizer.conf.sizing import SizingSettings

from .advisory import post_advisory_comment
from .context import ActionContext
from .github.client import GitHubAPIClient
from .github.models import PullRequestSnapshot
from .labeler import sync_size_label
from .pr_size import SizeTier, categorize_pr_size

logger = getLogger(__name__)


@dataclass
class SizeCheckResult:
    """Outcome of a size check on one pull request."""

    number: int
    tier: SizeTier
    additions: int
    deletions: int
    labels_removed: list[str] = field(default_factory=list)
    label_added: bool = False
    comment_posted: bool = False

    @property
    def total_changes(self) -> int:
        return self.additions + self.deletions

    @property
    def outputs(self) -> dict[str, object]:
        """Step outputs published for later workflow steps."""
        return {"size-label": self.tier.value, "lines-changed": self.total_changes}


async def run_size_check(
    context: ActionContext,
    settings: SizingSettings,
    client: GitHubAPIClient,
) -> SizeCheckResult:
    """Classify the triggering pull request and sync its size label.

    Args:
        context: Workflow context holding the repository and event payload
        settings: Thresholds and the advisory comment toggle
        client: Entered GitHub API client

    Returns:
        The result of the check; outputs are left to the caller

    Raises:
        MissingPullRequestError: If the event has no pull request (before any API call)
        httpx.HTTPError: If fetching the pull request, attaching the label or
            handling the advisory comment fails
    """
    number = context.pull_request_number
    owner, repo = context.owner, context.repo

    pull_request = PullRequestSnapshot.from_api(await client.get_pull_request(owner, repo, number))
    logger.info(
        f"PR #{pull_request.number}: +{pull_request.additions} -{pull_request.deletions} "
        f"(total: {pull_request.total_changes} lines)"
    )

    tier = categorize_pr_size(pull_request.additions, pull_request.deletions, settings.thresholds)
    logger.info(f"Determined size: {tier.value}")

    changes = await sync_size_label(client, owner, repo, pull_request, tier)

    comment_posted = False
    if settings.comment_on_large and tier.is_oversized:
        comment_posted = await post_advisory_comment(
            client, owner, repo, pull_request, tier, medium_threshold=settings.medium_threshold
        )

    return SizeCheckResult(
        number=pull_request.number,
        tier=tier,
        additions=pull_request.additions,
        deletions=pull_request.deletions,
        labels_removed=changes.removed,
        label_added=changes.added,
        comment_posted=comment_posted,
    )
