"""Advisory comment for oversized pull requests."""

from logging import getLogger

from .github.client import GitHubAPIClient
from .github.models import IssueComment, PullRequestSnapshot
from .pr_size import SizeTier

logger = getLogger(__name__)

# Present in every advisory comment; used to find one posted by an earlier run
ADVISORY_MARKER = "Large Pull Request Detected"

ADVISORY_TEMPLATE = """## ⚠️ {marker}

This PR has **{total} lines changed** (+{additions}/-{deletions}), which is marked as **{tier}**.

### Why does PR size matter?
- Smaller PRs are easier to review
- Faster feedback cycles
- Reduced risk of bugs
- Better context for reviewers

### Suggestions:
- Consider breaking this PR into smaller, focused changes
- Each PR should ideally address a single concern
- Aim for PRs under {medium_threshold} lines when possible

Thank you for your contribution! 🚀"""


def render_advisory_comment(pull_request: PullRequestSnapshot, tier: SizeTier, medium_threshold: int) -> str:
    """Render the advisory comment body."""
    return ADVISORY_TEMPLATE.format(
        marker=ADVISORY_MARKER,
        total=pull_request.total_changes,
        additions=pull_request.additions,
        deletions=pull_request.deletions,
        tier=tier.value,
        medium_threshold=medium_threshold,
    )


def find_advisory_comment(comments: list[IssueComment]) -> IssueComment | None:
    """Return the first bot comment carrying the advisory marker, if any.

    Any bot account counts, not only the one this run authenticates as.
    """
    for comment in comments:
        if comment.is_bot and ADVISORY_MARKER in comment.body:
            return comment
    return None


async def post_advisory_comment(
    client: GitHubAPIClient,
    owner: str,
    repo: str,
    pull_request: PullRequestSnapshot,
    tier: SizeTier,
    medium_threshold: int,
) -> bool:
    """Post the advisory comment unless one already exists.

    Returns:
        True if a new comment was created

    Raises:
        httpx.HTTPError: If listing or creating comments fails
    """
    raw_comments = await client.list_issue_comments(owner, repo, pull_request.number)
    existing = find_advisory_comment([IssueComment.from_api(c) for c in raw_comments])

    if existing is not None:
        logger.info("Comment about large PR already exists, skipping")
        return False

    body = render_advisory_comment(pull_request, tier, medium_threshold)
    await client.create_issue_comment(owner, repo, pull_request.number, body)
    logger.info("Posted comment about large PR")
    return True
