import asyncio
import os
from collections.abc import Callable
from functools import wraps
from logging import getLogger
from typing import Any

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from .conf.settings import Settings
from .services.context import ActionContext, MissingPullRequestError
from .services.formatter import format_classification, format_size_result
from .services.github.auth import GitHubClient
from .services.outputs import StepOutputs, escape_command_data
from .services.pr_size import SizeThresholds, categorize_pr_size
from .services.runner import run_size_check
from .settings import get_settings

app = typer.Typer()
logger = getLogger(__name__)
console = Console()

PROJECT_NAME = Settings.model_fields["project_name"].default


def syncify(f: Callable[..., Any]) -> Callable[..., Any]:
    """This simple decorator converts an async function into a sync function,
    allowing it to work with Typer.
    """

    @wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        return asyncio.run(f(*args, **kwargs))

    return wrapper


@app.command(help=f"Display the current installed version of {PROJECT_NAME}.")
def version() -> None:
    from . import __version__

    typer.echo(f"{PROJECT_NAME} - {__version__}")


@app.command(name="run", help="Label the triggering pull request with its size tier.")
@syncify
async def run_action(
    token: str | None = typer.Option(
        None,
        "--token",
        help="GitHub token (overrides the github-token input and GITHUB_TOKEN)",
    ),
    event_path: str | None = typer.Option(
        None,
        "--event-path",
        help="Path to the event payload JSON (default: GITHUB_EVENT_PATH)",
    ),
    repository: str | None = typer.Option(
        None,
        "--repository",
        help="Repository in owner/name form (default: GITHUB_REPOSITORY)",
    ),
) -> None:
    """Classify the pull request, sync its size label and publish step outputs."""
    settings: Settings | None = None
    try:
        # Malformed inputs fail here and are reported like any other error
        settings = get_settings()
        context = _load_context(settings, event_path, repository)
        # Fail on non pull request events before touching the API
        number = context.pull_request_number
        logger.debug(f"Checking size of {context.owner}/{context.repo}#{number}")

        github_client = GitHubClient(settings, token_override=token).get_authenticated_client()
        async with github_client:
            result = await run_size_check(context, settings, github_client)

    except MissingPullRequestError as e:
        _report_failure(str(e), settings)
        raise typer.Exit(1)
    except Exception as e:
        logger.debug("Size check failed", exc_info=True)
        _report_failure(f"Action failed: {e}", settings)
        raise typer.Exit(1)

    StepOutputs(settings.github_output).set_many(result.outputs)
    format_size_result(result, console=console)
    logger.info("PR size check completed successfully")


@app.command(help="Classify a change size without calling GitHub.")
def classify(
    additions: int = typer.Argument(..., min=0, help="Lines added"),
    deletions: int = typer.Argument(..., min=0, help="Lines deleted"),
    small: int | None = typer.Option(None, "--small", help="Small tier threshold (default: configured value)"),
    medium: int | None = typer.Option(None, "--medium", help="Medium tier threshold (default: configured value)"),
    large: int | None = typer.Option(None, "--large", help="Large tier threshold (default: configured value)"),
) -> None:
    try:
        settings = get_settings()
    except ValidationError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    thresholds = SizeThresholds(
        small=settings.small_threshold if small is None else small,
        medium=settings.medium_threshold if medium is None else medium,
        large=settings.large_threshold if large is None else large,
    )
    tier = categorize_pr_size(additions, deletions, thresholds)
    format_classification(additions, deletions, tier, thresholds, console=console)


def _load_context(settings: Settings, event_path: str | None, repository: str | None) -> ActionContext:
    """Build the run context from CLI overrides, falling back to the runner environment."""
    overrides = settings.model_copy(
        update={
            "github_event_path": event_path or settings.github_event_path,
            "github_repository": repository or settings.github_repository,
        }
    )
    return ActionContext.from_settings(overrides)


def _report_failure(message: str, settings: Settings | None) -> None:
    """Report a failed run as a job annotation inside Actions, or on the console locally.

    Without settings (they failed to load) the runner environment decides.
    """
    if settings is not None:
        in_actions = settings.github_actions
    else:
        in_actions = os.environ.get("GITHUB_ACTIONS") == "true"

    if in_actions:
        typer.echo(f"::error::{escape_command_data(message)}")
    else:
        console.print(f"[red]Error:[/red] {escape(message)}")


if __name__ == "__main__":
    app()
