from logging import getLogger

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .pr_size import SizeThresholds, SizeTier
from .runner import SizeCheckResult

logger = getLogger(__name__)


def format_size_result(result: SizeCheckResult, console: Console | None = None) -> None:
    """Display the outcome of a size check using Rich library.

    Args:
        result: Size check result
        console: Console to print to (default: a new stdout console)
    """
    console = console or Console()

    table = Table(title=f"PR #{result.number}", show_header=True, header_style="bold magenta")
    table.add_column("Size", no_wrap=True)
    table.add_column("Lines Changed", style="cyan", justify="right", no_wrap=True)
    table.add_column("Additions", style="green", justify="right", no_wrap=True)
    table.add_column("Deletions", style="red", justify="right", no_wrap=True)
    table.add_column("Labels Removed", style="dim")
    table.add_column("Label", no_wrap=True)
    table.add_column("Comment", no_wrap=True)

    table.add_row(
        format_size_badge(result.tier),
        str(result.total_changes),
        f"+{result.additions}",
        f"-{result.deletions}",
        ", ".join(result.labels_removed) or "-",
        "[green]added[/green]" if result.label_added else "[dim]already applied[/dim]",
        "[yellow]posted[/yellow]" if result.comment_posted else "-",
    )
    console.print(table)


def format_classification(
    additions: int,
    deletions: int,
    tier: SizeTier,
    thresholds: SizeThresholds,
    console: Console | None = None,
) -> None:
    """Display an offline classification with the thresholds that produced it."""
    console = console or Console()

    summary_text = (
        f"[bold]Lines changed:[/bold] {additions + deletions} (+{additions}/-{deletions})\n"
        f"[bold]Size:[/bold] {format_size_badge(tier)}\n"
        f"[dim]Thresholds: small <= {thresholds.small}, medium <= {thresholds.medium}, "
        f"large <= {thresholds.large}[/dim]"
    )
    if not thresholds.is_ordered:
        summary_text += "\n[red]Warning:[/red] thresholds are not in ascending order"

    console.print(Panel(summary_text, title="Classification", border_style="cyan"))


def format_size_badge(tier: SizeTier) -> str:
    """Format size tier with color for Rich display.

    Args:
        tier: Size tier

    Returns:
        Colored tier name
    """
    color_map = {
        SizeTier.SMALL: "green",
        SizeTier.MEDIUM: "yellow",
        SizeTier.LARGE: "magenta",
        SizeTier.EXTRA_LARGE: "bold red",
    }

    color = color_map.get(tier, "white")
    return f"[{color}]{tier.value}[/{color}]"
