"""Table formatter for CLI output."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from vendorlens.models import StepStatus, VendorRiskProfile
from vendorlens.pipeline.scoring import format_points

STATUS_STYLES = {
    StepStatus.PENDING: "dim",
    StepStatus.COMPLETED: "green",
    StepStatus.ERROR: "red",
    StepStatus.SKIPPED: "yellow",
}


def _points_markup(points: float) -> str:
    if points > 0:
        return f"[green]+{format_points(points)}[/green]"
    if points < 0:
        return f"[red]{format_points(points)}[/red]"
    return format_points(points)


def format_profile(console: Console, profile: VendorRiskProfile) -> None:
    """Format and display a risk profile as tables."""
    console.print()

    if profile.is_disqualified:
        verdict = "[bold red]DISQUALIFIED[/bold red]"
    elif profile.passed:
        verdict = "[bold green]PASS[/bold green]"
    else:
        verdict = "[bold red]FAIL[/bold red]"

    score_line = f"Score: [cyan]{format_points(profile.total_score)}[/cyan]"
    if profile.percentage is not None:
        score_line += f" ({profile.percentage:.1f}%)"

    console.print(
        Panel(
            f"{verdict}\n"
            f"Domain: [cyan]{escape(profile.domain)}[/cyan]\n"
            f"{score_line}\n\n"
            f"{escape(profile.summary)}",
            title="Risk Summary",
        )
    )

    table = Table(title="Detailed Checklist", show_header=True, show_lines=True)
    table.add_column("Question", style="cyan")
    table.add_column("Status")
    table.add_column("Points", justify="right")
    table.add_column("Finding")
    table.add_column("Justification", max_width=60)

    for result in profile.checklist_results:
        style = STATUS_STYLES[result.status]
        table.add_row(
            result.question,
            f"[{style}]{result.status.value}[/{style}]",
            _points_markup(result.points),
            escape(result.finding),
            escape(result.justification),
        )

    console.print(table)
