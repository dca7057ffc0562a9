"""Main CLI entry point."""

import asyncio
import logging

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ..ai.models import AnalyzedIssue
from ..config import MonitorConfig
from ..monitor import IssueMonitor

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="issue-monitor",
    help="Daily GitHub issue triage with AI analysis and notifications",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def render_results(analyzed: list[AnalyzedIssue]) -> Table:
    """Build a results table for the console."""
    table = Table(title="Issue Analysis")
    table.add_column("Issue #", style="cyan")
    table.add_column("Title")
    table.add_column("Priority", style="magenta")
    table.add_column("Category")
    table.add_column("Effort")
    table.add_column("Suggested Action", style="green")

    for item in analyzed:
        table.add_row(
            str(item.issue.number),
            item.issue.title,
            item.analysis.priority,
            item.analysis.category,
            item.analysis.estimated_effort,
            item.analysis.suggested_action,
        )
    return table


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def run(
    owner: str | None = typer.Option(
        None, "--owner", "-o", help="Repository owner (defaults to REPO_OWNER)"
    ),
    repo: str | None = typer.Option(
        None, "--repo", "-r", help="Repository name (defaults to REPO_NAME)"
    ),
    model: str | None = typer.Option(
        None, "--model", "-m", help="Model identifier (defaults to MODEL_NAME)"
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", help="Analyze issues without sending notifications"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Check for new issues, analyze them, and send notifications.

    Examples:
        issue-monitor run
        issue-monitor run --owner octocat --repo hello-world --dry-run
    """
    configure_logging(verbose)

    try:
        config = MonitorConfig.from_env()
        overrides = {"repo_owner": owner, "repo_name": repo, "model": model}
        config = config.model_copy(
            update={key: value for key, value in overrides.items() if value}
        )
        config.check_required()

        analyzed = asyncio.run(IssueMonitor(config).run(dry_run=dry_run))
    except Exception as e:
        if verbose:
            console.print_exception()
        console.print(f"[red]❌ Error: {e}[/red]")
        raise typer.Exit(1)

    if analyzed:
        console.print(render_results(analyzed))
    console.print(f"✅ Processed {len(analyzed)} new issue(s)")


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def version() -> None:
    """Show version information."""
    from issue_monitor import __version__

    console.print(f"GitHub Issue Monitor v{__version__}")


if __name__ == "__main__":
    app()
