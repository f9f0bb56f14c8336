"""Command-line interface for News Verifier credibility analysis."""

import asyncio
import json
import sys
from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ...application.verifier import NewsVerifierService, create_verifier_service
from ...config.logging import configure_logging
from ...domain.errors import error_response
from ...domain.models import AnalysisRequest, AnalysisResult

console = Console(force_terminal=True, legacy_windows=False)

# (label, field, maximum) in rubric order
SCORE_ROWS = [
    ("来源可信度", "source", 30),
    ("事实准确性", "fact", 50),
    ("逻辑一致性", "logic", 20),
    ("总分", "total", 100),
]


def _get_score_color(total: float) -> str:
    """Get display color for a total score."""
    if total >= 80:
        return "green"
    if total >= 60:
        return "yellow"
    return "red"


def _print_error(message: str) -> None:
    console.print(
        Panel(
            f"[red]Error:[/red] {message}",
            title="[bold red]Error[/bold red]",
            border_style="red",
        )
    )


def _print_result(result: AnalysisResult, json_output: bool = False) -> None:
    """Print an analysis result to the console.

    Args:
        result: AnalysisResult to print.
        json_output: If True, output as JSON. Otherwise, print formatted text.
    """
    if json_output:
        console.print_json(json.dumps(result.to_payload(), ensure_ascii=False))
        return

    color = _get_score_color(result.scores.total)

    score_table = Table(
        title="[bold]Credibility Scores[/bold]",
        show_header=True,
        header_style="bold magenta",
        border_style=color,
        padding=(0, 1),
    )
    score_table.add_column("Dimension", style="bright_white")
    score_table.add_column("Score", style="bright_cyan", justify="right")
    for label, field, maximum in SCORE_ROWS:
        value = getattr(result.scores, field)
        score_table.add_row(label, f"{value:g} / {maximum}")
    console.print(score_table)
    console.print()

    if result.analysis:
        console.print(
            Panel(
                Text(result.analysis),
                title="[bold]Analysis[/bold]",
                border_style="blue",
                padding=(1, 2),
            )
        )
        console.print()

    if result.key_points:
        points = Text()
        for i, point in enumerate(result.key_points, 1):
            points.append(f"{i}. ", style="dim")
            points.append(f"{point}\n")
        console.print(
            Panel(points, title="[bold]Key Points[/bold]", border_style="cyan", padding=(1, 2))
        )
        console.print()

    if result.summary:
        console.print(
            Panel(
                Text(result.summary),
                title="[bold]Summary[/bold]",
                border_style="dim blue",
                padding=(1, 2),
            )
        )


async def _analyze(
    request: AnalysisRequest,
    json_output: bool = False,
    service: Optional[NewsVerifierService] = None,
) -> int:
    """Analyze one request and print the result.

    Returns:
        Exit code (0 for success, 1 for error).
    """
    service = service or create_verifier_service()
    try:
        if json_output:
            result = await service.analyze(request)
        else:
            with console.status("[cyan]Analyzing...[/cyan]", spinner="dots"):
                result = await service.analyze(request)
    except Exception as e:
        _, body = error_response(e)
        if json_output:
            console.print_json(json.dumps(body, ensure_ascii=False))
        else:
            _print_error(body["error"])
        return 1

    _print_result(result, json_output=json_output)
    return 0


def _print_help() -> None:
    """Print help message."""
    help_content = Text()
    help_content.append("newsverifier", style="bold cyan")
    help_content.append(" - AI-powered news credibility scoring\n\n", style="white")

    help_content.append("Usage:\n", style="bold")
    help_content.append("  newsverifier <text>             ", style="cyan")
    help_content.append("Score a piece of news text\n", style="dim")
    help_content.append("  newsverifier --url <url>        ", style="cyan")
    help_content.append("Fetch and score a news article\n", style="dim")
    help_content.append("  newsverifier --json [...]       ", style="cyan")
    help_content.append("Output results as JSON\n\n", style="dim")

    help_content.append("Environment Variables:\n", style="bold")
    help_content.append("  DEEPSEEK_KEY", style="yellow")
    help_content.append("       DeepSeek API key (required)\n", style="dim")
    help_content.append("  ALLOWED_DOMAINS", style="yellow")
    help_content.append("    Comma-separated news site suffixes for --url\n", style="dim")

    console.print(
        Panel(
            help_content,
            title="[bold bright_blue]Help[/bold bright_blue]",
            border_style="bright_blue",
            padding=(1, 2),
        )
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Usage:
        newsverifier <text>          # Score text
        newsverifier --url <url>     # Score an article page
        newsverifier --json ...      # Output as JSON
        newsverifier --help          # Show help

    Returns:
        Exit code (0 for success, 1 for error).
    """
    args = list(sys.argv[1:] if argv is None else argv)

    if not args or args[0] in ("-h", "--help"):
        _print_help()
        return 0

    json_output = False
    if args[0] == "--json":
        json_output = True
        args = args[1:]

    is_url = False
    if args and args[0] == "--url":
        is_url = True
        args = args[1:]

    content = " ".join(args).strip()
    if not content:
        _print_error("内容不能为空")
        return 1

    configure_logging("WARNING")
    request = AnalysisRequest(content=content, is_url=is_url)
    return asyncio.run(_analyze(request, json_output=json_output))


if __name__ == "__main__":
    sys.exit(main())
