"""Markdown/JSON leaderboard writers and a rich terminal summary."""

from __future__ import annotations

import json
from dataclasses import asdict

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .models import LeaderboardReport

PROFILE_URL = "https://github.com/{login}"

PLACEHOLDER_ROW = "| *No contributors yet* | - | - | - | - |"

_HEADER = """\
# 🏆 Contributors Leaderboard

This leaderboard tracks contributors who have completed issues labeled as \
`level1`, `level2`, or `level3`, along with their merged pull requests.

*Last updated: {date}*

| Username | Level 1 | Level 2 | Level 3 | PRs Merged |
|----------|---------|---------|---------|-------------|
"""

_LEGEND = """
---

**Legend:**
- **Level 1/2/3**: Number of completed issues with respective level labels
- **PRs Merged**: Number of merged pull requests
- Contributors are sorted by total contributions (levels + PRs)

*This leaderboard is automatically updated by GitHub Actions.*
"""


def _write_to_file(content: str, output_file: str) -> None:
    """Write content to a file and print confirmation."""
    with open(output_file, "w", encoding="utf-8") as f:
        f.write(content)
    Console().print(f"Saved to {output_file}")


def render_markdown(report: LeaderboardReport) -> str:
    """Render the leaderboard as a Markdown table with a legend footer."""
    rows = []
    for c in report.contributors:
        link = f"[@{c.username}]({PROFILE_URL.format(login=c.username)})"
        rows.append(f"| {link} | {c.level1} | {c.level2} | {c.level3} | {c.merged_prs} |")
    if not rows:
        rows.append(PLACEHOLDER_ROW)

    return (
        _HEADER.format(date=report.generated_on.isoformat())
        + "\n".join(rows)
        + "\n"
        + _LEGEND
    )


def write_markdown(report: LeaderboardReport, output_file: str) -> None:
    _write_to_file(render_markdown(report), output_file)


def render_json(report: LeaderboardReport, output_file: str | None = None) -> None:
    """Render a LeaderboardReport as JSON."""
    data = asdict(report)
    data["generated_on"] = report.generated_on.isoformat()
    for entry, contributor in zip(data["contributors"], report.contributors):
        entry["total"] = contributor.total
    content = json.dumps(data, indent=2, ensure_ascii=False)
    if output_file:
        _write_to_file(content, output_file)
    else:
        print(content)


def render_summary(
    report: LeaderboardReport,
    top_n: int = 3,
    console: Console | None = None,
) -> None:
    """Print run totals and the top contributors to the terminal."""
    console = console or Console()

    console.print(Panel(
        Text(f"tier-leaderboard: {report.owner}/{report.repo}", justify="center"),
        style="bold cyan",
    ))

    if report.incomplete_resources:
        console.print(
            f"[bold yellow]Warning:[/bold yellow] Partial data for "
            f"{', '.join(report.incomplete_resources)} (a page fetch failed)"
        )

    summary = Table(show_header=False, box=None, padding=(0, 2))
    summary.add_column("label", style="dim")
    summary.add_column("value", style="bold")
    summary.add_row("Closed issues", str(report.issues_scanned))
    summary.add_row("Level issues", str(report.tier_issues))
    summary.add_row("Merged PRs", str(report.merged_prs))
    summary.add_row("Contributors", str(len(report.contributors)))
    console.print(summary)

    if report.contributors:
        console.print("[bold]Top contributors[/bold]")
        top = Table(show_header=True, header_style="bold")
        top.add_column("#", justify="right")
        top.add_column("Username")
        top.add_column("Total ▼", justify="right")
        for i, c in enumerate(report.contributors[:top_n], 1):
            top.add_row(str(i), c.username, str(c.total))
        console.print(top)
