"""Orchestrates fetch, aggregate and render for one leaderboard run."""

from __future__ import annotations

from .aggregator import build_leaderboard
from .config import LeaderboardConfig
from .github.client import GitHubClient
from .models import LeaderboardReport
from .renderer import render_json, render_summary, write_markdown


async def run(config: LeaderboardConfig) -> LeaderboardReport:
    async with GitHubClient(
        config.token, timeout=config.timeout, page_delay=config.page_delay
    ) as client:
        report = await build_leaderboard(
            client, config.owner, config.repo, max_pages=config.max_pages
        )

    if config.output_format == "json":
        render_json(report, output_file=config.output_file)
    else:
        write_markdown(report, config.output_file)
    render_summary(report)
    return report
