"""Command-line entry point for tier-leaderboard."""

from __future__ import annotations

import asyncio
import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler

from . import __version__
from .config import (
    DEFAULT_MAX_PAGES,
    DEFAULT_OUTPUT_FILE,
    DEFAULT_PAGE_DELAY,
    DEFAULT_TIMEOUT,
    ConfigError,
    load_config,
)
from .orchestrator import run

log = logging.getLogger("tier_leaderboard")


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=True)
        ],
        force=True,
    )
    # keep per-request noise out of INFO output
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)


@click.command()
@click.option("--token", envvar="GITHUB_TOKEN", help="GitHub token (or GITHUB_TOKEN env).")
@click.option("--owner", envvar="REPO_OWNER", help="Repository owner (or REPO_OWNER env).")
@click.option("--repo", envvar="REPO_NAME", help="Repository name (or REPO_NAME env).")
@click.option(
    "--output", "-o", "output_file", default=DEFAULT_OUTPUT_FILE, show_default=True,
    help="File the leaderboard is written to.",
)
@click.option(
    "--format", "output_format", type=click.Choice(["markdown", "json"]),
    default="markdown", show_default=True, help="Output format.",
)
@click.option(
    "--max-pages", type=click.IntRange(min=1), default=DEFAULT_MAX_PAGES, show_default=True,
    help="Maximum pages fetched per resource.",
)
@click.option(
    "--page-delay", type=float, default=DEFAULT_PAGE_DELAY, show_default=True,
    help="Seconds to wait between pages.",
)
@click.option(
    "--timeout", type=float, default=DEFAULT_TIMEOUT, show_default=True,
    help="Per-request timeout in seconds.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.version_option(version=__version__)
def main(
    token: str | None,
    owner: str | None,
    repo: str | None,
    output_file: str,
    output_format: str,
    max_pages: int,
    page_delay: float,
    timeout: float,
    verbose: bool,
) -> None:
    """Generate a contributor leaderboard from level-labelled GitHub issues."""
    _setup_logging(verbose)

    try:
        config = load_config(
            token,
            owner,
            repo,
            output_file=output_file,
            output_format=output_format,
            max_pages=max_pages,
            page_delay=page_delay,
            timeout=timeout,
        )
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    try:
        asyncio.run(run(config))
    except Exception:
        log.exception("Error generating leaderboard")
        sys.exit(1)
