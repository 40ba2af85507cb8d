"""Run configuration for tier-leaderboard."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_OUTPUT_FILE = "LEADERBOARD.md"
DEFAULT_MAX_PAGES = 5
DEFAULT_PAGE_DELAY = 0.1
DEFAULT_TIMEOUT = 30.0

# field name -> environment variable
REQUIRED_SETTINGS = {
    "token": "GITHUB_TOKEN",
    "owner": "REPO_OWNER",
    "repo": "REPO_NAME",
}


class ConfigError(Exception):
    """Required configuration is missing or invalid."""


@dataclass(frozen=True)
class LeaderboardConfig:
    token: str
    owner: str
    repo: str
    output_file: str = DEFAULT_OUTPUT_FILE
    output_format: str = "markdown"
    max_pages: int = DEFAULT_MAX_PAGES
    page_delay: float = DEFAULT_PAGE_DELAY
    timeout: float = DEFAULT_TIMEOUT


def load_config(
    token: str | None,
    owner: str | None,
    repo: str | None,
    **settings,
) -> LeaderboardConfig:
    """Validate required values and build a LeaderboardConfig.

    Raises ConfigError naming every missing environment variable.
    """
    given = {"token": token, "owner": owner, "repo": repo}
    missing = [env for name, env in REQUIRED_SETTINGS.items() if not given[name]]
    if missing:
        raise ConfigError(f"Missing required environment variables: {', '.join(missing)}")
    if settings.get("max_pages", DEFAULT_MAX_PAGES) < 1:
        raise ConfigError("max_pages must be at least 1")
    return LeaderboardConfig(token=token, owner=owner, repo=repo, **settings)
