"""Fold fetched issues and pull requests into a ranked leaderboard."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime, timezone

from .github.client import GitHubClient
from .models import (
    ContributorStats,
    Issue,
    LeaderboardReport,
    Login,
    PullRequest,
)

log = logging.getLogger(__name__)


def qualifying_issues(issues: Iterable[Issue]) -> list[Issue]:
    """Closed issues carrying at least one tier label."""
    return [issue for issue in issues if issue.closed and issue.tiers]


def merged_pull_requests(pulls: Iterable[PullRequest]) -> list[PullRequest]:
    return [pr for pr in pulls if pr.merged_at is not None]


def tally_issues(issues: Iterable[Issue]) -> dict[Login, ContributorStats]:
    """Credit every assignee of a qualifying issue with each of its tiers.

    Insertion order of the returned mapping is discovery order.
    """
    stats: dict[Login, ContributorStats] = {}
    for issue in qualifying_issues(issues):
        for login in issue.assignees:
            if login not in stats:
                stats[login] = ContributorStats(username=login)
            entry = stats[login]
            for tier in issue.tiers:
                setattr(entry, tier, getattr(entry, tier) + 1)
    return stats


def count_merged_prs(
    stats: dict[Login, ContributorStats], pulls: Iterable[PullRequest]
) -> None:
    """Set ``merged_prs`` for contributors already present in ``stats``."""
    merged = merged_pull_requests(pulls)
    for login, entry in stats.items():
        entry.merged_prs = sum(1 for pr in merged if pr.author == login)
        log.debug("%s: %d merged PRs", login, entry.merged_prs)


def rank_contributors(stats: Iterable[ContributorStats]) -> list[ContributorStats]:
    # sorted() is stable, so equal totals keep discovery order
    return sorted(stats, key=lambda c: c.total, reverse=True)


def aggregate_contributors(
    issues: Iterable[Issue], pulls: Iterable[PullRequest]
) -> list[ContributorStats]:
    stats = tally_issues(issues)
    count_merged_prs(stats, pulls)
    return rank_contributors(stats.values())


async def build_leaderboard(
    client: GitHubClient,
    owner: str,
    repo: str,
    max_pages: int = 5,
) -> LeaderboardReport:
    """Fetch closed issues and pull requests and rank their contributors."""
    report = LeaderboardReport(
        owner=owner,
        repo=repo,
        generated_on=datetime.now(timezone.utc).date(),
    )

    log.info("Fetching closed issues with level labels...")
    issue_page = await client.list_closed_issues(owner, repo, max_pages=max_pages)
    if not issue_page.complete:
        report.incomplete_resources.append("issues")
    issues = [Issue.from_api(record) for record in issue_page.records]
    report.issues_scanned = len(issues)
    report.tier_issues = len(qualifying_issues(issues))
    log.info(
        "Found %d closed issues, %d with level labels", report.issues_scanned, report.tier_issues
    )

    stats = tally_issues(issues)
    log.info("Processing %d contributors...", len(stats))

    # Pull requests only matter for contributors who already qualified.
    if stats:
        log.info("Fetching merged PRs...")
        pull_page = await client.list_closed_pull_requests(owner, repo, max_pages=max_pages)
        if not pull_page.complete:
            report.incomplete_resources.append("pulls")
        pulls = [PullRequest.from_api(record) for record in pull_page.records]
        report.pull_requests_scanned = len(pulls)
        report.merged_prs = len(merged_pull_requests(pulls))
        log.info("Found %d merged PRs", report.merged_prs)
        count_merged_prs(stats, pulls)

    report.contributors = rank_contributors(stats.values())
    return report
