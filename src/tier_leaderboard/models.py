"""Data models for tier-leaderboard."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, NewType

Login = NewType("Login", str)

TIER_LABELS = ("level1", "level2", "level3")


@dataclass(frozen=True)
class Issue:
    number: int
    labels: frozenset[str]
    assignees: tuple[Login, ...]
    closed: bool

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Issue:
        return cls(
            number=data["number"],
            labels=frozenset(label["name"].lower() for label in data["labels"]),
            assignees=tuple(Login(a["login"]) for a in data.get("assignees") or []),
            closed=data.get("state") == "closed",
        )

    @property
    def tiers(self) -> list[str]:
        """Tier labels carried by this issue, in tier order."""
        return [tier for tier in TIER_LABELS if tier in self.labels]


@dataclass(frozen=True)
class PullRequest:
    number: int
    author: Login | None
    merged_at: str | None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> PullRequest:
        merged_at = data.get("merged_at")
        # the author only matters once merged; unmerged PRs may have a deleted user
        if merged_at is None and not data.get("user"):
            author = None
        else:
            author = Login(data["user"]["login"])
        return cls(number=data["number"], author=author, merged_at=merged_at)


@dataclass
class ContributorStats:
    username: Login
    level1: int = 0
    level2: int = 0
    level3: int = 0
    merged_prs: int = 0

    @property
    def total(self) -> int:
        return self.level1 + self.level2 + self.level3 + self.merged_prs


@dataclass
class PageResult:
    """Records gathered from a paginated resource.

    ``complete`` is False only when a page failed and pagination stopped
    early; reaching the page cap still counts as complete.
    """

    records: list[dict[str, Any]] = field(default_factory=list)
    complete: bool = True


@dataclass
class LeaderboardReport:
    owner: str
    repo: str
    generated_on: date
    contributors: list[ContributorStats] = field(default_factory=list)
    issues_scanned: int = 0
    tier_issues: int = 0
    pull_requests_scanned: int = 0
    merged_prs: int = 0
    incomplete_resources: list[str] = field(default_factory=list)
