"""Contributor leaderboard built from tier-labelled GitHub issues."""

__version__ = "0.1.0"
