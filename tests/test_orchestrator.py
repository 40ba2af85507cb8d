"""Tests for the orchestrator module."""

from __future__ import annotations

from datetime import date
from unittest.mock import AsyncMock, patch

import pytest

from tier_leaderboard.config import load_config
from tier_leaderboard.models import LeaderboardReport
from tier_leaderboard.orchestrator import run


def _config(**settings):
    return load_config("fake", "octo", "hello", **settings)


def _mock_client_cls(mock_client_cls):
    mock_client = AsyncMock()
    mock_client_cls.return_value.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client_cls.return_value.__aexit__ = AsyncMock(return_value=False)
    return mock_client


@pytest.mark.asyncio
@patch("tier_leaderboard.orchestrator.render_summary")
@patch("tier_leaderboard.orchestrator.write_markdown")
@patch("tier_leaderboard.orchestrator.build_leaderboard")
@patch("tier_leaderboard.orchestrator.GitHubClient")
async def test_run_markdown_format(mock_client_cls, mock_build, mock_write, mock_summary):
    mock_client = _mock_client_cls(mock_client_cls)
    report = LeaderboardReport(owner="octo", repo="hello", generated_on=date(2024, 1, 1))
    mock_build.return_value = report

    result = await run(_config(max_pages=3, timeout=10.0, page_delay=0.5))

    assert result is report
    mock_client_cls.assert_called_once_with("fake", timeout=10.0, page_delay=0.5)
    mock_build.assert_called_once_with(mock_client, "octo", "hello", max_pages=3)
    mock_write.assert_called_once_with(report, "LEADERBOARD.md")
    mock_summary.assert_called_once_with(report)


@pytest.mark.asyncio
@patch("tier_leaderboard.orchestrator.render_summary")
@patch("tier_leaderboard.orchestrator.render_json")
@patch("tier_leaderboard.orchestrator.write_markdown")
@patch("tier_leaderboard.orchestrator.build_leaderboard")
@patch("tier_leaderboard.orchestrator.GitHubClient")
async def test_run_json_format(mock_client_cls, mock_build, mock_write, mock_json, mock_summary):
    _mock_client_cls(mock_client_cls)
    mock_build.return_value = LeaderboardReport(
        owner="octo", repo="hello", generated_on=date(2024, 1, 1)
    )

    await run(_config(output_format="json", output_file="out.json"))

    mock_json.assert_called_once_with(mock_build.return_value, output_file="out.json")
    mock_write.assert_not_called()


@pytest.mark.asyncio
@patch("tier_leaderboard.orchestrator.write_markdown")
@patch("tier_leaderboard.orchestrator.build_leaderboard")
@patch("tier_leaderboard.orchestrator.GitHubClient")
async def test_run_aggregation_error_writes_nothing(mock_client_cls, mock_build, mock_write):
    _mock_client_cls(mock_client_cls)
    mock_build.side_effect = KeyError("labels")

    with pytest.raises(KeyError):
        await run(_config())
    mock_write.assert_not_called()
