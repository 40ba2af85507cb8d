"""Async GitHub REST client with Link-header pagination."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from typing import Any

import httpx

from ..models import PageResult
from .rate_limit import RateLimitMonitor

log = logging.getLogger(__name__)

API_URL = "https://api.github.com"
USER_AGENT = "tier-leaderboard"
PER_PAGE = 100

_CLOSED_UPDATED_DESC = {"state": "closed", "sort": "updated", "direction": "desc"}


class PageFetchError(Exception):
    """A single page of a paginated resource could not be fetched."""

    def __init__(self, path: str, page: int, reason: str) -> None:
        super().__init__(f"{path} page {page}: {reason}")
        self.path = path
        self.page = page
        self.reason = reason


class GitHubClient:
    """Sequential, paginated reader for the GitHub REST API.

    Use as an async context manager so the underlying connection pool is
    closed when the run ends.
    """

    def __init__(
        self,
        token: str,
        *,
        base_url: str = API_URL,
        timeout: float = 30.0,
        page_delay: float = 0.1,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._http = httpx.AsyncClient(
            base_url=base_url,
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "User-Agent": USER_AGENT,
            },
            timeout=timeout,
            transport=transport,
        )
        self.rate_limit = RateLimitMonitor(page_delay=page_delay)

    async def __aenter__(self) -> GitHubClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def close(self) -> None:
        await self._http.aclose()

    async def _get_page(
        self, path: str, params: dict[str, Any], page: int
    ) -> tuple[list[dict[str, Any]], bool]:
        await self.rate_limit.wait_if_needed()
        log.info("Fetching page %d of %s", page, path)
        try:
            response = await self._http.get(
                path, params={**params, "page": page, "per_page": PER_PAGE}
            )
            self.rate_limit.update(response)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPError as exc:
            raise PageFetchError(path, page, str(exc) or type(exc).__name__) from exc
        except ValueError as exc:
            raise PageFetchError(path, page, f"invalid JSON body: {exc}") from exc
        if not isinstance(data, list):
            raise PageFetchError(path, page, f"expected a JSON array, got {type(data).__name__}")
        return data, "next" in response.links

    async def iter_pages(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        max_pages: int = 10,
    ) -> AsyncIterator[list[dict[str, Any]]]:
        """Yield pages of ``path`` lazily, at most ``max_pages`` of them.

        Raises PageFetchError on the first page that fails.
        """
        params = dict(params or {})
        for page in range(1, max_pages + 1):
            records, has_next = await self._get_page(path, params, page)
            yield records
            if not has_next or page == max_pages:
                return
            await self.rate_limit.pause()

    async def fetch_all_pages(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        max_pages: int = 10,
    ) -> PageResult:
        """Concatenate every page of ``path`` in server order.

        A failed page ends pagination for this resource; the records
        gathered before it are returned with ``complete=False``.
        """
        result = PageResult()
        try:
            async for records in self.iter_pages(path, params, max_pages):
                result.records.extend(records)
        except PageFetchError as exc:
            log.warning("Error fetching %s, keeping %d records: %s", path, len(result.records), exc)
            result.complete = False
        return result

    async def list_closed_issues(self, owner: str, repo: str, max_pages: int = 5) -> PageResult:
        return await self.fetch_all_pages(
            f"/repos/{owner}/{repo}/issues", _CLOSED_UPDATED_DESC, max_pages
        )

    async def list_closed_pull_requests(
        self, owner: str, repo: str, max_pages: int = 5
    ) -> PageResult:
        return await self.fetch_all_pages(
            f"/repos/{owner}/{repo}/pulls", _CLOSED_UPDATED_DESC, max_pages
        )
