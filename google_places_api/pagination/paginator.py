"""
Pagination Controller

Runs the fetch/merge loop for the search endpoints. Pages are fetched
strictly in order because each page's token is only known once the
previous page has been decoded.
"""

import asyncio
import logging
from dataclasses import replace
from typing import Awaitable, Callable, Optional

import httpx

from ..config import PAGE_TOKEN_DELAY
from ..exceptions import PreconditionError
from ..models.results import SearchResultPage
from .accumulator import AggregatedResult
from .fetcher import fetch_page
from .params import SearchCriteria, build_params

logger = logging.getLogger(__name__)

SleepFunc = Callable[[float], Awaitable[None]]


class Paginator:
    """Fetches and merges up to ``max_pages`` pages from one search endpoint.

    Holds no per-call state, so one instance may serve concurrent
    ``execute`` calls; each call builds its own AggregatedResult.

    Args:
        client: Shared async HTTP client
        url: Search endpoint URL
        api_key: Places API key
        sleep: Awaitable used for the inter-page delay (default asyncio.sleep)
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        url: str,
        api_key: str,
        sleep: Optional[SleepFunc] = None,
    ):
        self.client = client
        self.url = url
        self.api_key = api_key
        self._sleep = sleep or asyncio.sleep

    async def execute(self, criteria: SearchCriteria, max_pages: int) -> AggregatedResult:
        """
        Fetch pages until the token runs out or ``max_pages`` is reached.

        Args:
            criteria: Criteria for the first page
            max_pages: Maximum number of pages to fetch (>= 1)

        Returns:
            AggregatedResult with the first page's status and all places.
            If the cap was hit with more pages available, the unused token
            is kept in ``next_page_token``.

        Raises:
            PreconditionError: If max_pages < 1
            TransportError, DecodeError: If any page fails; nothing partial
                is returned
        """
        if max_pages < 1:
            raise PreconditionError(f"max_pages must be at least 1, got {max_pages}")

        result = AggregatedResult()
        page_count = 0

        while page_count < max_pages:
            params = build_params(criteria, self.api_key)
            page = await fetch_page(self.client, self.url, params, SearchResultPage)
            result.merge(page)

            logger.info(
                "Page %d from %s: %d places (status %s)",
                result.pages_fetched, self.url, len(page.results), page.status,
            )

            if page.next_page_token is None:
                break

            criteria = replace(criteria, page_token=page.next_page_token)
            page_count += 1
            if page_count < max_pages:
                logger.debug("Waiting %.1fs before requesting the next page", PAGE_TOKEN_DELAY)
                await self._sleep(PAGE_TOKEN_DELAY)

        if result.is_truncated:
            logger.info("Stopped after %d page(s); more results are available", result.pages_fetched)

        return result
