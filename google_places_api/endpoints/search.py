"""
Search Query Base

Shared builder behaviour for the paginated search endpoints (Text Search
and Nearby Search): chainable criteria setters, execution through the
Paginator, and access to the finished result.
"""

from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Optional, Union

import httpx

from ..config import DEFAULT_MAX_PAGES
from ..exceptions import PreconditionError
from ..models.constants import Language, PlaceType
from ..models.location import Location
from ..models.place import Place
from ..pagination import AggregatedResult, Paginator, PlaceCursor, SearchCriteria
from ..pagination.paginator import SleepFunc


class SearchQuery(ABC):
    """Base class for paginated searches.

    Setters return ``self`` so calls chain. Criteria are stored as an
    immutable SearchCriteria snapshot, replaced on every setter call.

    A query object runs one ``execute`` at a time; build separate query
    objects for concurrent searches (they may share the HTTP client).
    """

    def __init__(
        self,
        api_key: str,
        client: httpx.AsyncClient,
        url: str,
        sleep: Optional[SleepFunc] = None,
    ):
        self._paginator = Paginator(client, url, api_key, sleep=sleep)
        self._criteria = SearchCriteria()
        self._result: Optional[AggregatedResult] = None
        self._executing = False

    @property
    def criteria(self) -> SearchCriteria:
        """Current criteria snapshot."""
        return self._criteria

    def _set(self, **changes):
        self._criteria = replace(self._criteria, **changes)
        return self

    def with_radius(self, radius: float):
        """Search radius in meters."""
        return self._set(radius=radius)

    def with_language(self, language: Language):
        return self._set(language=language)

    def with_location(self, location: Location):
        return self._set(location=location)

    def with_min_price(self, min_price: int):
        """Minimum price level, 0 (most affordable) to 4."""
        return self._set(min_price=min_price)

    def with_max_price(self, max_price: int):
        """Maximum price level, 0 to 4 (most expensive)."""
        return self._set(max_price=max_price)

    def with_open_now(self, open_now: bool):
        """Only return places open at the time of the query."""
        return self._set(open_now=open_now)

    def with_page_token(self, page_token: str):
        """Start from a page token returned by an earlier search.

        Other criteria are still sent alongside the token.
        """
        return self._set(page_token=page_token)

    def with_type(self, place_type: Union[PlaceType, str]):
        return self._set(place_type=place_type)

    @abstractmethod
    def _check_criteria(self, criteria: SearchCriteria):
        """Raise PreconditionError if ``criteria`` cannot be sent."""

    async def execute(self, max_pages: int = DEFAULT_MAX_PAGES):
        """
        Run the search, following page tokens for up to ``max_pages`` pages.

        Pages after the first are requested 2 seconds apart, as required by
        the service.

        Args:
            max_pages: Maximum number of pages to fetch (>= 1)

        Returns:
            self, for chaining into get_result() / iter()

        Raises:
            PreconditionError: If required criteria are missing, max_pages < 1,
                or this query is already executing
            TransportError, DecodeError: If any page fails
        """
        self._check_criteria(self._criteria)
        if self._executing:
            raise PreconditionError(
                "execute() is already running on this query; use a separate query object"
            )

        self._executing = True
        try:
            self._result = await self._paginator.execute(self._criteria, max_pages)
        finally:
            self._executing = False
        return self

    def get_result(self) -> AggregatedResult:
        """Copy of the last completed result (empty before any execute)."""
        if self._result is None:
            return AggregatedResult()
        return self._result.model_copy(deep=True)

    def iter(self) -> PlaceCursor:
        """New cursor over the last completed result's places."""
        if self._result is None:
            return PlaceCursor()
        return PlaceCursor(self._result.places)

    def __iter__(self):
        return self.iter()

    def at(self, index: int) -> Optional[Place]:
        """Place at ``index`` in the last completed result, or None."""
        return self.iter().at(index)
