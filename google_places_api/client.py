"""
GooglePlacesAPI - High-level entry point for the Places web service.

Owns the configuration and the shared HTTP client, and hands out fresh
query builders. Builders from one instance share its connection pool
and can run concurrently.

Usage:
    from google_places_api import GooglePlacesAPI, Location, PlaceType

    async with GooglePlacesAPI() as api:
        search = await api.text_search().with_query("coffee").execute(3)
        for place in search:
            print(place.name, place.formatted_address)
"""

import logging
from dataclasses import replace
from typing import Optional

import httpx

from .config import (
    TEXT_SEARCH_PATH,
    NEARBY_SEARCH_PATH,
    FIND_PLACE_PATH,
    PLACE_DETAILS_PATH,
    PLACE_PHOTO_PATH,
)
from .config_manager import ClientConfig
from .endpoints import FindPlace, NearbySearch, PlaceDetails, PlacePhotos, TextSearch
from .pagination.paginator import SleepFunc

logger = logging.getLogger(__name__)


class GooglePlacesAPI:
    """Client for the Google Places API.

    The API key is taken from ``api_key``, else ``config.api_key``, else
    the GOOGLE_PLACES_API_KEY environment variable. A missing key raises
    ConfigurationError here, before any request.

    If ``client`` is given it is borrowed and never closed; otherwise an
    httpx.AsyncClient is created and closed by ``aclose()`` / ``async with``.

    Args:
        api_key: Places API key.
        config: Full configuration (timeout, proxy, base URL).
        client: Existing httpx.AsyncClient to use.
        sleep: Awaitable used for the inter-page delay of searches
               (default asyncio.sleep).

    Example:
        async with GooglePlacesAPI("my-key") as api:
            details = await api.place_details().with_place_id(pid).execute()
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        config: Optional[ClientConfig] = None,
        client: Optional[httpx.AsyncClient] = None,
        sleep: Optional[SleepFunc] = None,
    ):
        self._config = config or ClientConfig()
        if api_key is not None:
            self._config = replace(self._config, api_key=api_key)
        self.api_key = self._config.require_api_key()
        self._sleep = sleep

        if client is None:
            self._client = httpx.AsyncClient(
                timeout=self._config.timeout,
                proxy=self._config.proxy_url,
            )
            self._owns_client = True
        else:
            self._client = client
            self._owns_client = False

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
        return False

    async def aclose(self):
        """Close the HTTP client if this instance created it."""
        if self._owns_client and not self._client.is_closed:
            await self._client.aclose()
            logger.debug("Closed HTTP client")

    def text_search(self) -> TextSearch:
        """New Text Search query."""
        return TextSearch(self.api_key, self._client, self._config.url(TEXT_SEARCH_PATH), sleep=self._sleep)

    def nearby_search(self) -> NearbySearch:
        """New Nearby Search query."""
        return NearbySearch(self.api_key, self._client, self._config.url(NEARBY_SEARCH_PATH), sleep=self._sleep)

    def find_place(self) -> FindPlace:
        """New Find Place query."""
        return FindPlace(self.api_key, self._client, self._config.url(FIND_PLACE_PATH))

    def place_details(self) -> PlaceDetails:
        """New Place Details query."""
        return PlaceDetails(self.api_key, self._client, self._config.url(PLACE_DETAILS_PATH))

    def place_photos(self) -> PlacePhotos:
        """New Place Photo download."""
        return PlacePhotos(self.api_key, self._client, self._config.url(PLACE_PHOTO_PATH))

    def __repr__(self):
        return f"<GooglePlacesAPI: {self._config.base_url}>"
