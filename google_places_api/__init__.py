"""
Google Places API Client

An async Python client for the Google Places web service with automatic
pagination of search results.

Quick start (library usage):
    from google_places_api import GooglePlacesAPI, PlaceType

    async with GooglePlacesAPI("my-key") as api:
        search = api.text_search().with_query("coffee").with_type(PlaceType.CAFE)
        await search.execute(3)
        for place in search:
            print(place.name, place.formatted_address)

Or run the HTTP server:
    python -m google_places_api serve --port 8000
"""

from .client import GooglePlacesAPI
from .config_manager import ClientConfig
from .endpoints import FindPlace, NearbySearch, PlaceDetails, PlacePhotos, SearchQuery, TextSearch
from .exceptions import (
    ConfigurationError,
    DecodeError,
    FetchError,
    GooglePlacesError,
    PreconditionError,
    TransportError,
)
from .models import (
    InputType,
    Language,
    Location,
    LocationBias,
    Place,
    PlaceDetailsField,
    PlaceSearchField,
    PlaceType,
    RankBy,
    ReviewSort,
    Status,
)
from .pagination import AggregatedResult, PlaceCursor, SearchCriteria

__version__ = "1.0.0"
__all__ = [
    "GooglePlacesAPI",
    "ClientConfig",
    "SearchQuery",
    "TextSearch",
    "NearbySearch",
    "FindPlace",
    "PlaceDetails",
    "PlacePhotos",
    "AggregatedResult",
    "PlaceCursor",
    "SearchCriteria",
    "Location",
    "LocationBias",
    "Place",
    "Status",
    "PlaceType",
    "Language",
    "RankBy",
    "InputType",
    "ReviewSort",
    "PlaceSearchField",
    "PlaceDetailsField",
    "GooglePlacesError",
    "ConfigurationError",
    "PreconditionError",
    "FetchError",
    "TransportError",
    "DecodeError",
]
