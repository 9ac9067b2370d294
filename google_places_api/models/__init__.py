"""
Data models for Places API requests and responses.

- constants.py: Wire enums (languages, place types, fields, statuses)
- location.py: Location and LocationBias parameter values
- place.py: Place records
- results.py: Response envelopes
"""

from .constants import (
    Status,
    RankBy,
    InputType,
    ReviewSort,
    Language,
    PlaceType,
    PlaceSearchField,
    PlaceDetailsField,
)
from .location import Location, LocationBias
from .place import Place, PlaceDetails, Photo, Geometry, LatLng, OpeningHours, Review
from .results import SearchResultPage, FindPlaceResult, PlaceDetailsResult
