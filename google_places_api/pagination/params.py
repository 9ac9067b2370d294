"""
Search Parameters

Turns immutable search criteria into the ordered query parameters sent
to the search endpoints.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple, Union

from ..models.constants import Language, PlaceType, RankBy
from ..models.location import Location, format_number

Params = List[Tuple[str, str]]


@dataclass(frozen=True)
class SearchCriteria:
    """Typed, optional criteria shared by Text Search and Nearby Search.

    Instances are immutable; use ``dataclasses.replace`` to derive a new
    set (the paginator does this to hand over the page token).
    """
    query: Optional[str] = None
    location: Optional[Location] = None
    radius: Optional[float] = None
    keyword: Optional[str] = None
    language: Optional[Language] = None
    min_price: Optional[int] = None
    max_price: Optional[int] = None
    open_now: Optional[bool] = None
    rank_by: Optional[Union[RankBy, str]] = None
    region: Optional[str] = None
    place_type: Optional[Union[PlaceType, str]] = None
    page_token: Optional[str] = None


# (wire name, attribute) in emission order
_WIRE_FIELDS = (
    ("query", "query"),
    ("location", "location"),
    ("radius", "radius"),
    ("keyword", "keyword"),
    ("language", "language"),
    ("minprice", "min_price"),
    ("maxprice", "max_price"),
    ("opennow", "open_now"),
    ("rankby", "rank_by"),
    ("region", "region"),
    ("type", "place_type"),
    ("pagetoken", "page_token"),
)


def render_value(value) -> str:
    """Render a parameter value as its wire string."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return format_number(value)
    if isinstance(value, Enum):
        return value.value
    return str(value)


def build_params(criteria: SearchCriteria, api_key: str) -> Params:
    """
    Build the query parameters for one search page.

    ``key`` is always first; unset criteria are left out entirely.

    Args:
        criteria: Search criteria for this page
        api_key: Places API key

    Returns:
        Ordered list of (name, value) pairs
    """
    params = [("key", api_key)]
    for name, attr in _WIRE_FIELDS:
        value = getattr(criteria, attr)
        if value is not None:
            params.append((name, render_value(value)))
    return params
