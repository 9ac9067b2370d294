"""
Place records returned by the Places API.

Which fields are populated depends on the endpoint and on the requested
``fields``; everything is optional. Unknown fields are preserved so new
upstream attributes are not lost. Records are frozen: aggregates hold
their own copies and callers cannot mutate shared state.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class _Record(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)


class LatLng(_Record):
    lat: float
    lng: float


class Viewport(_Record):
    northeast: LatLng
    southwest: LatLng


class Geometry(_Record):
    location: Optional[LatLng] = None
    viewport: Optional[Viewport] = None


class Photo(_Record):
    photo_reference: str
    height: Optional[int] = None
    width: Optional[int] = None
    html_attributions: List[str] = []


class PlusCode(_Record):
    global_code: Optional[str] = None
    compound_code: Optional[str] = None


class OpeningHoursTime(_Record):
    day: int
    time: Optional[str] = None
    date: Optional[str] = None
    truncated: Optional[bool] = None


class OpeningHoursPeriod(_Record):
    open: OpeningHoursTime
    close: Optional[OpeningHoursTime] = None


class OpeningHours(_Record):
    open_now: Optional[bool] = None
    periods: List[OpeningHoursPeriod] = []
    weekday_text: List[str] = []
    type: Optional[str] = None


class Place(_Record):
    """A place as returned by Text Search, Nearby Search and Find Place."""

    place_id: Optional[str] = None
    name: Optional[str] = None
    business_status: Optional[str] = None
    formatted_address: Optional[str] = None
    vicinity: Optional[str] = None
    geometry: Optional[Geometry] = None
    icon: Optional[str] = None
    icon_background_color: Optional[str] = None
    icon_mask_base_uri: Optional[str] = None
    opening_hours: Optional[OpeningHours] = None
    photos: List[Photo] = []
    plus_code: Optional[PlusCode] = None
    price_level: Optional[int] = None
    rating: Optional[float] = None
    types: List[str] = []
    user_ratings_total: Optional[int] = None

    @property
    def latitude(self) -> Optional[float]:
        if self.geometry and self.geometry.location:
            return self.geometry.location.lat
        return None

    @property
    def longitude(self) -> Optional[float]:
        if self.geometry and self.geometry.location:
            return self.geometry.location.lng
        return None


class AddressComponent(_Record):
    long_name: str
    short_name: str
    types: List[str] = []


class EditorialSummary(_Record):
    overview: Optional[str] = None
    language: Optional[str] = None


class Review(_Record):
    author_name: Optional[str] = None
    author_url: Optional[str] = None
    language: Optional[str] = None
    original_language: Optional[str] = None
    profile_photo_url: Optional[str] = None
    rating: Optional[int] = None
    relative_time_description: Optional[str] = None
    text: Optional[str] = None
    time: Optional[int] = None
    translated: Optional[bool] = None


class PlaceDetails(Place):
    """A place as returned by Place Details, with the detail-only fields."""

    address_components: List[AddressComponent] = []
    adr_address: Optional[str] = None
    formatted_phone_number: Optional[str] = None
    international_phone_number: Optional[str] = None
    website: Optional[str] = None
    url: Optional[str] = None
    utc_offset: Optional[int] = None
    current_opening_hours: Optional[OpeningHours] = None
    secondary_opening_hours: List[OpeningHours] = []
    editorial_summary: Optional[EditorialSummary] = None
    reviews: List[Review] = []
    curbside_pickup: Optional[bool] = None
    delivery: Optional[bool] = None
    dine_in: Optional[bool] = None
    reservable: Optional[bool] = None
    serves_beer: Optional[bool] = None
    serves_breakfast: Optional[bool] = None
    serves_brunch: Optional[bool] = None
    serves_dinner: Optional[bool] = None
    serves_lunch: Optional[bool] = None
    serves_vegetarian_food: Optional[bool] = None
    serves_wine: Optional[bool] = None
    takeout: Optional[bool] = None
    wheelchair_accessible_entrance: Optional[bool] = None
