"""
Location values used in query parameters.

Coordinates are passed through as given; no range checks or geocoding.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Location:
    """A latitude/longitude pair, rendered as ``lat,lng``."""
    lat: float
    lng: float

    def __str__(self) -> str:
        return f"{format_coordinate(self.lat)},{format_coordinate(self.lng)}"

    @classmethod
    def parse(cls, value: str) -> "Location":
        """Parse a ``lat,lng`` string."""
        try:
            lat, lng = (part.strip() for part in value.split(","))
            return cls(float(lat), float(lng))
        except ValueError:
            raise ValueError(f"Expected 'lat,lng', got {value!r}")


@dataclass(frozen=True)
class LocationBias:
    """Find Place ``locationbias`` value.

    Use the constructors: ``ip()``, ``point()``, ``circle()``, ``rectangle()``.
    """
    kind: str
    location: Optional[Location] = None
    radius: Optional[float] = None
    northeast: Optional[Location] = None

    @classmethod
    def ip(cls) -> "LocationBias":
        return cls("ipbias")

    @classmethod
    def point(cls, location: Location) -> "LocationBias":
        return cls("point", location=location)

    @classmethod
    def circle(cls, location: Location, radius: float) -> "LocationBias":
        return cls("circle", location=location, radius=radius)

    @classmethod
    def rectangle(cls, southwest: Location, northeast: Location) -> "LocationBias":
        return cls("rectangle", location=southwest, northeast=northeast)

    def __str__(self) -> str:
        if self.kind == "point":
            return f"point:{self.location}"
        if self.kind == "circle":
            return f"circle:{format_number(self.radius)}@{self.location}"
        if self.kind == "rectangle":
            return f"rectangle:{self.location}|{self.northeast}"
        return self.kind


def format_number(value: float) -> str:
    """Render whole floats without a trailing ``.0``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_coordinate(value: float) -> str:
    """Fixed-point degrees, at most 7 decimals, no trailing zeros."""
    text = f"{value:.7f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text
