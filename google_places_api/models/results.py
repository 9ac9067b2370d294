"""
Response envelopes for the JSON endpoints.

One model per response shape. Decoding a body into one of these is the
schema check: a body that does not validate is a DecodeError.
"""

from typing import Annotated, List, Optional, Union

from pydantic import BaseModel, ConfigDict, PlainValidator

from .constants import Status
from .place import Place, PlaceDetails


def parse_status(value) -> Union[Status, str]:
    """Map a wire status to a Status member; unrecognised strings are kept as-is."""
    if isinstance(value, Status):
        return value
    if not isinstance(value, str):
        raise ValueError(f"status must be a string, got {type(value).__name__}")
    try:
        return Status(value)
    except ValueError:
        return value


# Upstream may add statuses; those are reported, not rejected.
StatusValue = Annotated[Union[Status, str], PlainValidator(parse_status)]


class _Envelope(BaseModel):
    model_config = ConfigDict(extra="ignore")

    status: StatusValue
    error_message: Optional[str] = None
    info_messages: List[str] = []
    html_attributions: List[str] = []

    @property
    def ok(self) -> bool:
        return self.status == Status.OK


class SearchResultPage(_Envelope):
    """One page of a Text Search or Nearby Search response."""

    results: List[Place] = []
    next_page_token: Optional[str] = None


class FindPlaceResult(_Envelope):
    """Find Place response. Candidates are usually one, sometimes more."""

    candidates: List[Place] = []


class PlaceDetailsResult(_Envelope):
    """Place Details response."""

    result: PlaceDetails = PlaceDetails()
