"""
Place Details

Fetches the full record for one place_id.
"""

import logging
from typing import Iterable, List, Optional, Tuple, Union

import httpx

from ..exceptions import DecodeError, PreconditionError
from ..models.constants import Language, PlaceDetailsField, ReviewSort, Status
from ..models.results import PlaceDetailsResult
from ..pagination import fetch_page, render_value
from .find_place import join_fields

logger = logging.getLogger(__name__)


class PlaceDetails:
    """Builder for a Place Details request. Requires a place_id."""

    def __init__(self, api_key: str, client: httpx.AsyncClient, url: str):
        self.api_key = api_key
        self.client = client
        self.url = url
        self.place_id: Optional[str] = None
        self.fields: Optional[List[Union[PlaceDetailsField, str]]] = None
        self.language: Optional[Language] = None
        self.region: Optional[str] = None
        self.review_no_translations: Optional[bool] = None
        self.review_sort: Optional[Union[ReviewSort, str]] = None
        self.session_token: Optional[str] = None
        self._result: Optional[PlaceDetailsResult] = None

    def with_place_id(self, place_id: str):
        self.place_id = place_id
        return self

    def with_fields(self, fields: Iterable[Union[PlaceDetailsField, str]]):
        """Restrict the returned fields (billing depends on them)."""
        self.fields = list(fields)
        return self

    def with_language(self, language: Language):
        self.language = language
        return self

    def with_region(self, region: str):
        """ccTLD region code (e.g. "ro") used to format the response."""
        self.region = region
        return self

    def with_review_no_translations(self, review_no_translations: bool):
        """Return reviews in their original language."""
        self.review_no_translations = review_no_translations
        return self

    def with_review_sort(self, review_sort: Union[ReviewSort, str]):
        self.review_sort = review_sort
        return self

    def with_session_token(self, session_token: str):
        """Autocomplete session token, for session billing."""
        self.session_token = session_token
        return self

    def build_params(self) -> List[Tuple[str, str]]:
        params = [("key", self.api_key)]
        if self.place_id is not None:
            params.append(("place_id", self.place_id))
        if self.fields is not None:
            params.append(("fields", join_fields(self.fields)))
        if self.language is not None:
            params.append(("language", render_value(self.language)))
        if self.review_no_translations is not None:
            params.append(("reviews_no_translations", render_value(self.review_no_translations)))
        if self.review_sort is not None:
            params.append(("reviews_sort", render_value(self.review_sort)))
        if self.session_token is not None:
            params.append(("sessiontoken", self.session_token))
        if self.region is not None:
            params.append(("region", self.region))
        return params

    async def execute(self):
        """
        Send the request.

        Returns:
            self

        Raises:
            PreconditionError: If no place_id was set
            TransportError, DecodeError: If the request fails
        """
        if self.place_id is None:
            raise PreconditionError("Place details needs a place_id")

        try:
            self._result = await fetch_page(
                self.client, self.url, self.build_params(), PlaceDetailsResult
            )
        except DecodeError:
            if self.fields is not None:
                logger.warning("Details response for %s did not decode with fields=%s",
                               self.place_id, join_fields(self.fields))
            raise
        return self

    def get_details(self) -> PlaceDetailsResult:
        """Copy of the last result (UNKNOWN_ERROR placeholder before execute)."""
        if self._result is None:
            return PlaceDetailsResult(status=Status.UNKNOWN_ERROR)
        return self._result.model_copy(deep=True)
