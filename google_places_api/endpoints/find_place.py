"""
Find Place

Resolves a text query or phone number to candidate places. A single
request; there is no pagination.
"""

from typing import Iterable, List, Optional, Tuple, Union

import httpx

from ..exceptions import PreconditionError
from ..models.constants import InputType, Language, PlaceSearchField, Status
from ..models.location import LocationBias
from ..models.place import Place
from ..models.results import FindPlaceResult
from ..pagination import PlaceCursor, fetch_page, render_value


def join_fields(fields: Iterable) -> str:
    """Comma-join field names, dropping duplicates but keeping order."""
    return ",".join(dict.fromkeys(render_value(f) for f in fields))


class FindPlace:
    """Builder for a Find Place request. Requires input and input type."""

    def __init__(self, api_key: str, client: httpx.AsyncClient, url: str):
        self.api_key = api_key
        self.client = client
        self.url = url
        self.input: Optional[str] = None
        self.input_type: Optional[Union[InputType, str]] = None
        self.fields: Optional[List[Union[PlaceSearchField, str]]] = None
        self.language: Optional[Language] = None
        self.location_bias: Optional[LocationBias] = None
        self._result: Optional[FindPlaceResult] = None

    def with_input(self, input: str):
        """Text or phone number (E.164 format) to look up."""
        self.input = input
        return self

    def with_input_type(self, input_type: Union[InputType, str]):
        self.input_type = input_type
        return self

    def with_fields(self, fields: Iterable[Union[PlaceSearchField, str]]):
        """Restrict the returned fields (billing depends on them)."""
        self.fields = list(fields)
        return self

    def with_language(self, language: Language):
        self.language = language
        return self

    def with_location_bias(self, location_bias: LocationBias):
        self.location_bias = location_bias
        return self

    def build_params(self) -> List[Tuple[str, str]]:
        params = [("key", self.api_key)]
        if self.input is not None:
            params.append(("input", self.input))
        if self.fields is not None:
            params.append(("fields", join_fields(self.fields)))
        if self.language is not None:
            params.append(("language", render_value(self.language)))
        if self.location_bias is not None:
            params.append(("locationbias", str(self.location_bias)))
        if self.input_type is not None:
            params.append(("inputtype", render_value(self.input_type)))
        return params

    async def execute(self):
        """
        Send the request.

        Returns:
            self

        Raises:
            PreconditionError: If input or input type is missing
            TransportError, DecodeError: If the request fails
        """
        if self.input is None or self.input_type is None:
            raise PreconditionError("Find place needs both input and input type")

        self._result = await fetch_page(self.client, self.url, self.build_params(), FindPlaceResult)
        return self

    def get_result(self) -> FindPlaceResult:
        """Copy of the last result (UNKNOWN_ERROR placeholder before execute)."""
        if self._result is None:
            return FindPlaceResult(status=Status.UNKNOWN_ERROR)
        return self._result.model_copy(deep=True)

    def iter(self) -> PlaceCursor:
        if self._result is None:
            return PlaceCursor()
        return PlaceCursor(self._result.candidates)

    def __iter__(self):
        return self.iter()

    def at(self, index: int) -> Optional[Place]:
        return self.iter().at(index)
