"""
Nearby Search

Search for places within an area around a location, optionally filtered
by keyword and type.
"""

from typing import Union

from ..exceptions import PreconditionError
from ..models.constants import RankBy
from ..pagination import SearchCriteria
from .search import SearchQuery


class NearbySearch(SearchQuery):
    """Builder for a Nearby Search request.

    A location is required. With ``RankBy.DISTANCE`` the service expects
    a keyword or type and no radius; that combination is left to the
    service to validate.
    """

    def with_keyword(self, keyword: str):
        """Term matched against all content indexed for a place."""
        return self._set(keyword=keyword)

    def with_rank_by(self, rank_by: Union[RankBy, str]):
        return self._set(rank_by=rank_by)

    def _check_criteria(self, criteria: SearchCriteria):
        if criteria.location is None:
            raise PreconditionError("Nearby search needs a location")
