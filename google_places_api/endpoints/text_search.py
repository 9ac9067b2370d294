"""
Text Search

Free-text place search, e.g. "coffee in Cluj-Napoca". Results are paged
in groups of up to 20; up to 3 pages are available.
"""

from ..exceptions import PreconditionError
from ..pagination import SearchCriteria
from .search import SearchQuery


class TextSearch(SearchQuery):
    """Builder for a Text Search request.

    Requires a query, a place type, or both.

    Example:
        search = api.text_search().with_query("coffee").with_radius(1000.0)
        await search.execute(3)
        for place in search:
            print(place.name)
    """

    def with_query(self, query: str):
        """The text to search for."""
        return self._set(query=query)

    def with_region(self, region: str):
        """ccTLD region code used to bias results (e.g. "ro")."""
        return self._set(region=region)

    def _check_criteria(self, criteria: SearchCriteria):
        if criteria.query is None and criteria.place_type is None:
            raise PreconditionError("Text search needs a query, a place type, or both")
