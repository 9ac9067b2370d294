"""
Result Accumulator

Merges search pages into one logical result. The first page decides the
status and diagnostics; later pages only contribute places.
"""

from typing import List, Optional

from pydantic import BaseModel

from ..models.constants import Status
from ..models.place import Place
from ..models.results import SearchResultPage, StatusValue


class AggregatedResult(BaseModel):
    """Merged result of every page fetched by one ``execute`` call.

    Attributes:
        status: Status of the first page (None until a page is merged).
            Statuses unknown to the Status enum are kept as plain strings.
        error_message: First page's error message, if any.
        info_messages: First page's info messages.
        html_attributions: First page's attributions.
        places: All pages' places, in arrival order.
        next_page_token: Token left unused when the page cap was hit.
        pages_fetched: Number of pages merged.
    """

    status: Optional[StatusValue] = None
    error_message: Optional[str] = None
    info_messages: List[str] = []
    html_attributions: List[str] = []
    places: List[Place] = []
    next_page_token: Optional[str] = None
    pages_fetched: int = 0

    @property
    def ok(self) -> bool:
        return self.status == Status.OK

    @property
    def is_truncated(self) -> bool:
        """True when more pages existed than the caller allowed."""
        return self.next_page_token is not None

    def merge(self, page: SearchResultPage):
        """Merge one page into the aggregate."""
        if self.pages_fetched == 0:
            self.status = page.status
            self.error_message = page.error_message
            self.info_messages = list(page.info_messages)
            self.html_attributions = list(page.html_attributions)
        self.places.extend(page.results)
        self.next_page_token = page.next_page_token
        self.pages_fetched += 1
