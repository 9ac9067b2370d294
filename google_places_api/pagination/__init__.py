"""
Pagination engine shared by the search endpoints.

- params.py: Search criteria and query parameter building
- fetcher.py: Single-page HTTP fetch and decode
- accumulator.py: Multi-page result merging
- paginator.py: Token-driven fetch loop
- cursor.py: Iteration over finished results
"""

from .params import SearchCriteria, build_params, render_value
from .fetcher import fetch_page, send_get
from .accumulator import AggregatedResult
from .paginator import Paginator
from .cursor import PlaceCursor
