"""
Default configuration for the Google Places API client.

Module-level defaults used by the endpoints, the server and the CLI.
Per-client overrides go through ClientConfig (config_manager.py); the
inter-page delay is fixed by the upstream service and is not overridable.
"""

import os
from typing import Optional

# Credentials
API_KEY_ENV = "GOOGLE_PLACES_API_KEY"
PROXY_ENV = "GOOGLE_PLACES_PROXY"
TIMEOUT_ENV = "GOOGLE_PLACES_TIMEOUT"

# Endpoints
BASE_URL = "https://maps.googleapis.com/maps/api/place"
TEXT_SEARCH_PATH = "/textsearch/json"
NEARBY_SEARCH_PATH = "/nearbysearch/json"
FIND_PLACE_PATH = "/findplacefromtext/json"
PLACE_DETAILS_PATH = "/details/json"
PLACE_PHOTO_PATH = "/photo"

# Pagination
# A next_page_token is rejected (INVALID_REQUEST) if used too soon after issuance.
PAGE_TOKEN_DELAY = 2.0
# The service returns at most 60 results (3 pages of 20) per search.
DEFAULT_MAX_PAGES = 3

# HTTP
DEFAULT_TIMEOUT = 30.0

# API Server
API_HOST = "127.0.0.1"
API_PORT = 8000

# CSV Output Columns
CSV_COLUMNS = [
    "place_id",
    "name",
    "formatted_address",
    "vicinity",
    "latitude",
    "longitude",
    "rating",
    "user_ratings_total",
    "price_level",
    "business_status",
    "types",
]


def get_api_key() -> Optional[str]:
    """Get the API key from the environment, or None if unset."""
    key = os.environ.get(API_KEY_ENV, "").strip()
    return key or None


def get_proxy_url() -> Optional[str]:
    """Get proxy URL from the environment. Returns single URL string for httpx."""
    proxy = os.environ.get(PROXY_ENV, "").strip()
    return proxy or None
