"""
FastAPI Server for the Google Places API client

Exposes the client over HTTP:
- Text and nearby search (paginated)
- Find place
- Place details
- Photo download
"""

import logging
from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel

from .client import GooglePlacesAPI
from .config import API_HOST, API_PORT, DEFAULT_MAX_PAGES
from .endpoints import SearchQuery
from .exceptions import (
    ConfigurationError,
    DecodeError,
    GooglePlacesError,
    PreconditionError,
    TransportError,
)
from .models import InputType, Language, Location, LocationBias, PlaceDetailsField, PlaceSearchField, RankBy, ReviewSort

logger = logging.getLogger(__name__)

_api: Optional[GooglePlacesAPI] = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    global _api
    yield
    if _api is not None:
        await _api.aclose()
        _api = None


# FastAPI app
app = FastAPI(title="Google Places API Server", lifespan=lifespan)

# Enable CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_api() -> GooglePlacesAPI:
    """Shared client, created on first use from the environment."""
    global _api
    if _api is None:
        _api = GooglePlacesAPI()
    return _api


_ERROR_STATUS = (
    (PreconditionError, 400),
    (TransportError, 502),
    (DecodeError, 502),
    (ConfigurationError, 500),
)


@app.exception_handler(GooglePlacesError)
async def handle_library_error(request: Request, exc: GooglePlacesError):
    status_code = 500
    for exc_type, code in _ERROR_STATUS:
        if isinstance(exc, exc_type):
            status_code = code
            break
    logger.warning("%s on %s: %s", type(exc).__name__, request.url.path, exc)
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error_type": type(exc).__name__, "error": str(exc)},
    )


# Request Models
class SearchRequest(BaseModel):
    location: Optional[str] = None  # "lat,lng"
    radius: Optional[float] = None
    language: Optional[Language] = None
    min_price: Optional[int] = None
    max_price: Optional[int] = None
    open_now: Optional[bool] = None
    type: Optional[str] = None
    page_token: Optional[str] = None
    max_pages: int = DEFAULT_MAX_PAGES


class TextSearchRequest(SearchRequest):
    query: Optional[str] = None
    region: Optional[str] = None


class NearbySearchRequest(SearchRequest):
    keyword: Optional[str] = None
    rank_by: Optional[RankBy] = None


class FindPlaceRequest(BaseModel):
    input: str
    input_type: InputType = InputType.TEXT_QUERY
    fields: Optional[List[PlaceSearchField]] = None
    language: Optional[Language] = None
    location_bias: Optional[str] = None  # raw locationbias value, e.g. "ipbias"


class PlaceDetailsRequest(BaseModel):
    place_id: str
    fields: Optional[List[PlaceDetailsField]] = None
    language: Optional[Language] = None
    region: Optional[str] = None
    review_no_translations: Optional[bool] = None
    review_sort: Optional[ReviewSort] = None
    session_token: Optional[str] = None


# Helper Functions
def parse_location(value: str) -> Location:
    try:
        return Location.parse(value)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


def apply_search_request(search: SearchQuery, request: SearchRequest) -> SearchQuery:
    """Copy the shared search criteria from a request onto a query."""
    if request.location is not None:
        search.with_location(parse_location(request.location))
    if request.radius is not None:
        search.with_radius(request.radius)
    if request.language is not None:
        search.with_language(request.language)
    if request.min_price is not None:
        search.with_min_price(request.min_price)
    if request.max_price is not None:
        search.with_max_price(request.max_price)
    if request.open_now is not None:
        search.with_open_now(request.open_now)
    if request.type is not None:
        search.with_type(request.type)
    if request.page_token is not None:
        search.with_page_token(request.page_token)
    return search


def search_response(search: SearchQuery) -> dict:
    result = search.get_result()
    return {
        "success": True,
        "place_count": len(result.places),
        "truncated": result.is_truncated,
        "result": result.model_dump(mode="json", exclude_none=True),
    }


# API Endpoints
@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "ok"}


@app.post("/api/text-search")
async def text_search(request: TextSearchRequest, api: GooglePlacesAPI = Depends(get_api)):
    """Run a paginated text search."""
    search = apply_search_request(api.text_search(), request)
    if request.query is not None:
        search.with_query(request.query)
    if request.region is not None:
        search.with_region(request.region)
    await search.execute(request.max_pages)
    return search_response(search)


@app.post("/api/nearby-search")
async def nearby_search(request: NearbySearchRequest, api: GooglePlacesAPI = Depends(get_api)):
    """Run a paginated nearby search."""
    search = apply_search_request(api.nearby_search(), request)
    if request.keyword is not None:
        search.with_keyword(request.keyword)
    if request.rank_by is not None:
        search.with_rank_by(request.rank_by)
    await search.execute(request.max_pages)
    return search_response(search)


@app.post("/api/find-place")
async def find_place(request: FindPlaceRequest, api: GooglePlacesAPI = Depends(get_api)):
    """Resolve text or a phone number to candidate places."""
    query = api.find_place().with_input(request.input).with_input_type(request.input_type)
    if request.fields:
        query.with_fields(request.fields)
    if request.language is not None:
        query.with_language(request.language)
    if request.location_bias is not None:
        query.with_location_bias(LocationBias(request.location_bias))
    await query.execute()
    result = query.get_result()
    return {
        "success": True,
        "candidate_count": len(result.candidates),
        "result": result.model_dump(mode="json", exclude_none=True),
    }


@app.post("/api/place-details")
async def place_details(request: PlaceDetailsRequest, api: GooglePlacesAPI = Depends(get_api)):
    """Fetch the full record for a place."""
    query = api.place_details().with_place_id(request.place_id)
    if request.fields:
        query.with_fields(request.fields)
    if request.language is not None:
        query.with_language(request.language)
    if request.region is not None:
        query.with_region(request.region)
    if request.review_no_translations is not None:
        query.with_review_no_translations(request.review_no_translations)
    if request.review_sort is not None:
        query.with_review_sort(request.review_sort)
    if request.session_token is not None:
        query.with_session_token(request.session_token)
    await query.execute()
    return {
        "success": True,
        "place_id": request.place_id,
        "result": query.get_details().model_dump(mode="json", exclude_none=True),
    }


@app.get("/api/photo")
async def photo(
    photo_reference: str,
    max_width: Optional[int] = Query(None, ge=1, le=1600),
    max_height: Optional[int] = Query(None, ge=1, le=1600),
    api: GooglePlacesAPI = Depends(get_api),
):
    """Download a place photo."""
    query = api.place_photos().with_photo_reference(photo_reference)
    if max_width is not None:
        query.with_max_width(max_width)
    if max_height is not None:
        query.with_max_height(max_height)
    await query.execute()
    return Response(content=query.get_photo(), media_type=query.content_type or "application/octet-stream")


def run_server(host: str = API_HOST, port: int = API_PORT):
    """Run the API server."""
    import uvicorn
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run_server()
