"""Shared fixtures: an in-memory Places service behind httpx.MockTransport."""

import asyncio

import httpx
import pytest

from google_places_api import GooglePlacesAPI

TEST_KEY = "test-key"


def make_place(index, **fields):
    place = {
        "place_id": f"place-{index}",
        "name": f"Place {index}",
        "formatted_address": f"{index} Main St",
        "geometry": {"location": {"lat": round(46.0 + index / 1000, 6), "lng": round(23.0 + index / 1000, 6)}},
        "types": ["cafe", "food"],
    }
    place.update(fields)
    return place


def make_page(count, start=0, token=None, status="OK", **extra):
    """Build one search page body with ``count`` places numbered from ``start``."""
    page = {
        "status": status,
        "html_attributions": [],
        "results": [make_place(i) for i in range(start, start + count)],
    }
    if token is not None:
        page["next_page_token"] = token
    page.update(extra)
    return page


class FakePlacesService:
    """Answers requests from a queue and records what was asked.

    Queue items may be dicts (served as JSON 200), httpx.Response objects,
    or exceptions (raised from the transport).
    """

    def __init__(self):
        self.responses = []
        self.requests = []
        self.events = []

    def queue(self, *responses):
        self.responses.extend(responses)
        return self

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        self.events.append("fetch")
        if not self.responses:
            raise AssertionError(f"Unexpected request: {request.url}")
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        if isinstance(item, httpx.Response):
            return item
        return httpx.Response(200, json=item)

    def params(self, index=0):
        return list(self.requests[index].url.params.multi_items())

    def param(self, name, index=0):
        return self.requests[index].url.params.get(name)


class RecordingSleep:
    """Stand-in for asyncio.sleep that records delays instead of waiting."""

    def __init__(self, events=None):
        self.delays = []
        self.events = events

    async def __call__(self, delay):
        self.delays.append(delay)
        if self.events is not None:
            self.events.append("sleep")


def run(coro):
    return asyncio.run(coro)


@pytest.fixture
def service():
    return FakePlacesService()


@pytest.fixture
def sleeps(service):
    return RecordingSleep(service.events)


@pytest.fixture
def http_client(service):
    return httpx.AsyncClient(transport=httpx.MockTransport(service.handler))


@pytest.fixture
def api(http_client, sleeps):
    return GooglePlacesAPI(TEST_KEY, client=http_client, sleep=sleeps)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("GOOGLE_PLACES_API_KEY", "GOOGLE_PLACES_PROXY", "GOOGLE_PLACES_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
