"""Tests for the FastAPI server."""

import httpx
import pytest
from fastapi.testclient import TestClient

from google_places_api.server import app, get_api

from conftest import TEST_KEY, make_page, make_place


@pytest.fixture
def client(api):
    app.dependency_overrides[get_api] = lambda: api
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


class TestSearchRoutes:
    def test_text_search(self, client, service, sleeps):
        service.queue(make_page(20, token="t1"), make_page(5, start=20))
        response = client.post("/api/text-search", json={"query": "coffee", "radius": 1000, "max_pages": 3})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["place_count"] == 25
        assert body["truncated"] is False
        assert body["result"]["status"] == "OK"
        assert body["result"]["places"][0]["place_id"] == "place-0"
        assert service.param("radius") == "1000"
        assert sleeps.delays == [2.0]

    def test_truncated_search(self, client, service):
        service.queue(make_page(20, token="more"))
        body = client.post("/api/text-search", json={"query": "coffee", "max_pages": 1}).json()
        assert body["truncated"] is True
        assert body["result"]["next_page_token"] == "more"

    def test_nearby_search(self, client, service):
        service.queue(make_page(2))
        response = client.post(
            "/api/nearby-search",
            json={"location": "46.7749,23.62", "keyword": "espresso", "rank_by": "distance"},
        )
        assert response.status_code == 200
        assert service.params() == [
            ("key", TEST_KEY),
            ("location", "46.7749,23.62"),
            ("keyword", "espresso"),
            ("rankby", "distance"),
        ]

    def test_missing_query_is_bad_request(self, client, service):
        response = client.post("/api/text-search", json={"radius": 100})
        assert response.status_code == 400
        assert response.json()["error_type"] == "PreconditionError"
        assert service.requests == []

    def test_zero_max_pages_is_bad_request(self, client):
        response = client.post("/api/text-search", json={"query": "coffee", "max_pages": 0})
        assert response.status_code == 400

    def test_bad_location(self, client):
        response = client.post("/api/nearby-search", json={"location": "north"})
        assert response.status_code == 400

    def test_upstream_failure_is_bad_gateway(self, client, service):
        service.queue(httpx.Response(500, text="boom"))
        response = client.post("/api/text-search", json={"query": "coffee"})
        assert response.status_code == 502
        body = response.json()
        assert body["success"] is False
        assert body["error_type"] == "TransportError"

    def test_undecodable_body_is_bad_gateway(self, client, service):
        service.queue({"unexpected": True})
        response = client.post("/api/text-search", json={"query": "coffee"})
        assert response.status_code == 502
        assert response.json()["error_type"] == "DecodeError"


def test_find_place(client, service):
    service.queue({"status": "OK", "candidates": [make_place(3)]})
    response = client.post(
        "/api/find-place",
        json={"input": "museum", "fields": ["name", "place_id"], "location_bias": "ipbias"},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["candidate_count"] == 1
    assert body["result"]["candidates"][0]["name"] == "Place 3"
    assert service.param("fields") == "name,place_id"
    assert service.param("locationbias") == "ipbias"
    assert service.param("inputtype") == "textquery"


def test_place_details(client, service):
    service.queue({"status": "OK", "result": make_place(9, website="https://example.com")})
    response = client.post(
        "/api/place-details",
        json={"place_id": "place-9", "review_sort": "newest", "language": "en"},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["place_id"] == "place-9"
    assert body["result"]["result"]["website"] == "https://example.com"
    assert service.param("reviews_sort") == "newest"


def test_photo(client, service):
    service.queue(httpx.Response(200, content=b"img", headers={"content-type": "image/png"}))
    response = client.get("/api/photo", params={"photo_reference": "ref", "max_width": 200})
    assert response.status_code == 200
    assert response.content == b"img"
    assert response.headers["content-type"] == "image/png"
    assert service.param("maxwidth") == "200"


def test_photo_size_is_validated(client, service):
    response = client.get("/api/photo", params={"photo_reference": "ref", "max_width": 5000})
    assert response.status_code == 422
    assert service.requests == []
