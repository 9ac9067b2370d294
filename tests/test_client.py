"""Tests for the GooglePlacesAPI facade."""

import httpx
import pytest

from google_places_api import ClientConfig, GooglePlacesAPI
from google_places_api.exceptions import ConfigurationError

from conftest import make_page, run


def test_missing_key_fails_before_any_request():
    with pytest.raises(ConfigurationError):
        GooglePlacesAPI()


def test_key_from_environment(monkeypatch):
    monkeypatch.setenv("GOOGLE_PLACES_API_KEY", "env-key")
    api = GooglePlacesAPI()
    assert api.api_key == "env-key"
    run(api.aclose())


def test_argument_overrides_config():
    api = GooglePlacesAPI("arg-key", config=ClientConfig(api_key="cfg-key"))
    assert api.api_key == "arg-key"
    assert api.config.api_key == "arg-key"
    run(api.aclose())


def test_custom_base_url(service, http_client):
    service.queue(make_page(1))
    api = GooglePlacesAPI(
        "k", config=ClientConfig(base_url="http://stub.local/api"), client=http_client
    )
    run(api.text_search().with_query("coffee").execute(1))
    assert str(service.requests[0].url).startswith("http://stub.local/api/textsearch/json?")


def test_builders_share_client_and_are_independent(api, service):
    service.queue(make_page(1), make_page(2, start=5))

    async def go():
        first = await api.text_search().with_query("a").execute(1)
        second = await api.text_search().with_query("b").execute(1)
        return first, second

    first, second = run(go())
    assert len(first.get_result().places) == 1
    assert len(second.get_result().places) == 2


def test_owned_client_is_closed():
    async def go():
        async with GooglePlacesAPI("k") as api:
            client = api._client
        return client

    assert run(go()).is_closed


def test_borrowed_client_is_left_open(service):
    client = httpx.AsyncClient(transport=httpx.MockTransport(service.handler))

    async def go():
        async with GooglePlacesAPI("k", client=client):
            pass

    run(go())
    assert not client.is_closed
