"""Tests for the Find Place builder."""

import pytest

from google_places_api.endpoints.find_place import join_fields
from google_places_api.exceptions import DecodeError, PreconditionError
from google_places_api.models import InputType, Language, Location, LocationBias, PlaceSearchField, Status

from conftest import TEST_KEY, make_place, run


def candidates_body(*places, status="OK"):
    return {"status": status, "candidates": list(places)}


def test_join_fields_dedupes_in_order():
    fields = [PlaceSearchField.NAME, "place_id", PlaceSearchField.NAME, PlaceSearchField.RATING]
    assert join_fields(fields) == "name,place_id,rating"


@pytest.mark.parametrize("setup", [
    lambda q: q.with_input("museum"),
    lambda q: q.with_input_type(InputType.TEXT_QUERY),
    lambda q: q,
])
def test_requires_input_and_input_type(api, service, setup):
    with pytest.raises(PreconditionError):
        run(setup(api.find_place()).execute())
    assert service.requests == []


def test_params_in_order(api, service):
    service.queue(candidates_body(make_place(1)))
    query = (
        api.find_place()
        .with_input("Museum of Contemporary Art Australia")
        .with_input_type(InputType.TEXT_QUERY)
        .with_fields([PlaceSearchField.NAME, PlaceSearchField.FORMATTED_ADDRESS, PlaceSearchField.NAME])
        .with_language(Language.EN)
        .with_location_bias(LocationBias.circle(Location(-33.86, 151.2), 2000.0))
    )
    run(query.execute())

    assert service.requests[0].url.path == "/maps/api/place/findplacefromtext/json"
    assert service.params() == [
        ("key", TEST_KEY),
        ("input", "Museum of Contemporary Art Australia"),
        ("fields", "name,formatted_address"),
        ("language", "en"),
        ("locationbias", "circle:2000@-33.86,151.2"),
        ("inputtype", "textquery"),
    ]


def test_phone_number_lookup(api, service):
    service.queue(candidates_body(make_place(1), make_place(2)))
    query = api.find_place().with_input("+61293744000").with_input_type(InputType.PHONE_NUMBER)
    run(query.execute())

    assert service.param("inputtype") == "phonenumber"
    result = query.get_result()
    assert result.status == Status.OK
    assert [c.place_id for c in query] == ["place-1", "place-2"]
    assert query.at(1).name == "Place 2"
    assert query.at(2) is None
    assert len(result.candidates) == 2


def test_placeholder_before_execute(api):
    query = api.find_place()
    assert query.get_result().status == Status.UNKNOWN_ERROR
    assert query.get_result().candidates == []
    assert list(query) == []


def test_zero_results(api, service):
    service.queue(candidates_body(status="ZERO_RESULTS"))
    query = run(api.find_place().with_input("nowhere").with_input_type("textquery").execute())
    assert query.get_result().status == Status.ZERO_RESULTS
    assert query.at(0) is None


def test_bad_body_is_decode_error(api, service):
    service.queue({"candidates": []})
    with pytest.raises(DecodeError):
        run(api.find_place().with_input("x").with_input_type(InputType.TEXT_QUERY).execute())
