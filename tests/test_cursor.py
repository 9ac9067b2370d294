"""Tests for PlaceCursor."""

import pytest

from google_places_api.models import Place
from google_places_api.pagination import PlaceCursor


@pytest.fixture
def places():
    return [Place(place_id=f"p{i}", name=f"Place {i}") for i in range(3)]


def test_iterates_in_order(places):
    assert [p.place_id for p in PlaceCursor(places)] == ["p0", "p1", "p2"]


def test_is_single_pass(places):
    cursor = PlaceCursor(places)
    assert len(list(cursor)) == 3
    assert list(cursor) == []
    with pytest.raises(StopIteration):
        next(cursor)


def test_fresh_cursor_restarts(places):
    list(PlaceCursor(places))
    assert next(PlaceCursor(places)).place_id == "p0"


def test_len_and_indexing(places):
    cursor = PlaceCursor(places)
    assert len(cursor) == 3
    assert cursor[1].place_id == "p1"
    with pytest.raises(IndexError):
        cursor[3]


def test_negative_index_is_out_of_range(places):
    cursor = PlaceCursor(places)
    with pytest.raises(IndexError):
        cursor[-1]
    assert cursor.at(-1) is None


def test_at_returns_none_out_of_range(places):
    cursor = PlaceCursor(places)
    assert cursor.at(0).place_id == "p0"
    assert cursor.at(2).place_id == "p2"
    assert cursor.at(3) is None
    assert cursor.at(-1) is None


def test_empty_cursor():
    cursor = PlaceCursor()
    assert len(cursor) == 0
    assert list(cursor) == []
    assert cursor.at(0) is None
