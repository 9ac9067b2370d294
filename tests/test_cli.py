"""Tests for the command line interface."""

import json

import httpx
import pytest

from google_places_api import cli
from google_places_api.models import Location, RankBy

from conftest import make_page, make_place


@pytest.fixture
def patched_api(monkeypatch, api):
    monkeypatch.setattr(cli, "GooglePlacesAPI", lambda api_key=None: api)
    return api


def test_parser_text_defaults():
    args = cli.build_parser().parse_args(["text", "coffee"])
    assert args.command == "text"
    assert args.query == "coffee"
    assert args.pages == 3
    assert args.output is None


def test_parser_nearby():
    args = cli.build_parser().parse_args(
        ["nearby", "46.7749,23.62", "--radius", "500", "--rank-by", "distance"]
    )
    assert args.location == Location(46.7749, 23.62)
    assert args.radius == 500.0
    assert args.rank_by is RankBy.DISTANCE


def test_parser_rejects_bad_location():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args(["nearby", "somewhere"])


def test_text_search_writes_outputs(patched_api, service, tmp_path, capsys):
    service.queue(make_page(20, token="t1"), make_page(3, start=20))
    json_path = tmp_path / "coffee.json"
    csv_path = tmp_path / "coffee.csv"

    code = cli.main(["text", "coffee", "--pages", "2", "-o", str(json_path), "--csv", str(csv_path)])

    assert code == 0
    assert service.param("pagetoken", 1) == "t1"
    data = json.loads(json_path.read_text(encoding="utf-8"))
    assert len(data["places"]) == 23
    assert data["metadata"]["command"] == "text"
    assert len(csv_path.read_text(encoding="utf-8").splitlines()) == 24
    out = capsys.readouterr().out
    assert "Places: 23" in out
    assert "[1] Place 0" in out


def test_truncation_is_reported(patched_api, service, capsys):
    service.queue(make_page(20, token="more"))
    assert cli.main(["text", "coffee", "--pages", "1"]) == 0
    assert "More results available" in capsys.readouterr().out


def test_find(patched_api, service, capsys):
    service.queue({"status": "OK", "candidates": [make_place(4)]})
    assert cli.main(["find", "+40123456789", "--phone", "--fields", "name, place_id"]) == 0
    assert service.param("inputtype") == "phonenumber"
    assert service.param("fields") == "name,place_id"
    assert "Candidates: 1" in capsys.readouterr().out


def test_details(patched_api, service, capsys):
    service.queue({"status": "OK", "result": make_place(5)})
    assert cli.main(["details", "place-5"]) == 0
    assert '"place_id": "place-5"' in capsys.readouterr().out


def test_photo(patched_api, service, tmp_path):
    service.queue(httpx.Response(200, content=b"jpeg-bytes", headers={"content-type": "image/jpeg"}))
    out = tmp_path / "photo.jpg"
    assert cli.main(["-q", "photo", "ref-1", "-o", str(out)]) == 0
    assert out.read_bytes() == b"jpeg-bytes"
    assert service.param("maxwidth") == "800"


def test_library_error_exits_with_one(patched_api, service, capsys):
    assert cli.main(["nearby", "1,2", "--pages", "0"]) == 1
    assert "max_pages" in capsys.readouterr().err
    assert service.requests == []


def test_missing_api_key_exits_with_one(capsys):
    assert cli.main(["text", "coffee"]) == 1
    assert "No API key" in capsys.readouterr().err
