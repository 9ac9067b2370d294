"""Tests for configuration resolution."""

import pytest

from google_places_api import config
from google_places_api.config_manager import ClientConfig
from google_places_api.exceptions import ConfigurationError


def test_defaults_without_environment():
    cfg = ClientConfig()
    assert cfg.api_key is None
    assert cfg.proxy_url is None
    assert cfg.timeout == config.DEFAULT_TIMEOUT
    assert cfg.base_url == config.BASE_URL


def test_values_from_environment(monkeypatch):
    monkeypatch.setenv("GOOGLE_PLACES_API_KEY", " env-key ")
    monkeypatch.setenv("GOOGLE_PLACES_PROXY", "http://proxy:8080")
    monkeypatch.setenv("GOOGLE_PLACES_TIMEOUT", "12.5")

    cfg = ClientConfig()
    assert cfg.api_key == "env-key"
    assert cfg.proxy_url == "http://proxy:8080"
    assert cfg.timeout == 12.5


def test_explicit_values_win(monkeypatch):
    monkeypatch.setenv("GOOGLE_PLACES_API_KEY", "env-key")
    monkeypatch.setenv("GOOGLE_PLACES_TIMEOUT", "12.5")
    cfg = ClientConfig(api_key="arg-key", timeout=3.0)
    assert cfg.api_key == "arg-key"
    assert cfg.timeout == 3.0


def test_blank_environment_is_unset(monkeypatch):
    monkeypatch.setenv("GOOGLE_PLACES_API_KEY", "   ")
    assert ClientConfig().api_key is None


def test_bad_timeout(monkeypatch):
    monkeypatch.setenv("GOOGLE_PLACES_TIMEOUT", "soon")
    with pytest.raises(ConfigurationError, match="GOOGLE_PLACES_TIMEOUT"):
        ClientConfig()


def test_require_api_key():
    assert ClientConfig(api_key="k").require_api_key() == "k"
    with pytest.raises(ConfigurationError):
        ClientConfig().require_api_key()


def test_url_joins_base_and_path():
    cfg = ClientConfig(base_url="http://localhost:9000/place/")
    assert cfg.base_url == "http://localhost:9000/place"
    assert cfg.url(config.TEXT_SEARCH_PATH) == "http://localhost:9000/place/textsearch/json"
