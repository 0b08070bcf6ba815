"""Tests for city_autocomplete.config.settings."""

import pytest

from city_autocomplete.config.settings import (
    GEODB_API_URL,
    LookupConfig,
    itinerary_api_url,
    load_config,
    validate_config,
)

ENV_VARS = [
    "CITY_LOOKUP_PROVIDER",
    "GEODB_API_URL",
    "GEODB_API_HOST",
    "RAPIDAPI_KEY",
    "MAPS_API_KEY",
    "CITY_LOOKUP_LIMIT",
    "CITY_LOOKUP_DEBOUNCE_MS",
    "CITY_LOOKUP_TIMEOUT",
    "ITINERARY_API_URL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestLookupConfig:
    def test_defaults(self):
        config = LookupConfig()
        assert config.endpoint == GEODB_API_URL
        assert config.result_limit == 5
        assert config.debounce_interval_ms == 300
        assert config.debounce_interval == pytest.approx(0.3)
        assert config.provider == "geodb"

    def test_rejects_zero_limit(self):
        with pytest.raises(ValueError):
            LookupConfig(result_limit=0)

    def test_rejects_negative_interval(self):
        with pytest.raises(ValueError):
            LookupConfig(debounce_interval_ms=-1)

    def test_rejects_unknown_provider(self):
        with pytest.raises(ValueError):
            LookupConfig(provider="bing")


class TestLoadConfig:
    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("RAPIDAPI_KEY", "rapid")
        monkeypatch.setenv("CITY_LOOKUP_LIMIT", "8")
        monkeypatch.setenv("CITY_LOOKUP_DEBOUNCE_MS", "150")
        monkeypatch.setenv("CITY_LOOKUP_TIMEOUT", "2.5")
        config = load_config()
        assert config.credential == "rapid"
        assert config.result_limit == 8
        assert config.debounce_interval_ms == 150
        assert config.timeout == 2.5

    def test_google_provider_uses_maps_key(self, monkeypatch):
        monkeypatch.setenv("CITY_LOOKUP_PROVIDER", "Google")
        monkeypatch.setenv("MAPS_API_KEY", "AIza-maps")
        monkeypatch.setenv("RAPIDAPI_KEY", "rapid")
        config = load_config()
        assert config.provider == "google"
        assert config.credential == "AIza-maps"

    def test_bad_number_falls_back_to_default(self, monkeypatch):
        monkeypatch.setenv("CITY_LOOKUP_DEBOUNCE_MS", "soon")
        assert load_config().debounce_interval_ms == 300

    def test_each_call_returns_new_object(self):
        assert load_config() is not load_config()

    def test_itinerary_api_url(self, monkeypatch):
        assert itinerary_api_url() is None
        monkeypatch.setenv("ITINERARY_API_URL", "http://localhost:8000")
        assert itinerary_api_url() == "http://localhost:8000"


class TestValidateConfig:
    def test_valid_with_credential(self):
        assert validate_config(LookupConfig(credential="k")) is True

    def test_missing_credential_logs_error(self, caplog):
        assert validate_config(LookupConfig()) is False
        assert "RAPIDAPI_KEY" in caplog.text

    def test_missing_google_key(self, caplog):
        assert validate_config(LookupConfig(provider="google")) is False
        assert "MAPS_API_KEY" in caplog.text
