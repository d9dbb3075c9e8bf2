"""Tests for configuration loading and log filtering."""

import logging

import pytest

from league_tracker.api.config import Config, SensitiveDataFilter, account_routing_for, routing_for


def test_defaults(api_key):
    config = Config()
    assert config.api_key == api_key
    assert config.platform == "na1"
    assert config.account_routing == "americas"
    assert config.cache_ttl == 120
    assert config.recent_match_count == 0
    assert config.headers["X-Riot-Token"] == api_key


def test_environment_overrides(api_key, monkeypatch):
    monkeypatch.setenv("RIOT_PLATFORM", "EUW1")
    monkeypatch.setenv("CACHE_TTL", "0")
    monkeypatch.setenv("RECENT_MATCH_COUNT", "5")
    config = Config()
    assert config.platform == "euw1"
    assert config.account_routing == "europe"
    assert config.cache_ttl == 0
    assert config.recent_match_count == 5


def test_missing_key(monkeypatch):
    monkeypatch.delenv("RIOT_API_KEY", raising=False)
    with pytest.raises(ValueError, match="RIOT_API_KEY"):
        Config()


def test_rejects_short_key(monkeypatch):
    monkeypatch.setenv("RIOT_API_KEY", "short")
    monkeypatch.delenv("MIN_API_KEY_LENGTH", raising=False)
    with pytest.raises(ValueError, match="too short"):
        Config()


def test_rejects_placeholder_key(monkeypatch):
    monkeypatch.setenv("RIOT_API_KEY", "your_api_key_here")
    monkeypatch.setenv("MIN_API_KEY_LENGTH", "5")
    with pytest.raises(ValueError, match="real API key"):
        Config()


def test_routing_for_unknown_platform():
    assert routing_for("kr") == "asia"
    assert routing_for("OC1") == "sea"
    assert routing_for("moon1") == "americas"


def test_account_routing_sends_sea_platforms_to_asia(api_key, monkeypatch):
    monkeypatch.setenv("RIOT_PLATFORM", "oc1")
    assert Config().account_routing == "asia"
    for platform in ("oc1", "ph2", "sg2", "th2", "tw2", "vn2"):
        assert account_routing_for(platform) == "asia"
        assert routing_for(platform) == "sea"
    assert account_routing_for("euw1") == "europe"
    assert account_routing_for("moon1") == "americas"


def test_sensitive_data_filter_masks_keys():
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "key=%s", ("RGAPI-secret",), None)
    assert SensitiveDataFilter().filter(record)
    assert record.getMessage() == "[SENSITIVE DATA FILTERED]"

    plain = logging.LogRecord("x", logging.INFO, __file__, 1, "Looking up %s", ("Faker#KR1",), None)
    SensitiveDataFilter().filter(plain)
    assert plain.getMessage() == "Looking up Faker#KR1"
