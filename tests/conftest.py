"""Shared fixtures: an in-memory stand-in for RiotAPIClient."""

import os
import sys
from types import SimpleNamespace

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from league_tracker.api.riot_api import RiotAPIError  # noqa: E402

FAKE_KEY = "RGAPI-00000000-0000-0000-0000-000000000000"

ACCOUNT = {"puuid": "puuid-faker", "gameName": "Faker", "tagLine": "KR1"}
SUMMONER = {"id": "summoner-faker", "name": "Hide on bush", "summonerLevel": 612, "profileIconId": 6}
SOLO_ENTRY = {
    "queueType": "RANKED_SOLO_5x5", "tier": "CHALLENGER", "rank": "I",
    "leaguePoints": 1204, "wins": 120, "losses": 80,
}
FLEX_ENTRY = {
    "queueType": "RANKED_FLEX_SR", "tier": "GOLD", "rank": "II",
    "leaguePoints": 40, "wins": 3, "losses": 4,
}


def make_match(match_id, puuid="puuid-faker", win=True, kills=3, deaths=2, assists=5):
    return {
        "metadata": {"matchId": match_id},
        "info": {
            "gameMode": "CLASSIC",
            "gameDuration": 1834,
            "participants": [
                {"puuid": "someone-else", "championName": "Zed", "win": not win,
                 "kills": 1, "deaths": 1, "assists": 1,
                 "totalDamageDealt": 100, "goldEarned": 100},
                {"puuid": puuid, "championName": "Ahri", "win": win,
                 "kills": kills, "deaths": deaths, "assists": assists,
                 "totalDamageDealt": 145000, "goldEarned": 12450},
            ],
        },
    }


class FakeRiotClient:
    """Records every call; each endpoint returns a canned value or raises it."""

    def __init__(self, platform="kr", recent_match_count=0):
        self.config = SimpleNamespace(platform=platform, recent_match_count=recent_match_count)
        self.calls = []
        self.account = ACCOUNT
        self.summoner = SUMMONER
        self.ranked = [SOLO_ENTRY, FLEX_ENTRY]
        self.match_ids = []
        self.matches = {}

    def _answer(self, name, value, use_cache):
        self.calls.append((name, use_cache))
        if isinstance(value, Exception):
            raise value
        return value

    def get_account_by_riot_id(self, game_name, tag_line, region=None, use_cache=True):
        return self._answer("account", self.account, use_cache)

    def get_summoner_by_puuid(self, puuid, region=None, use_cache=True):
        return self._answer("summoner", self.summoner, use_cache)

    def get_ranked_entries_by_summoner_id(self, summoner_id, region=None, use_cache=True):
        return self._answer("ranked_by_summoner", self.ranked, use_cache)

    def get_ranked_entries_by_puuid(self, puuid, region=None, use_cache=True):
        return self._answer("ranked_by_puuid", self.ranked, use_cache)

    def get_match_ids_by_puuid(self, puuid, region=None, count=5, use_cache=True):
        return self._answer("match_ids", self.match_ids[:count]
                            if not isinstance(self.match_ids, Exception) else self.match_ids, use_cache)

    def get_match_data(self, match_id, region=None, use_cache=True):
        return self._answer("match", self.matches.get(match_id), use_cache)


def api_error(status_code):
    return RiotAPIError(f"API request failed: {status_code}", status_code=status_code)


@pytest.fixture
def fake_client():
    return FakeRiotClient()


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setenv("RIOT_API_KEY", FAKE_KEY)
    monkeypatch.delenv("RIOT_PLATFORM", raising=False)
    monkeypatch.delenv("CACHE_TTL", raising=False)
    monkeypatch.delenv("RECENT_MATCH_COUNT", raising=False)
    return FAKE_KEY
