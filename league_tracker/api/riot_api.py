"""Riot API client for League of Legends player data.

This module provides the HTTP client used by the player lookup pipeline,
with error reporting, logging and a small response cache.
"""

import requests
import logging
from typing import Optional, Dict, List, Any
from urllib.parse import quote
from .cache import ResponseCache
from .config import Config, API_HOST, account_routing_for, routing_for


class RiotAPIError(Exception):
    """Custom exception for Riot API errors.

    Attributes:
        message (str): Error message
        status_code (Optional[int]): HTTP status code, None for network errors
        response_text (Optional[str]): Raw response text if available
    """

    def __init__(self, message: str, status_code: Optional[int] = None,
                 response_text: Optional[str] = None) -> None:
        self.status_code = status_code
        self.response_text = response_text
        super().__init__(message)


class RiotAPIClient:
    """Client for the Riot Games endpoints needed by the tracker.

    Every public method accepts ``use_cache``; passing ``False`` skips the
    cached response and stores the fresh one in its place. The client never
    retries: a 429 is reported to the caller like any other failure.

    Attributes:
        config (Config): Configuration instance
        logger (logging.Logger): Logger for this client
        session (requests.Session): HTTP session for requests
        cache (ResponseCache): Decoded responses keyed by URL
    """

    def __init__(self, config: Optional[Config] = None,
                 session: Optional[requests.Session] = None) -> None:
        """Initialize the Riot API client.

        Args:
            config: Configuration instance (creates default if None)
            session: HTTP session to use (creates one if None)

        Raises:
            ValueError: If configuration is invalid
        """
        self.config = config or Config()
        self.logger = logging.getLogger(__name__)
        self.session = session or requests.Session()
        self.session.headers.update(self.config.headers)
        self.cache = ResponseCache(self.config.cache_ttl)
        self.logger.info("Riot API client initialized successfully")

    @staticmethod
    def _cache_key(url: str, params: Optional[Dict[str, Any]]) -> str:
        if not params:
            return url
        query = "&".join(f"{key}={params[key]}" for key in sorted(params))
        return f"{url}?{query}"

    def _make_request(self, url: str, params: Optional[Dict[str, Any]] = None,
                      use_cache: bool = True) -> Any:
        """
        Make a GET request to the Riot API.

        Args:
            url: The API endpoint URL
            params: Query parameters for the request
            use_cache: Whether a cached response may be returned

        Returns:
            Decoded JSON response data

        Raises:
            RiotAPIError: If the request fails
        """
        key = self._cache_key(url, params)
        if use_cache:
            cached = self.cache.get(key)
            if cached is not None:
                self.logger.debug(f"Cache hit: {url}")
                return cached

        try:
            response = self.session.get(url, params=params, timeout=self.config.session_timeout)
        except requests.RequestException as e:
            raise RiotAPIError(f"Network error: {e}")

        if response.status_code == 200:
            try:
                data = response.json()
            except ValueError:
                raise RiotAPIError("Invalid JSON in API response",
                                   status_code=response.status_code,
                                   response_text=response.text)
            self.cache.set(key, data)
            return data

        error_msg = f"API request failed: {response.status_code}"
        if response.status_code == 403:
            error_msg += " - Access forbidden (check API key permissions)"
        elif response.status_code == 404:
            error_msg += " - Resource not found"
        elif response.status_code == 429:
            error_msg += " - Rate limit exceeded"
        elif response.status_code >= 500:
            error_msg += " - Riot API unavailable"

        raise RiotAPIError(
            error_msg,
            status_code=response.status_code,
            response_text=response.text
        )

    def _platform_url(self, region: Optional[str], path: str) -> str:
        return API_HOST.format(host=(region or self.config.platform).lower()) + path

    def _routing_url(self, region: Optional[str], path: str) -> str:
        return API_HOST.format(host=routing_for(region or self.config.platform)) + path

    def _account_url(self, region: Optional[str], path: str) -> str:
        return API_HOST.format(host=account_routing_for(region or self.config.platform)) + path

    def get_account_by_riot_id(self, game_name: str, tag_line: str, region: Optional[str] = None,
                               use_cache: bool = True) -> Optional[Dict[str, Any]]:
        """
        Get account information using Riot ID (game name + tag line).

        Args:
            game_name: The player's game name
            tag_line: The player's tag line
            region: Platform whose account route serves the request
            use_cache: Whether a cached response may be returned

        Returns:
            Account data dictionary or None if not found
        """
        url = self._account_url(
            region,
            f"/riot/account/v1/accounts/by-riot-id/{quote(game_name, safe='')}/{quote(tag_line, safe='')}"
        )

        try:
            data = self._make_request(url, use_cache=use_cache)
            self.logger.info(f"Successfully retrieved account for {game_name}#{tag_line}")
            return data
        except RiotAPIError as e:
            if e.status_code == 404:
                self.logger.warning(f"Account not found: {game_name}#{tag_line}")
                return None
            self.logger.error(f"Failed to get account {game_name}#{tag_line}: {e}")
            raise

    def get_summoner_by_puuid(self, puuid: str, region: Optional[str] = None,
                              use_cache: bool = True) -> Optional[Dict[str, Any]]:
        """
        Get summoner information using PUUID.

        Args:
            puuid: The player's PUUID
            region: The platform for the request
            use_cache: Whether a cached response may be returned

        Returns:
            Summoner data dictionary or None if not found
        """
        url = self._platform_url(region, f"/lol/summoner/v4/summoners/by-puuid/{puuid}")

        try:
            data = self._make_request(url, use_cache=use_cache)
            self.logger.info(f"Successfully retrieved summoner data for PUUID: {puuid[:20]}...")
            return data
        except RiotAPIError as e:
            if e.status_code == 404:
                self.logger.warning(f"Summoner not found for PUUID: {puuid[:20]}...")
                return None
            self.logger.error(f"Failed to get summoner for PUUID {puuid[:20]}...: {e}")
            raise

    def get_ranked_entries_by_summoner_id(self, summoner_id: str, region: Optional[str] = None,
                                          use_cache: bool = True) -> List[Dict[str, Any]]:
        """
        Get ranked entries using summoner ID.

        Raises:
            RiotAPIError: If the request fails
        """
        url = self._platform_url(region, f"/lol/league/v4/entries/by-summoner/{summoner_id}")
        return self._make_request(url, use_cache=use_cache)

    def get_ranked_entries_by_puuid(self, puuid: str, region: Optional[str] = None,
                                    use_cache: bool = True) -> List[Dict[str, Any]]:
        """
        Get ranked entries using PUUID.

        Raises:
            RiotAPIError: If the request fails
        """
        url = self._platform_url(region, f"/lol/league/v4/entries/by-puuid/{puuid}")
        return self._make_request(url, use_cache=use_cache)

    def get_match_ids_by_puuid(self, puuid: str, region: Optional[str] = None,
                               count: int = 5, use_cache: bool = True) -> List[str]:
        """
        Get the most recent match IDs for a player.

        Args:
            puuid: The player's PUUID
            region: The platform whose regional route serves the request
            count: Number of match IDs to retrieve
            use_cache: Whether a cached response may be returned

        Returns:
            List of match IDs, newest first

        Raises:
            RiotAPIError: If the request fails
        """
        url = self._routing_url(region, f"/lol/match/v5/matches/by-puuid/{puuid}/ids")
        data = self._make_request(url, {"start": 0, "count": count}, use_cache=use_cache)
        self.logger.info(f"Retrieved {len(data)} match IDs for PUUID: {puuid[:20]}...")
        return data

    def get_match_data(self, match_id: str, region: Optional[str] = None,
                       use_cache: bool = True) -> Optional[Dict[str, Any]]:
        """
        Get detailed match data by match ID.

        Returns:
            Match data dictionary or None if not found
        """
        url = self._routing_url(region, f"/lol/match/v5/matches/{match_id}")

        try:
            return self._make_request(url, use_cache=use_cache)
        except RiotAPIError as e:
            if e.status_code == 404:
                self.logger.warning(f"Match not found: {match_id}")
                return None
            raise
