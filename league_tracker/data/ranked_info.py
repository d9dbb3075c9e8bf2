"""Module for handling ranked information retrieval and processing."""

import logging
from typing import Any, Dict, List, Optional
from ..api.riot_api import RiotAPIClient, RiotAPIError
from .models import RankedEntry


class RankedInfoRetriever:
    """Fetches a summoner's ranked entries, degrading to an empty list on failure."""

    def __init__(self, api_client: RiotAPIClient):
        self.api_client = api_client
        self.logger = logging.getLogger(__name__)

    def get_ranked_entries(self, summoner: Dict[str, Any], puuid: str,
                           region: Optional[str] = None, use_cache: bool = True) -> List[RankedEntry]:
        """
        Get ranked entries for a summoner.

        Uses the summoner-id endpoint when the summoner record carries an
        ``id`` and the PUUID endpoint otherwise. Any upstream failure,
        throttling included, is logged and yields an empty list.

        Args:
            summoner: Summoner record from the summoner endpoint
            puuid: The player's PUUID
            region: The platform for the request
            use_cache: Whether cached responses may be used

        Returns:
            List of ranked entries, empty if unranked or unavailable
        """
        summoner_id = summoner.get('id')
        try:
            if summoner_id:
                raw_entries = self.api_client.get_ranked_entries_by_summoner_id(
                    summoner_id, region, use_cache=use_cache)
            else:
                raw_entries = self.api_client.get_ranked_entries_by_puuid(
                    puuid, region, use_cache=use_cache)
        except RiotAPIError as e:
            self.logger.warning(f"Ranked data unavailable, treating player as unranked: {e}")
            return []

        if not isinstance(raw_entries, list):
            self.logger.warning("Unexpected ranked payload, treating player as unranked")
            return []

        entries = self.parse_entries(raw_entries)
        self.logger.info(f"Retrieved {len(entries)} ranked entries")
        return entries

    @staticmethod
    def parse_entries(raw_entries: List[Dict[str, Any]]) -> List[RankedEntry]:
        """Convert raw ranked payloads, skipping anything that is not a mapping."""
        return [RankedEntry.from_api(entry) for entry in raw_entries if isinstance(entry, dict)]
