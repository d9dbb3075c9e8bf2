"""Module for handling recent match retrieval and processing."""

import logging
from typing import List, Optional
from ..api.riot_api import RiotAPIClient, RiotAPIError
from .models import MatchSummary


class MatchHistoryRetriever:
    """Handles recent match retrieval and processing."""

    def __init__(self, api_client: RiotAPIClient):
        self.api_client = api_client
        self.logger = logging.getLogger(__name__)

    def get_recent_matches(self, puuid: str, region: Optional[str] = None,
                           count: int = 5, use_cache: bool = True) -> List[MatchSummary]:
        """
        Get the player's most recent matches.

        Failing to list match IDs propagates as RiotAPIError. Individual
        matches that cannot be fetched, or that do not include the player,
        are skipped.

        Args:
            puuid: The player's PUUID
            region: The platform for the request
            count: Number of matches to retrieve
            use_cache: Whether cached responses may be used

        Returns:
            List of match summaries, newest first
        """
        match_ids = self.api_client.get_match_ids_by_puuid(
            puuid, region, count=count, use_cache=use_cache
        )

        if not match_ids:
            self.logger.info("No recent matches found")
            return []

        summaries = []
        for match_id in match_ids:
            try:
                match_data = self.api_client.get_match_data(match_id, region, use_cache=use_cache)
            except RiotAPIError as e:
                self.logger.warning(f"Skipping match {match_id}: {e}")
                continue
            if not match_data:
                continue
            summary = MatchSummary.from_match(match_data, puuid)
            if summary:
                summaries.append(summary)

        self.logger.info(f"Retrieved {len(summaries)} recent matches")
        return summaries
