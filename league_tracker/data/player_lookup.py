"""League of Legends player lookup.

Resolves a Riot ID to a PlayerSnapshot through the account, summoner and
ranked endpoints of the Riot Games API, reporting failures as one of the
LookupFailure kinds instead of raising.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from ..api.riot_api import RiotAPIClient, RiotAPIError
from .errors import (
    LookupFailure,
    NotFound,
    RateLimited,
    UnknownFailure,
    UpstreamUnavailable,
)
from .match_history import MatchHistoryRetriever
from .models import PlayerSnapshot, RiotIdentifier
from .ranked_info import RankedInfoRetriever


@dataclass(frozen=True)
class LookupResult:
    """Outcome of a lookup: exactly one of ``snapshot`` and ``error`` is set."""

    identifier: str
    snapshot: Optional[PlayerSnapshot] = None
    error: Optional[LookupFailure] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> PlayerSnapshot:
        if self.error is not None:
            raise self.error
        return self.snapshot


def failure_from_api_error(error: RiotAPIError) -> LookupFailure:
    """Map a Riot API error onto the lookup failure taxonomy."""
    status = error.status_code
    if status == 404:
        return NotFound(str(error), status)
    if status == 429:
        return RateLimited(status)
    if status is None or status >= 500:
        return UpstreamUnavailable(str(error), status)
    return UnknownFailure(str(error), status)


class PlayerLookupPipeline:
    """Runs the account -> summoner -> ranked lookup for a Riot ID.

    The pipeline keeps no state between calls; everything a lookup needs is
    local to that call.
    """

    def __init__(self, api_client: RiotAPIClient, region: Optional[str] = None,
                 match_count: Optional[int] = None):
        """Initialize the lookup pipeline.

        Args:
            api_client: Client used for every upstream call
            region: Platform to query (defaults to the configured platform)
            match_count: Recent matches to fetch; 0 skips the match step
                (defaults to the configured count)
        """
        self.api_client = api_client
        self.region = (region or api_client.config.platform).lower()
        if match_count is None:
            match_count = api_client.config.recent_match_count
        self.match_count = max(match_count, 0)
        self.ranked_retriever = RankedInfoRetriever(api_client)
        self.match_retriever = MatchHistoryRetriever(api_client)
        self.logger = logging.getLogger(__name__)

    def lookup(self, identifier: str) -> LookupResult:
        """Look up a player, allowing cached upstream responses."""
        return self._run(identifier, use_cache=True)

    def refresh(self, identifier: str) -> LookupResult:
        """Look up a player again, bypassing any cached upstream responses."""
        return self._run(identifier, use_cache=False)

    def _run(self, identifier: str, use_cache: bool) -> LookupResult:
        try:
            riot_id = RiotIdentifier.parse(identifier)
        except LookupFailure as e:
            self.logger.info(f"Rejected invalid Riot ID: {identifier!r}")
            return LookupResult(identifier, error=e)

        action = "lookup" if use_cache else "refresh"
        self.logger.info(f"Starting {action} for: {riot_id} ({self.region})")

        try:
            snapshot = self._fetch_snapshot(riot_id, use_cache)
        except LookupFailure as e:
            self.logger.warning(f"{action.capitalize()} failed for {riot_id}: {e.kind}: {e}")
            return LookupResult(str(riot_id), error=e)
        except RiotAPIError as e:
            failure = failure_from_api_error(e)
            self.logger.warning(f"{action.capitalize()} failed for {riot_id}: {failure.kind}: {e}")
            return LookupResult(str(riot_id), error=failure)
        except Exception as e:
            self.logger.error(f"Unexpected error during {action} for {riot_id}: {e}", exc_info=True)
            return LookupResult(str(riot_id), error=UnknownFailure(str(e)))

        self.logger.info(f"{action.capitalize()} completed for {riot_id}")
        return LookupResult(str(riot_id), snapshot=snapshot)

    def _fetch_snapshot(self, riot_id: RiotIdentifier, use_cache: bool) -> PlayerSnapshot:
        # Step 1: Resolve the Riot ID to an account
        account = self.api_client.get_account_by_riot_id(
            riot_id.game_name, riot_id.tag_line, self.region, use_cache=use_cache
        )
        if not account:
            raise NotFound("Player not found", 404)
        puuid = account['puuid']

        # Step 2: Platform summoner record
        summoner = self.api_client.get_summoner_by_puuid(puuid, self.region, use_cache=use_cache)
        if not summoner:
            raise NotFound(f"No summoner found for {riot_id} on {self.region.upper()}", 404)

        # Step 3: Ranked entries, empty on failure
        ranked_entries = self.ranked_retriever.get_ranked_entries(
            summoner, puuid, self.region, use_cache=use_cache
        )

        # Step 4: Recent matches
        recent_matches = None
        if self.match_count:
            recent_matches = tuple(self.match_retriever.get_recent_matches(
                puuid, self.region, count=self.match_count, use_cache=use_cache
            ))

        return PlayerSnapshot(
            riot_id=f"{account.get('gameName') or riot_id.game_name}#{account.get('tagLine') or riot_id.tag_line}",
            display_name=summoner.get('name') or account.get('gameName') or riot_id.game_name,
            summoner_level=summoner.get('summonerLevel', 0),
            region=self.region,
            profile_icon_id=summoner.get('profileIconId'),
            ranked_entries=tuple(ranked_entries),
            recent_matches=recent_matches,
            last_updated=datetime.now(timezone.utc),
        )
