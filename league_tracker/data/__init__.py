"""Data module for the League tracker.

This module holds the data records, the champion catalog and the player
lookup pipeline with its ranked and match retrievers.
"""

from .champions import ChampionCatalog
from .errors import (
    InvalidIdentifier,
    LookupFailure,
    NotFound,
    RateLimited,
    UnknownFailure,
    UpstreamUnavailable,
)
from .match_history import MatchHistoryRetriever
from .models import (
    ChampionRecord,
    FilterCriteria,
    MatchSummary,
    PlayerSnapshot,
    RankedEntry,
    RiotIdentifier,
    Role,
    SortOrder,
)
from .player_lookup import LookupResult, PlayerLookupPipeline
from .ranked_info import RankedInfoRetriever

__all__ = [
    'ChampionCatalog', 'PlayerLookupPipeline', 'LookupResult',
    'RankedInfoRetriever', 'MatchHistoryRetriever',
    'ChampionRecord', 'FilterCriteria', 'MatchSummary', 'PlayerSnapshot',
    'RankedEntry', 'RiotIdentifier', 'Role', 'SortOrder',
    'LookupFailure', 'InvalidIdentifier', 'NotFound', 'RateLimited',
    'UpstreamUnavailable', 'UnknownFailure',
]
