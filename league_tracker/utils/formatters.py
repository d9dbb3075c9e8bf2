"""Formatting utilities for displaying League of Legends data.

The module-level functions are total: they accept None or empty input and
fall back to sentinel strings ("Unranked", "N/A") instead of raising.
"""

from typing import Any, Iterable, List, Mapping, Optional, Sequence, Union

from ..api.config import QUEUE_NAMES, SOLO_QUEUE
from ..data.errors import LookupFailure
from ..data.models import ChampionRecord, FilterCriteria, PlayerSnapshot, RankedEntry

EntryLike = Union[RankedEntry, Mapping[str, Any]]


def _normalize(entries: Optional[Iterable[EntryLike]]) -> List[RankedEntry]:
    normalized = []
    for entry in entries or ():
        if isinstance(entry, RankedEntry):
            normalized.append(entry)
        elif isinstance(entry, Mapping):
            normalized.append(RankedEntry.from_api(entry))
    return normalized


def find_solo_queue(entries: Optional[Iterable[EntryLike]]) -> Optional[RankedEntry]:
    """Return the Solo/Duo entry, if the player has one."""
    return next((e for e in _normalize(entries) if e.queue_type == SOLO_QUEUE), None)


def format_tier(tier: str) -> str:
    return tier[:1].upper() + tier[1:].lower()


def format_rank(entries: Optional[Iterable[EntryLike]]) -> str:
    """Format the Solo/Duo rank, e.g. ``Gold II (40 LP)``."""
    solo = find_solo_queue(entries)
    if not solo or not solo.tier:
        return "Unranked"
    return f"{format_tier(solo.tier)} {solo.rank} ({solo.league_points} LP)"


def format_win_rate(entries: Optional[Iterable[EntryLike]]) -> str:
    """Format the Solo/Duo win rate, e.g. ``55.0% (11W 9L)``."""
    solo = find_solo_queue(entries)
    if not solo:
        return "N/A"
    return f"{_percent(solo.wins, solo.total_games)}% ({solo.wins}W {solo.losses}L)"


def format_kda(kills: int, deaths: int, assists: int) -> str:
    """Format a KDA line, e.g. ``3/2/5 (4.00 KDA)``.

    With zero deaths the ratio is reported as the plain sum of kills and
    assists, e.g. ``3/0/5 (8 KDA)``.
    """
    kills, deaths, assists = kills or 0, deaths or 0, assists or 0
    if deaths > 0:
        ratio = f"{(kills + assists) / deaths:.2f}"
    else:
        ratio = str(kills + assists)
    return f"{kills}/{deaths}/{assists} ({ratio} KDA)"


def format_queue_name(queue_type: Optional[str]) -> str:
    if not queue_type:
        return "Unknown"
    return QUEUE_NAMES.get(queue_type, queue_type.replace('_', ' ').title())


def format_duration(seconds: Optional[int]) -> str:
    minutes, secs = divmod(int(seconds or 0), 60)
    return f"{minutes}:{secs:02d}"


def _percent(part: int, total: int) -> str:
    return f"{(part / total) * 100:.1f}" if total > 0 else "0.0"


class OutputFormatter:
    """Handles formatting of tracker and champion views for console output."""

    @staticmethod
    def format_player_info(snapshot: PlayerSnapshot) -> str:
        """
        Format the player information block.

        Args:
            snapshot: Player snapshot from a lookup

        Returns:
            Formatted player information string
        """
        lines = [
            "=" * 50,
            "PLAYER INFORMATION",
            "=" * 50,
            f"Riot ID: {snapshot.riot_id}",
            f"Summoner Name: {snapshot.display_name or 'N/A'}",
            f"Summoner Level: {snapshot.summoner_level}",
            f"Server: {snapshot.region.upper() if snapshot.region else 'N/A'}",
            f"Last Updated: {snapshot.last_updated.strftime('%Y-%m-%d %H:%M:%S UTC')}",
        ]
        if snapshot.profile_icon_id is not None:
            lines.append(f"Profile Icon ID: {snapshot.profile_icon_id}")
        return "\n".join(lines)

    @staticmethod
    def format_ranked_info(entries: Sequence[RankedEntry]) -> str:
        """
        Format the Solo/Duo summary and every ranked queue.

        Args:
            entries: Ranked entries of the player

        Returns:
            Formatted ranked information string
        """
        lines = [
            "\nRANKED STATISTICS (Solo/Duo)",
            "=" * 50,
            f"Current Rank: {format_rank(entries)}",
            f"Win Rate: {format_win_rate(entries)}",
        ]

        if entries:
            lines.append("\nAll Ranked Queues:")
            for entry in entries:
                lines.extend([
                    f"  {format_queue_name(entry.queue_type)}: {entry.tier} {entry.rank} ({entry.league_points} LP)",
                    f"    W/L: {entry.wins}W {entry.losses}L ({_percent(entry.wins, entry.total_games)}%)",
                ])

        return "\n".join(lines)

    @staticmethod
    def format_recent_matches(snapshot: PlayerSnapshot) -> str:
        if snapshot.recent_matches is None:
            return ""

        if not snapshot.recent_matches:
            return "\nRECENT MATCHES\n" + "=" * 50 + "\nNo recent matches found"

        lines = ["\nRECENT MATCHES", "=" * 50]
        for i, match in enumerate(snapshot.recent_matches, 1):
            status_emoji = "🟢" if match.win else "🔴"
            result = "Victory" if match.win else "Defeat"
            lines.extend([
                f"\n{i}. {status_emoji} {result} - {match.champion_name} ({match.game_mode})",
                f"   KDA: {format_kda(match.kills, match.deaths, match.assists)}",
                f"   Duration: {format_duration(match.game_duration)} | "
                f"Damage: {match.total_damage_dealt:,} | Gold: {match.gold_earned:,}",
            ])
        return "\n".join(lines)

    @classmethod
    def format_snapshot(cls, snapshot: PlayerSnapshot) -> str:
        """Format a complete tracker view for a snapshot."""
        sections = [
            cls.format_player_info(snapshot),
            cls.format_ranked_info(snapshot.ranked_entries),
            cls.format_recent_matches(snapshot),
        ]
        return "\n".join(section for section in sections if section)

    @staticmethod
    def format_champion_grid(champions: Sequence[ChampionRecord], criteria: FilterCriteria,
                             total: Optional[int] = None) -> str:
        """
        Format the champion view with a summary of the active filters.

        Args:
            champions: Champions to show, in display order
            criteria: Filters that produced the list
            total: Size of the unfiltered catalog

        Returns:
            Formatted champion list string
        """
        filters = [f"Role: {criteria.role.value}", f"Sort: {criteria.sort_order.value}"]
        if criteria.query:
            filters.insert(0, f"Search: '{criteria.query}'")

        shown = f"{len(champions)} of {total}" if total is not None else str(len(champions))
        lines = [
            "=" * 50,
            "CHAMPIONS",
            "=" * 50,
            " | ".join(filters),
            f"Showing {shown} champions",
        ]

        if not champions:
            lines.extend([
                "",
                "No champions match your filters.",
                "💡 Reset filters: python main.py champions",
            ])
            return "\n".join(lines)

        for champion in champions:
            lines.extend([
                f"\n{champion.title} [{champion.category.value}]",
                f"  {champion.description}",
            ])
        return "\n".join(lines)

    @staticmethod
    def format_error_message(error: str, suggestion: str = None) -> str:
        """
        Format error messages for display.

        Args:
            error: Error message
            suggestion: Optional suggestion for resolving the error

        Returns:
            Formatted error message
        """
        lines = [
            "❌ ERROR",
            "=" * 30,
            error
        ]

        if suggestion:
            lines.extend([
                "",
                "💡 Suggestion:",
                suggestion
            ])

        return "\n".join(lines)

    @classmethod
    def format_lookup_error(cls, error: LookupFailure) -> str:
        """Format a lookup failure: its message verbatim, then a suggestion tagged with its kind."""
        suggestions = {
            "InvalidIdentifier": "Enter a Riot ID like Faker#KR1",
            "NotFound": "Please check the spelling and ensure the account exists",
            "RateLimited": "Wait a moment, then search again",
            "UpstreamUnavailable": "The Riot API may be down. Please try again shortly",
        }
        suggestion = suggestions.get(error.kind, "Please check your configuration and try again")
        return cls.format_error_message(str(error), f"[{error.kind}] {suggestion}")
