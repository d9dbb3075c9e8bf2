"""Data records shared by the champion catalog and the player tracker."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple

from .errors import InvalidIdentifier


class Role(str, Enum):
    ALL = "All"
    ADC = "ADC"
    SUPPORT = "Support"
    JUNGLE = "Jungle"
    TOP = "Top"
    MID = "Mid"

    @classmethod
    def parse(cls, value: "Role | str") -> "Role":
        if isinstance(value, cls):
            return value
        for role in cls:
            if role.value.lower() == str(value).strip().lower():
                return role
        raise ValueError(f"Unknown role: {value!r}")


class SortOrder(str, Enum):
    DEFAULT = "Default"
    ASCENDING = "A-Z"
    DESCENDING = "Z-A"

    @classmethod
    def parse(cls, value: "SortOrder | str") -> "SortOrder":
        """Accept either the member name or its label, case-insensitively."""
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for order in cls:
            if text in (order.name.lower(), order.value.lower()):
                return order
        raise ValueError(f"Unknown sort order: {value!r}")


@dataclass(frozen=True)
class ChampionRecord:
    id: str
    image_url: str
    title: str
    description: str
    category: Role

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ChampionRecord":
        category = Role.parse(data["category"])
        if category is Role.ALL:
            raise ValueError(f"Champion {data.get('title')!r} cannot have category 'All'")
        return cls(
            id=str(data["id"]),
            image_url=data.get("imageUrl", ""),
            title=data["title"],
            description=data.get("description", ""),
            category=category,
        )


@dataclass(frozen=True)
class FilterCriteria:
    """Champion view filters. ``FilterCriteria()`` is the reset state."""

    query: str = ""
    role: Role = Role.ALL
    sort_order: SortOrder = SortOrder.DEFAULT

    @property
    def is_default(self) -> bool:
        return self == FilterCriteria()


@dataclass(frozen=True)
class RiotIdentifier:
    game_name: str
    tag_line: str

    @classmethod
    def parse(cls, identifier: Optional[str]) -> "RiotIdentifier":
        """Parse ``GameName#TagLine``.

        Raises:
            InvalidIdentifier: If there is not exactly one ``#`` or either
                side is blank
        """
        text = (identifier or "").strip()
        if text.count("#") != 1:
            raise InvalidIdentifier(identifier)
        game_name, tag_line = (part.strip() for part in text.split("#"))
        if not game_name or not tag_line:
            raise InvalidIdentifier(identifier)
        return cls(game_name, tag_line)

    def __str__(self) -> str:
        return f"{self.game_name}#{self.tag_line}"


@dataclass(frozen=True)
class RankedEntry:
    queue_type: str
    tier: str
    rank: str
    league_points: int = 0
    wins: int = 0
    losses: int = 0

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> "RankedEntry":
        return cls(
            queue_type=data.get("queueType") or "",
            tier=data.get("tier") or "",
            rank=data.get("rank") or "",
            league_points=data.get("leaguePoints") or 0,
            wins=data.get("wins") or 0,
            losses=data.get("losses") or 0,
        )

    @property
    def total_games(self) -> int:
        return self.wins + self.losses


@dataclass(frozen=True)
class MatchSummary:
    champion_name: str
    game_mode: str
    win: bool
    kills: int
    deaths: int
    assists: int
    total_damage_dealt: int
    gold_earned: int
    game_duration: int

    @classmethod
    def from_match(cls, match_data: Mapping[str, Any], puuid: str) -> Optional["MatchSummary"]:
        """Extract the given player's line from a match-v5 payload.

        Returns None if the player did not take part in the match.
        """
        info = match_data.get("info") or {}
        player = next(
            (p for p in info.get("participants", []) if p.get("puuid") == puuid),
            None,
        )
        if player is None:
            return None
        return cls(
            champion_name=player.get("championName", "Unknown"),
            game_mode=info.get("gameMode", "Unknown"),
            win=bool(player.get("win", False)),
            kills=player.get("kills", 0),
            deaths=player.get("deaths", 0),
            assists=player.get("assists", 0),
            total_damage_dealt=player.get("totalDamageDealt", 0),
            gold_earned=player.get("goldEarned", 0),
            game_duration=info.get("gameDuration", 0),
        )


@dataclass(frozen=True)
class PlayerSnapshot:
    riot_id: str
    display_name: str
    summoner_level: int
    region: str
    profile_icon_id: Optional[int] = None
    ranked_entries: Tuple[RankedEntry, ...] = ()
    recent_matches: Optional[Tuple[MatchSummary, ...]] = None
    last_updated: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["ranked_entries"] = [asdict(e) for e in self.ranked_entries]
        if self.recent_matches is not None:
            data["recent_matches"] = [asdict(m) for m in self.recent_matches]
        data["last_updated"] = self.last_updated.isoformat()
        return data
