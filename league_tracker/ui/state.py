"""Page state for the Champions and Tracker views.

Every transition returns a new state value; nothing is mutated in place,
so transitions can be tested without a rendering surface.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Optional

from ..data.errors import LookupFailure
from ..data.models import FilterCriteria, PlayerSnapshot, RiotIdentifier, Role, SortOrder


class Page(str, Enum):
    CHAMPIONS = "Champions"
    TRACKER = "Tracker"


@dataclass(frozen=True)
class ChampionsState:
    criteria: FilterCriteria = field(default_factory=FilterCriteria)

    def set_query(self, query: str) -> "ChampionsState":
        return replace(self, criteria=replace(self.criteria, query=query or ""))

    def set_role(self, role: "Role | str") -> "ChampionsState":
        return replace(self, criteria=replace(self.criteria, role=Role.parse(role)))

    def set_sort(self, sort_order: "SortOrder | str") -> "ChampionsState":
        return replace(self, criteria=replace(self.criteria, sort_order=SortOrder.parse(sort_order)))

    def reset(self) -> "ChampionsState":
        return replace(self, criteria=FilterCriteria())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "query": self.criteria.query,
            "role": self.criteria.role.value,
            "sort_order": self.criteria.sort_order.value,
        }


@dataclass(frozen=True)
class TrackerState:
    """State of the Tracker page.

    ``pending_request`` identifies the lookup currently in flight. Results
    carrying any other request id are stale and ignored.
    """

    riot_id_input: str = ""
    loading: bool = False
    snapshot: Optional[PlayerSnapshot] = None
    error: Optional[LookupFailure] = None
    pending_request: Optional[int] = None
    pending_identifier: Optional[str] = None
    last_request: int = 0

    @property
    def input_valid(self) -> bool:
        try:
            RiotIdentifier.parse(self.riot_id_input)
        except LookupFailure:
            return False
        return True

    @property
    def can_search(self) -> bool:
        return not self.loading and self.input_valid

    def set_input(self, text: str) -> "TrackerState":
        return replace(self, riot_id_input=text or "")

    def lookup_started(self, identifier: str) -> "TrackerState":
        request_id = self.last_request + 1
        return replace(
            self,
            loading=True,
            error=None,
            pending_request=request_id,
            pending_identifier=identifier,
            last_request=request_id,
        )

    def _is_current(self, request_id: int) -> bool:
        return self.pending_request is not None and request_id == self.pending_request

    def lookup_succeeded(self, snapshot: PlayerSnapshot, request_id: int) -> "TrackerState":
        if not self._is_current(request_id):
            return self
        return replace(
            self,
            loading=False,
            snapshot=snapshot,
            error=None,
            pending_request=None,
            pending_identifier=None,
        )

    def lookup_failed(self, error: LookupFailure, request_id: int) -> "TrackerState":
        if not self._is_current(request_id):
            return self
        return replace(
            self,
            loading=False,
            error=error,
            pending_request=None,
            pending_identifier=None,
        )

    def lookup_cancelled(self, request_id: int) -> "TrackerState":
        """Abandon the lookup in flight, keeping the previous snapshot and error."""
        if not self._is_current(request_id):
            return self
        return replace(self, loading=False, pending_request=None, pending_identifier=None)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "riot_id_input": self.riot_id_input,
            "loading": self.loading,
            "snapshot": self.snapshot.to_dict() if self.snapshot else None,
            "error": {"kind": self.error.kind, "message": str(self.error)} if self.error else None,
            "pending_request": self.pending_request,
            "pending_identifier": self.pending_identifier,
            "last_request": self.last_request,
        }


@dataclass(frozen=True)
class AppState:
    """Top-level shell: the active page plus each page's own state."""

    page: Page = Page.CHAMPIONS
    champions: ChampionsState = field(default_factory=ChampionsState)
    tracker: TrackerState = field(default_factory=TrackerState)

    def navigate(self, page: "Page | str") -> "AppState":
        """Switch pages, discarding the state of the page being left."""
        page = Page(page)
        if page is self.page:
            return self
        if self.page is Page.TRACKER:
            # keep the counter so late results from the old page stay stale
            return replace(self, page=page, tracker=TrackerState(last_request=self.tracker.last_request))
        return replace(self, page=page, champions=ChampionsState())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "page": self.page.value,
            "champions": self.champions.to_dict(),
            "tracker": self.tracker.to_dict(),
        }
