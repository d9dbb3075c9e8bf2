"""Controller for the Tracker page."""

import logging
from typing import Callable, List, Optional

from ..data.player_lookup import LookupResult, PlayerLookupPipeline
from .state import TrackerState

Listener = Callable[[TrackerState], None]


class TrackerController:
    """Owns the Tracker page state and drives lookups through the pipeline.

    ``begin``/``complete`` split a lookup so a front end can run the
    pipeline on another thread; ``search``/``update`` do both in one call.
    Only the most recently started lookup may write the snapshot.
    """

    def __init__(self, pipeline: PlayerLookupPipeline, state: Optional[TrackerState] = None):
        self.pipeline = pipeline
        self.state = state or TrackerState()
        self.logger = logging.getLogger(__name__)
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def _set_state(self, state: TrackerState) -> None:
        if state is self.state:
            return
        self.state = state
        for listener in self._listeners:
            listener(state)

    def set_input(self, text: str) -> None:
        self._set_state(self.state.set_input(text))

    def begin(self, identifier: str) -> Optional[int]:
        """Mark a lookup as started.

        Returns:
            The request id to pass to ``complete``, or None if a lookup is
            already in flight
        """
        if self.state.loading:
            self.logger.info(f"Ignoring lookup for {identifier!r}: another lookup is in flight")
            return None
        self._set_state(self.state.lookup_started(identifier))
        return self.state.pending_request

    def complete(self, request_id: int, result: LookupResult) -> None:
        if request_id != self.state.pending_request:
            self.logger.info(f"Discarding stale result for {result.identifier}")
            return
        if result.ok:
            self._set_state(self.state.lookup_succeeded(result.snapshot, request_id))
        else:
            self._set_state(self.state.lookup_failed(result.error, request_id))

    def run(self, identifier: str, force: bool = False) -> Optional[LookupResult]:
        """Run a lookup synchronously.

        Args:
            identifier: Riot ID to look up
            force: Bypass cached upstream responses

        Returns:
            The lookup result, or None if the request was refused because
            another lookup is in flight
        """
        request_id = self.begin(identifier)
        if request_id is None:
            return None
        result = None
        try:
            if force:
                result = self.pipeline.refresh(identifier)
            else:
                result = self.pipeline.lookup(identifier)
        finally:
            if result is None:
                # interrupted; release the loading flag so later lookups run
                self._set_state(self.state.lookup_cancelled(request_id))
        self.complete(request_id, result)
        return result

    def search(self, identifier: Optional[str] = None) -> Optional[LookupResult]:
        return self.run(identifier if identifier is not None else self.state.riot_id_input)

    def update(self, identifier: Optional[str] = None) -> Optional[LookupResult]:
        return self.run(identifier if identifier is not None else self.state.riot_id_input, force=True)
