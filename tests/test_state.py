"""Tests for page state transitions and the tracker controller."""

import pytest

from conftest import FakeRiotClient
from league_tracker.data.errors import NotFound
from league_tracker.data.models import FilterCriteria, PlayerSnapshot, Role, SortOrder
from league_tracker.data.player_lookup import LookupResult, PlayerLookupPipeline
from league_tracker.ui.state import AppState, ChampionsState, Page, TrackerState
from league_tracker.ui.tracker import TrackerController


def make_snapshot(riot_id):
    return PlayerSnapshot(riot_id=riot_id, display_name=riot_id, summoner_level=1, region="na1")


class TestChampionsState:
    def test_transitions_return_new_values(self):
        state = ChampionsState()
        updated = state.set_query("ah").set_role("Mid").set_sort("Z-A")

        assert state.criteria == FilterCriteria()
        assert updated.criteria == FilterCriteria("ah", Role.MID, SortOrder.DESCENDING)

    def test_reset_restores_defaults(self):
        state = ChampionsState().set_query("zzz").set_role(Role.TOP).reset()
        assert state.criteria.is_default

    def test_invalid_role_rejected(self):
        with pytest.raises(ValueError):
            ChampionsState().set_role("Bot")

    def test_to_dict(self):
        assert ChampionsState().set_sort("A-Z").to_dict() == {
            "query": "", "role": "All", "sort_order": "A-Z",
        }


class TestTrackerState:
    def test_lookup_cycle(self):
        state = TrackerState().set_input("Faker#KR1")
        assert state.can_search

        started = state.lookup_started("Faker#KR1")
        assert started.loading
        assert not started.can_search
        assert started.pending_identifier == "Faker#KR1"

        done = started.lookup_succeeded(make_snapshot("Faker#KR1"), started.pending_request)
        assert not done.loading
        assert done.snapshot.riot_id == "Faker#KR1"
        assert done.pending_request is None
        assert state.snapshot is None

    def test_invalid_input_cannot_search(self):
        assert not TrackerState().set_input("Faker").can_search
        assert not TrackerState().can_search

    def test_failure_keeps_previous_snapshot(self):
        state = TrackerState(snapshot=make_snapshot("A#1")).lookup_started("B#2")
        failed = state.lookup_failed(NotFound("Player not found"), state.pending_request)
        assert failed.error.kind == "NotFound"
        assert failed.snapshot.riot_id == "A#1"
        assert not failed.loading

    def test_stale_result_is_discarded(self):
        first = TrackerState().lookup_started("A#1")
        first_id = first.pending_request
        second = first.lookup_started("B#2")

        assert second.pending_request != first_id
        assert second.lookup_succeeded(make_snapshot("A#1"), first_id) is second
        assert second.lookup_failed(NotFound("x"), first_id) is second

        done = second.lookup_succeeded(make_snapshot("B#2"), second.pending_request)
        assert done.snapshot.riot_id == "B#2"

    def test_result_without_pending_request_is_ignored(self):
        state = TrackerState()
        assert state.lookup_succeeded(make_snapshot("A#1"), 1) is state

    def test_cancel_clears_loading_and_keeps_previous_results(self):
        state = TrackerState().lookup_started("A#1")
        state = state.lookup_succeeded(make_snapshot("A#1"), state.pending_request)
        started = state.lookup_started("B#2")

        cancelled = started.lookup_cancelled(started.pending_request)
        assert not cancelled.loading
        assert cancelled.pending_request is None
        assert cancelled.snapshot.riot_id == "A#1"
        assert started.lookup_cancelled(started.pending_request - 1) is started

    def test_to_dict_serializes_snapshot_and_error(self):
        state = TrackerState().lookup_started("A#1")
        state = state.lookup_failed(NotFound("Player not found"), state.pending_request)
        data = state.to_dict()
        assert data["error"] == {"kind": "NotFound", "message": "Player not found"}
        assert data["snapshot"] is None


class TestAppState:
    def test_navigation_discards_tracker_state(self):
        app = AppState().navigate(Page.TRACKER)
        tracker = app.tracker.lookup_started("A#1")
        stale_id = tracker.pending_request
        app = AppState(page=Page.TRACKER, tracker=tracker)

        app = app.navigate("Champions")
        assert app.page is Page.CHAMPIONS
        assert app.tracker.pending_request is None
        assert app.tracker.lookup_succeeded(make_snapshot("A#1"), stale_id).snapshot is None

        restarted = app.tracker.lookup_started("B#2")
        assert restarted.pending_request != stale_id

    def test_navigation_discards_champion_filters(self):
        app = AppState(champions=ChampionsState().set_query("ahri"))
        app = app.navigate(Page.TRACKER).navigate(Page.CHAMPIONS)
        assert app.champions.criteria.is_default

    def test_same_page_is_noop(self):
        app = AppState()
        assert app.navigate(Page.CHAMPIONS) is app


class TestTrackerController:
    def test_search_updates_state_and_notifies(self):
        controller = TrackerController(PlayerLookupPipeline(FakeRiotClient()))
        seen = []
        controller.subscribe(lambda state: seen.append(state.loading))

        controller.set_input("Faker#KR1")
        result = controller.search()

        assert result.ok
        assert controller.state.snapshot.riot_id == "Faker#KR1"
        assert seen == [False, True, False]

    def test_update_forces_refresh(self):
        client = FakeRiotClient()
        controller = TrackerController(PlayerLookupPipeline(client))
        controller.update("Faker#KR1")
        assert all(use_cache is False for _, use_cache in client.calls)

    def test_refuses_while_loading(self):
        client = FakeRiotClient()
        controller = TrackerController(PlayerLookupPipeline(client))
        assert controller.begin("Faker#KR1") is not None

        assert controller.search("Other#NA1") is None
        assert client.calls == []

    def test_late_result_for_old_request_is_dropped(self):
        controller = TrackerController(PlayerLookupPipeline(FakeRiotClient()))
        old_id = controller.begin("A#1")
        # the page was left and re-entered, then a new lookup started
        controller.state = TrackerState(last_request=controller.state.last_request)
        new_id = controller.begin("B#2")

        controller.complete(old_id, LookupResult("A#1", snapshot=make_snapshot("A#1")))
        assert controller.state.loading
        assert controller.state.snapshot is None

        controller.complete(new_id, LookupResult("B#2", snapshot=make_snapshot("B#2")))
        assert controller.state.snapshot.riot_id == "B#2"

    def test_failed_lookup_sets_error(self):
        client = FakeRiotClient()
        client.account = None
        controller = TrackerController(PlayerLookupPipeline(client))
        result = controller.search("Faker#KR1")
        assert not result.ok
        assert controller.state.error.kind == "NotFound"
        assert not controller.state.loading

    def test_interrupted_lookup_releases_loading(self):
        pipeline = PlayerLookupPipeline(FakeRiotClient())
        controller = TrackerController(pipeline)
        controller.search("Faker#KR1")
        previous = controller.state.snapshot

        def interrupted(identifier):
            raise KeyboardInterrupt

        pipeline.lookup = interrupted
        with pytest.raises(KeyboardInterrupt):
            controller.search("Other#NA1")

        assert not controller.state.loading
        assert controller.state.pending_request is None
        assert controller.state.snapshot is previous

        del pipeline.lookup
        assert controller.search("Faker#KR1").ok
