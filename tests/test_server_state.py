# tests/test_server_state.py
import pytest

from configurations import ListingConfig
from exceptions import NetworkFailureError
from listing import ASC, DESC, ServerListState
from listing.server_state import ServerListSnapshot, derive_server_view, search_servers


@pytest.fixture
def servers(make_server):
    return [make_server() for _ in range(45)]


@pytest.fixture
def state(fake_server_service, scheduler, servers):
    engine = ServerListState(fake_server_service(servers), ListingConfig(), scheduler)
    engine.refresh_list()
    return engine


class TestRefresh:
    def test_initial_snapshot_is_loading(self, fake_server_service, scheduler):
        engine = ServerListState(fake_server_service(), scheduler=scheduler)

        assert engine.loading is True
        assert engine.servers == ()

    def test_success_replaces_servers(self, state, servers):
        assert state.servers == tuple(servers)
        assert state.loading is False
        assert state.error is None

    def test_failure_keeps_previous_servers(self, state, servers):
        state.service.error = NetworkFailureError("Network error: boom")

        state.refresh_list()

        assert state.servers == tuple(servers)
        assert state.error == "Network error: boom"
        assert state.loading is False

    def test_success_clears_previous_error(self, state):
        state.service.error = NetworkFailureError("down")
        state.refresh_list()
        state.service.error = None

        state.refresh_list()

        assert state.error is None

    def test_manual_refresh_flags(self, fake_server_service, scheduler):
        engine = ServerListState(fake_server_service(), ListingConfig(), scheduler)

        engine.refresh_list(is_manual=True)

        assert engine.manual_refresh_loading is False
        assert engine.is_manual_refresh is True
        assert len(scheduler.pending(2.5)) == 1

        scheduler.run_pending(2.5)

        assert engine.is_manual_refresh is False

    def test_manual_reset_timer_is_replaced(self, state, scheduler):
        state.refresh_list(is_manual=True)
        state.refresh_list(is_manual=True)

        assert len(scheduler.pending(2.5)) == 1

    def test_refresh_resets_mobile_cursor(self, state, scheduler):
        state.handle_load_more()
        scheduler.run_pending(0.5)

        state.refresh_list()

        assert state.mobile_current_page == 1

    def test_stale_response_is_discarded(self, make_server, scheduler):
        first = [make_server(name="old")]
        second = [make_server(name="new")]

        class OverlappingService:
            def __init__(self):
                self.calls = 0

            def list_all(self, timeout=None):
                self.calls += 1
                if self.calls == 1:
                    engine.refresh_list()
                    return first
                return second

        engine = ServerListState(OverlappingService(), scheduler=scheduler)
        engine.refresh_list()

        assert [s.name for s in engine.servers] == ["new"]

    def test_unexpected_error_is_surfaced(self, fake_server_service, scheduler, servers):
        engine = ServerListState(fake_server_service(servers), scheduler=scheduler)
        engine.refresh_list()
        engine.service.error = ValueError("bad payload")

        engine.refresh_list(is_manual=True)

        assert engine.loading is False
        assert engine.manual_refresh_loading is False
        assert engine.error == "bad payload"
        assert engine.servers == tuple(servers)

    def test_overtaken_manual_refresh_clears_its_flags(self, make_server, scheduler):
        class OverlappingService:
            def __init__(self):
                self.calls = 0

            def list_all(self, timeout=None):
                self.calls += 1
                if self.calls == 1:
                    engine.refresh_list(is_manual=False)
                return [make_server(name=f"call {self.calls}")]

        engine = ServerListState(OverlappingService(), scheduler=scheduler)
        engine.refresh_list(is_manual=True)

        assert engine.loading is False
        assert engine.manual_refresh_loading is False
        assert [s.name for s in engine.servers] == ["call 2"]

    def test_subscribers_receive_snapshots(self, fake_server_service, scheduler, servers):
        engine = ServerListState(fake_server_service(servers), scheduler=scheduler)
        received = []
        unsubscribe = engine.subscribe(received.append)

        engine.refresh_list()
        unsubscribe()
        engine.handle_page_change(2)

        assert len(received) == 2
        assert received[-1].servers == tuple(servers)


class TestSort:
    def test_cycle(self, state):
        seen = []
        for _ in range(4):
            state.handle_page_change(3)
            state.handle_sort("name")
            seen.append((state.sort_column, state.sort_direction, state.current_page))

        assert seen == [
            ("name", DESC, 1),
            ("name", ASC, 1),
            (None, None, 1),
            ("name", DESC, 1),
        ]

    def test_new_column_starts_descending(self, state):
        state.handle_sort("name")
        state.handle_sort("port")

        assert (state.sort_column, state.sort_direction) == ("port", DESC)

    def test_set_sort_state_keeps_page(self, state):
        state.handle_page_change(2)
        state.set_sort_state("bots", ASC)

        assert state.current_page == 2
        assert (state.sort_column, state.sort_direction) == ("bots", ASC)


class TestDerivedData:
    def test_desktop_pagination(self, state, servers):
        state.handle_page_change(3)

        view = state.get_derived_data()

        assert view.total_pages == 3
        assert view.paginated_servers == servers[40:]
        assert view.total_stats.total_servers == 45

    def test_page_past_end_is_empty(self, state):
        state.handle_page_change(9)

        assert state.get_derived_data().paginated_servers == []

    def test_search_and_filters(self, make_server):
        servers = [
            make_server(name="Alpha", realm="official_invasion", current_players=4),
            make_server(name="Beta", realm="official_dominance", current_players=2),
            make_server(name="alphabet", mode="COOP", player_list=("Zed",)),
        ]
        snapshot = ServerListSnapshot(servers=tuple(servers))

        view = derive_server_view(snapshot, "alpha", ["invasion"])

        assert [s.name for s in view.filtered_servers] == ["Alpha"]
        assert view.filtered_stats.total_players == 4
        assert view.total_stats.total_servers == 3

    def test_search_covers_player_names(self, make_server):
        servers = [make_server(player_list=("Zed",)), make_server()]

        assert search_servers(servers, "zed") == servers[:1]
        assert search_servers(servers, "") == servers

    def test_empty_collection(self):
        view = derive_server_view(ServerListSnapshot(), page_size=20)

        assert view.total_pages == 0
        assert view.mobile_has_more is False


class TestLoadMore:
    def test_grows_slice_and_settles(self, state, scheduler, servers):
        assert state.handle_load_more() is True
        assert state.mobile_loading_more is True
        assert state.handle_load_more() is False

        scheduler.run_pending(0.5)

        view = state.get_derived_data()
        assert state.mobile_loading_more is False
        assert view.mobile_paginated_servers == servers[:40]
        assert view.mobile_has_more is True

    def test_stops_when_exhausted(self, state, scheduler):
        state.handle_load_more()
        scheduler.run_pending()
        state.handle_load_more()
        scheduler.run_pending()

        assert state.mobile_current_page == 3
        assert state.handle_load_more() is False

    def test_respects_filtered_rows(self, state):
        assert state.handle_load_more(search_query="no such server") is False
        assert state.mobile_current_page == 1

    def test_reset_pagination(self, state, scheduler):
        state.handle_load_more()
        state.handle_page_change(2)

        state.reset_pagination()

        assert (state.current_page, state.mobile_current_page) == (1, 1)
        assert state.mobile_loading_more is False
