# tests/test_url_sync.py
import pytest

from listing import ASC, PlayerListState, ServerListState, UrlState, UrlSync
from models import PlayerDatabase


@pytest.fixture
def engines(fake_server_service, fake_player_service, scheduler):
    return (
        ServerListState(fake_server_service(), scheduler=scheduler),
        PlayerListState(fake_player_service()),
    )


@pytest.fixture
def events():
    return {"view": [], "search": []}


@pytest.fixture
def sync(engines, events):
    server_state, player_state = engines
    return UrlSync(
        server_state,
        player_state,
        on_view_change=events["view"].append,
        on_search_change=events["search"].append,
    )


class TestInitialize:
    def test_drops_unknown_filters(self, sync):
        result = sync.initialize_from_url(UrlState(quick_filters=["invasion", "not-a-real-id"]))

        assert result.active_quick_filters == ["invasion"]

    def test_applies_search_and_sort(self, sync, engines, events):
        server_state, player_state = engines

        result = sync.initialize_from_url(
            UrlState(
                search="eu",
                sort_column="name",
                sort_direction=ASC,
                view="players",
                player_db=PlayerDatabase.PACIFIC,
            )
        )

        assert events["search"] == ["eu"]
        assert (server_state.sort_column, server_state.sort_direction) == ("name", ASC)
        assert (player_state.sort_column, player_state.sort_direction) == ("name", ASC)
        assert result.initial_view == "players"
        assert result.initial_player_db is PlayerDatabase.PACIFIC
        assert player_state.db is PlayerDatabase.INVASION

    def test_sort_needs_both_parts(self, sync, engines):
        server_state, _ = engines

        sync.initialize_from_url(UrlState(sort_column="name"))

        assert server_state.sort_column is None

    def test_empty_state(self, sync, events):
        result = sync.initialize_from_url(UrlState())

        assert result.active_quick_filters == []
        assert result.initial_view is None
        assert events["search"] == []


class TestUrlStateChange:
    def test_quick_filters_return_early(self, sync, engines, events):
        server_state, _ = engines

        result = sync.handle_url_state_change(
            UrlState(search="x", quick_filters=["dominance", "zzz"], sort_column="name", view="players")
        )

        assert result == {"quick_filters": ["dominance"]}
        assert events["search"] == ["x"]
        assert server_state.sort_column is None
        assert events["view"] == []

    def test_sort_view_and_db(self, sync, engines, events):
        server_state, player_state = engines

        result = sync.handle_url_state_change(
            UrlState(sort_column="port", view="players", player_db=PlayerDatabase.PACIFIC)
        )

        assert result == {}
        assert (server_state.sort_column, server_state.sort_direction) == ("port", None)
        assert player_state.db is PlayerDatabase.PACIFIC
        assert events["view"] == ["players", "players"]

    def test_db_alone_keeps_view(self, sync, engines, events):
        _, player_state = engines

        sync.handle_url_state_change(UrlState(player_db=PlayerDatabase.PRERESET_INVASION))

        assert player_state.db is PlayerDatabase.PRERESET_INVASION
        assert events["view"] == []

    def test_sync_fn(self, sync, events):
        sync.create_sync_fn()(UrlState(view="servers"))

        assert events["view"] == ["servers"]
