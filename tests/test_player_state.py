# tests/test_player_state.py
import pytest

from configurations import ListingConfig
from exceptions import NetworkFailureError
from listing import DESC, PlayerListState
from models import PlayerDatabase, PlayerListResult


@pytest.fixture
def page(make_player):
    def factory(*names, has_next=False, has_previous=False):
        return PlayerListResult(
            players=[make_player(name) for name in names],
            has_next=has_next,
            has_previous=has_previous,
        )

    return factory


def test_initial_state(fake_player_service):
    engine = PlayerListState(fake_player_service())

    assert engine.db is PlayerDatabase.INVASION
    assert engine.page_size == 20
    assert engine.loading is False
    assert engine.get_derived_data().total_pages == 1


def test_initial_db_override(fake_player_service):
    engine = PlayerListState(fake_player_service(), initial_db="pacific")

    assert engine.db is PlayerDatabase.PACIFIC


class TestLoadPlayers:
    def test_replaces_players(self, fake_player_service, page):
        service = fake_player_service([page("a", "b", has_next=True)])
        engine = PlayerListState(service)

        engine.load_players("  alp ")

        assert [p.username for p in engine.players] == ["a", "b"]
        assert engine.has_next is True
        assert engine.loading is False
        assert engine.last_query_timestamp is not None
        assert service.calls == [
            dict(db=PlayerDatabase.INVASION, search="alp", sort=None, size=20, start=0)
        ]

    def test_start_follows_current_page(self, fake_player_service):
        service = fake_player_service()
        engine = PlayerListState(service)

        engine.handle_page_change(3)
        engine.load_players()
        engine.load_players(start=7)

        assert [call["start"] for call in service.calls] == [40, 7]

    def test_sort_parameter_is_snake_case(self, fake_player_service):
        service = fake_player_service()
        engine = PlayerListState(service)

        engine.handle_sort("rankProgression")
        engine.load_players()

        assert service.calls[0]["sort"] == "rank_progression"

    def test_failure_keeps_players(self, fake_player_service, page):
        service = fake_player_service([page("a")])
        engine = PlayerListState(service)
        engine.load_players()

        service.error = NetworkFailureError("Network error: down")
        engine.load_players()

        assert [p.username for p in engine.players] == ["a"]
        assert engine.error == "Network error: down"
        assert engine.loading is False

    def test_success_clears_error(self, fake_player_service):
        service = fake_player_service(error=NetworkFailureError("x"))
        engine = PlayerListState(service)
        engine.load_players()

        service.error = None
        engine.load_players()

        assert engine.error is None


    def test_unexpected_error_is_surfaced(self, fake_player_service, page):
        service = fake_player_service([page("a")])
        engine = PlayerListState(service)
        engine.load_players()

        service.error = KeyError("db")
        engine.load_players()

        assert engine.loading is False
        assert engine.error == "'db'"
        assert [p.username for p in engine.players] == ["a"]

    def test_overtaken_load_clears_loading(self, make_player):
        class OverlappingService:
            def __init__(self):
                self.calls = 0

            def list_with_pagination(self, db=None, search=None, sort=None, size=None, start=0):
                self.calls += 1
                if self.calls == 1:
                    engine.load_players_more("")
                return PlayerListResult(players=[make_player(f"call {self.calls}")])

        engine = PlayerListState(OverlappingService())
        engine.load_players("")

        assert engine.loading is False
        assert [p.username for p in engine.players] == ["call 2"]


class TestLoadMore:
    def test_appends_next_page(self, fake_player_service, page):
        service = fake_player_service([page("a", has_next=True), page("b", has_next=False)])
        engine = PlayerListState(service, ListingConfig(player_page_size=1))
        engine.load_players()

        assert engine.handle_load_more() is True

        assert [p.username for p in engine.players] == ["a", "b"]
        assert engine.mobile_current_page == 2
        assert engine.mobile_loading_more is False
        assert service.calls[-1]["start"] == 1
        assert engine.handle_load_more() is False

    def test_nothing_when_no_next_page(self, fake_player_service, page):
        service = fake_player_service([page("a")])
        engine = PlayerListState(service)
        engine.load_players()

        assert engine.handle_load_more() is False
        assert len(service.calls) == 1

    def test_flag_cleared_on_failure(self, fake_player_service, page):
        service = fake_player_service([page("a", has_next=True)])
        engine = PlayerListState(service)
        engine.load_players()
        service.error = NetworkFailureError("gone")

        engine.handle_load_more()

        assert engine.mobile_loading_more is False
        assert [p.username for p in engine.players] == ["a"]
        assert engine.error == "gone"


class TestMutators:
    def test_sort_toggle(self, fake_player_service):
        engine = PlayerListState(fake_player_service())
        engine.handle_page_change(4)

        engine.handle_sort("kills")
        assert (engine.sort_column, engine.sort_direction, engine.current_page) == ("kills", DESC, 1)

        engine.handle_sort("kills")
        assert (engine.sort_column, engine.sort_direction) == (None, None)

    def test_page_size_resets_pages(self, fake_player_service):
        engine = PlayerListState(fake_player_service())
        engine.handle_page_change(5)

        engine.handle_player_page_size_change(50)

        assert engine.page_size == 50
        assert engine.current_page == 1

    def test_db_change(self, fake_player_service):
        engine = PlayerListState(fake_player_service())

        engine.handle_player_db_change("prereset_invasion")
        engine.handle_player_db_change("bogus")

        assert engine.db is PlayerDatabase.PRERESET_INVASION

    def test_total_pages_from_flags(self, fake_player_service, page):
        engine = PlayerListState(fake_player_service([page("a", has_next=True)]))
        engine.handle_page_change(2)
        engine.load_players()

        view = engine.get_derived_data()

        assert view.total_pages == 3
        assert view.mobile_has_more is True

    def test_set_players(self, fake_player_service, make_player):
        engine = PlayerListState(fake_player_service())

        engine.set_players([make_player("x")])

        assert engine.get_derived_data().total_stats.total_players == 1
