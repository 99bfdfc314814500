# tests/test_main.py
from urllib.parse import parse_qs

import pytest

from main import BrowserSession, build_parser
from models import PlayerDatabase


@pytest.fixture
def session(testing_config):
    return BrowserSession(testing_config)


def test_url_state_seeds_session(session):
    session.apply_url_state("search=cn&quickFilters=invasion,bogus&page=2&sort=name&dir=asc&view=players&db=pacific")

    assert session.search_query == "cn"
    assert session.active_quick_filters == ["invasion"]
    assert session.view == "players"
    assert session.player_state.db is PlayerDatabase.PACIFIC
    assert session.server_state.current_page == 2
    assert (session.server_state.sort_column, session.server_state.sort_direction) == ("name", "asc")


def test_arguments_override_url_state(session):
    args = build_parser().parse_args(
        ["servers", "--search", "eu", "--filter", "castling", "--filter", "dominance", "--sort", "port", "--page", "3"]
    )

    session.apply_url_state("quickFilters=invasion")
    session.apply_arguments(args)

    assert session.search_query == "eu"
    assert session.active_quick_filters == ["invasion", "castling", "dominance"]
    assert (session.server_state.sort_column, session.server_state.sort_direction) == ("port", "desc")
    assert session.server_state.current_page == 3


def test_share_query(session):
    session.apply_url_state("search=cn&quickFilters=invasion&page=2")

    assert parse_qs(session.share_query()) == {
        "search": ["cn"],
        "quickFilters": ["invasion"],
        "page": ["2"],
    }


def test_players_page_size_keeps_page(session):
    args = build_parser().parse_args(["players", "--db", "prereset_invasion", "--page", "4", "--page-size", "50"])

    session.apply_arguments(args)

    assert session.player_state.page_size == 50
    assert session.player_state.current_page == 4
    assert session.player_state.db is PlayerDatabase.PRERESET_INVASION


def test_subcommand_required():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])
