# tests/test_server_parser.py
import logging

import pytest

from extractors import fix_player_list
from extractors.parsers import parse_server_list_from_string


class TestServerFeedParser:
    def test_parses_nested_server_list(self, server_xml):
        servers = parse_server_list_from_string(server_xml)

        assert [s.id for s in servers] == ["0", "1"]
        first = servers[0]
        assert first.name == "[Castling][Global][EU-1 LV1] Castle Wars"
        assert first.ip_address == "10.0.0.1"
        assert first.port == 1234
        assert first.bots == 12
        assert first.current_players == 3
        assert first.max_players == 16
        assert first.time_stamp == 1700000000
        assert first.dedicated is True
        assert first.mod is True
        assert first.realm is None
        assert first.mode == "Castling"

    def test_empty_player_entries_are_dropped(self, server_xml):
        servers = parse_server_list_from_string(server_xml)

        assert list(servers[0].player_list) == ["Player1", "Player3"]
        assert list(servers[1].player_list) == []

    def test_invalid_numbers_become_zero(self, server_xml):
        second = parse_server_list_from_string(server_xml)[1]

        assert second.bots == 0
        assert second.dedicated is False
        assert second.mod is False
        assert second.realm == "official_invasion"

    def test_flat_result_with_single_server(self):
        xml = (
            "<result><server><name>Solo</name><address>1.2.3.4</address>"
            "<port>80</port><player>Only</player></server></result>"
        )
        servers = parse_server_list_from_string(xml)

        assert len(servers) == 1
        assert servers[0].name == "Solo"
        assert servers[0].player_list == ("Only",)
        assert servers[0].current_players == 0

    @pytest.mark.parametrize("payload", ["", "<result></result>", "<other><server/></other>"])
    def test_missing_structure_yields_empty_list(self, payload):
        assert parse_server_list_from_string(payload) == []

    def test_non_text_payload_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert parse_server_list_from_string(None) == []
        assert "Error parsing server list XML" in caplog.text

    @pytest.mark.parametrize(
        "padding",
        ["", " ", "   ", "\n\t ", "　"],
    )
    def test_whitespace_only_players_never_survive(self, padding):
        xml = (
            "<result><server_list><server><name>S</name>"
            f"<player>{padding}</player><player>{padding}Ann{padding}</player>"
            f"<player>{padding}</player></server></server_list></result>"
        )
        players = parse_server_list_from_string(xml)[0].player_list

        assert players == ("Ann",)
        assert all(name.strip() for name in players)


class TestFixPlayerList:
    def test_absent(self):
        assert fix_player_list(None) == []

    def test_single_string(self):
        assert fix_player_list("  Ann ") == ["Ann"]

    def test_list_drops_blank_entries(self):
        assert fix_player_list(["Ann", "", "  ", "Bob"]) == ["Ann", "Bob"]

    def test_numeric_names_are_kept_as_text(self):
        assert fix_player_list([123, "x"]) == ["123", "x"]
