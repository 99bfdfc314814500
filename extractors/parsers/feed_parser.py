# extractors/parsers/feed_parser.py
"""
Main feed parsing module for server and player data extraction.
Provides simplified interface to the parser components.
"""

from typing import Iterable, List, Union

import pandas as pd

from models import PlayerDatabase, PlayerListResult, PlayerRecord, ServerRecord

from .player_parser import PlayerFeedParser
from .server_parser import ServerFeedParser

Record = Union[ServerRecord, PlayerRecord]


class FeedParser:
    """
    Main feed parser class providing unified interface to all parsing functionality.
    Acts as a facade to the specialized parser components.
    """

    def __init__(self):
        """
        Initialize feed parser with the server and player parsers.
        """
        self.server_parser = ServerFeedParser()
        self.player_parser = PlayerFeedParser()

    def parse_server_list(self, xml: str) -> List[ServerRecord]:
        """
        Parse the server-list XML feed.

        Args:
            xml: Raw XML payload

        Returns:
            List of ServerRecord, empty on malformed input
        """
        return self.server_parser.parse_server_list(xml)

    def parse_player_list(self, html: str, db: PlayerDatabase) -> List[PlayerRecord]:
        """
        Parse the player leaderboard HTML feed.

        Args:
            html: Raw HTML payload
            db: Leaderboard partition

        Returns:
            List of PlayerRecord, empty on malformed input
        """
        return self.player_parser.parse_player_list(html, db)

    def parse_player_list_with_pagination(
        self, html: str, db: PlayerDatabase
    ) -> PlayerListResult:
        """
        Parse the player leaderboard plus its Next/Previous flags.
        """
        return self.player_parser.parse_with_pagination(html, db)


_default_parser = FeedParser()


def parse_server_list_from_string(xml: str) -> List[ServerRecord]:
    return _default_parser.parse_server_list(xml)


def parse_player_list_from_string(html: str, db: PlayerDatabase) -> List[PlayerRecord]:
    return _default_parser.parse_player_list(html, db)


def parse_player_list_with_pagination(html: str, db: PlayerDatabase) -> PlayerListResult:
    return _default_parser.parse_player_list_with_pagination(html, db)


def records_to_dataframe(records: Iterable[Record]) -> pd.DataFrame:
    """
    Convert parsed records to a DataFrame, one column per record field.

    Args:
        records: ServerRecord or PlayerRecord instances

    Returns:
        DataFrame (empty when there are no records)
    """
    data = [record.to_dict() for record in records]
    return pd.DataFrame(data) if data else pd.DataFrame()


def export_records_csv(records: Iterable[Record], path: str) -> int:
    """
    Write records to a CSV file.

    Args:
        records: ServerRecord or PlayerRecord instances
        path: Destination file path

    Returns:
        Number of rows written
    """
    df = records_to_dataframe(records)
    df.to_csv(path, index=False)
    return len(df)
