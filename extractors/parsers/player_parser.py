# extractors/parsers/player_parser.py
"""
Player table parser for extracting leaderboard rows from the HTML feed.
Specialized parser focusing on table finding and row filtering.
"""

import logging
from typing import List, Union

from bs4 import BeautifulSoup

from exceptions import ParsingError, TableNotFoundError
from extractors.extractor_player import PlayerRowExtractor
from extractors.navigation import PaginationFinder
from logger import LoggingConstants
from models import PlayerDatabase, PlayerListResult, PlayerRecord

from .base_parser import BaseParser

logger = logging.getLogger(__name__)


class PlayerFeedParser(BaseParser):
    """
    HTML parser specialized for the player leaderboard table.
    Inherits common functionality from BaseParser and adds player-specific logic.
    """

    feed_type = "player"

    def __init__(self, pagination_finder: PaginationFinder = None):
        """
        Initialize player parser with row extractor and pagination finder.

        Args:
            pagination_finder: Finder used for the Next/Previous flags
        """
        super().__init__()
        self.row_extractor = PlayerRowExtractor()
        self.pagination_finder = pagination_finder or PaginationFinder()

    def parse_player_list(
        self, html: Union[str, bytes], db: PlayerDatabase
    ) -> List[PlayerRecord]:
        """
        Parse the leaderboard HTML into records.

        Args:
            html: Raw HTML payload
            db: Leaderboard partition the page belongs to

        Returns:
            Players in table order; empty list when no table is found or
            parsing fails
        """
        try:
            soup = self._load_document(html, self.config.HTML_FEATURES)
        except ParsingError as e:
            logger.warning(LoggingConstants.PLAYER_PARSE_FAILED_MSG, e)
            return []
        return self._parse_players(soup, db)

    def parse_with_pagination(
        self, html: Union[str, bytes], db: PlayerDatabase
    ) -> PlayerListResult:
        """
        Parse players and pagination flags from a single document parse.

        Args:
            html: Raw HTML payload
            db: Leaderboard partition the page belongs to

        Returns:
            PlayerListResult; flags default to False when the scan fails
        """
        try:
            soup = self._load_document(html, self.config.HTML_FEATURES)
        except ParsingError as e:
            logger.warning(LoggingConstants.PLAYER_PARSE_FAILED_MSG, e)
            return PlayerListResult(players=[])

        players = self._parse_players(soup, db)

        try:
            links = self.pagination_finder.find_pagination_links(soup)
        except Exception as e:
            logger.warning(LoggingConstants.PAGINATION_PARSE_FAILED_MSG, e)
            return PlayerListResult(players=players)

        return PlayerListResult(
            players=players,
            has_next=links.has_next,
            has_previous=links.has_previous,
        )

    def _parse_players(self, soup: BeautifulSoup, db: PlayerDatabase) -> List[PlayerRecord]:
        try:
            table = self._locate_table(soup)
            if table is None:
                raise TableNotFoundError("player")

            rows = self._get_table_rows_from_table(table)
            if not rows:
                logger.warning(LoggingConstants.NO_ROWS_MSG)
                return []

            return [
                self.row_extractor.extract_player(self._get_table_cells(row), db)
                for row in rows
                if not self._should_skip_header_row(row)
            ]
        except TableNotFoundError:
            logger.warning(LoggingConstants.NO_TABLE_MSG)
            return []
        except Exception as e:
            logger.warning(LoggingConstants.PLAYER_PARSE_FAILED_MSG, e)
            return []
