# services/player_service.py
"""
Player leaderboard feed service.
"""

import logging
from typing import Any, Dict, List, Optional, Union

from configurations import FeedConfig, ListingConfig
from exceptions import NetworkFailureError
from extractors.parsers import PlayerFeedParser
from models import PlayerDatabase, PlayerListResult, PlayerRecord

from .request import FeedClient

logger = logging.getLogger(__name__)


class PlayerService:
    """
    Fetches and parses the player leaderboard feed.
    """

    def __init__(
        self,
        client: Optional[FeedClient] = None,
        parser: Optional[PlayerFeedParser] = None,
        listing: Optional[ListingConfig] = None,
    ):
        self.client = client or FeedClient()
        self.parser = parser or PlayerFeedParser()
        self.listing = listing or ListingConfig()

    @property
    def config(self) -> FeedConfig:
        return self.client.config

    def _build_params(
        self,
        search: Optional[str],
        db: Union[PlayerDatabase, str, None],
        sort: Optional[str],
        start: int,
        size: Optional[int],
    ) -> Dict[str, Any]:
        """
        Query parameters with defaults applied, empty search omitted.
        """
        params: Dict[str, Any] = {}
        if search:
            params["search"] = search
        params["db"] = self._resolve_db(db).value
        params["sort"] = sort or self.listing.default_player_sort
        params["start"] = start
        params["size"] = size or self.listing.player_page_size
        return params

    def _resolve_db(self, db: Union[PlayerDatabase, str, None]) -> PlayerDatabase:
        resolved = PlayerDatabase.parse(db or self.listing.default_player_db)
        return resolved or PlayerDatabase.INVASION

    def _fetch(self, params: Dict[str, Any], timeout: Optional[float]) -> str:
        try:
            return self.client.request(
                self.config.player_list_path, params=params, timeout=timeout
            )
        except NetworkFailureError as e:
            logger.error("Error fetching player list: %s", e)
            raise

    def list(
        self,
        search: Optional[str] = None,
        db: Union[PlayerDatabase, str, None] = None,
        sort: Optional[str] = None,
        start: int = 0,
        size: Optional[int] = None,
        timeout: Optional[float] = None,
    ) -> List[PlayerRecord]:
        """
        Fetch one leaderboard page.

        Args:
            search: Username filter
            db: Leaderboard partition, defaults to invasion
            sort: Feed sort field, defaults to rank_progression
            start: Row offset
            size: Page size, defaults to 20
            timeout: Request timeout in seconds

        Returns:
            Parsed players

        Raises:
            NetworkFailureError: If the request fails
        """
        params = self._build_params(search, db, sort, start, size)
        html = self._fetch(params, timeout)
        return self.parser.parse_player_list(html, PlayerDatabase(params["db"]))

    def list_with_pagination(
        self,
        search: Optional[str] = None,
        db: Union[PlayerDatabase, str, None] = None,
        sort: Optional[str] = None,
        start: int = 0,
        size: Optional[int] = None,
        timeout: Optional[float] = None,
    ) -> PlayerListResult:
        """
        Fetch one leaderboard page together with its Next/Previous flags.

        Same arguments as ``list``.

        Returns:
            PlayerListResult
        """
        params = self._build_params(search, db, sort, start, size)
        html = self._fetch(params, timeout)
        return self.parser.parse_with_pagination(html, PlayerDatabase(params["db"]))
