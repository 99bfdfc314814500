# listing/player_state.py
"""
Player list-state engine.

Leaderboard pages are filtered, sorted and paginated by the feed itself;
the engine only tracks which page is loaded and whether more exist.
"""

import logging
import time
from dataclasses import dataclass, field, replace
from typing import List, Optional, Sequence, Tuple, Union

from configurations import ListingConfig
from exceptions import NetworkFailureError
from models import PlayerDatabase, PlayerListResult, PlayerRecord

from .columns import camel_to_snake
from .sorting import DESC
from .store import SnapshotStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlayerStats:
    total_players: int = 0
    paginated_count: int = 0


@dataclass(frozen=True)
class PlayerListSnapshot:
    """
    Complete player engine state
    """

    players: Tuple[PlayerRecord, ...] = ()
    db: PlayerDatabase = PlayerDatabase.INVASION
    loading: bool = False
    error: Optional[str] = None
    last_query_timestamp: Optional[float] = None
    has_next: bool = False
    has_previous: bool = False
    page_size: int = 20
    current_page: int = 1
    mobile_current_page: int = 1
    mobile_loading_more: bool = False
    sort_column: Optional[str] = None
    sort_direction: Optional[str] = None


@dataclass(frozen=True)
class PlayerListView:
    """
    Derived, presentation-ready player data
    """

    filtered_players: List[PlayerRecord] = field(default_factory=list)
    total_pages: int = 1
    paginated_players: List[PlayerRecord] = field(default_factory=list)
    total_stats: PlayerStats = field(default_factory=PlayerStats)
    filtered_stats: PlayerStats = field(default_factory=PlayerStats)
    mobile_paginated_players: List[PlayerRecord] = field(default_factory=list)
    mobile_has_more: bool = False


# ***> pure updates <***


def reset_pages(snapshot: PlayerListSnapshot) -> PlayerListSnapshot:
    return replace(
        snapshot, current_page=1, mobile_current_page=1, mobile_loading_more=False
    )


def toggle_sort(snapshot: PlayerListSnapshot, column: str) -> PlayerListSnapshot:
    """
    Same column clears the sort; a new column sorts descending.
    """
    if snapshot.sort_column == column:
        snapshot = replace(snapshot, sort_column=None, sort_direction=None)
    else:
        snapshot = replace(snapshot, sort_column=column, sort_direction=DESC)
    return reset_pages(snapshot)


def land_page(
    snapshot: PlayerListSnapshot, result: PlayerListResult, append: bool, timestamp: float
) -> PlayerListSnapshot:
    """
    Store a fetched page, replacing or appending to the current players.
    """
    if append:
        return replace(
            snapshot,
            players=snapshot.players + tuple(result.players),
            has_next=result.has_next,
            has_previous=result.has_previous,
            error=None,
        )
    return replace(
        snapshot,
        players=tuple(result.players),
        has_next=result.has_next,
        has_previous=result.has_previous,
        mobile_current_page=1,
        last_query_timestamp=timestamp,
        error=None,
    )


def derive_player_view(snapshot: PlayerListSnapshot) -> PlayerListView:
    players = list(snapshot.players)
    stats = PlayerStats(total_players=len(players), paginated_count=len(players))
    return PlayerListView(
        filtered_players=players,
        total_pages=snapshot.current_page + 1 if snapshot.has_next else snapshot.current_page,
        paginated_players=players,
        total_stats=stats,
        filtered_stats=stats,
        mobile_paginated_players=players,
        mobile_has_more=snapshot.has_next,
    )


class PlayerListState(SnapshotStore[PlayerListSnapshot]):
    """
    Player list-state engine.

    Fetching goes through an injected service exposing
    ``list_with_pagination(db, search, sort, size, start)``.
    """

    name = "player list"

    def __init__(
        self,
        service,
        config: Optional[ListingConfig] = None,
        initial_db: Union[PlayerDatabase, str, None] = None,
    ):
        """
        Initialize the engine.

        Args:
            service: Player feed service
            config: Listing configuration (page size, default database)
            initial_db: Leaderboard partition to start with
        """
        self.config = config or ListingConfig()
        db = PlayerDatabase.parse(initial_db or self.config.default_player_db)
        super().__init__(
            PlayerListSnapshot(
                db=db or PlayerDatabase.INVASION,
                page_size=self.config.player_page_size,
            )
        )
        self.service = service

    # ***> state accessors <***

    @property
    def players(self) -> Tuple[PlayerRecord, ...]:
        return self.snapshot.players

    @property
    def db(self) -> PlayerDatabase:
        return self.snapshot.db

    @property
    def loading(self) -> bool:
        return self.snapshot.loading

    @property
    def error(self) -> Optional[str]:
        return self.snapshot.error

    @property
    def has_next(self) -> bool:
        return self.snapshot.has_next

    @property
    def has_previous(self) -> bool:
        return self.snapshot.has_previous

    @property
    def page_size(self) -> int:
        return self.snapshot.page_size

    @property
    def current_page(self) -> int:
        return self.snapshot.current_page

    @property
    def mobile_current_page(self) -> int:
        return self.snapshot.mobile_current_page

    @property
    def mobile_loading_more(self) -> bool:
        return self.snapshot.mobile_loading_more

    @property
    def sort_column(self) -> Optional[str]:
        return self.snapshot.sort_column

    @property
    def sort_direction(self) -> Optional[str]:
        return self.snapshot.sort_direction

    @property
    def last_query_timestamp(self) -> Optional[float]:
        return self.snapshot.last_query_timestamp

    # ***> fetching <***

    def _fetch(self, search_query: str, start: int) -> PlayerListResult:
        snapshot = self.snapshot
        sort_param = camel_to_snake(snapshot.sort_column) if snapshot.sort_column else None
        return self.service.list_with_pagination(
            db=snapshot.db,
            search=search_query.strip() or None,
            sort=sort_param,
            size=snapshot.page_size,
            start=start,
        )

    def _log_failure(self, error: Exception) -> None:
        if isinstance(error, NetworkFailureError):
            logger.error("Error loading players: %s", error)
        else:
            logger.exception("Unexpected error loading players")

    def load_players(self, search_query: str = "", start: Optional[int] = None) -> None:
        """
        Load one leaderboard page, replacing the current players.

        Args:
            search_query: Username search passed to the feed
            start: Row offset; defaults to the current desktop page
        """
        snapshot = self.snapshot
        if start is None:
            start = (snapshot.current_page - 1) * snapshot.page_size

        token = self._next_token()
        self._apply(lambda s: replace(s, loading=True))

        try:
            result = self._fetch(search_query, start)
        except Exception as e:
            self._log_failure(e)
            message = str(e) or "Failed to load player data"
            landed = self._apply_if_latest(
                token, lambda s: replace(s, loading=False, error=message)
            )
        else:
            landed = self._apply_if_latest(
                token,
                lambda s: replace(land_page(s, result, False, time.time()), loading=False),
            )
            if landed:
                logger.info("Loaded %d players from %s", len(result.players), snapshot.db.value)

        if not landed:
            self._apply(lambda s: replace(s, loading=False))

    def load_players_more(self, search_query: str = "") -> None:
        """
        Load the page after the mobile cursor and append it.
        """
        snapshot = self.snapshot
        start = (snapshot.mobile_current_page - 1) * snapshot.page_size
        token = self._next_token()

        try:
            result = self._fetch(search_query, start)
        except Exception as e:
            self._log_failure(e)
            message = str(e) or "Failed to load player data"
            self._apply_if_latest(token, lambda s: replace(s, error=message))
            return

        self._apply_if_latest(token, land_page, result, True, time.time())

    # ***> mutators <***

    def handle_sort(self, column: str) -> None:
        self._apply(toggle_sort, column)

    def handle_page_change(self, page: int) -> None:
        self._apply(lambda snapshot: replace(snapshot, current_page=max(1, int(page))))

    def handle_load_more(self, search_query: str = "") -> bool:
        """
        Fetch and append the next page for the mobile view.

        Returns:
            True when a page was requested, False when busy or at the end
        """
        with self._lock:
            snapshot = self._snapshot
            if snapshot.mobile_loading_more or not snapshot.has_next:
                return False
            self._snapshot = replace(
                snapshot,
                mobile_loading_more=True,
                mobile_current_page=snapshot.mobile_current_page + 1,
            )
            snapshot = self._snapshot
        self._notify(snapshot)

        try:
            self.load_players_more(search_query)
        finally:
            self._apply(lambda s: replace(s, mobile_loading_more=False))
        return True

    def handle_player_db_change(self, db: Union[PlayerDatabase, str]) -> None:
        parsed = PlayerDatabase.parse(db)
        if parsed is None:
            logger.warning("Ignoring unknown player database: %s", db)
            return
        self._apply(lambda snapshot: replace(snapshot, db=parsed))

    def handle_player_page_size_change(self, size: int) -> None:
        self._apply(lambda snapshot: reset_pages(replace(snapshot, page_size=int(size))))

    def reset_pagination(self) -> None:
        self._apply(reset_pages)

    def set_players(self, players: Sequence[PlayerRecord]) -> None:
        self._apply(lambda snapshot: replace(snapshot, players=tuple(players)))

    def set_sort_state(self, column: Optional[str], direction: Optional[str]) -> None:
        self._apply(
            lambda snapshot: replace(snapshot, sort_column=column, sort_direction=direction)
        )

    def get_derived_data(self) -> PlayerListView:
        return derive_player_view(self.snapshot)
