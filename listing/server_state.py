# listing/server_state.py
"""
Server list-state engine.

The whole server collection is held locally; search, quick filters,
sorting and both pagination modes are derived from it on demand.
"""

import logging
import math
from dataclasses import dataclass, field, replace
from typing import List, Optional, Sequence, Tuple

from configurations import ListingConfig
from exceptions import NetworkFailureError
from models import ServerRecord

from .quick_filters import apply_quick_filters
from .sorting import ASC, DESC, sort_servers
from .store import Scheduler, SnapshotStore, start_timer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServerStats:
    total_servers: int = 0
    total_players: int = 0


@dataclass(frozen=True)
class ServerListSnapshot:
    """
    Complete server engine state
    """

    servers: Tuple[ServerRecord, ...] = ()
    loading: bool = True
    error: Optional[str] = None
    is_manual_refresh: bool = False
    manual_refresh_loading: bool = False
    current_page: int = 1
    mobile_current_page: int = 1
    mobile_loading_more: bool = False
    sort_column: Optional[str] = None
    sort_direction: Optional[str] = None


@dataclass(frozen=True)
class ServerListView:
    """
    Derived, presentation-ready server data
    """

    filtered_servers: List[ServerRecord] = field(default_factory=list)
    total_pages: int = 0
    paginated_servers: List[ServerRecord] = field(default_factory=list)
    total_stats: ServerStats = field(default_factory=ServerStats)
    filtered_stats: ServerStats = field(default_factory=ServerStats)
    mobile_paginated_servers: List[ServerRecord] = field(default_factory=list)
    mobile_has_more: bool = False


# ***> pure updates <***


def reset_pages(snapshot: ServerListSnapshot) -> ServerListSnapshot:
    return replace(
        snapshot, current_page=1, mobile_current_page=1, mobile_loading_more=False
    )


def cycle_sort(snapshot: ServerListSnapshot, column: str) -> ServerListSnapshot:
    """
    Same column cycles desc -> asc -> unsorted -> desc; a new column starts at desc.
    """
    if snapshot.sort_column == column:
        if snapshot.sort_direction == DESC:
            snapshot = replace(snapshot, sort_direction=ASC)
        elif snapshot.sort_direction == ASC:
            snapshot = replace(snapshot, sort_column=None, sort_direction=None)
        else:
            snapshot = replace(snapshot, sort_direction=DESC)
    else:
        snapshot = replace(snapshot, sort_column=column, sort_direction=DESC)
    return reset_pages(snapshot)


def begin_refresh(snapshot: ServerListSnapshot, is_manual: bool) -> ServerListSnapshot:
    return replace(
        snapshot,
        loading=True,
        is_manual_refresh=True,
        manual_refresh_loading=snapshot.manual_refresh_loading or is_manual,
    )


def settle_refresh(snapshot: ServerListSnapshot, is_manual: bool) -> ServerListSnapshot:
    """
    Clear the loading flags a refresh raised.
    """
    return replace(
        snapshot,
        loading=False,
        manual_refresh_loading=False if is_manual else snapshot.manual_refresh_loading,
    )


def finish_refresh(
    snapshot: ServerListSnapshot,
    is_manual: bool,
    servers: Optional[Sequence[ServerRecord]] = None,
    error: Optional[str] = None,
) -> ServerListSnapshot:
    """
    Land a refresh result. Failed refreshes keep the previous servers.
    """
    snapshot = settle_refresh(snapshot, is_manual)
    if error is not None:
        return replace(snapshot, error=error)
    return replace(
        snapshot,
        servers=tuple(servers or ()),
        error=None,
        mobile_current_page=1,
        mobile_loading_more=False,
    )


def search_servers(servers: Sequence[ServerRecord], search_query: str) -> List[ServerRecord]:
    """
    Case-insensitive substring match over the searchable server fields.
    """
    if not search_query:
        return list(servers)

    query = search_query.lower()

    def matches(server: ServerRecord) -> bool:
        return (
            query in server.name.lower()
            or query in server.ip_address.lower()
            or query in str(server.port)
            or query in server.country.lower()
            or query in server.mode.lower()
            or query in server.map_id.lower()
            or (bool(server.comment) and query in server.comment.lower())
            or any(query in player.lower() for player in server.player_list)
        )

    return [server for server in servers if matches(server)]


def calculate_stats(servers: Sequence[ServerRecord]) -> ServerStats:
    return ServerStats(
        total_servers=len(servers),
        total_players=sum(server.current_players for server in servers),
    )


def derive_server_view(
    snapshot: ServerListSnapshot,
    search_query: str = "",
    active_quick_filters: Sequence[str] = (),
    page_size: int = 20,
) -> ServerListView:
    """
    Search, filter, sort and paginate the server collection.

    Args:
        snapshot: Engine state
        search_query: Free-text search
        active_quick_filters: Active quick-filter ids (OR-combined)
        page_size: Rows per desktop page and per mobile step

    Returns:
        ServerListView
    """
    filtered = search_servers(snapshot.servers, search_query)
    filtered = apply_quick_filters(filtered, active_quick_filters)
    ordered = sort_servers(filtered, snapshot.sort_column, snapshot.sort_direction)

    start = (snapshot.current_page - 1) * page_size
    mobile_slice = ordered[: snapshot.mobile_current_page * page_size]

    return ServerListView(
        filtered_servers=ordered,
        total_pages=math.ceil(len(ordered) / page_size),
        paginated_servers=ordered[start : start + page_size],
        total_stats=calculate_stats(snapshot.servers),
        filtered_stats=calculate_stats(ordered),
        mobile_paginated_servers=mobile_slice,
        mobile_has_more=len(mobile_slice) < len(ordered),
    )


class ServerListState(SnapshotStore[ServerListSnapshot]):
    """
    Server list-state engine.

    Owns the server snapshot and exposes the mutators the presentation
    layer and the URL synchronizer drive. Fetching goes through an
    injected service exposing ``list_all()``.
    """

    name = "server list"

    def __init__(
        self,
        service,
        config: Optional[ListingConfig] = None,
        scheduler: Optional[Scheduler] = None,
    ):
        """
        Initialize the engine.

        Args:
            service: Object with a ``list_all()`` method returning ServerRecords
            config: Listing configuration (page size, delays)
            scheduler: ``scheduler(delay, callback)`` used for delayed resets
        """
        super().__init__(ServerListSnapshot())
        self.service = service
        self.config = config or ListingConfig()
        self.scheduler = scheduler or start_timer
        self._settle_handle = None
        self._manual_refresh_handle = None

    # ***> state accessors <***

    @property
    def servers(self) -> Tuple[ServerRecord, ...]:
        return self.snapshot.servers

    @property
    def loading(self) -> bool:
        return self.snapshot.loading

    @property
    def error(self) -> Optional[str]:
        return self.snapshot.error

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
    def is_manual_refresh(self) -> bool:
        return self.snapshot.is_manual_refresh

    @property
    def manual_refresh_loading(self) -> bool:
        return self.snapshot.manual_refresh_loading

    @property
    def page_size(self) -> int:
        return self.config.server_page_size

    # ***> mutators <***

    def refresh_list(self, is_manual: bool = False) -> None:
        """
        Fetch the full server collection and replace the local copy.

        On failure the error message is stored and the previous servers
        are kept. A response that arrives after a newer refresh started
        is discarded, but the loading flags it raised are still cleared.

        Args:
            is_manual: Whether the refresh was triggered by the user
        """
        token = self._next_token()
        self._apply(begin_refresh, is_manual)

        servers: Sequence[ServerRecord] = ()
        error: Optional[str] = None
        try:
            servers = self.service.list_all()
        except NetworkFailureError as e:
            logger.error("Error loading servers: %s", e)
            error = str(e) or "Failed to load data"
        except Exception as e:
            logger.exception("Unexpected error loading servers")
            error = str(e) or "Failed to load data"

        if self._apply_if_latest(token, finish_refresh, is_manual, servers=servers, error=error):
            if error is None:
                logger.info("Loaded %d servers", len(servers))
        else:
            self._apply(settle_refresh, is_manual)

        self._cancel(self._manual_refresh_handle)
        self._manual_refresh_handle = self.scheduler(
            self.config.manual_refresh_reset_delay, self._clear_manual_refresh
        )

    def _clear_manual_refresh(self) -> None:
        self._manual_refresh_handle = None
        self._apply(lambda snapshot: replace(snapshot, is_manual_refresh=False))

    def handle_sort(self, column: str) -> None:
        self._apply(cycle_sort, column)

    def handle_page_change(self, page: int) -> None:
        self._apply(lambda snapshot: replace(snapshot, current_page=max(1, int(page))))

    def handle_load_more(
        self, search_query: str = "", active_quick_filters: Sequence[str] = ()
    ) -> bool:
        """
        Grow the mobile slice by one page.

        Args:
            search_query: Current search, used to decide if more rows exist
            active_quick_filters: Current quick filters, same purpose

        Returns:
            True when the slice grew, False when busy or nothing is left
        """
        with self._lock:
            snapshot = self._snapshot
            if snapshot.mobile_loading_more:
                return False
            view = derive_server_view(
                snapshot, search_query, active_quick_filters, self.page_size
            )
            if not view.mobile_has_more:
                return False
            self._snapshot = replace(
                snapshot,
                mobile_loading_more=True,
                mobile_current_page=snapshot.mobile_current_page + 1,
            )
            snapshot = self._snapshot
        self._notify(snapshot)

        self._cancel(self._settle_handle)
        self._settle_handle = self.scheduler(
            self.config.load_more_settle_delay, self._settle_load_more
        )
        return True

    def _settle_load_more(self) -> None:
        self._settle_handle = None
        self._apply(lambda snapshot: replace(snapshot, mobile_loading_more=False))

    def reset_pagination(self) -> None:
        self._apply(reset_pages)

    def set_servers(self, servers: Sequence[ServerRecord]) -> None:
        self._apply(lambda snapshot: replace(snapshot, servers=tuple(servers)))

    def set_sort_state(self, column: Optional[str], direction: Optional[str]) -> None:
        self._apply(
            lambda snapshot: replace(snapshot, sort_column=column, sort_direction=direction)
        )

    def get_derived_data(
        self, search_query: str = "", active_quick_filters: Sequence[str] = ()
    ) -> ServerListView:
        return derive_server_view(
            self.snapshot, search_query, active_quick_filters, self.page_size
        )
