# listing/url_sync.py
"""
Synchronizes the list-state engines with URL state.

The synchronizer holds no state of its own: it translates a UrlState
into calls on the server and player engines plus the optional view and
search callbacks supplied by the host.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from models import PlayerDatabase

from .player_state import PlayerListState
from .quick_filters import validate_quick_filter_ids
from .server_state import ServerListState
from .url_state import VIEW_PLAYERS, UrlState

logger = logging.getLogger(__name__)

ViewCallback = Callable[[str], None]
SearchCallback = Callable[[str], None]


@dataclass
class UrlInitResult:
    """
    Values the host applies itself after initialization
    """

    active_quick_filters: List[str] = field(default_factory=list)
    initial_view: Optional[str] = None
    initial_player_db: Optional[PlayerDatabase] = None


class UrlSync:
    """
    Drives engine mutators from URL state on startup and on navigation.
    """

    def __init__(
        self,
        server_state: ServerListState,
        player_state: PlayerListState,
        on_view_change: Optional[ViewCallback] = None,
        on_search_change: Optional[SearchCallback] = None,
    ):
        self.server_state = server_state
        self.player_state = player_state
        self.on_view_change = on_view_change
        self.on_search_change = on_search_change

    def initialize_from_url(self, url_state: UrlState) -> UrlInitResult:
        """
        Apply the URL state present at startup.

        Sort is applied to both engines only when column and direction are
        both present. Unknown quick-filter ids are dropped.

        Args:
            url_state: Parsed URL state

        Returns:
            UrlInitResult with the validated quick filters, view and database
        """
        if url_state.search is not None and self.on_search_change:
            self.on_search_change(url_state.search)

        active_quick_filters = validate_quick_filter_ids(url_state.quick_filters)

        if url_state.sort_column and url_state.sort_direction:
            self.server_state.set_sort_state(url_state.sort_column, url_state.sort_direction)
            self.player_state.set_sort_state(url_state.sort_column, url_state.sort_direction)

        logger.debug(
            "Initialized from URL: filters=%s view=%s db=%s",
            active_quick_filters,
            url_state.view,
            url_state.player_db,
        )
        return UrlInitResult(
            active_quick_filters=active_quick_filters,
            initial_view=url_state.view,
            initial_player_db=url_state.player_db,
        )

    def handle_url_state_change(self, url_state: UrlState) -> Dict[str, List[str]]:
        """
        Apply a URL state reached by navigation (back/forward).

        When quick filters are present they are returned for the host to
        apply and nothing after them is synchronized.

        Args:
            url_state: Parsed URL state

        Returns:
            ``{"quick_filters": [...]}`` when filters were present, else ``{}``
        """
        if url_state.search is not None and self.on_search_change:
            self.on_search_change(url_state.search)

        if url_state.quick_filters is not None:
            return {"quick_filters": validate_quick_filter_ids(url_state.quick_filters)}

        if url_state.sort_column is not None:
            direction = url_state.sort_direction or None
            self.server_state.set_sort_state(url_state.sort_column, direction)
            self.player_state.set_sort_state(url_state.sort_column, direction)

        if url_state.view is not None and self.on_view_change:
            self.on_view_change(url_state.view)

        if url_state.player_db is not None:
            self.player_state.handle_player_db_change(url_state.player_db)
            if url_state.view == VIEW_PLAYERS and self.on_view_change:
                self.on_view_change(VIEW_PLAYERS)

        return {}

    def create_sync_fn(self) -> Callable[[UrlState], None]:
        """
        Callback suitable for a URL change subscriber.
        """

        def sync(url_state: UrlState) -> None:
            self.handle_url_state_change(url_state)

        return sync
