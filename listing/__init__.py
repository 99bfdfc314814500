from .columns import (
    PLAYER_COLUMNS,
    SERVER_COLUMNS,
    Column,
    camel_to_snake,
    find_column,
    format_kd,
    format_number,
)
from .highlight import highlight_in_badge, highlight_match, render_player_list_with_highlight
from .player_state import PlayerListSnapshot, PlayerListState, PlayerListView
from .quick_filters import (
    QUICK_FILTERS,
    QuickFilter,
    apply_quick_filters,
    toggle_quick_filter,
    validate_quick_filter_ids,
)
from .server_state import ServerListSnapshot, ServerListState, ServerListView
from .sorting import ASC, DESC, SortConfig, sort_players, sort_servers
from .store import SnapshotStore, start_timer
from .url_state import UrlState, build_query_string, clear_url_state, parse_url_state
from .url_sync import UrlInitResult, UrlSync

__all__ = [
    "Column",
    "PLAYER_COLUMNS",
    "SERVER_COLUMNS",
    "camel_to_snake",
    "find_column",
    "format_number",
    "format_kd",
    "highlight_match",
    "highlight_in_badge",
    "render_player_list_with_highlight",
    "QuickFilter",
    "QUICK_FILTERS",
    "apply_quick_filters",
    "toggle_quick_filter",
    "validate_quick_filter_ids",
    "ASC",
    "DESC",
    "SortConfig",
    "sort_servers",
    "sort_players",
    "SnapshotStore",
    "start_timer",
    "ServerListSnapshot",
    "ServerListState",
    "ServerListView",
    "PlayerListSnapshot",
    "PlayerListState",
    "PlayerListView",
    "UrlState",
    "parse_url_state",
    "build_query_string",
    "clear_url_state",
    "UrlSync",
    "UrlInitResult",
]
