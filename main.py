#!/usr/bin/env python3
"""
Server browser command line front-end.

Fetches the live server list or a leaderboard page, applies the same
search / quick-filter / sort / pagination state a shared URL carries and
renders the result as a terminal table.

Examples:
  python main.py servers --search castling --filter invasion --sort playerCount --dir desc
  python main.py servers --url-state "search=cn&quickFilters=invasion,dominance&page=2"
  python main.py players --db pacific --sort kills --export players.csv
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from configurations import BrowserConfig, get_config
from exceptions import ConfigurationError
from extractors.parsers import export_records_csv
from listing import (
    PLAYER_COLUMNS,
    QUICK_FILTERS,
    SERVER_COLUMNS,
    Column,
    PlayerListState,
    ServerListState,
    UrlSync,
    build_query_string,
    parse_url_state,
    toggle_quick_filter,
)
from listing.columns import map_name_from_id
from listing.url_state import VIEW_PLAYERS, VIEW_SERVERS
from logger import configure_logging
from models import PlayerDatabase, compute_online_stats
from services import FeedClient, MapService, PlayerService, ServerService

logger = logging.getLogger(__name__)
console = Console()

SERVER_TABLE_COLUMNS = ("name", "ipAddress", "port", "country", "mode", "mapId", "playerCount", "bots")
PLAYER_TABLE_COLUMNS = (
    "rowNumber",
    "username",
    "kills",
    "deaths",
    "score",
    "kd",
    "timePlayed",
    "rankProgression",
    "rankName",
)


class BrowserSession:
    """
    Composition root: wires config, services, engines and URL sync.
    """

    def __init__(self, config: BrowserConfig):
        self.config = config
        self.client = FeedClient(config.feed)
        self.server_state = ServerListState(ServerService(self.client), config.listing)
        self.player_state = PlayerListState(
            PlayerService(self.client, listing=config.listing), config.listing
        )
        self.map_service = MapService(self.client)

        self.search_query = ""
        self.active_quick_filters: List[str] = []
        self.view = VIEW_SERVERS

        self.url_sync = UrlSync(
            self.server_state,
            self.player_state,
            on_view_change=self._set_view,
            on_search_change=self._set_search,
        )

    def _set_view(self, view: str) -> None:
        self.view = view

    def _set_search(self, search: str) -> None:
        self.search_query = search

    def apply_url_state(self, query_string: str) -> None:
        """
        Seed the session from a shared query string.
        """
        url_state = parse_url_state(query_string)
        result = self.url_sync.initialize_from_url(url_state)
        self.active_quick_filters = result.active_quick_filters
        if result.initial_view:
            self.view = result.initial_view
        if result.initial_player_db:
            self.player_state.handle_player_db_change(result.initial_player_db)

        if url_state.page:
            self.server_state.handle_page_change(url_state.page)
            self.player_state.handle_page_change(url_state.page)

    def apply_arguments(self, args: argparse.Namespace) -> None:
        """
        Apply explicit command line options on top of the URL state.
        """
        if args.search is not None:
            self.search_query = args.search

        for filter_id in getattr(args, "filter", None) or []:
            if filter_id not in self.active_quick_filters:
                self.active_quick_filters = toggle_quick_filter(
                    self.active_quick_filters,
                    filter_id,
                    self.config.listing.multi_select_quick_filters,
                )

        if args.sort:
            self.server_state.set_sort_state(args.sort, args.dir or "desc")
            self.player_state.set_sort_state(args.sort, args.dir or "desc")

        if args.page:
            self.server_state.handle_page_change(args.page)
            self.player_state.handle_page_change(args.page)

        if getattr(args, "db", None):
            self.player_state.handle_player_db_change(args.db)

        if getattr(args, "page_size", None):
            page = self.player_state.current_page
            self.player_state.handle_player_page_size_change(args.page_size)
            self.player_state.handle_page_change(page)

    def share_query(self) -> str:
        """
        Query string reproducing the current view.
        """
        state = self.server_state if self.view == VIEW_SERVERS else self.player_state
        return build_query_string(
            "",
            {
                "search": self.search_query,
                "quick_filters": self.active_quick_filters if self.view == VIEW_SERVERS else [],
                "page": state.current_page,
                "sort_column": state.sort_column,
                "sort_direction": state.sort_direction,
                "view": self.view,
                "player_db": self.player_state.db,
            },
        )


def _cell(column: Column, record, query: str) -> Text:
    text = Text(column.render(record))
    if query:
        text.highlight_words([query], style="black on yellow", case_sensitive=False)
    return text


def _build_table(title: str, columns: Sequence[Column], records, query: str) -> Table:
    table = Table(title=title, box=box.SIMPLE_HEAD, show_header=True, header_style="bold magenta")
    for column in columns:
        justify = {"right": "right", "center": "center"}.get(column.alignment or "", "left")
        table.add_column(column.label, justify=justify)
    for record in records:
        table.add_row(*[_cell(column, record, query) for column in columns])
    return table


def _pick_columns(registry: Sequence[Column], keys: Sequence[str]) -> List[Column]:
    by_key = {column.key: column for column in registry}
    return [by_key[key] for key in keys if key in by_key]


def _with_catalogue_map_names(columns: List[Column], maps) -> List[Column]:
    """
    Swap the map column for one showing catalogue names where known.
    """
    names = {map_data.path: map_data.name for map_data in maps}
    logger.info("Loaded %d maps", len(names))
    map_column = Column(
        key="mapId",
        label="Map",
        i18n="app.column.map",
        get_value=lambda server: names.get(server.map_id) or map_name_from_id(server.map_id),
    )
    return [map_column if column.key == "mapId" else column for column in columns]


def _export(records, target: str, config: BrowserConfig) -> None:
    path = Path(target)
    if not path.is_absolute() and path.parent == Path("."):
        path = Path(config.output_directory) / path
    path.parent.mkdir(parents=True, exist_ok=True)
    rows = export_records_csv(records, str(path))
    console.print(f"[green]Exported {rows} rows to {path}[/green]")


def run_servers(session: BrowserSession, args: argparse.Namespace) -> int:
    state = session.server_state
    state.refresh_list(is_manual=True)
    if state.error:
        console.print(f"[red]Failed to load servers: {state.error}[/red]")
        return 1

    view = state.get_derived_data(session.search_query, session.active_quick_filters)
    columns = _pick_columns(SERVER_COLUMNS, SERVER_TABLE_COLUMNS)

    if args.with_maps:
        columns = _with_catalogue_map_names(columns, session.map_service.get_maps())

    rows = view.paginated_servers
    title = f"Servers (page {state.current_page}/{max(view.total_pages, 1)})"
    console.print(_build_table(title, columns, rows, session.search_query))

    stats = compute_online_stats(state.servers)
    console.print(
        f"Servers: {view.filtered_stats.total_servers}/{view.total_stats.total_servers} "
        f"| Players: {view.filtered_stats.total_players}/{view.total_stats.total_players} "
        f"| Online servers: {stats.online_server_count} "
        f"| Capacity: {stats.player_capacity_count}"
    )

    if args.export:
        _export(view.filtered_servers, args.export, session.config)
    return 0


def run_players(session: BrowserSession, args: argparse.Namespace) -> int:
    state = session.player_state
    state.load_players(session.search_query)
    if state.error:
        console.print(f"[red]Failed to load players: {state.error}[/red]")
        return 1

    view = state.get_derived_data()
    columns = _pick_columns(PLAYER_COLUMNS, PLAYER_TABLE_COLUMNS)
    title = f"Players [{state.db.value}] (page {state.current_page}{'+' if state.has_next else ''})"
    console.print(_build_table(title, columns, view.paginated_players, session.search_query))
    console.print(
        f"Rows: {view.total_stats.total_players} | Next: {'yes' if state.has_next else 'no'} "
        f"| Previous: {'yes' if state.has_previous else 'no'}"
    )

    if args.export:
        _export(view.paginated_players, args.export, session.config)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Live game server directory and leaderboard browser",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"Quick filters: {', '.join(f.id for f in QUICK_FILTERS)}",
    )
    parser.add_argument(
        "--environment",
        choices=["development", "testing", "production"],
        help="Configuration environment (defaults to $ENVIRONMENT)",
    )
    parser.add_argument("--rich-logs", action="store_true", help="Use rich log output")

    subparsers = parser.add_subparsers(dest="view")
    subparsers.required = True

    def add_common(sub: argparse.ArgumentParser) -> None:
        sub.add_argument("--url-state", default="", help="Shared query string to start from")
        sub.add_argument("--search", help="Search text")
        sub.add_argument("--sort", help="Sort column (camelCase or snake_case)")
        sub.add_argument("--dir", choices=["asc", "desc"], help="Sort direction")
        sub.add_argument("--page", type=int, help="Page number")
        sub.add_argument("--export", help="Write the rows to this CSV file")

    servers = subparsers.add_parser(VIEW_SERVERS, help="Show live servers")
    add_common(servers)
    servers.add_argument(
        "--filter",
        action="append",
        choices=[f.id for f in QUICK_FILTERS],
        help="Quick filter (repeatable)",
    )
    servers.add_argument("--with-maps", action="store_true", help="Resolve map names from the catalogue")

    players = subparsers.add_parser(VIEW_PLAYERS, help="Show a leaderboard page")
    add_common(players)
    players.add_argument("--db", choices=[db.value for db in PlayerDatabase], help="Leaderboard database")
    players.add_argument("--page-size", type=int, help="Rows per page")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = get_config(args.environment)
        config.validate()
    except ConfigurationError as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        return 2

    configure_logging(config, use_rich=args.rich_logs)

    session = BrowserSession(config)
    session.apply_url_state(args.url_state)
    session.view = args.view
    session.apply_arguments(args)

    try:
        if session.view == VIEW_PLAYERS:
            code = run_players(session, args)
        else:
            code = run_servers(session, args)
    except KeyboardInterrupt:
        console.print("\nInterrupted")
        return 130

    console.print(f"[dim]Share: ?{session.share_query()}[/dim]")
    return code


if __name__ == "__main__":
    sys.exit(main())
