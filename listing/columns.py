# listing/columns.py
"""
Column registries for the server and player tables.

Each column carries a plain-text getter and, where search matters, a
getter that wraps query matches in highlight markup.
"""

import re
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Union

from models import PlayerRecord, ServerRecord

from .highlight import highlight_match, render_player_list_with_highlight

Number = Union[int, float]
EMPTY_VALUE = "-"


def camel_to_snake(name: str) -> str:
    """
    Convert "rankProgression" to "rank_progression"; snake_case passes through.
    """
    return re.sub(r"([A-Z])", r"_\1", name).lower()


def format_number(value: Optional[Number]) -> str:
    """
    Thousands-separated number, "-" when missing.
    """
    if value is None:
        return EMPTY_VALUE
    if isinstance(value, float) and not value.is_integer():
        return f"{value:,.3f}".rstrip("0").rstrip(".")
    return f"{int(value):,}"


def format_kd(kd: Optional[Number]) -> str:
    """
    Kill/death ratio with two decimals, "-" when missing.
    """
    if kd is None:
        return EMPTY_VALUE
    return f"{kd:.2f}"


def format_flag(value: bool) -> str:
    return "Yes" if value else "No"


def map_name_from_id(map_id: str) -> str:
    """
    Last path segment of a map id ("media/packages/vanilla/maps/map1" -> "map1").
    """
    return map_id.split("/")[-1] if map_id else ""


@dataclass(frozen=True)
class Column:
    """
    One table column: a key as used in sort parameters, its display
    label and value getters.
    """

    key: str
    label: str
    i18n: str
    alignment: Optional[str] = None
    get_value: Optional[Callable[[Any], str]] = None
    get_value_with_highlight: Optional[Callable[[Any, str], str]] = None

    @property
    def field(self) -> str:
        return camel_to_snake(self.key)

    def render(self, record: Any, query: Optional[str] = None) -> str:
        """
        Cell text for a record, highlighted when a query is given.
        """
        if query and self.get_value_with_highlight is not None:
            return self.get_value_with_highlight(record, query)
        if self.get_value is not None:
            return self.get_value(record)

        value = getattr(record, self.field, None)
        return "" if value is None else str(value)


def _stat_column(key: str, label: str, formatter=format_number) -> Column:
    field_name = camel_to_snake(key)
    return Column(
        key=key,
        label=label,
        i18n=f"app.player.column.{key}",
        alignment="right",
        get_value=lambda player: formatter(getattr(player, field_name)),
        get_value_with_highlight=lambda player, query: formatter(getattr(player, field_name)),
    )


def _rank_name_with_highlight(player: PlayerRecord, query: str) -> str:
    if not player.rank_name:
        return EMPTY_VALUE
    return highlight_match(player.rank_name, query) if query else player.rank_name


PLAYER_COLUMNS: List[Column] = [
    Column(
        key="rowNumber",
        label="#",
        i18n="app.player.column.rowNumber",
        alignment="center",
        get_value=lambda player: str(player.row_number),
        get_value_with_highlight=lambda player, query: str(player.row_number),
    ),
    Column(
        key="username",
        label="Username",
        i18n="app.player.column.username",
        get_value=lambda player: player.username,
        get_value_with_highlight=lambda player, query: highlight_match(player.username, query),
    ),
    _stat_column("kills", "Kills"),
    _stat_column("deaths", "Deaths"),
    _stat_column("score", "K-D"),
    _stat_column("kd", "K/D", format_kd),
    Column(
        key="timePlayed",
        label="Time",
        i18n="app.player.column.timePlayed",
        alignment="right",
        get_value=lambda player: player.time_played or EMPTY_VALUE,
    ),
    _stat_column("longestKillStreak", "Streak"),
    _stat_column("targetsDestroyed", "Targets"),
    _stat_column("vehiclesDestroyed", "Vehicles"),
    _stat_column("soldiersHealed", "Heals"),
    _stat_column("teamkills", "TK's"),
    Column(
        key="distanceMoved",
        label="Distance",
        i18n="app.player.column.distanceMoved",
        alignment="right",
        get_value=lambda player: player.distance_moved or EMPTY_VALUE,
    ),
    _stat_column("shotsFired", "Shots"),
    _stat_column("throwablesThrown", "Throws"),
    _stat_column("rankProgression", "XP"),
    Column(
        key="rankName",
        label="Rank",
        i18n="app.player.column.rankName",
        get_value=lambda player: player.rank_name or EMPTY_VALUE,
        get_value_with_highlight=_rank_name_with_highlight,
    ),
]

PLAYER_COLUMN_KEYS = frozenset(column.field for column in PLAYER_COLUMNS)


def _player_count(server: ServerRecord) -> str:
    return f"{server.current_players}/{server.max_players}"


SERVER_COLUMNS: List[Column] = [
    Column(
        key="name",
        label="Name",
        i18n="app.column.name",
        get_value=lambda server: server.name,
        get_value_with_highlight=lambda server, query: highlight_match(server.name, query),
    ),
    Column(
        key="ipAddress",
        label="IP Address",
        i18n="app.column.ip",
        get_value_with_highlight=lambda server, query: highlight_match(server.ip_address, query),
    ),
    Column(
        key="port",
        label="Port",
        i18n="app.column.port",
        alignment="center",
        get_value_with_highlight=lambda server, query: highlight_match(str(server.port), query),
    ),
    Column(
        key="bots",
        label="Bots",
        i18n="app.column.bots",
        alignment="center",
        get_value_with_highlight=lambda server, query: highlight_match(str(server.bots), query),
    ),
    Column(
        key="country",
        label="Country",
        i18n="app.column.country",
        get_value_with_highlight=lambda server, query: highlight_match(server.country, query),
    ),
    Column(
        key="mode",
        label="Mode",
        i18n="app.column.mode",
        get_value=lambda server: server.mode or "Unknown",
        get_value_with_highlight=lambda server, query: highlight_match(
            server.mode or "Unknown", query
        ),
    ),
    Column(
        key="mapId",
        label="Map",
        i18n="app.column.map",
        get_value=lambda server: map_name_from_id(server.map_id),
        get_value_with_highlight=lambda server, query: highlight_match(
            map_name_from_id(server.map_id), query
        ),
    ),
    Column(
        key="playerCount",
        label="Players",
        i18n="app.column.capacity",
        alignment="center",
        get_value=_player_count,
        get_value_with_highlight=lambda server, query: highlight_match(
            _player_count(server), query
        ),
    ),
    Column(
        key="playerList",
        label="Player List",
        i18n="app.column.players",
        alignment="top",
        get_value=lambda server: render_player_list_with_highlight(server.player_list),
        get_value_with_highlight=lambda server, query: render_player_list_with_highlight(
            server.player_list, query
        ),
    ),
    Column(key="comment", label="Comment", i18n="app.column.comment"),
    Column(
        key="dedicated",
        label="Dedicated",
        i18n="app.column.dedicated",
        get_value=lambda server: format_flag(server.dedicated),
    ),
    Column(
        key="mod",
        label="Mod",
        i18n="app.column.mod",
        get_value=lambda server: format_flag(server.mod),
    ),
    Column(key="url", label="URL", i18n="app.column.url"),
    Column(key="version", label="Version", i18n="app.column.version"),
]


def find_column(columns: List[Column], key: str) -> Optional[Column]:
    """
    Look a column up by camelCase key or snake_case field name.
    """
    field_name = camel_to_snake(key)
    for column in columns:
        if column.key == key or column.field == field_name:
            return column
    return None
