# listing/sorting.py
"""
Sort engine for server and player collections.

Both sorters return a new list and never mutate their input. A missing
column or direction means "no sort" and yields a copy in input order.
Column names are accepted in camelCase ("currentPlayers") or snake_case
("current_players").
"""

import math
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any, Callable, List, Optional, Sequence

from models import PlayerRecord, ServerRecord

from .columns import PLAYER_COLUMN_KEYS, camel_to_snake

ASC = "asc"
DESC = "desc"
SORT_DIRECTIONS = (ASC, DESC)

# Server sort columns compared numerically, mapped to record fields
SERVER_NUMERIC_COLUMNS = {
    "bots": "bots",
    "player_count": "current_players",
    "current_players": "current_players",
    "max_players": "max_players",
    "port": "port",
}


@dataclass(frozen=True)
class SortConfig:
    """
    A sort column plus direction; either being None means unsorted
    """

    key: Optional[str] = None
    direction: Optional[str] = None

    @property
    def is_active(self) -> bool:
        return bool(self.key) and self.direction in SORT_DIRECTIONS


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _as_text(value: Any) -> str:
    """
    Render a field value as comparable text.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(_as_text(item) for item in value)
    return str(value)


def _as_number(value: Any) -> float:
    if _is_number(value):
        return value
    try:
        return float(str(value).strip() or 0)
    except ValueError:
        return math.nan


def _compare(a: Any, b: Any, direction: str) -> int:
    if direction == DESC:
        return -1 if a > b else (1 if a < b else 0)
    return -1 if a < b else (1 if a > b else 0)


def _sorted_by(
    records: Sequence[Any],
    accessor: Callable[[Any], Any],
    direction: str,
) -> List[Any]:
    return sorted(
        records,
        key=cmp_to_key(lambda a, b: _compare(accessor(a), accessor(b), direction)),
    )


def sort_servers(
    servers: Sequence[ServerRecord],
    column: Optional[str],
    direction: Optional[str],
) -> List[ServerRecord]:
    """
    Sort servers by a column.

    Numeric columns (bots, player count, max players, port) compare as
    numbers; every other column compares as lower-cased text. Unknown
    columns read as "" for every record, which keeps input order.

    Args:
        servers: Records to sort
        column: Column name, or None for no sort
        direction: "asc", "desc" or None for no sort

    Returns:
        New list of the same records
    """
    if not column or direction not in SORT_DIRECTIONS:
        return list(servers)

    field_name = camel_to_snake(column)
    numeric_field = SERVER_NUMERIC_COLUMNS.get(field_name)

    if numeric_field is not None:
        def accessor(server):
            return _as_number(getattr(server, numeric_field, 0))
    else:
        def accessor(server):
            return _as_text(getattr(server, field_name, None) or "").lower()

    return _sorted_by(servers, accessor, direction)


def sort_players(
    players: Sequence[PlayerRecord],
    column: Optional[str],
    direction: Optional[str],
) -> List[PlayerRecord]:
    """
    Sort players by a leaderboard column.

    Missing statistics order as 0 without being changed on the record. A
    pair compares numerically when either side is a number, otherwise as
    lower-cased text. Columns outside the player column registry are a
    no-op.

    Args:
        players: Records to sort
        column: Column key, or None for no sort
        direction: "asc", "desc" or None for no sort

    Returns:
        New list of the same records
    """
    if not column or direction not in SORT_DIRECTIONS:
        return list(players)

    field_name = camel_to_snake(column)
    known = field_name in PLAYER_COLUMN_KEYS

    def compare(a: PlayerRecord, b: PlayerRecord) -> int:
        a_value = getattr(a, field_name) if known else ""
        b_value = getattr(b, field_name) if known else ""
        if a_value is None:
            a_value = 0
        if b_value is None:
            b_value = 0

        if _is_number(a_value) or _is_number(b_value):
            return _compare(_as_number(a_value), _as_number(b_value), direction)
        return _compare(_as_text(a_value).lower(), _as_text(b_value).lower(), direction)

    return sorted(players, key=cmp_to_key(compare))
