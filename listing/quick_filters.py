# listing/quick_filters.py
"""
Registry of predefined server filters exposed as one-click toggles.
"""

import re
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from models import ServerRecord

CASTLING_PATTERN = re.compile(r"^\[Castling](\[Global])?\[[\w!\\?]+(-\d)?\s(LV\d|FOV)]")
HELLDIVERS_PATTERN = re.compile(r"^\[地狱潜兵]")


@dataclass(frozen=True)
class QuickFilter:
    """
    A named server predicate
    """

    id: str
    label_key: str
    default_label: str
    predicate: Callable[[ServerRecord], bool]

    def matches(self, server: ServerRecord) -> bool:
        return bool(self.predicate(server))


def _realm_is(realm: str) -> Callable[[ServerRecord], bool]:
    return lambda server: server.realm == realm


def _mode_and_name(mode_fragment: str, name_pattern) -> Callable[[ServerRecord], bool]:
    def predicate(server: ServerRecord) -> bool:
        return mode_fragment in server.mode.lower() and bool(name_pattern.search(server.name))

    return predicate


QUICK_FILTERS: Tuple[QuickFilter, ...] = (
    QuickFilter(
        id="invasion",
        label_key="app.filter.officialInvasion",
        default_label="Invasion",
        predicate=_realm_is("official_invasion"),
    ),
    QuickFilter(
        id="ww2_invasion",
        label_key="app.filter.officialWW2Invasion",
        default_label="WW2 Invasion",
        predicate=_realm_is("official_pacific"),
    ),
    QuickFilter(
        id="dominance",
        label_key="app.filter.officialDominance",
        default_label="Dominance",
        predicate=_realm_is("official_dominance"),
    ),
    QuickFilter(
        id="castling",
        label_key="app.filter.officialModCastling",
        default_label="Castling",
        predicate=_mode_and_name("castling", CASTLING_PATTERN),
    ),
    QuickFilter(
        id="helldivers",
        label_key="app.filter.officialModHellDivers",
        default_label="HellDivers",
        predicate=_mode_and_name("hd", HELLDIVERS_PATTERN),
    ),
)


def get_quick_filter(filter_id: str) -> Optional[QuickFilter]:
    for quick_filter in QUICK_FILTERS:
        if quick_filter.id == filter_id:
            return quick_filter
    return None


def validate_quick_filter_ids(filter_ids: Optional[Iterable[str]]) -> List[str]:
    """
    Keep only registered filter ids, preserving order.
    """
    if not filter_ids:
        return []
    return [filter_id for filter_id in filter_ids if get_quick_filter(filter_id) is not None]


def matches_any(server: ServerRecord, filter_ids: Sequence[str]) -> bool:
    """
    OR-combination of the given filters; unknown ids never match.
    """
    for filter_id in filter_ids:
        quick_filter = get_quick_filter(filter_id)
        if quick_filter is not None and quick_filter.matches(server):
            return True
    return False


def apply_quick_filters(
    servers: Sequence[ServerRecord], active_ids: Optional[Sequence[str]]
) -> List[ServerRecord]:
    """
    Filter servers by the active quick filters.

    Args:
        servers: Records to filter
        active_ids: Active filter ids; empty means no filtering

    Returns:
        Matching servers in input order
    """
    if not active_ids:
        return list(servers)
    return [server for server in servers if matches_any(server, active_ids)]


def toggle_quick_filter(
    active_ids: Sequence[str], filter_id: str, multi_select: bool = True
) -> List[str]:
    """
    Toggle a filter on or off.

    In single-select mode turning a filter on replaces any other active one.

    Args:
        active_ids: Currently active ids
        filter_id: Filter being toggled
        multi_select: Whether several filters may be active at once

    Returns:
        New list of active ids
    """
    if filter_id in active_ids:
        return [active for active in active_ids if active != filter_id]
    if get_quick_filter(filter_id) is None:
        return list(active_ids)
    if multi_select:
        return list(active_ids) + [filter_id]
    return [filter_id]
