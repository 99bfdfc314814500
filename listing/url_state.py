# listing/url_state.py
"""
Query-string mirror of the listing state.

The query string never carries default values: page 1, the "servers"
view and the "invasion" player database are all represented by absence.
Values that fail validation are dropped rather than reported.
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple
from urllib.parse import parse_qsl, urlencode

from models import PlayerDatabase

from .sorting import SORT_DIRECTIONS


class UrlParams:
    """
    Query parameter names
    """

    SEARCH = "search"
    QUICK_FILTERS = "quickFilters"
    PAGE = "page"
    SORT_COLUMN = "sort"
    SORT_DIRECTION = "dir"
    VIEW = "view"
    PLAYER_DB = "db"


VIEW_SERVERS = "servers"
VIEW_PLAYERS = "players"
VIEWS = (VIEW_SERVERS, VIEW_PLAYERS)

DEFAULT_PAGE = 1
DEFAULT_VIEW = VIEW_SERVERS
DEFAULT_PLAYER_DB = PlayerDatabase.INVASION

_LEADING_INTEGER = re.compile(r"^\s*([+-]?\d+)")


@dataclass(frozen=True)
class UrlState:
    """
    Listing state as read from a query string; None means "not present"
    """

    search: Optional[str] = None
    quick_filters: Optional[List[str]] = None
    page: Optional[int] = None
    sort_column: Optional[str] = None
    sort_direction: Optional[str] = None
    view: Optional[str] = None
    player_db: Optional[PlayerDatabase] = None


def _parse_page(value: str) -> Optional[int]:
    match = _LEADING_INTEGER.match(value)
    if not match:
        return None
    page = int(match.group(1))
    return page if page >= DEFAULT_PAGE else None


def parse_url_state(query_string: str) -> UrlState:
    """
    Read a UrlState from a query string.

    Args:
        query_string: Raw query, with or without a leading "?"

    Returns:
        UrlState with invalid or empty values left as None
    """
    params = dict(parse_qsl((query_string or "").lstrip("?"), keep_blank_values=True))
    values: Dict[str, Any] = {}

    search = params.get(UrlParams.SEARCH)
    if search:
        values["search"] = search

    quick_filters = params.get(UrlParams.QUICK_FILTERS)
    if quick_filters is not None:
        values["quick_filters"] = [item for item in quick_filters.split(",") if item]

    page = params.get(UrlParams.PAGE)
    if page:
        values["page"] = _parse_page(page)

    sort_column = params.get(UrlParams.SORT_COLUMN)
    if sort_column:
        values["sort_column"] = sort_column

    sort_direction = params.get(UrlParams.SORT_DIRECTION)
    if sort_direction in SORT_DIRECTIONS:
        values["sort_direction"] = sort_direction

    view = params.get(UrlParams.VIEW)
    if view in VIEWS:
        values["view"] = view

    player_db = PlayerDatabase.parse(params.get(UrlParams.PLAYER_DB))
    if player_db is not None:
        values["player_db"] = player_db

    return UrlState(**values)


def _set_param(pairs: List[Tuple[str, str]], key: str, value: Optional[str]) -> List[Tuple[str, str]]:
    """
    Replace (or remove, when value is None) every occurrence of key.
    """
    result: List[Tuple[str, str]] = []
    placed = False
    for existing_key, existing_value in pairs:
        if existing_key != key:
            result.append((existing_key, existing_value))
        elif value is not None and not placed:
            result.append((key, value))
            placed = True
    if value is not None and not placed:
        result.append((key, value))
    return result


def build_query_string(current_query: str, state_update: Mapping[str, Any]) -> str:
    """
    Apply a partial state update to a query string.

    Only keys present in ``state_update`` are touched. Empty values and
    defaults remove their parameter.

    Args:
        current_query: Existing query string, with or without "?"
        state_update: Subset of UrlState field names to new values

    Returns:
        New query string without a leading "?" (empty when nothing is set)
    """
    pairs = parse_qsl((current_query or "").lstrip("?"), keep_blank_values=True)

    if "search" in state_update:
        search = state_update["search"]
        pairs = _set_param(pairs, UrlParams.SEARCH, search or None)

    if "quick_filters" in state_update:
        quick_filters = state_update["quick_filters"] or []
        pairs = _set_param(pairs, UrlParams.QUICK_FILTERS, ",".join(quick_filters) or None)

    if "page" in state_update:
        page = state_update["page"]
        pairs = _set_param(pairs, UrlParams.PAGE, str(page) if page and page > DEFAULT_PAGE else None)

    if "sort_column" in state_update:
        pairs = _set_param(pairs, UrlParams.SORT_COLUMN, state_update["sort_column"] or None)

    if "sort_direction" in state_update:
        direction = state_update["sort_direction"]
        pairs = _set_param(
            pairs, UrlParams.SORT_DIRECTION, direction if direction in SORT_DIRECTIONS else None
        )

    if "view" in state_update:
        view = state_update["view"]
        pairs = _set_param(
            pairs, UrlParams.VIEW, view if view in VIEWS and view != DEFAULT_VIEW else None
        )

    if "player_db" in state_update:
        player_db = PlayerDatabase.parse(state_update["player_db"])
        pairs = _set_param(
            pairs,
            UrlParams.PLAYER_DB,
            player_db.value if player_db and player_db != DEFAULT_PLAYER_DB else None,
        )

    return urlencode(pairs)


def clear_url_state(current_query: str) -> str:
    """
    Drop search, quick filters, page and sort from a query string.
    """
    return build_query_string(
        current_query,
        {
            "search": None,
            "quick_filters": [],
            "page": None,
            "sort_column": None,
            "sort_direction": None,
        },
    )
