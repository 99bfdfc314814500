# listing/highlight.py
"""
Search highlighting helpers producing HTML fragments.
"""

import re
from typing import Optional, Sequence

DEFAULT_HIGHLIGHT_CLASS = "bg-accent text-accent-content"
BADGE_HIGHLIGHT_CLASS = "bg-accent"

PLAYER_LIST_CONTAINER = '<div class="flex flex-wrap gap-1 items-start w-full">{}</div>'
PLAYER_BADGE = (
    '<span class="badge gap-0 badge-neutral text-xs whitespace-nowrap flex-shrink-0">{}</span>'
)
EMPTY_PLAYER_LIST = "-"


def _wrap_matches(text: str, query: Optional[str], open_tag: str, close_tag: str) -> str:
    if not text or not query or not query.strip():
        return text

    pattern = re.compile(f"({re.escape(query)})", re.IGNORECASE)
    return pattern.sub(lambda match: f"{open_tag}{match.group(1)}{close_tag}", text)


def highlight_match(
    text: str,
    query: Optional[str],
    class_name: str = DEFAULT_HIGHLIGHT_CLASS,
) -> str:
    """
    Wrap every case-insensitive occurrence of ``query`` in a <mark> element.

    The query is matched literally; regex metacharacters carry no meaning.
    Text outside the matches is kept verbatim.

    Args:
        text: Text to search within
        query: Search query; empty or whitespace-only leaves text unchanged
        class_name: CSS class applied to each <mark>

    Returns:
        Text with highlight markup
    """
    return _wrap_matches(text, query, f'<mark class="{class_name}">', "</mark>")


def highlight_in_badge(text: str, query: Optional[str]) -> str:
    """
    Same as highlight_match but with a <span> wrapper, for badge content.
    """
    return _wrap_matches(text, query, f'<span class="{BADGE_HIGHLIGHT_CLASS}">', "</span>")


def render_player_list_with_highlight(
    players: Sequence[str], query: Optional[str] = None
) -> str:
    """
    Render player names as a row of badges, highlighting each independently.

    Args:
        players: Player names in display order
        query: Optional search query

    Returns:
        "-" for an empty list, otherwise the badge container markup
    """
    if not players:
        return EMPTY_PLAYER_LIST

    badges = "".join(
        PLAYER_BADGE.format(highlight_in_badge(player, query)) for player in players
    )
    return PLAYER_LIST_CONTAINER.format(badges)
