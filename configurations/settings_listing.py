# configurations/settings_listing.py
"""
List-state configuration: page sizes, settle delays and defaults.
"""

from dataclasses import dataclass


@dataclass
class ListingConfig:
    """
    Configuration shared by the server and player list-state engines
    """

    server_page_size: int = 20
    # ***> seconds the mobile "load more" flag is held <***
    load_more_settle_delay: float = 0.5
    # ***> seconds the manual refresh flag stays set after a refresh <***
    manual_refresh_reset_delay: float = 2.5

    player_page_size: int = 20
    default_player_db: str = "invasion"
    default_player_sort: str = "rank_progression"

    multi_select_quick_filters: bool = True
