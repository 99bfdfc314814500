# extractors/extraction_config.py
"""
Configuration module for data extraction utilities.
"""

from typing import Dict, List, Tuple

from logger import HTMLConstants


class ExtractionConfig:
    """
    Configuration class for data extraction settings.
    """

    # HTML Constants
    LINK_TAG = HTMLConstants.LINK_SELECTOR
    IMAGE_TAG = HTMLConstants.IMAGE_SELECTOR
    IMAGE_SOURCE_ATTRIBUTES: Tuple[str, ...] = (HTMLConstants.IMAGE_SOURCE_ATTRIBUTE, "@_src")

    # Regex Patterns
    NUMBER_LITERAL_PATTERN = r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$"

    # Cell values that mean "no value"
    EMPTY_CELL_VALUES: Tuple[str, ...] = ("", "-")

    # Feed integer meaning "true"
    FEED_TRUE_VALUE = 1

    # Player table columns in feed order: (record field, cell kind)
    PLAYER_COLUMNS: List[Tuple[str, str]] = [
        ("row_number", "row_number"),
        ("username", "username"),
        ("kills", "number"),
        ("deaths", "number"),
        ("score", "number"),
        ("kd", "number"),
        ("time_played", "text"),
        ("longest_kill_streak", "number"),
        ("targets_destroyed", "number"),
        ("vehicles_destroyed", "number"),
        ("soldiers_healed", "number"),
        ("teamkills", "number"),
        ("distance_moved", "text"),
        ("shots_fired", "number"),
        ("throwables_thrown", "number"),
        ("rank_progression", "number"),
        ("rank_name", "text"),
        ("rank_icon", "image"),
    ]

    # Server XML field -> (record field, coercion)
    SERVER_FIELD_MAP: Dict[str, Tuple[str, str]] = {
        "name": ("name", "string"),
        "address": ("ip_address", "string"),
        "port": ("port", "number"),
        "map_id": ("map_id", "string"),
        "map_name": ("map_name", "string"),
        "bots": ("bots", "number"),
        "country": ("country", "string"),
        "current_players": ("current_players", "number"),
        "timestamp": ("time_stamp", "number"),
        "version": ("version", "string"),
        "dedicated": ("dedicated", "flag"),
        "mod": ("mod", "flag"),
        "comment": ("comment", "string"),
        "url": ("url", "string"),
        "mode": ("mode", "string"),
        "max_players": ("max_players", "number"),
        "realm": ("realm", "nullable_string"),
    }
