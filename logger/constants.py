# logger/constants.py
"""
Constants shared by the feed parsers and log messages
"""


class HTMLConstants:
    """
    Feed markup related constants
    """

    # Table selectors
    TABLE_SELECTOR = "table"
    TABLE_ROW_SELECTOR = "tr"
    TABLE_HEADER_SELECTOR = "th"
    TABLE_CELL_SELECTOR = "td"

    # Inline elements
    LINK_SELECTOR = "a"
    IMAGE_SELECTOR = "img"
    IMAGE_SOURCE_ATTRIBUTE = "src"

    # Pagination anchor texts (compared upper-cased)
    PAGINATION_NEXT_TEXT = "NEXT"
    PAGINATION_PREVIOUS_TEXT = "PREVIOUS"

    # Server XML structure
    XML_ROOT = "result"
    XML_SERVER_LIST = "server_list"
    XML_SERVER = "server"
    XML_PLAYER = "player"


class LoggingConstants:
    """
    Logging related constants
    """

    NO_TABLE_MSG = "No table found in player list response"
    NO_ROWS_MSG = "No rows found in player table"
    SERVER_PARSE_FAILED_MSG = "Error parsing server list XML: %s"
    PLAYER_PARSE_FAILED_MSG = "Error parsing player list HTML: %s"
    PAGINATION_PARSE_FAILED_MSG = "Error parsing pagination links: %s"
    STALE_RESPONSE_MSG = "Discarding stale %s response (token %d, latest %d)"
