# extractors/parsers/parser_config.py
"""
Configuration module for feed parser settings.
Contains all constants and configurable values used across parsers.
"""

from typing import List, Tuple

from logger import HTMLConstants


class ParserConfig:
    """
    Configuration class containing all parser-related constants and settings.
    Centralizes all hardcoded values to improve maintainability.
    """

    # BeautifulSoup backends
    XML_FEATURES = "xml"
    HTML_FEATURES = "html.parser"

    # HTML parsing constants
    TABLE_SELECTOR = HTMLConstants.TABLE_SELECTOR
    TABLE_ROW_SELECTOR = HTMLConstants.TABLE_ROW_SELECTOR
    TABLE_HEADER_SELECTOR = HTMLConstants.TABLE_HEADER_SELECTOR
    TABLE_CELL_SELECTOR = HTMLConstants.TABLE_CELL_SELECTOR
    TABLE_BODY_SELECTOR = "tbody"

    # Table locations tried in order before the depth-first fallback
    TABLE_LOCATION_PATHS: List[Tuple[str, ...]] = [
        ("html", "body", TABLE_SELECTOR),
        (TABLE_SELECTOR,),
        ("html", TABLE_SELECTOR),
        ("body", TABLE_SELECTOR),
    ]

    # Server XML structure
    XML_ROOT = HTMLConstants.XML_ROOT
    XML_SERVER_LIST = HTMLConstants.XML_SERVER_LIST
    XML_SERVER = HTMLConstants.XML_SERVER
