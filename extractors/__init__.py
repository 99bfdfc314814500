from .base_extractor import BaseDataExtractor
from .extraction_config import ExtractionConfig
from .extractor_player import PlayerRowExtractor
from .extractor_server import ServerRowExtractor, fix_player_list
from .navigation import PaginationFinder, PaginationLinks
from .parsers import (
    FeedParser,
    PlayerFeedParser,
    ServerFeedParser,
    export_records_csv,
    parse_player_list_from_string,
    parse_player_list_with_pagination,
    parse_server_list_from_string,
    records_to_dataframe,
)

__all__ = [
    "BaseDataExtractor",
    "ExtractionConfig",
    "ServerRowExtractor",
    "PlayerRowExtractor",
    "fix_player_list",
    "PaginationFinder",
    "PaginationLinks",
    "FeedParser",
    "ServerFeedParser",
    "PlayerFeedParser",
    "parse_server_list_from_string",
    "parse_player_list_from_string",
    "parse_player_list_with_pagination",
    "records_to_dataframe",
    "export_records_csv",
]
