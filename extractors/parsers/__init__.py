from .base_parser import BaseParser
from .feed_parser import (
    FeedParser,
    export_records_csv,
    parse_player_list_from_string,
    parse_player_list_with_pagination,
    parse_server_list_from_string,
    records_to_dataframe,
)
from .parser_config import ParserConfig
from .player_parser import PlayerFeedParser
from .server_parser import ServerFeedParser

__all__ = [
    "ParserConfig",
    "BaseParser",
    "ServerFeedParser",
    "PlayerFeedParser",
    "FeedParser",
    "parse_server_list_from_string",
    "parse_player_list_from_string",
    "parse_player_list_with_pagination",
    "records_to_dataframe",
    "export_records_csv",
]
