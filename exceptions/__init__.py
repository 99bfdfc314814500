from .configuration import ConfigurationError
from .network import HTTPStatusError, NetworkFailureError, RequestTimeoutError
from .parsers import MalformedFeedError, ParsingError, TableNotFoundError

__all__ = [
    "ConfigurationError",
    "NetworkFailureError",
    "RequestTimeoutError",
    "HTTPStatusError",
    "ParsingError",
    "MalformedFeedError",
    "TableNotFoundError",
]
