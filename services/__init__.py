from .map_service import MapData, MapService
from .player_service import PlayerService
from .request import FeedClient, request
from .server_service import ServerService

__all__ = [
    "FeedClient",
    "request",
    "ServerService",
    "PlayerService",
    "MapService",
    "MapData",
]
