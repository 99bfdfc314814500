# services/map_service.py
"""
Map catalogue service.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from exceptions import NetworkFailureError

from .request import RESPONSE_JSON, FeedClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MapData:
    name: str
    path: str
    image: str


class MapService:
    """
    Fetches the map catalogue used to resolve map ids to names and previews.
    """

    def __init__(self, client: Optional[FeedClient] = None):
        self.client = client or FeedClient()

    def get_maps(self) -> List[MapData]:
        """
        Fetch all known maps.

        Returns:
            MapData entries; empty list when the request or payload fails
        """
        try:
            payload = self.client.request(
                self.client.config.maps_path, response_type=RESPONSE_JSON, cache_bust=False
            )
        except NetworkFailureError as e:
            logger.error("Failed to fetch maps: %s", e)
            return []

        if not isinstance(payload, list):
            logger.warning("Unexpected maps payload: %s", type(payload).__name__)
            return []

        return [
            MapData(
                name=str(item.get("name", "")),
                path=str(item.get("path", "")),
                image=str(item.get("image", "")),
            )
            for item in payload
            if isinstance(item, dict)
        ]

    @staticmethod
    def find_map(maps: List[MapData], map_id: str) -> Optional[MapData]:
        for map_data in maps:
            if map_data.path == map_id:
                return map_data
        return None
