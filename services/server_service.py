# services/server_service.py
"""
Server list feed service.
"""

import logging
from dataclasses import replace
from typing import List, Optional

from configurations import FeedConfig
from exceptions import NetworkFailureError
from extractors.parsers import ServerFeedParser
from models import ServerRecord

from .request import FeedClient

logger = logging.getLogger(__name__)


class ServerService:
    """
    Fetches and parses the server-list feed.
    """

    def __init__(self, client: Optional[FeedClient] = None, parser: Optional[ServerFeedParser] = None):
        self.client = client or FeedClient()
        self.parser = parser or ServerFeedParser()

    @property
    def config(self) -> FeedConfig:
        return self.client.config

    def list(
        self, start: int = 0, size: int = 20, names: int = 1, timeout: Optional[float] = None
    ) -> List[ServerRecord]:
        """
        Fetch one batch of servers.

        Args:
            start: Offset of the first server
            size: Batch size
            names: 1 to include player names
            timeout: Request timeout in seconds

        Returns:
            Parsed servers (empty on malformed feed)

        Raises:
            NetworkFailureError: If the request fails
        """
        params = {"start": start, "size": size, "names": names}
        try:
            xml = self.client.request(self.config.server_list_path, params=params, timeout=timeout)
        except NetworkFailureError as e:
            logger.error("Error fetching server list: %s", e)
            raise
        return self.parser.parse_server_list(xml)

    def list_all(self, timeout: Optional[float] = None) -> List[ServerRecord]:
        """
        Fetch every server by walking batches until a short or empty one.

        A failing batch stops the walk and the servers gathered so far are
        returned, an empty list when the first batch failed.

        Args:
            timeout: Per-batch timeout, defaults to the config value

        Returns:
            All servers collected, ids renumbered across batches
        """
        batch_size = self.config.server_batch_size
        request_timeout = timeout or self.config.list_all_timeout
        collected: List[ServerRecord] = []
        last_error: Optional[NetworkFailureError] = None
        start = 0

        for batch in range(1, self.config.max_server_batches + 1):
            try:
                servers = self.list(start=start, size=batch_size, names=1, timeout=request_timeout)
            except NetworkFailureError as e:
                last_error = e
                logger.error("Error in batch %d: %s", batch, e)
                break

            if not servers:
                break
            collected.extend(servers)
            start += batch_size
            if len(servers) < batch_size:
                break

        if last_error is not None:
            logger.warning(
                "Returning %d servers despite error: %s", len(collected), last_error
            )

        return [replace(server, id=str(index)) for index, server in enumerate(collected)]
