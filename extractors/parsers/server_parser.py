# extractors/parsers/server_parser.py
"""
Server list parser for extracting live servers from the XML feed.
"""

import logging
from typing import List, Union

from bs4 import BeautifulSoup, Tag

from extractors.extractor_server import ServerRowExtractor
from extractors.navigation.tree_walker import child_element, follow_path
from logger import LoggingConstants
from models import ServerRecord

from .base_parser import BaseParser

logger = logging.getLogger(__name__)


class ServerFeedParser(BaseParser):
    """
    XML parser specialized for the server-list feed.

    Accepts both ``<result><server_list><server>`` and the flatter
    ``<result><server>`` layout, with one or many servers.
    """

    feed_type = "server"

    def __init__(self):
        """
        Initialize server parser with its row extractor.
        """
        super().__init__()
        self.row_extractor = ServerRowExtractor()

    def parse_server_list(self, xml: Union[str, bytes]) -> List[ServerRecord]:
        """
        Parse the server-list XML into records.

        Args:
            xml: Raw XML payload

        Returns:
            Servers in feed order with ids "0", "1", ...; empty list on any failure
        """
        try:
            soup = self._load_document(xml, self.config.XML_FEATURES)
            nodes = self._find_server_nodes(soup)
            return [
                self.row_extractor.extract_server(node, index)
                for index, node in enumerate(nodes)
            ]
        except Exception as e:
            logger.warning(LoggingConstants.SERVER_PARSE_FAILED_MSG, e)
            return []

    def _find_server_nodes(self, soup: BeautifulSoup) -> List[Tag]:
        """
        Collect the <server> elements under the result root.
        """
        result = child_element(soup, self.config.XML_ROOT)
        if result is None:
            return []

        server_list = follow_path(result, self.config.XML_SERVER_LIST)
        if server_list is not None:
            nodes = server_list.find_all(self.config.XML_SERVER, recursive=False)
            if nodes:
                return nodes

        return result.find_all(self.config.XML_SERVER, recursive=False)
