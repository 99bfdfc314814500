# extractors/navigation/pagination_finder.py
"""
Pagination link finding utilities.
Derives has-next / has-previous flags from anchors anywhere in a document.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from logger import HTMLConstants

from .navigation_config import NavigationConfig
from .tree_walker import Node, iter_elements, own_text

logger = logging.getLogger(__name__)


@dataclass
class PaginationLinks:
    """
    Result of a pagination scan
    """

    has_next: bool = False
    has_previous: bool = False


class PaginationFinder:
    """
    Finds pagination anchors in an already-parsed document tree.

    The scan is not scoped to any container: an anchor whose text reads
    "Next" or "Previous" (any case, surrounding whitespace ignored) at any
    depth sets the matching flag. Row count plays no part.
    """

    def __init__(self, config: Optional[NavigationConfig] = None):
        """
        Initialize pagination finder with configuration.

        Args:
            config: NavigationConfig instance with anchor settings
        """
        self.config = config or NavigationConfig.from_constants(HTMLConstants)

    def find_pagination_links(self, document: Optional[Node]) -> PaginationLinks:
        """
        Visit every element and inspect each anchor's own text.

        Args:
            document: Parsed document (BeautifulSoup or any Tag)

        Returns:
            PaginationLinks with the detected flags
        """
        links = PaginationLinks()

        for element in iter_elements(document):
            if element.name != self.config.LINK_TAG:
                continue

            text = own_text(element).upper()
            if text == self.config.NEXT_TEXT:
                links.has_next = True
            elif text == self.config.PREVIOUS_TEXT:
                links.has_previous = True

        logger.debug(
            "Pagination scan: has_next=%s has_previous=%s",
            links.has_next,
            links.has_previous,
        )
        return links
