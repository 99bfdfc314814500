# extractors/parsers/base_parser.py
"""
Base parser class providing common functionality for all feed parsers.
Contains shared methods and utilities used by specific parser implementations.
"""

from typing import List, Optional, Union

from bs4 import BeautifulSoup, Tag

from exceptions import MalformedFeedError
from extractors.navigation.tree_walker import child_element, find_first, follow_path

from .parser_config import ParserConfig


class BaseParser:
    """
    Base class for all feed parsers providing common functionality.
    Contains shared methods for document loading, table location and row filtering.
    """

    feed_type = "feed"

    def __init__(self):
        """
        Initialize base parser with configuration.
        """
        self.config = ParserConfig()

    def _load_document(self, payload: Union[str, bytes], features: str) -> BeautifulSoup:
        """
        Parse raw payload text into a document tree.

        Args:
            payload: Raw response body
            features: BeautifulSoup tree builder name

        Returns:
            Parsed BeautifulSoup document

        Raises:
            MalformedFeedError: If the payload is not text
        """
        if not isinstance(payload, (str, bytes)):
            raise MalformedFeedError(
                self.feed_type, f"expected text payload, got {type(payload).__name__}"
            )
        return BeautifulSoup(payload, features)

    def _locate_table(self, soup: BeautifulSoup) -> Optional[Tag]:
        """
        Find the data table using the configured paths, then depth-first.

        Args:
            soup: Parsed document

        Returns:
            Element owning the table rows or None if not found
        """
        for path in self.config.TABLE_LOCATION_PATHS:
            table = follow_path(soup, *path)
            if table is not None:
                return table

        return find_first(soup, self._owns_rows)

    def _owns_rows(self, element: Tag) -> bool:
        """
        True when the element has at least one direct non-header row.
        """
        return any(
            not self._should_skip_header_row(row)
            for row in element.find_all(self.config.TABLE_ROW_SELECTOR, recursive=False)
        )

    def _get_table_rows_from_table(self, table: Tag) -> List[Tag]:
        """
        Extract table rows from a table element, falling back to tbody.

        Args:
            table: Table element to extract rows from

        Returns:
            List of table row elements
        """
        rows = table.find_all(self.config.TABLE_ROW_SELECTOR, recursive=False)
        if rows:
            return rows

        tbody = child_element(table, self.config.TABLE_BODY_SELECTOR)
        if tbody is None:
            return []
        return tbody.find_all(self.config.TABLE_ROW_SELECTOR, recursive=False)

    def _should_skip_header_row(self, row: Tag) -> bool:
        """
        Check if row should be skipped because it's a header row.

        Args:
            row: BeautifulSoup row element to check

        Returns:
            True if row contains header cells and should be skipped
        """
        return child_element(row, self.config.TABLE_HEADER_SELECTOR) is not None

    def _get_table_cells(self, row: Tag) -> List[Tag]:
        """
        Extract the data cells of a row.

        Args:
            row: BeautifulSoup row element

        Returns:
            List of table cell elements
        """
        return row.find_all(self.config.TABLE_CELL_SELECTOR, recursive=False)
