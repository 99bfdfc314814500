# extractors/base_extractor.py
"""
Base data extraction utilities with common extraction methods.
Provides reusable cell extraction for the server and player feeds.
"""

import math
import re
from typing import Any, Optional, Union

from bs4 import Tag

from .extraction_config import ExtractionConfig
from .navigation.tree_walker import child_element, is_element, is_leaf, own_text

Number = Union[int, float]


class BaseDataExtractor:
    """
    Base class providing common data extraction methods.

    Cells arrive either as primitives (str, int, float) or as parsed
    elements. None of the methods here raise; anything unrecognised
    degrades to an empty value.
    """

    def __init__(self):
        """
        Initialize the base extractor with configuration
        """
        self.config = ExtractionConfig()
        self._number_literal = re.compile(self.config.NUMBER_LITERAL_PATTERN)

    def extract_text_from_cell(self, cell: Any) -> str:
        """
        Extract clean text content from a feed cell.

        Resolution order: primitive passthrough, the cell's own text, an
        anchor child's text, an image child (empty string).

        Args:
            cell: Primitive value, text leaf or Tag

        Returns:
            Clean text string or empty string if nothing is recognised
        """
        if cell is None or isinstance(cell, bool):
            return ""
        if isinstance(cell, (int, float)):
            return self._format_primitive(cell)
        if is_leaf(cell) or (isinstance(cell, str) and not is_element(cell)):
            return str(cell).strip()
        if not isinstance(cell, Tag):
            return ""

        try:
            text = own_text(cell)
            if text:
                return text

            link = child_element(cell, self.config.LINK_TAG)
            if link is not None:
                return link.get_text(strip=True)

            # Image cells carry no text; see extract_img_src
            return ""
        except (AttributeError, TypeError):
            return ""

    def extract_img_src(self, cell: Any) -> Optional[str]:
        """
        Extract the source URL of an image child.

        Args:
            cell: Tag expected to contain an <img>

        Returns:
            The src attribute or None if there is no image or no source
        """
        if not isinstance(cell, Tag):
            return None

        img = cell if cell.name == self.config.IMAGE_TAG else child_element(
            cell, self.config.IMAGE_TAG
        )
        if img is None:
            return None

        for attribute in self.config.IMAGE_SOURCE_ATTRIBUTES:
            value = img.get(attribute)
            if value:
                return str(value)
        return None

    def parse_number(self, value: Any) -> Optional[Number]:
        """
        Parse a nullable numeric cell value.

        Args:
            value: Raw text (or number) from a cell

        Returns:
            int or float, or None for empty, "-" and non-numeric text
        """
        if isinstance(value, bool):
            return None
        if isinstance(value, (int, float)):
            return None if isinstance(value, float) and not math.isfinite(value) else value
        if not isinstance(value, str):
            return None

        text = value.strip()
        if text in self.config.EMPTY_CELL_VALUES:
            return None
        if not self._number_literal.match(text):
            return None

        try:
            if any(marker in text for marker in (".", "e", "E")):
                parsed = float(text)
                return parsed if math.isfinite(parsed) else None
            return int(text)
        except ValueError:
            return None

    def coerce_number(self, value: Any) -> Number:
        """
        Numeric coercion for the server feed: invalid or missing is 0.
        """
        parsed = self.parse_number(value)
        return parsed if parsed is not None else 0

    def coerce_flag(self, value: Any) -> bool:
        """
        Feed booleans are integers; only 1 is true.
        """
        return self.parse_number(value) == self.config.FEED_TRUE_VALUE

    @staticmethod
    def _format_primitive(value: Number) -> str:
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)
