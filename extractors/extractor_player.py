# extractors/extractor_player.py
"""
Player-specific data extraction utilities.
Handles extraction of one leaderboard table row.
"""

from typing import Any, Dict, List, Optional

from bs4 import Tag

from models import PlayerDatabase, PlayerRecord, generate_player_id

from .base_extractor import BaseDataExtractor


class PlayerRowExtractor(BaseDataExtractor):
    """
    Extractor turning the <td> cells of one row into a PlayerRecord.

    Rows shorter than the full column set are accepted; the missing
    trailing cells extract as empty values.
    """

    def extract_player(self, cells: List[Tag], db: PlayerDatabase) -> PlayerRecord:
        """
        Build a PlayerRecord from a row's cells.

        Args:
            cells: The row's <td> elements in column order
            db: Leaderboard partition the row belongs to

        Returns:
            PlayerRecord with unparseable statistics set to None
        """
        values: Dict[str, Any] = {}

        for position, (field_name, kind) in enumerate(self.config.PLAYER_COLUMNS):
            cell = cells[position] if position < len(cells) else None
            values[field_name] = self._extract_column(cell, kind)

        username = values.pop("username")
        return PlayerRecord(
            id=generate_player_id(username, db),
            username=username,
            db=PlayerDatabase(db),
            **values,
        )

    def _extract_column(self, cell: Optional[Tag], kind: str) -> Any:
        if kind == "image":
            return self.extract_img_src(cell)

        text = self.extract_text_from_cell(cell)
        if kind == "row_number":
            return self.coerce_number(text)
        if kind == "username":
            return text
        if kind == "number":
            return self.parse_number(text)
        return text or None
