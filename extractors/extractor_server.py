# extractors/extractor_server.py
"""
Server-specific data extraction utilities.
Handles extraction of one <server> node of the server-list feed.
"""

from typing import Any, Dict, List, Sequence, Union

from bs4 import Tag

from logger import HTMLConstants
from models import ServerRecord

from .base_extractor import BaseDataExtractor
from .navigation.tree_walker import is_element


def fix_player_list(raw: Union[str, Sequence[Any], None]) -> List[str]:
    """
    Normalize the feed's player field into a clean list of names.

    The field is absent for empty servers, a single string for one player
    and a list otherwise. Entries that are empty or whitespace-only after
    trimming are dropped.

    Args:
        raw: Raw player field value

    Returns:
        Trimmed, non-empty player names in feed order
    """
    if raw is None:
        return []
    if isinstance(raw, (str, int, float)):
        values = [raw]
    else:
        values = list(raw)

    players = []
    for value in values:
        if value is None:
            continue
        name = str(value).strip()
        if name:
            players.append(name)
    return players


class ServerRowExtractor(BaseDataExtractor):
    """
    Extractor turning a parsed <server> element into a ServerRecord.
    """

    def extract_server(self, node: Tag, index: int) -> ServerRecord:
        """
        Build a ServerRecord from a <server> element.

        Args:
            node: Parsed <server> element
            index: Zero-based position in the feed, used as the record id

        Returns:
            ServerRecord with every numeric field defaulted to 0
        """
        fields = self._collect_fields(node)
        values: Dict[str, Any] = {}

        for feed_field, (record_field, kind) in self.config.SERVER_FIELD_MAP.items():
            raw = fields.get(feed_field)
            values[record_field] = self._coerce(raw, kind)

        values["player_list"] = tuple(fix_player_list(fields.get(HTMLConstants.XML_PLAYER)))
        return ServerRecord(id=str(index), **values)

    def _collect_fields(self, node: Tag) -> Dict[str, Any]:
        """
        Gather direct child elements by name; repeated names become lists.
        """
        fields: Dict[str, Any] = {}
        for child in node.children:
            if not is_element(child):
                continue
            text = child.get_text().strip()
            if child.name in fields:
                existing = fields[child.name]
                if isinstance(existing, list):
                    existing.append(text)
                else:
                    fields[child.name] = [existing, text]
            else:
                fields[child.name] = text
        return fields

    def _coerce(self, raw: Any, kind: str) -> Any:
        if isinstance(raw, list):
            raw = raw[0] if raw else None

        if kind == "number":
            return self.coerce_number(raw)
        if kind == "flag":
            return self.coerce_flag(raw)

        text = self.extract_text_from_cell(raw)
        if kind == "nullable_string":
            return text or None
        return text
