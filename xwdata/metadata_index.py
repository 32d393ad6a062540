"""
App-metadata lookup tables, keyed by category and id
"""

from __future__ import annotations

import logging
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, TypedDict, cast

from .errors import MissingMetadataError

LOGGER = logging.getLogger(__name__)


class MetadataCategory(Enum):
    """App-metadata sections the pipeline reads from."""

    UPGRADE_TYPES = "upgrade_types"
    FORCE_AFFILIATION = "force_affiliation"
    CARD_STATS = "card_stats"
    CARD_ACTION_TYPES = "card_action_types"
    SHIP_TYPES = "ship_types"
    SHIP_SIZE = "ship_size"
    FACTIONS = "factions"

    def __str__(self) -> str:
        return self.value


class NamedRecord(TypedDict):
    """Shape shared by every metadata record."""

    id: int
    name: str


class CardStatRecord(NamedRecord):
    """card_stats records additionally carry group tags."""

    groups: List[str]


class MetadataIndex:
    """
    Id keyed view over the app-metadata document.
    Built once per run and read-only afterwards.
    """

    _tables: Mapping[MetadataCategory, Mapping[int, Dict[str, Any]]]

    def __init__(self, app_metadata: Mapping[str, Iterable[Dict[str, Any]]]) -> None:
        tables: Dict[MetadataCategory, Mapping[int, Dict[str, Any]]] = {}
        for category in MetadataCategory:
            LOGGER.info(f"Parsing {category}")
            records = app_metadata.get(category.value) or []
            tables[category] = MappingProxyType(
                {int(record["id"]): record for record in records}
            )
        self._tables = MappingProxyType(tables)

    def __len__(self) -> int:
        return sum(len(table) for table in self._tables.values())

    def get(self, category: MetadataCategory, item_id: Any) -> Dict[str, Any]:
        """
        Find a record in a category
        :param category: Metadata section to look in
        :param item_id: Record id
        :return: Record
        """
        # bools and fractional numbers never name a record
        if isinstance(item_id, bool) or (
            isinstance(item_id, float) and not item_id.is_integer()
        ):
            raise MissingMetadataError(category, item_id)

        try:
            return self._tables[category][int(item_id)]
        except (KeyError, TypeError, ValueError) as error:
            raise MissingMetadataError(category, item_id) from error

    def upgrade_type(self, item_id: Any) -> NamedRecord:
        return cast(NamedRecord, self.get(MetadataCategory.UPGRADE_TYPES, item_id))

    def force_affiliation(self, item_id: Any) -> NamedRecord:
        return cast(NamedRecord, self.get(MetadataCategory.FORCE_AFFILIATION, item_id))

    def card_stat(self, item_id: Any) -> CardStatRecord:
        return cast(CardStatRecord, self.get(MetadataCategory.CARD_STATS, item_id))

    def card_action_type(self, item_id: Any) -> NamedRecord:
        return cast(NamedRecord, self.get(MetadataCategory.CARD_ACTION_TYPES, item_id))

    def ship_type(self, item_id: Any) -> NamedRecord:
        return cast(NamedRecord, self.get(MetadataCategory.SHIP_TYPES, item_id))

    def ship_size(self, item_id: Any) -> NamedRecord:
        return cast(NamedRecord, self.get(MetadataCategory.SHIP_SIZE, item_id))

    def faction(self, item_id: Any) -> NamedRecord:
        return cast(NamedRecord, self.get(MetadataCategory.FACTIONS, item_id))
