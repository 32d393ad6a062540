"""
Pipeline context for XWDATA ship building.

Holds everything one run reads from and accumulates into, so pipeline
functions can be exercised with small, controlled datasets.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping, Optional

from .keywords import Keywords
from .metadata_index import MetadataIndex
from .ship_builder import ShipRegistry


@dataclass
class PipelineContext:
    """
    Per-run container for metadata lookups, the text normalizer
    and the ships built so far.
    """

    metadata: MetadataIndex
    keywords: Keywords
    ships: ShipRegistry = field(init=False)

    def __post_init__(self) -> None:
        self.ships = ShipRegistry(self.metadata, self.keywords)

    @classmethod
    def from_app_metadata(
        cls,
        app_metadata: Mapping[str, Iterable[Dict[str, Any]]],
        keywords: Optional[Keywords] = None,
    ) -> PipelineContext:
        """
        Build a fresh context from the raw app-metadata document
        :param app_metadata: Vendor app-metadata
        :param keywords: Text normalizer, defaults to the packaged table
        :return: New context
        """
        return cls(
            metadata=MetadataIndex(app_metadata),
            keywords=keywords if keywords is not None else Keywords(),
        )
