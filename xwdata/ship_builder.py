"""
XWDATA Ship Builder
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Iterator, Optional

from typing_extensions import assert_never

from . import constants
from .card_parsers import parse_actions, parse_slots, parse_stats, split_ability
from .classes import XwdPilotObject, XwdShipObject
from .errors import UnknownCardTypeError
from .keywords import Keywords
from .metadata_index import MetadataIndex
from .utils import generate_xws, parse_int

if TYPE_CHECKING:
    from .context import PipelineContext

LOGGER = logging.getLogger(__name__)


class CardKind(Enum):
    """Kinds of vendor cards."""

    SHIP = "ship"
    UPGRADE = "upgrade"
    UNKNOWN = "unknown"


def classify_card(card: Dict[str, Any]) -> CardKind:
    """
    Determine what kind of card the vendor sent
    :param card: Raw card
    :return: Card kind
    """
    card_type_id = card.get("card_type_id")
    if type(card_type_id) is not int:
        return CardKind.UNKNOWN
    if card_type_id == constants.SHIP_CARD_TYPE_ID:
        return CardKind.SHIP
    if card_type_id == constants.UPGRADE_CARD_TYPE_ID:
        return CardKind.UPGRADE
    return CardKind.UNKNOWN


def get_ship_name(metadata: MetadataIndex, keywords: Keywords, ship_type: Any) -> str:
    """
    Ship name as used by the data files
    :param metadata: Metadata lookups
    :param keywords: Text normalizer
    :param ship_type: Ship type id
    :return: Ship name
    """
    name = keywords.replace(metadata.ship_type(ship_type)["name"])
    return constants.SHIP_NAME_FIXES.get(name, name)


def build_xwd_pilot(
    metadata: MetadataIndex, keywords: Keywords, card: Dict[str, Any]
) -> XwdPilotObject:
    """
    Construct a pilot from a ship card
    :param metadata: Metadata lookups
    :param keywords: Text normalizer
    :param card: Raw ship card
    :return: Pilot
    """
    is_unique = bool(card.get("is_unique"))
    name = card["name"]

    # Unique names lead with the uniqueness dot
    pilot = XwdPilotObject(keywords.replace(name[1:] if is_unique else name))

    caption = card.get("subtitle")
    if caption:
        pilot.caption = keywords.replace(caption)

    pilot.initiative = card.get("initiative") or 0
    pilot.limited = 1 if is_unique else 0
    pilot.cost = parse_int(card["cost"])
    pilot.image = card.get("card_image") or ""
    pilot.artwork = card.get("image")
    pilot.ffg = card.get("id")
    pilot.slots = parse_slots(metadata, card.get("available_upgrades") or [])

    _, charges, force = parse_stats(
        metadata, keywords, card.get("statistics") or [], card.get("force_side")
    )
    if force:
        pilot.force = force
    if charges:
        pilot.charges = charges

    pilot_ability, ship_ability = split_ability(keywords, card.get("ability_text"))
    if is_unique:
        pilot.ability = pilot_ability
    else:
        pilot.text = pilot_ability

    if ship_ability:
        pilot.ship_ability = ship_ability

    return pilot


class ShipRegistry:
    """
    Ships seen so far in the run, one per ship and faction.
    Ship level fields come from the first card seen for a ship.
    """

    metadata: MetadataIndex
    keywords: Keywords
    ships: Dict[str, XwdShipObject]

    def __init__(self, metadata: MetadataIndex, keywords: Keywords) -> None:
        self.metadata = metadata
        self.keywords = keywords
        self.ships = {}

    def __len__(self) -> int:
        return len(self.ships)

    def __iter__(self) -> Iterator[XwdShipObject]:
        return iter(self.ships.values())

    def __contains__(self, ship_key: object) -> bool:
        return ship_key in self.ships

    def get(self, ship_key: str) -> Optional[XwdShipObject]:
        return self.ships.get(ship_key)

    def ship_key(self, card: Dict[str, Any]) -> str:
        """
        Composite key of a card's ship, "<xws>-<faction id>"
        :param card: Raw ship card
        :return: Ship key
        """
        ship_name = get_ship_name(self.metadata, self.keywords, card["ship_type"])
        return f"{generate_xws(ship_name)}-{card['faction_id']}"

    def build_xwd_ship(self, card: Dict[str, Any]) -> XwdShipObject:
        """
        Construct the ship level fields from a ship card
        :param card: Raw ship card
        :return: Ship without pilots
        """
        ship_name = get_ship_name(self.metadata, self.keywords, card["ship_type"])
        stats, _, _ = parse_stats(
            self.metadata,
            self.keywords,
            card.get("statistics") or [],
            card.get("force_side"),
        )
        return XwdShipObject(
            name=ship_name,
            xws=generate_xws(ship_name),
            ffg=card["ship_type"],
            size=self.metadata.ship_size(card["ship_size"])["name"],
            faction=self.metadata.faction(card["faction_id"])["name"],
            stats=stats,
            actions=parse_actions(
                self.metadata, self.keywords, card.get("available_actions") or []
            ),
        )

    def upsert(self, card: Dict[str, Any], pilot: XwdPilotObject) -> XwdShipObject:
        """
        Add a pilot to its ship, creating the ship on first sight
        :param card: Raw ship card the pilot was built from
        :param pilot: Pilot to add
        :return: Ship the pilot was added to
        """
        ship_key = self.ship_key(card)

        ship = self.ships.get(ship_key)
        if ship is None:
            ship = self.build_xwd_ship(card)
            self.ships[ship_key] = ship
            LOGGER.debug(f"Creating ship {ship.name} ({ship.faction})")
        else:
            # Later cards only contribute their pilot
            LOGGER.debug(f"Ship {ship_key} already built, keeping first card's stats")

        LOGGER.debug(f"Adding pilot {pilot.name} ({ship.name})")
        ship.add_pilot(pilot)
        return ship


def process_card(context: PipelineContext, card: Dict[str, Any]) -> None:
    """
    Route a raw card to the right builder
    :param context: Run context
    :param card: Raw card
    """
    card_kind = classify_card(card)
    if card_kind is CardKind.SHIP:
        pilot = build_xwd_pilot(context.metadata, context.keywords, card)
        context.ships.upsert(card, pilot)
    elif card_kind is CardKind.UPGRADE:
        LOGGER.debug(f"Skipping upgrade {card.get('name')}")
    elif card_kind is CardKind.UNKNOWN:
        raise UnknownCardTypeError(card.get("card_type_id"))
    else:
        assert_never(card_kind)
