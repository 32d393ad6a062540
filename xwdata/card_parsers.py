"""
Parsers turning vendor id lists and text into X-Wing data shapes
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from . import constants
from .errors import UnknownStatisticError
from .keywords import Keywords
from .metadata_index import MetadataIndex
from .utils import parse_int

LOGGER = logging.getLogger(__name__)

BASIC_STAT_NAMES = {"Agility", "Hull", "Shields"}


def parse_slots(metadata: MetadataIndex, available_upgrades: List[int]) -> List[str]:
    """
    Convert upgrade type ids to slot names
    :param metadata: Metadata lookups
    :param available_upgrades: Upgrade type ids from the card
    :return: Slot names, in card order
    """
    return [
        metadata.upgrade_type(upgrade_id)["name"]
        for upgrade_id in available_upgrades
        if upgrade_id != constants.SPECIAL_SLOT_ID
    ]


def get_force_side(metadata: MetadataIndex, force_side: Any) -> str:
    return metadata.force_affiliation(force_side)["name"].lower()


def parse_stats(
    metadata: MetadataIndex,
    keywords: Keywords,
    statistics: List[Dict[str, Any]],
    force_side: Any = None,
) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
    """
    Sort a card's statistics into ship stats, charges and force
    :param metadata: Metadata lookups
    :param keywords: Text normalizer
    :param statistics: Statistic entries from the card
    :param force_side: Force affiliation id of the card
    :return: (stats, charges, force)
    """
    stats: List[Dict[str, Any]] = []
    charges: Optional[Dict[str, Any]] = None
    force: Optional[Dict[str, Any]] = None

    for statistic_entry in statistics:
        statistic = metadata.card_stat(statistic_entry["statistic_id"])
        name = statistic["name"]
        value = statistic_entry["value"]
        recovers = 1 if statistic_entry.get("recurring") else 0

        if constants.ATTACK_STAT_GROUP in (statistic.get("groups") or []):
            stats.append(
                {
                    "type": "attack",
                    "value": parse_int(value),
                    "arc": keywords.fix_exact_match(name.replace(" ", "")),
                }
            )
        elif name in BASIC_STAT_NAMES:
            stats.append({"type": name.lower(), "value": parse_int(value)})
        elif name == "Charge":
            charges = {"value": parse_int(value), "recovers": recovers}
        elif name == "Force":
            force = {
                "value": parse_int(value),
                "recovers": recovers,
                "side": [get_force_side(metadata, force_side)],
            }
        else:
            raise UnknownStatisticError(name)

    return stats, charges, force


def parse_action(
    metadata: MetadataIndex,
    keywords: Keywords,
    action_id: Any,
    side_effect: Optional[str],
) -> Dict[str, Any]:
    """
    Build a single action descriptor
    :param metadata: Metadata lookups
    :param keywords: Text normalizer
    :param action_id: Action type id
    :param side_effect: Vendor side effect, "stress" makes the action red
    :return: Action descriptor
    """
    action = metadata.card_action_type(action_id)
    return {
        "difficulty": "Red" if side_effect == constants.STRESS_SIDE_EFFECT else "White",
        "type": keywords.fix_exact_match(action["name"]),
    }


def parse_actions(
    metadata: MetadataIndex,
    keywords: Keywords,
    available_actions: List[Dict[str, Any]],
) -> List[Dict[str, Any]]:
    """
    Build the action bar, including linked actions
    :param metadata: Metadata lookups
    :param keywords: Text normalizer
    :param available_actions: Action entries from the card
    :return: Action descriptors, in card order
    """
    actions = []
    for entry in available_actions:
        action = parse_action(
            metadata,
            keywords,
            entry["base_action_id"],
            entry.get("base_action_side_effect"),
        )
        if entry.get("related_action_id"):
            action["linked"] = parse_action(
                metadata,
                keywords,
                entry["related_action_id"],
                entry.get("related_action_side_effect"),
            )
        actions.append(action)
    return actions


def parse_ship_ability(keywords: Keywords, raw_ship_ability: str) -> Dict[str, str]:
    """
    "Name: text" => {"name": "Name", "text": "text"}
    :param keywords: Text normalizer
    :param raw_ship_ability: Ship ability portion of the ability text
    :return: Ship ability
    """
    name, *text = keywords.replace(raw_ship_ability).split(":")
    return {"name": name, "text": ": ".join(text).strip()}


def split_ability(
    keywords: Keywords, ability_text: Optional[str]
) -> Tuple[str, Optional[Dict[str, str]]]:
    """
    Separate the pilot ability from the ship ability
    :param keywords: Text normalizer
    :param ability_text: Raw ability text from the card
    :return: (pilot ability, ship ability or None)
    """
    pilot_ability, _, raw_ship_ability = (ability_text or "").partition(
        constants.SHIP_ABILITY_MARKER
    )

    ship_ability = None
    if raw_ship_ability:
        ship_ability = parse_ship_ability(keywords, raw_ship_ability)

    return keywords.replace(pilot_ability), ship_ability
