"""Pytest configuration and fixtures for XWDATA tests."""

import copy
import json
import pathlib
from typing import Any, Callable, Dict, List

import pytest

from xwdata.context import PipelineContext
from xwdata.keywords import Keywords
from xwdata.metadata_index import MetadataIndex

HULL_ID = 4

APP_METADATA: Dict[str, List[Dict[str, Any]]] = {
    "upgrade_types": [
        {"id": 1, "name": "Talent"},
        {"id": 3, "name": "Astromech"},
        {"id": 10, "name": "Torpedo"},
        {"id": 12, "name": "Modification"},
    ],
    "force_affiliation": [
        {"id": 1, "name": "Light"},
        {"id": 2, "name": "Dark"},
    ],
    "card_stats": [
        {"id": 1, "name": "Front Arc", "groups": ["attack"]},
        {"id": 2, "name": "Rear Arc", "groups": ["attack"]},
        {"id": 3, "name": "Agility", "groups": ["defense"]},
        {"id": HULL_ID, "name": "Hull", "groups": ["defense"]},
        {"id": 5, "name": "Shields", "groups": ["defense"]},
        {"id": 6, "name": "Charge", "groups": ["resource"]},
        {"id": 7, "name": "Force", "groups": ["resource"]},
        {"id": 8, "name": "Energy", "groups": ["resource"]},
    ],
    "card_action_types": [
        {"id": 1, "name": "Focus"},
        {"id": 2, "name": "Target Lock"},
        {"id": 3, "name": "Barrel Roll"},
        {"id": 4, "name": "Boost"},
    ],
    "ship_types": [
        {"id": 1, "name": "T-65 X-wing"},
        {"id": 2, "name": "Scavenged YT-1300 Light Freighter"},
        {"id": 3, "name": "TIE/ln Fighter"},
    ],
    "ship_size": [
        {"id": 1, "name": "Small"},
        {"id": 2, "name": "Large"},
    ],
    "factions": [
        {"id": 1, "name": "Rebel Alliance"},
        {"id": 2, "name": "Galactic Empire"},
        {"id": 3, "name": "Scum and Villainy"},
    ],
}


@pytest.fixture
def app_metadata() -> Dict[str, List[Dict[str, Any]]]:
    return copy.deepcopy(APP_METADATA)


@pytest.fixture
def metadata(app_metadata: Dict[str, List[Dict[str, Any]]]) -> MetadataIndex:
    return MetadataIndex(app_metadata)


@pytest.fixture
def keywords() -> Keywords:
    """Normalizer that leaves text alone, so expectations stay literal."""
    return Keywords.identity()


@pytest.fixture
def context(
    app_metadata: Dict[str, List[Dict[str, Any]]], keywords: Keywords
) -> PipelineContext:
    return PipelineContext.from_app_metadata(app_metadata, keywords)


@pytest.fixture
def make_card() -> Callable[..., Dict[str, Any]]:
    """
    Factory for raw ship cards; keyword arguments override the defaults.
    """

    def _make_card(**overrides: Any) -> Dict[str, Any]:
        card: Dict[str, Any] = {
            "id": 1,
            "card_type_id": 1,
            "name": "Red Squadron Veteran",
            "is_unique": False,
            "initiative": 3,
            "cost": "43",
            "ability_text": "",
            "subtitle": "",
            "card_image": "https://example.invalid/card.png",
            "image": "https://example.invalid/art.png",
            "available_upgrades": [1, 10, 3, 12],
            "available_actions": [
                {
                    "base_action_id": 1,
                    "related_action_id": None,
                    "base_action_side_effect": None,
                    "related_action_side_effect": None,
                },
            ],
            "ship_type": 1,
            "ship_size": 1,
            "faction_id": 1,
            "force_side": None,
            "statistics": [
                {"statistic_id": 1, "value": "3", "recurring": False},
                {"statistic_id": 3, "value": "2", "recurring": False},
                {"statistic_id": HULL_ID, "value": "4", "recurring": False},
                {"statistic_id": 5, "value": "2", "recurring": False},
            ],
        }
        card.update(overrides)
        return card

    return _make_card


@pytest.fixture
def write_ship_json() -> Callable[[pathlib.Path, Dict[str, Any]], pathlib.Path]:
    """Write a persisted ship record to disk, creating parent folders."""

    def _write(file_path: pathlib.Path, contents: Dict[str, Any]) -> pathlib.Path:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(json.dumps(contents, indent=2), encoding="utf-8")
        return file_path

    return _write
