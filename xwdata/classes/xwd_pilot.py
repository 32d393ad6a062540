"""
XWDATA Singular Pilot Object
"""
from typing import Any, Dict, Iterable, List, Optional

from .json_object import JsonObject


class XwdPilotObject(JsonObject):
    """
    XWDATA Singular Pilot Object
    """

    # Left out of the JSON dump when unset; everything else is always written
    OPTIONAL_KEYS = ("caption", "force", "charges", "text", "ability", "ship_ability")

    name: str
    caption: Optional[str]
    initiative: int
    limited: int
    cost: Optional[int]
    image: str
    artwork: Optional[str]
    ffg: Optional[int]
    slots: List[str]
    force: Optional[Dict[str, Any]]
    charges: Optional[Dict[str, Any]]
    text: Optional[str]
    ability: Optional[str]
    ship_ability: Optional[Dict[str, str]]

    def __init__(self, name: str) -> None:
        """
        Attribute order here is the key order in the data files
        """
        self.name = name
        self.caption = None
        self.initiative = 0
        self.limited = 0
        self.cost = 0
        self.image = ""
        self.artwork = None
        self.ffg = None
        self.slots = []
        self.force = None
        self.charges = None
        self.text = None
        self.ability = None
        self.ship_ability = None

    def build_keys_to_skip(self) -> Iterable[str]:
        return {key for key in self.OPTIONAL_KEYS if getattr(self, key) is None}

    def __lt__(self, other: Any) -> bool:
        """
        Pilots are ordered by plain (case-sensitive) name comparison
        :param other: Other pilot
        :return: Less than or not
        """
        return bool(self.name < other.name)

    def __repr__(self) -> str:
        return f"XwdPilotObject({self.name!r})"
