"""
XWDATA Ship Object
"""
from typing import Any, Dict, List

from .json_object import JsonObject
from .xwd_pilot import XwdPilotObject


class XwdShipObject(JsonObject):
    """
    XWDATA Ship Object, one per ship and faction
    """

    name: str
    xws: str
    ffg: int
    size: str
    faction: str
    stats: List[Dict[str, Any]]
    actions: List[Dict[str, Any]]
    pilots: List[XwdPilotObject]

    def __init__(
        self,
        name: str,
        xws: str,
        ffg: int,
        size: str,
        faction: str,
        stats: List[Dict[str, Any]],
        actions: List[Dict[str, Any]],
    ) -> None:
        self.name = name
        self.xws = xws
        self.ffg = ffg
        self.size = size
        self.faction = faction
        self.stats = stats
        self.actions = actions
        self.pilots = []

    def add_pilot(self, pilot: XwdPilotObject) -> None:
        """
        Attach another pilot flying this ship
        :param pilot: Pilot to add
        """
        self.pilots.append(pilot)

    def sort_pilots(self) -> None:
        """
        Order pilots by name ahead of writing
        """
        self.pilots.sort()

    def __repr__(self) -> str:
        return f"XwdShipObject({self.name!r}, {self.faction!r}, pilots={len(self.pilots)})"
