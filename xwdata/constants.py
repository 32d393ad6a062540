"""
XWDATA Constants that cannot be changed and are hardcoded intentionally
"""

import os
import pathlib
from typing import Dict

TOP_LEVEL_DIR: pathlib.Path = pathlib.Path(__file__).resolve().parent.parent
RESOURCE_PATH: pathlib.Path = TOP_LEVEL_DIR.joinpath("xwdata").joinpath("resources")
CONFIG_PATH: pathlib.Path = RESOURCE_PATH.joinpath("xwdata.properties")
ENV_DATA_PATH: pathlib.Path = (
    pathlib.Path(os.environ.get("XWDATA_DATA_PATH", TOP_LEVEL_DIR.joinpath("data")))
    .expanduser()
    .resolve()
)

LOG_PATH: pathlib.Path = TOP_LEVEL_DIR.joinpath("xwdata_logs")

CACHE_PATH: pathlib.Path = TOP_LEVEL_DIR.joinpath(".xwdata_cache")

API_ROOT: str = "https://squadbuilder.fantasyflightgames.com/api"

# Vendor card_type_id values
SHIP_CARD_TYPE_ID: int = 1
UPGRADE_CARD_TYPE_ID: int = 2

# "Special" upgrade slot, not a real slot
SPECIAL_SLOT_ID: int = 999

SHIP_ABILITY_MARKER: str = "<shipability>"
STRESS_SIDE_EFFECT: str = "stress"
ATTACK_STAT_GROUP: str = "attack"

# Vendor ship names that differ from the data files
SHIP_NAME_FIXES: Dict[str, str] = {
    "Scavenged YT-1300 Light Freighter": "Scavenged YT-1300",
    "TIE/in Interceptor": "TIE Interceptor",
    "Upsilon-class Shuttle": "Upsilon-class command shuttle",
}
