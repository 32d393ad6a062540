"""
XWDATA simple utilities
"""

import json
import logging
import os
import re
import time
from typing import Any, Optional

from . import constants

LOGGER = logging.getLogger(__name__)

_NON_XWS_CHARACTERS = re.compile(r"[^a-z0-9]")
_LEADING_INTEGER = re.compile(r"\s*([+-]?[0-9]+)")


def init_logger() -> None:
    """
    Initialize the main system logger
    """
    constants.LOG_PATH.mkdir(parents=True, exist_ok=True)

    start_time = time.strftime("%Y-%m-%d_%H.%M.%S")

    logging.basicConfig(
        level=(
            logging.DEBUG
            if os.environ.get("XWDATA_DEBUG", "").lower() in ["true", "1"]
            else logging.INFO
        ),
        format="[%(levelname)s] %(asctime)s: %(message)s",
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(
                str(constants.LOG_PATH.joinpath(f"xwdata_{start_time}.log"))
            ),
        ],
    )
    logging.getLogger("urllib3").setLevel(logging.ERROR)


def to_camel_case(snake_str: str) -> str:
    """
    Convert "snake_case" => "camelCase"
    :param snake_str: Snake String
    :return: Camel String
    """
    components = snake_str.split("_")
    return components[0] + "".join(x.title() for x in components[1:])


def str_to_filename(value: str) -> str:
    """
    Convert a display name into the name used on disk
    "Rebel Alliance" => "rebel-alliance", "TIE/ln Fighter" => "tie-ln-fighter"
    :param value: Display name
    :return: File name component
    """
    return value.lower().replace(" ", "-").replace("/", "-")


def generate_xws(value: str) -> str:
    """
    Build an XWS identifier out of an (already normalized) display name
    :param value: Display name
    :return: Lowercase alphanumeric identifier
    """
    return _NON_XWS_CHARACTERS.sub("", value.lower())


def parse_int(value: Any) -> Optional[int]:
    """
    Read the leading integer of a vendor number, which comes through as
    an int, a float or a string that may carry trailing junk ("3*" => 3)
    :param value: Value to convert
    :return: Integer value, or None when there are no leading digits
    """
    match = _LEADING_INTEGER.match(str(value))
    if not match:
        LOGGER.warning(f"Unable to read an integer from {value!r}")
        return None
    return int(match.group(1), 10)


def load_resource_json(file_name: str) -> Any:
    """
    Load a JSON file from the resources folder
    :param file_name: File inside of resources
    :return: Decoded contents
    """
    with constants.RESOURCE_PATH.joinpath(file_name).open(encoding="utf-8") as f:
        return json.load(f)
