"""
XWDATA output merging and writing
"""

import json
import logging
import pathlib
from typing import Any, Dict, Iterable, List, Optional

from .classes import XwdShipObject
from .errors import MissingPersistedShipFileError
from .utils import str_to_filename
from .xwdata_config import XwdataConfig

LOGGER = logging.getLogger(__name__)


def get_ship_file_path(
    ship: XwdShipObject, data_path: Optional[pathlib.Path] = None
) -> pathlib.Path:
    """
    Where a ship's data file lives
    :param ship: Ship to locate
    :param data_path: Data root, defaults to the configured one
    :return: <data root>/pilots/<faction>/<ship>.json
    """
    data_path = data_path or XwdataConfig().data_path
    return data_path.joinpath(
        "pilots", str_to_filename(ship.faction), f"{str_to_filename(ship.name)}.json"
    )


def ship_to_dict(ship: XwdShipObject) -> Dict[str, Any]:
    """
    Flatten a ship (and its pilots) into plain JSON types
    :param ship: Ship to flatten
    :return: JSON compatible dict
    """
    contents: Dict[str, Any] = json.loads(
        json.dumps(ship, ensure_ascii=False, default=lambda o: o.to_json())
    )
    return contents


def read_ship_file(file_path: pathlib.Path) -> Dict[str, Any]:
    """
    Load the currently persisted record of a ship
    :param file_path: Ship data file
    :return: Persisted record
    """
    if not file_path.is_file():
        raise MissingPersistedShipFileError(file_path)

    with file_path.open(encoding="utf-8") as file:
        contents: Dict[str, Any] = json.load(file)
    return contents


def merge_pilots(
    persisted_pilots: Iterable[Dict[str, Any]], new_pilots: Iterable[Dict[str, Any]]
) -> List[Dict[str, Any]]:
    """
    Union two pilot lists by pilot name. Colliding pilots are merged
    field by field, with the new pilot's fields winning.
    :param persisted_pilots: Pilots already on disk
    :param new_pilots: Pilots built this run
    :return: Persisted pilot order, then newly seen pilots
    """
    pilots_by_name: Dict[str, Dict[str, Any]] = {}
    for pilot in [*persisted_pilots, *new_pilots]:
        pilots_by_name[pilot["name"]] = {**pilots_by_name.get(pilot["name"], {}), **pilot}
    return list(pilots_by_name.values())


def merge_ship_record(
    persisted: Dict[str, Any], ship: XwdShipObject
) -> Dict[str, Any]:
    """
    Overlay a freshly built ship on top of its persisted record.
    Fields this run does not produce are kept as-is.
    :param persisted: Record currently on disk
    :param ship: Ship built this run
    :return: Record to write
    """
    ship.sort_pilots()
    new_record = ship_to_dict(ship)

    merged_record = {**persisted, **new_record}
    merged_record["pilots"] = merge_pilots(
        persisted.get("pilots") or [], new_record["pilots"]
    )
    return merged_record


def write_ship_file(
    ship: XwdShipObject, data_path: Optional[pathlib.Path] = None
) -> pathlib.Path:
    """
    Merge a ship into its data file and write it back
    :param ship: Ship built this run
    :param data_path: Data root, defaults to the configured one
    :return: File written
    """
    file_path = get_ship_file_path(ship, data_path)
    LOGGER.info(f"Writing {ship.name} ({ship.faction})")

    merged_record = merge_ship_record(read_ship_file(file_path), ship)

    with file_path.open("w", encoding="utf-8") as file:
        json.dump(
            merged_record,
            fp=file,
            indent=XwdataConfig().indent,
            ensure_ascii=False,
        )
        file.write("\n")

    return file_path


def persist_ships(
    ships: Iterable[XwdShipObject], data_path: Optional[pathlib.Path] = None
) -> List[pathlib.Path]:
    """
    Write every ship, one at a time
    :param ships: Ships built this run
    :param data_path: Data root, defaults to the configured one
    :return: Files written
    """
    return [write_ship_file(ship, data_path) for ship in ships]
