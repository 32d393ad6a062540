"""
XWDATA pipeline failures

None of these are recovered inside the pipeline; they abort the run.
"""

import pathlib
from typing import Any


class XwdataError(Exception):
    """
    Base class for all XWDATA pipeline failures
    """


class MissingMetadataError(XwdataError, LookupError):
    """
    An id was not found in an app-metadata category
    """

    def __init__(self, category: Any, item_id: Any) -> None:
        self.category = category
        self.item_id = item_id
        super().__init__(f"Could not find {category} with id {item_id}")


class UnknownCardTypeError(XwdataError):
    """
    A card's card_type_id is neither a ship nor an upgrade
    """

    def __init__(self, type_id: Any) -> None:
        self.type_id = type_id
        super().__init__(f"Unknown card type: {type_id}")


class UnknownStatisticError(XwdataError):
    """
    A resolved statistic name is not one we know how to convert
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'Unknown statistic "{name}"')


class MissingPersistedShipFileError(XwdataError, FileNotFoundError):
    """
    The ship file to merge into does not exist yet
    """

    def __init__(self, path: pathlib.Path) -> None:
        self.path = path
        super().__init__(f"Ship file not found: {path}")
