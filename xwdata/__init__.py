"""
XWDATA, vendor Squad Builder catalog to X-Wing ship data files
"""

from .context import PipelineContext
from .errors import (
    MissingMetadataError,
    MissingPersistedShipFileError,
    UnknownCardTypeError,
    UnknownStatisticError,
    XwdataError,
)

__all__ = [
    "MissingMetadataError",
    "MissingPersistedShipFileError",
    "PipelineContext",
    "UnknownCardTypeError",
    "UnknownStatisticError",
    "XwdataError",
]
