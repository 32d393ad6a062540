"""
XWDATA Class Dispatcher
"""

from .json_object import JsonObject
from .xwd_pilot import XwdPilotObject
from .xwd_ship import XwdShipObject
