from .finder import InvalidPeriodError, SlotError, find, find_free
from .interval import (
    BusyInterval,
    FreeInterval,
    InvalidRangeError,
    Period,
    Relation,
    render,
    to_string,
)
from .protocols import Input, Output
from .util import DAY, HOUR, MINUTE, at_tz, now
from .window import Window

__all__ = [
    "Period",
    "BusyInterval",
    "FreeInterval",
    "Window",
    "Relation",
    "Input",
    "Output",
    "find",
    "find_free",
    "render",
    "to_string",
    "SlotError",
    "InvalidPeriodError",
    "InvalidRangeError",
    "at_tz",
    "now",
    "MINUTE",
    "HOUR",
    "DAY",
]
