"""cmxedl — CMX 3600 EDL event records."""

__version__ = "0.1.0"

from cmxedl.errors import (  # noqa: E402
    EDLError,
    InvalidConstructionSourceError,
    MalformedInputError,
)
from cmxedl.models import EDL, Event, MotionEffect  # noqa: E402
from cmxedl.reader import read_edl, read_edl_file  # noqa: E402

__all__ = [
    "EDL",
    "EDLError",
    "Event",
    "InvalidConstructionSourceError",
    "MalformedInputError",
    "MotionEffect",
    "read_edl",
    "read_edl_file",
]
