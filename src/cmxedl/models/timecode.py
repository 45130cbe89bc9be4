"""Timecode helpers around ``timecode.Timecode``."""

from __future__ import annotations

import math
from typing import Any

from timecode import Timecode

from cmxedl.errors import MalformedInputError

DEFAULT_FRAME_RATE = 29.97


def coerce_frame_rate(value: Any) -> float:
    """Return *value* as a positive float frame rate, or the default otherwise."""
    try:
        rate = float(value)
    except (TypeError, ValueError):
        return DEFAULT_FRAME_RATE
    if not math.isfinite(rate) or rate <= 0:
        return DEFAULT_FRAME_RATE
    return rate


def is_timecode(value: Any) -> bool:
    """Return whether *value* is already a Timecode."""
    return isinstance(value, Timecode)


def is_drop_frame(text: str, drop_frame: bool | None = None) -> bool:
    """Decide whether *text* is drop-frame timecode.

    A ``;`` frame separator always means drop frame. Otherwise *drop_frame*
    (usually taken from the EDL's FCM header) decides, and without it the
    timecode is read as non-drop.
    """
    if ";" in text:
        return True
    return bool(drop_frame)


def to_timecode(value: Any, frame_rate: Any, drop_frame: bool | None = None) -> Timecode | None:
    """Convert *value* to a Timecode at *frame_rate*.

    Values that already are Timecodes are returned untouched, so normalizing
    twice is a no-op. Falsy values give ``None``.
    """
    if is_timecode(value):
        return value
    if not value:
        return None

    text = str(value)
    try:
        return Timecode(
            coerce_frame_rate(frame_rate),
            text,
            force_non_drop_frame=not is_drop_frame(text, drop_frame),
        )
    except (ValueError, IndexError, TypeError) as exc:
        raise MalformedInputError(f"Invalid timecode: {value!r}") from exc
