"""Motion effect (M2) record."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_serializer
from pydantic.alias_generators import to_camel
from timecode import Timecode

from cmxedl.errors import InvalidConstructionSourceError, MalformedInputError
from cmxedl.models.timecode import to_timecode
from cmxedl.patterns import MOTION_EFFECT_PATTERN


class MotionEffect(BaseModel):
    """Speed change applied to the source clip of an event."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    reel: str
    speed: float  # frames per second of playback
    entry_point: Timecode

    @field_serializer("entry_point")
    def render_entry_point(self, value: Timecode) -> str:
        return str(value)

    @classmethod
    def from_text(cls, line: str, frame_rate: Any = None) -> MotionEffect:
        """Build a motion effect from an ``M2`` line."""
        match = MOTION_EFFECT_PATTERN.match(line)
        if match is None:
            raise MalformedInputError(f"Not a motion effect line: {line!r}")

        return cls(
            reel=match.group("reel"),
            speed=float(match.group("speed")),
            entry_point=to_timecode(match.group("entry_point"), frame_rate),
        )

    @classmethod
    def from_record(cls, record: Mapping[str, Any], frame_rate: Any = None) -> MotionEffect:
        """Build a motion effect from a plain mapping such as a serialized one."""
        data = dict(record)
        for key in ("entryPoint", "entry_point"):
            if key in data:
                data[key] = to_timecode(data[key], frame_rate)
        return cls.model_validate(data)

    @classmethod
    def from_input(cls, value: Any, frame_rate: Any = None) -> MotionEffect:
        """Build a motion effect from an M2 line, a mapping or an existing one."""
        if isinstance(value, MotionEffect):
            return value
        if isinstance(value, str):
            return cls.from_text(value, frame_rate)
        if isinstance(value, Mapping):
            return cls.from_record(value, frame_rate)
        raise InvalidConstructionSourceError(
            "MotionEffect must be created from an Object or String."
        )

    @classmethod
    def try_from_input(cls, value: Any, frame_rate: Any = None) -> MotionEffect | None:
        """Like :meth:`from_input`, but return ``None`` when *value* is malformed."""
        try:
            return cls.from_input(value, frame_rate)
        except (MalformedInputError, InvalidConstructionSourceError, ValidationError):
            return None

    def to_json(self) -> dict[str, Any]:
        """Return the effect as a dict with ``entryPoint`` rendered as a string."""
        return self.model_dump(by_alias=True)
