"""CMX 3600 event record."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_serializer
from pydantic.alias_generators import to_camel
from timecode import Timecode

from cmxedl.errors import InvalidConstructionSourceError, MalformedInputError
from cmxedl.models.motion_effect import MotionEffect
from cmxedl.models.timecode import coerce_frame_rate, to_timecode
from cmxedl.patterns import (
    COMMENT_PATTERN,
    EVENT_PATTERN,
    SOURCE_CLIP_PATTERN,
    SOURCE_FILE_PATTERN,
    parse_track,
)

SOURCE_TIMECODE_FIELDS = ("source_start", "source_end")
RECORD_TIMECODE_FIELDS = ("record_start", "record_end")


class Event(BaseModel):
    """A single edit instruction of an EDL.

    Build one with :meth:`from_text` (an event line), :meth:`from_record`
    (a mapping, e.g. a previous :meth:`to_json` result) or :meth:`from_input`,
    which picks between the two. ``Event()`` gives a record with no fields set.
    Only the fields that were actually set are serialized; keys the model does
    not know about are kept as extras.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        arbitrary_types_allowed=True,
        extra="allow",
    )

    number: int | None = None
    reel: str | None = None
    track_type: str | None = None
    track_number: int | None = None
    transition: str | None = None  # C | D | W### | K...
    transition_duration: int | None = None  # frames
    source_start: Timecode | None = None
    source_end: Timecode | None = None
    record_start: Timecode | None = None
    record_end: Timecode | None = None
    comment: str | None = None
    source_file: str | None = None
    source_clip: str | None = None
    motion_effect: MotionEffect | None = None

    @field_serializer(*SOURCE_TIMECODE_FIELDS, *RECORD_TIMECODE_FIELDS)
    def render_timecode(self, value: Timecode | None) -> str | None:
        return None if value is None else str(value)

    @classmethod
    def from_text(
        cls,
        line: str,
        source_frame_rate: Any = None,
        record_frame_rate: Any = None,
        *,
        drop_frame: bool | None = None,
    ) -> Event:
        """Parse a single CMX 3600 event line.

        Source timecodes are read at the source frame rate, record timecodes
        at the record frame rate; either rate falls back to 29.97 when it is
        not a positive number. *drop_frame* is the EDL's frame code mode;
        timecodes written with a ``;`` are drop frame regardless.
        """
        match = EVENT_PATTERN.match(line)
        if match is None:
            raise MalformedInputError(f"Not an EDL event line: {line!r}")

        source_rate = coerce_frame_rate(source_frame_rate)
        record_rate = coerce_frame_rate(record_frame_rate)
        track = parse_track(match.group("track"))

        data: dict[str, Any] = {
            "number": int(match.group("number"), 10),
            "reel": match.group("reel"),
            "track_type": track.kind,
            "transition": match.group("transition"),
            "source_start": to_timecode(match.group("source_start"), source_rate, drop_frame),
            "source_end": to_timecode(match.group("source_end"), source_rate, drop_frame),
            "record_start": to_timecode(match.group("record_start"), record_rate, drop_frame),
            "record_end": to_timecode(match.group("record_end"), record_rate, drop_frame),
        }
        if track.number is not None:
            data["track_number"] = track.number
        if match.group("transition_duration"):
            data["transition_duration"] = int(match.group("transition_duration"), 10)

        return cls(**data)

    @classmethod
    def from_record(
        cls,
        record: Mapping[str, Any] | Event | None,
        source_frame_rate: Any = None,
        record_frame_rate: Any = None,
    ) -> Event:
        """Copy a plain record and normalize its timecodes.

        Timecode fields that already hold Timecodes are left as they are.
        """
        if not record:
            return cls()
        if isinstance(record, Event):
            data = record._own_fields()
        elif isinstance(record, Mapping):
            data = dict(record)
        else:
            raise InvalidConstructionSourceError(
                "Event must be created from an Object or String."
            )

        source_rate = coerce_frame_rate(source_frame_rate)
        record_rate = coerce_frame_rate(record_frame_rate)

        for name in SOURCE_TIMECODE_FIELDS + RECORD_TIMECODE_FIELDS:
            rate = source_rate if name in SOURCE_TIMECODE_FIELDS else record_rate
            key = _present_key(data, name)
            if key is not None:
                data[key] = to_timecode(data[key], rate)

        key = _present_key(data, "motion_effect")
        if key is not None and not isinstance(data[key], MotionEffect):
            effect = MotionEffect.try_from_input(data[key], source_rate)
            if effect is None:
                del data[key]
            else:
                data[key] = effect

        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise MalformedInputError(f"Invalid event record: {exc}") from exc

    @classmethod
    def from_input(
        cls,
        value: Any,
        source_frame_rate: Any = None,
        record_frame_rate: Any = None,
    ) -> Event:
        """Build an event from an event line or a record, whichever *value* is."""
        if not value:
            return cls()
        if isinstance(value, str) and EVENT_PATTERN.match(value):
            return cls.from_text(value, source_frame_rate, record_frame_rate)
        if isinstance(value, (Mapping, Event)):
            return cls.from_record(value, source_frame_rate, record_frame_rate)
        raise InvalidConstructionSourceError(
            "Event must be created from an Object or String."
        )

    def add_comment(self, text: str) -> None:
        """Attach a comment line to the event.

        ``* SOURCE FILE:`` and ``* FROM CLIP NAME:`` lines replace
        ``source_file`` / ``source_clip``. Anything else is appended to
        ``comment`` as is, without a separator.
        """
        match = SOURCE_FILE_PATTERN.match(text)
        if match:
            self.source_file = match.group("value").strip()
            return

        match = SOURCE_CLIP_PATTERN.match(text)
        if match:
            self.source_clip = match.group("value").strip()
            return

        match = COMMENT_PATTERN.match(text)
        comment = (match.group("text") if match else text).strip()
        if self.comment:
            self.comment += comment
        else:
            self.comment = comment

    def set_motion_effect(self, value: Any, frame_rate: Any = None) -> bool:
        """Attach a motion effect if *value* describes one.

        Returns whether it was attached; a malformed *value* leaves the event
        unchanged.
        """
        effect = MotionEffect.try_from_input(value, frame_rate)
        if effect is None:
            return False
        self.motion_effect = effect
        return True

    def to_json(self, stringify: bool = False) -> dict[str, Any] | str:
        """Return the set fields with timecodes rendered as strings.

        With ``stringify=True`` the JSON text is returned instead.
        """
        if stringify is True:
            return self.model_dump_json(by_alias=True, exclude_unset=True)
        return self.model_dump(by_alias=True, exclude_unset=True)

    def _own_fields(self) -> dict[str, Any]:
        fields = type(self).model_fields
        data = {
            fields[name].alias or name: getattr(self, name)
            for name in self.model_fields_set
            if name in fields
        }
        data.update(self.model_extra or {})
        return data


def _present_key(data: Mapping[str, Any], name: str) -> str | None:
    """Return the key *name* is stored under in *data*, by alias or by name."""
    alias = to_camel(name)
    if alias in data:
        return alias
    if name in data:
        return name
    return None
