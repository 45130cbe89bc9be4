"""EDL document reader — CMX 3600 text to an EDL model."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from rich.markup import escape

from cmxedl.errors import MalformedInputError
from cmxedl.models.config import ParserConfig
from cmxedl.models.edl import EDL
from cmxedl.models.event import Event
from cmxedl.models.timecode import coerce_frame_rate
from cmxedl.patterns import (
    COMMENT_PATTERN,
    EVENT_PATTERN,
    FCM_PATTERN,
    MOTION_EFFECT_PATTERN,
    TITLE_PATTERN,
)
from cmxedl.utils.io import read_text
from cmxedl.utils.progress import log_step, log_warning


def read_edl(
    text: str,
    *,
    source_frame_rate: Any = None,
    record_frame_rate: Any = None,
    strict: bool = False,
) -> EDL:
    """Read a whole EDL document.

    Comment and ``M2`` lines belong to the event line above them. Lines the
    reader does not recognize are skipped with a warning, or raise
    :class:`MalformedInputError` when *strict* is set.
    """
    source_rate = coerce_frame_rate(source_frame_rate)
    record_rate = coerce_frame_rate(record_frame_rate)

    edl = EDL()
    current: Event | None = None
    drop_frame: bool | None = None

    for line_number, raw in enumerate(text.splitlines(), start=1):
        line = raw.rstrip()
        if not line.strip():
            continue

        title = TITLE_PATTERN.match(line)
        fcm = FCM_PATTERN.match(line)

        if title:
            edl.title = title.group("title")
        elif fcm:
            edl.frame_code_mode = fcm.group("mode")
            drop_frame = _is_drop_frame_mode(edl.frame_code_mode)
        elif EVENT_PATTERN.match(line):
            try:
                current = Event.from_text(
                    line, source_rate, record_rate, drop_frame=drop_frame
                )
            except MalformedInputError as exc:
                current = None
                _skip(line_number, line, str(exc), strict)
                continue
            edl.events.append(current)
        elif current is not None and MOTION_EFFECT_PATTERN.match(line):
            if not current.set_motion_effect(line, source_rate):
                _skip(line_number, line, "motion effect rejected", strict)
        elif current is not None and COMMENT_PATTERN.match(line):
            current.add_comment(line)
        else:
            _skip(line_number, line, "unrecognized line", strict)

    log_step("EDL", f"Read {len(edl.events)} event(s) from {escape(edl.title or 'untitled EDL')}")
    return edl


def read_edl_file(path: Path | str, config: ParserConfig | None = None) -> EDL:
    """Read an EDL file using the frame rates and strictness of *config*."""
    config = config or ParserConfig()
    return read_edl(
        read_text(path),
        source_frame_rate=config.source_frame_rate,
        record_frame_rate=config.record_frame_rate,
        strict=config.strict,
    )


def _is_drop_frame_mode(mode: str) -> bool | None:
    """Map an FCM value to drop frame (True), non-drop (False) or unknown (None)."""
    mode = mode.upper()
    if "NON" in mode:
        return False
    if "DROP" in mode:
        return True
    return None


def _skip(line_number: int, line: str, reason: str, strict: bool) -> None:
    if strict:
        raise MalformedInputError(f"Line {line_number}: {reason}: {line!r}")
    log_warning(escape(f"Line {line_number}: {reason}, skipped: {line.strip()}"))
