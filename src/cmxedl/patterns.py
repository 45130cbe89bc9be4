"""CMX 3600 line patterns and the track code parser."""

from __future__ import annotations

import re
from typing import NamedTuple

from cmxedl.errors import MalformedInputError

_TC = r"\d{2}:\d{2}:\d{2}[:;]\d{2}"

EVENT_PATTERN = re.compile(
    r"^\s*(?P<number>\d+)\s+"
    r"(?P<reel>\S+)\s+"
    r"(?P<track>\S+)\s+"
    r"(?P<transition>\S+)"
    r"(?:\s+(?P<transition_duration>\d{3}))?\s+"
    rf"(?P<source_start>{_TC})\s+"
    rf"(?P<source_end>{_TC})\s+"
    rf"(?P<record_start>{_TC})\s+"
    rf"(?P<record_end>{_TC})"
)

COMMENT_PATTERN = re.compile(r"^\s*\*\s*(?P<text>.*)$")
SOURCE_FILE_PATTERN = re.compile(r"^\s*\*\s*SOURCE FILE:\s*(?P<value>.*)$")
SOURCE_CLIP_PATTERN = re.compile(r"^\s*\*\s*FROM CLIP NAME:\s*(?P<value>.*)$")

# M2   REEL   048.0   01:00:00:00
MOTION_EFFECT_PATTERN = re.compile(
    r"^\s*M2\s+(?P<reel>\S+)\s+"
    r"(?P<speed>[+-]?\d+(?:\.\d+)?)\s+"
    rf"(?P<entry_point>{_TC})"
)

TITLE_PATTERN = re.compile(r"^\s*TITLE:\s*(?P<title>.*?)\s*$")
FCM_PATTERN = re.compile(r"^\s*FCM:\s*(?P<mode>.*?)\s*$")

TRACK_PATTERN = re.compile(r"^(?P<kind>[A-Za-z])(?P<number>\d+)?")


class TrackCode(NamedTuple):
    """A track token split into its kind letter and optional index."""

    kind: str
    number: int | None = None


def parse_track(token: str) -> TrackCode:
    """Split a track token such as ``V`` or ``A2``."""
    match = TRACK_PATTERN.match(token)
    if match is None:
        raise MalformedInputError(f"Unrecognized track token: {token!r}")

    number = match.group("number")
    return TrackCode(
        kind=match.group("kind"),
        number=int(number, 10) if number else None,
    )
