"""Tests for reading whole EDL documents."""

import pytest

from cmxedl.errors import MalformedInputError
from cmxedl.models.config import ParserConfig
from cmxedl.reader import read_edl, read_edl_file


def test_header(sample_edl):
    edl = read_edl(sample_edl, source_frame_rate=25, record_frame_rate=25)
    assert edl.title == "Reel 1 Conform"
    assert edl.frame_code_mode == "NON-DROP FRAME"


def test_events_and_attached_lines(sample_edl):
    edl = read_edl(sample_edl, source_frame_rate=25, record_frame_rate=25)

    assert [e.number for e in edl.events] == [1, 2, 3]

    first, second, third = edl.events
    assert first.source_clip == "A001C003_210414.MOV"
    assert first.source_file == "A001C003_210414"
    assert first.comment is None

    assert second.track_type == "A"
    assert second.track_number == 2
    assert second.motion_effect.speed == 50.0
    assert str(second.motion_effect.entry_point) == "02:00:00:00"
    assert second.comment == "CROWD WALLANEEDS ADR"

    assert third.transition_duration == 25


def test_tracks(sample_edl):
    edl = read_edl(sample_edl, source_frame_rate=25, record_frame_rate=25)
    assert edl.tracks == ["V", "A2"]


def test_to_json(sample_edl):
    data = read_edl(sample_edl, source_frame_rate=25, record_frame_rate=25).to_json()
    assert data["title"] == "Reel 1 Conform"
    assert data["events"][1]["motionEffect"]["entryPoint"] == "02:00:00:00"
    assert data["events"][0]["recordEnd"] == "01:00:15:00"


def test_unrecognized_lines_are_skipped():
    text = "TITLE: X\nGARBAGE\n* orphan comment\n001  AX  V  C  01:00:00:00 01:00:05:00 01:00:10:00 01:00:15:00\n"
    edl = read_edl(text, source_frame_rate=25, record_frame_rate=25)
    assert len(edl.events) == 1
    assert edl.events[0].comment is None


def test_strict_rejects_unrecognized_lines():
    with pytest.raises(MalformedInputError, match="Line 2"):
        read_edl("TITLE: X\nGARBAGE\n", strict=True)


def test_strict_rejects_orphan_comment():
    with pytest.raises(MalformedInputError):
        read_edl("* orphan comment\n", strict=True)


def test_read_edl_file(edl_file):
    edl = read_edl_file(edl_file, ParserConfig(source_frame_rate=25, record_frame_rate=25))
    assert len(edl.events) == 3


def test_non_drop_header_at_2997_keeps_timecodes():
    text = (
        "FCM: NON-DROP FRAME\n"
        "001  AX  V  C  00:01:00:00 00:01:05:00 00:01:00:00 00:01:05:00\n"
    )
    event = read_edl(text, source_frame_rate=29.97, record_frame_rate=29.97).events[0]

    assert not event.source_start.drop_frame
    assert event.to_json()["sourceStart"] == "00:01:00:00"
    assert event.to_json()["recordEnd"] == "00:01:05:00"


def test_drop_frame_header_at_2997():
    text = (
        "FCM: DROP FRAME\n"
        "001  AX  V  C  00:01:00:02 00:01:05:00 00:01:00:02 00:01:05:00\n"
    )
    event = read_edl(text, source_frame_rate=29.97, record_frame_rate=29.97).events[0]

    assert event.record_start.drop_frame
    assert event.to_json()["recordStart"] == "00:01:00;02"


BAD_TRACK_EDL = (
    "001  AX  V   C  01:00:00:00 01:00:05:00 01:00:10:00 01:00:15:00\n"
    "002  BX  2A  C  02:00:00:00 02:00:02:00 01:00:15:00 01:00:17:00\n"
    "* BELONGS TO THE SKIPPED EVENT\n"
    "003  CX  V   C  03:00:00:00 03:00:04:00 01:00:17:00 01:00:21:00\n"
)


def test_bad_event_line_is_skipped():
    edl = read_edl(BAD_TRACK_EDL, source_frame_rate=25, record_frame_rate=25)

    assert [e.number for e in edl.events] == [1, 3]
    assert edl.events[0].comment is None


def test_strict_rejects_bad_event_line():
    with pytest.raises(MalformedInputError, match="Line 2"):
        read_edl(BAD_TRACK_EDL, source_frame_rate=25, record_frame_rate=25, strict=True)
