"""Tests for the M2 motion effect record."""

import pytest
from pydantic import ValidationError
from timecode import Timecode

from cmxedl.errors import InvalidConstructionSourceError, MalformedInputError
from cmxedl.models.motion_effect import MotionEffect

M2_LINE = "M2   BX       050.0                02:00:00:00"


def test_from_text():
    effect = MotionEffect.from_text(M2_LINE, 25)
    assert effect.reel == "BX"
    assert effect.speed == 50.0
    assert str(effect.entry_point) == "02:00:00:00"


def test_from_text_rejects_other_lines():
    with pytest.raises(MalformedInputError):
        MotionEffect.from_text("* NEEDS ADR", 25)


def test_from_record_accepts_serialized_form():
    effect = MotionEffect.from_record(
        {"reel": "BX", "speed": -25.0, "entryPoint": "02:00:01:00"}, 25
    )
    assert isinstance(effect.entry_point, Timecode)
    assert effect.speed == -25.0


def test_from_record_missing_field():
    with pytest.raises(ValidationError):
        MotionEffect.from_record({"reel": "BX"}, 25)


def test_from_input_rejects_numbers():
    with pytest.raises(InvalidConstructionSourceError):
        MotionEffect.from_input(42)


@pytest.mark.parametrize("value", ["M2 BX fast 02:00:00:00", 42, {"reel": "BX"}, None])
def test_try_from_input_returns_none_when_malformed(value):
    assert MotionEffect.try_from_input(value, 25) is None


def test_to_json_renders_entry_point():
    effect = MotionEffect.from_text(M2_LINE, 25)
    assert effect.to_json() == {"reel": "BX", "speed": 50.0, "entryPoint": "02:00:00:00"}
    assert isinstance(effect.entry_point, Timecode)
