"""Pydantic data models for cmxedl."""

from cmxedl.models.config import ParserConfig, load_config
from cmxedl.models.edl import EDL
from cmxedl.models.event import Event
from cmxedl.models.motion_effect import MotionEffect

__all__ = [
    "EDL",
    "Event",
    "MotionEffect",
    "ParserConfig",
    "load_config",
]
