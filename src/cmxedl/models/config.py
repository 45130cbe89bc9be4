"""Reader configuration."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from cmxedl.models.timecode import DEFAULT_FRAME_RATE
from cmxedl.utils.io import read_yaml


class ParserConfig(BaseModel):
    """Configuration for reading EDL documents."""

    source_frame_rate: float = Field(default=DEFAULT_FRAME_RATE, gt=0)
    record_frame_rate: float = Field(default=DEFAULT_FRAME_RATE, gt=0)
    strict: bool = False  # raise on unrecognized lines instead of skipping them


def load_config(path: Path | str | None = None) -> ParserConfig:
    """Load a ParserConfig from YAML, or the defaults if there is no file."""
    if path is None or not Path(path).exists():
        return ParserConfig()
    return ParserConfig(**read_yaml(path))
