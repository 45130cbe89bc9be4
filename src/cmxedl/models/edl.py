"""EDL document model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from cmxedl.models.event import Event


class EDL(BaseModel):
    """A parsed CMX 3600 edit decision list."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str | None = None
    frame_code_mode: str | None = None  # DROP FRAME | NON-DROP FRAME
    events: list[Event] = Field(default_factory=list)

    @property
    def tracks(self) -> list[str]:
        """Distinct track codes used by the events, in order of appearance."""
        seen: list[str] = []
        for event in self.events:
            code = f"{event.track_type or ''}{event.track_number or ''}"
            if code and code not in seen:
                seen.append(code)
        return seen

    def to_json(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "frameCodeMode": self.frame_code_mode,
            "events": [event.to_json() for event in self.events],
        }
