"""cmxedl event — parse a single event line."""

from __future__ import annotations

import click
from pydantic import ValidationError
from rich.markup import escape

from cmxedl.cli.options import (
    config_option,
    record_rate_option,
    resolve_config,
    source_rate_option,
)
from cmxedl.errors import EDLError
from cmxedl.models.event import Event
from cmxedl.utils.progress import log_error, log_warning


@click.command()
@click.argument("line")
@config_option
@source_rate_option
@record_rate_option
@click.option(
    "--comment",
    "comments",
    multiple=True,
    help="Comment line to attach (repeatable)",
)
@click.option("--motion-effect", default=None, help="M2 line to attach")
def event_cmd(
    line: str,
    config_path: str,
    source_rate: float | None,
    record_rate: float | None,
    comments: tuple[str, ...],
    motion_effect: str | None,
) -> None:
    """Parse one event LINE and print it as JSON."""
    try:
        config = resolve_config(config_path, source_rate, record_rate)
        event = Event.from_text(line, config.source_frame_rate, config.record_frame_rate)
    except (EDLError, ValidationError) as e:
        log_error(escape(str(e)))
        raise SystemExit(1)

    for comment in comments:
        event.add_comment(comment)

    if motion_effect and not event.set_motion_effect(motion_effect, config.source_frame_rate):
        log_warning(f"Ignoring malformed motion effect: {escape(motion_effect)}")

    click.echo(event.to_json(stringify=True))
