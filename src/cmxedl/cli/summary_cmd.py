"""cmxedl summary — tabulate the events of an EDL file."""

from __future__ import annotations

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cmxedl.cli.options import (
    config_option,
    record_rate_option,
    resolve_config,
    source_rate_option,
)
from cmxedl.errors import EDLError
from cmxedl.reader import read_edl_file
from cmxedl.utils.progress import log_error

console = Console()


@click.command()
@click.argument("edl_file", type=click.Path(exists=True, dir_okay=False))
@config_option
@source_rate_option
@record_rate_option
def summary_cmd(
    edl_file: str,
    config_path: str,
    source_rate: float | None,
    record_rate: float | None,
) -> None:
    """Show the events of EDL_FILE as a table."""
    try:
        config = resolve_config(config_path, source_rate, record_rate)
        edl = read_edl_file(edl_file, config)
    except (EDLError, ValidationError) as e:
        log_error(escape(f"Could not read {edl_file}: {e}"))
        raise SystemExit(1)

    console.print(f"\n[bold]{escape(edl.title or 'Untitled')}[/bold]")
    console.print(f"[dim]{edl.frame_code_mode or 'FCM not set'}[/dim]")
    console.print(f"Events: {len(edl.events)}  Tracks: {', '.join(edl.tracks) or '—'}")
    console.print()

    table = Table(show_lines=False)
    table.add_column("#", justify="right")
    table.add_column("Reel")
    table.add_column("Track")
    table.add_column("Trans")
    table.add_column("Src In")
    table.add_column("Src Out")
    table.add_column("Rec In")
    table.add_column("Rec Out")
    table.add_column("Notes")

    for event in edl.events:
        track = f"{event.track_type or ''}{event.track_number or ''}"
        notes = event.source_clip or event.source_file or event.comment or ""
        if event.motion_effect is not None:
            notes = f"M2 {event.motion_effect.speed:g}fps {notes}".strip()
        table.add_row(
            str(event.number),
            escape(event.reel or ""),
            track,
            escape(event.transition or ""),
            _tc(event.source_start),
            _tc(event.source_end),
            _tc(event.record_start),
            _tc(event.record_end),
            escape(notes[:50]),
        )

    console.print(table)
    console.print()


def _tc(value: object) -> str:
    return "—" if value is None else str(value)
