"""cmxedl parse — convert an EDL file to JSON."""

from __future__ import annotations

import json
from pathlib import Path

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
from cmxedl.reader import read_edl_file
from cmxedl.utils.io import write_json
from cmxedl.utils.progress import log_error, log_success


@click.command()
@click.argument("edl_file", type=click.Path(exists=True, dir_okay=False))
@config_option
@source_rate_option
@record_rate_option
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Fail on unrecognized lines instead of skipping them",
)
@click.option(
    "--output", "-o",
    default=None,
    type=click.Path(dir_okay=False),
    help="Write JSON here instead of stdout",
)
def parse_cmd(
    edl_file: str,
    config_path: str,
    source_rate: float | None,
    record_rate: float | None,
    strict: bool | None,
    output: str | None,
) -> None:
    """Read EDL_FILE and print it as JSON."""
    try:
        config = resolve_config(config_path, source_rate, record_rate, strict)
        edl = read_edl_file(edl_file, config)
    except (EDLError, ValidationError) as e:
        log_error(escape(f"Could not read {edl_file}: {e}"))
        raise SystemExit(1)

    data = edl.to_json()
    if output is None:
        click.echo(json.dumps(data, indent=2))
        return

    output_path = Path(output).resolve()
    write_json(output_path, data)
    log_success(f"Wrote {len(edl.events)} event(s) to {output_path}")
