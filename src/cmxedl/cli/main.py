"""Root CLI group for cmxedl."""

from __future__ import annotations

import click

from cmxedl import __version__


@click.group()
@click.version_option(version=__version__, prog_name="cmxedl")
def cli() -> None:
    """cmxedl — read CMX 3600 edit decision lists into JSON."""


# Import and register subcommands
from cmxedl.cli.event_cmd import event_cmd  # noqa: E402
from cmxedl.cli.parse_cmd import parse_cmd  # noqa: E402
from cmxedl.cli.summary_cmd import summary_cmd  # noqa: E402

cli.add_command(parse_cmd, "parse")
cli.add_command(event_cmd, "event")
cli.add_command(summary_cmd, "summary")
