"""Options shared by the EDL reading commands."""

from __future__ import annotations

import click

from cmxedl.models.config import ParserConfig, load_config

config_option = click.option(
    "--config", "-c", "config_path",
    default="cmxedl.yaml",
    type=click.Path(),
    help="Path to a cmxedl.yaml config (defaults apply if it does not exist)",
)
source_rate_option = click.option(
    "--source-rate",
    default=None,
    type=float,
    help="Frame rate of source timecodes (overrides config)",
)
record_rate_option = click.option(
    "--record-rate",
    default=None,
    type=float,
    help="Frame rate of record timecodes (overrides config)",
)


def resolve_config(
    config_path: str,
    source_rate: float | None,
    record_rate: float | None,
    strict: bool | None = None,
) -> ParserConfig:
    """Load the config file and apply command-line overrides."""
    config = load_config(config_path)
    overrides = {
        "source_frame_rate": source_rate,
        "record_frame_rate": record_rate,
        "strict": strict,
    }
    return config.model_copy(
        update={k: v for k, v in overrides.items() if v is not None}
    )
