"""CLI command for ulid-uuid."""

import logging
import sys
from pathlib import Path

import click

from ulid_uuid import ConversionError, IdentifierConverter
from ulid_uuid.config import Config

logger = logging.getLogger(__name__)

MISSING_ARGUMENT = "Please give one Parameter to convert!"


def load_config(config_path: Path | None) -> Config:
    """Load config from an explicit path, a discovered file, or the environment."""
    if config_path is not None:
        return Config.from_toml(config_path)

    try:
        return Config.find_and_load()
    except FileNotFoundError:
        return Config()


@click.command(
    name="ulid_uuid",
    options_metavar="[-hn]",
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.argument("value", required=False, metavar="[UUID|GUID|ULID]")
@click.option("-n", "--no-newline", is_flag=True, help="Do not print the trailing newline")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to ulid-uuid.toml",
)
@click.version_option(package_name="ulid-uuid")
def cli(value: str | None, no_newline: bool, config_path: Path | None) -> None:
    """Convert a ULID to a UUID, or a UUID/GUID to a ULID."""
    try:
        config = load_config(config_path)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    logging.basicConfig(level=config.log.level, format=config.log.format)

    if value is None:
        click.echo(MISSING_ARGUMENT, err=True)
        sys.exit(1)

    try:
        converted = IdentifierConverter().convert(value)
    except ConversionError as e:
        click.echo(str(e), err=True)
        sys.exit(1)

    logger.debug(f"Converted {value!r} to {converted!r}")
    click.echo(converted, nl=config.output.trailing_newline and not no_newline)


if __name__ == "__main__":
    cli()
