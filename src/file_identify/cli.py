"""Command line interface for file-identify."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, NoReturn

import click
from rich.console import Console
from rich.logging import RichHandler

from file_identify.config import ConfigError, ConfigManager, FileIdentifyConfig
from file_identify.detection import FileIdentifier, tags_from_filename
from file_identify.errors import IdentifyError

LOGGER = logging.getLogger(__name__)

err_console = Console(stderr=True)


def _configure_logging(level: str) -> None:
    """Route library logging through rich on stderr at the requested level.

    Args:
        level: Logging level name such as ``DEBUG`` or ``WARNING``.

    Raises:
        click.ClickException: If the level name is not recognized.
    """
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise click.ClickException(f"Unknown log level: {level}")

    logger = logging.getLogger("file_identify")
    logger.handlers.clear()
    logger.addHandler(RichHandler(console=err_console, show_path=False))
    logger.setLevel(numeric)


def _load_config(config_path: str | None, cli_overrides: dict[str, Any]) -> FileIdentifyConfig:
    manager = ConfigManager(Path(config_path) if config_path else None)
    return manager.load(cli_overrides=cli_overrides)


def _handle_cli_error(message: str, *, original: Exception | None = None) -> NoReturn:
    """Surface an error on stderr and terminate with a non-zero status.

    Raises:
        click.ClickException: Always, chained to ``original`` when given.
    """
    raise click.ClickException(message) from original


@click.command(
    "file-identify",
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(package_name="file-identify", prog_name="file-identify")
@click.argument("path", type=str)
@click.option(
    "--filename-only",
    is_flag=True,
    help="Only use the filename for identification (don't read file contents).",
)
@click.option(
    "--skip-content-analysis",
    is_flag=True,
    help="Do not sniff file contents for text versus binary.",
)
@click.option(
    "--skip-shebang-analysis",
    is_flag=True,
    help="Do not parse shebang lines of executable files.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=str),
    help="Read settings from this configuration file.",
)
@click.option("--log-level", type=str, help="Override the configured logging level.")
def cli(
    path: str,
    filename_only: bool,
    skip_content_analysis: bool,
    skip_shebang_analysis: bool,
    config_path: str | None,
    log_level: str | None,
) -> None:
    """File identification tool - determines file types based on extensions, content, and shebangs.

    Prints the tags for PATH as a sorted JSON array. Exits with status 1 when
    no tags apply or PATH cannot be identified.
    """
    overrides: dict[str, Any] = {}
    if skip_content_analysis:
        overrides["identify.skip_content_analysis"] = True
    if skip_shebang_analysis:
        overrides["identify.skip_shebang_analysis"] = True
    if log_level:
        overrides["logging.level"] = log_level

    try:
        config = _load_config(config_path, overrides)
    except ConfigError as exc:
        _handle_cli_error(str(exc), original=exc)

    _configure_logging(config.logging.level)

    try:
        if filename_only:
            tags = tags_from_filename(path)
        else:
            identifier = FileIdentifier(config.identify.to_options())
            tags = identifier.identify(path)
    except IdentifyError as exc:
        _handle_cli_error(str(exc), original=exc)
    except OSError as exc:
        _handle_cli_error(f"IO error: {exc}", original=exc)

    if not tags:
        LOGGER.debug("No tags identified for %s", path)
        raise SystemExit(1)

    click.echo(json.dumps(sorted(tags)))


__all__ = ["cli"]
