"""CLI interface for genericfile.

Command-line tool for parsing and relating generic file paths.
"""

import json
import logging
import sys
from pathlib import Path
from typing import NoReturn

import click

from genericfile.config import LOG_LEVELS, OUTPUT_FORMATS, Config
from genericfile.core.exceptions import GenericFileError
from genericfile.core.info import PathInfo
from genericfile.core.path import GenericFilePath

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@click.group()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path, dir_okay=False),
    default=None,
    help="Path to configuration file (default: auto-discover genericfile.toml)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, verbose: bool) -> None:
    """genericfile - provider-agnostic file paths."""
    try:
        config = Config.load(config_path)
    except (FileNotFoundError, ValueError) as e:
        _fail(e)

    if verbose:
        config = config.with_overrides(log_level="DEBUG")

    _configure_logging(config.logging.level)
    if config.config_path is not None:
        logger.debug(f"Loaded configuration from {config.config_path}")

    ctx.obj = config


@cli.command()
@click.argument("paths", nargs=-1, required=True)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default=None,
    help="Output format (overrides config, default: text)",
)
@click.pass_obj
def inspect(config: Config, paths: tuple[str, ...], output_format: str | None) -> None:
    """Describe the components of each PATH."""
    config = config.with_overrides(output_format=output_format)
    infos = [PathInfo.from_path(_parse(raw)) for raw in paths]

    if config.output.format == "json":
        click.echo(json.dumps([info.to_dict() for info in infos], indent=2))
        return

    for i, info in enumerate(infos):
        if i:
            click.echo()
        _print_info(info)


@cli.command()
@click.argument("path")
def parent(path: str) -> None:
    """Print the parent of PATH."""
    parsed = _parse(path)
    parent_path = parsed.parent
    if parent_path is None:
        _fail("The null path has no parent")
    click.echo(str(parent_path))


@cli.command()
@click.argument("path")
def ancestors(path: str) -> None:
    """Print the ancestors of PATH, nearest first."""
    current = _parse(path).parent
    while current is not None and not current.is_null:
        click.echo(str(current))
        current = current.parent


@cli.command()
@click.argument("path")
@click.argument("segment")
def child(path: str, segment: str) -> None:
    """Print the child SEGMENT of PATH."""
    try:
        child_path = _parse(path).child(segment)
    except GenericFileError as e:
        _fail(e)
    click.echo(str(child_path))


@cli.command()
@click.argument("path")
@click.argument("base")
def relative(path: str, base: str) -> None:
    """Print the segments of PATH beyond BASE, one per line."""
    segments = _parse(path).relative_segments(_parse(base))
    if segments is None:
        _fail(f"{path!r} is not contained in {base!r}")
    for segment in segments:
        click.echo(segment)


@cli.command()
@click.argument("path")
@click.argument("other")
def contains(path: str, other: str) -> None:
    """Print whether PATH equals, or is an ancestor of, OTHER."""
    result = _parse(path).contains(_parse(other))
    click.echo("true" if result else "false")


@cli.command()
@click.argument("paths", nargs=-1, required=True)
def validate(paths: tuple[str, ...]) -> None:
    """Check that each PATH is valid."""
    invalid = 0
    for raw in paths:
        try:
            GenericFilePath.parse(raw)
        except GenericFileError as e:
            logger.debug(f"Rejected {raw!r}: {e}")
            invalid += 1
            click.echo(f"{raw}: " + click.style("invalid", fg="red"))
        else:
            click.echo(f"{raw}: " + click.style("valid", fg="green"))

    if invalid:
        sys.exit(1)


@cli.command()
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@click.pass_obj
def serve(config: Config, host: str | None, port: int | None) -> None:
    """Start the path inspection server."""
    from genericfile.server import run_server

    config = config.with_overrides(host=host, port=port)
    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    run_server(config)


def _parse(raw: str) -> GenericFilePath:
    """Parse a command argument, exiting with an error if it is invalid."""
    try:
        return GenericFilePath.parse(raw)
    except GenericFileError as e:
        _fail(e)


def _fail(error: Exception | str) -> NoReturn:
    click.echo(click.style(f"Error: {error}", fg="red"), err=True)
    sys.exit(1)


def _print_info(info: PathInfo) -> None:
    """Print a path description as aligned text."""
    rows = [
        ("path", info.path if not info.is_null else "(null)"),
        ("root segment", info.root_segment or "-"),
        ("scheme", info.scheme or "-"),
        ("segments", ", ".join(info.non_root_segments) or "-"),
        ("parent", "-" if info.parent is None else info.parent or "(null)"),
    ]
    for label, value in rows:
        click.echo(f"{label + ':':<14}{value}")


def _configure_logging(level: str) -> None:
    """Attach a stderr handler to the package logger."""
    if level not in LOG_LEVELS:
        level = "WARNING"

    package_logger = logging.getLogger("genericfile")
    package_logger.setLevel(level)

    for handler in list(package_logger.handlers):
        handler.close()
    package_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)


if __name__ == "__main__":
    cli()
