"""gocov2lcov CLI."""

from __future__ import annotations

from pathlib import Path

import click
import structlog

from gocov2lcov import __version__
from gocov2lcov.config.loader import load_config
from gocov2lcov.core.errors import Gocov2LcovError
from gocov2lcov.core.logging import configure_logging
from gocov2lcov.coverage.convert import read_profile
from gocov2lcov.coverage.lcov import emit
from gocov2lcov.coverage.report import build_text_summary, compute_file_stats


@click.command()
@click.version_option(version=__version__, prog_name="gocov2lcov")
@click.option(
    "--coverin",
    "infile",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Go coverage profile to read. Defaults to stdin.",
)
@click.option(
    "--lcovout",
    "outfile",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    default=None,
    help="LCOV file to write. Defaults to stdout.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="YAML config file.",
)
@click.option("--summary", is_flag=True, help="Print a coverage summary to stderr")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(
    infile: Path | None,
    outfile: Path | None,
    config_path: Path | None,
    summary: bool,
    verbose: bool,
) -> None:
    """Convert a Go coverage profile into an LCOV tracefile.

    File paths are resolved with `go list -find` from the current directory
    and written relative to their repository root when one is found.
    """
    try:
        config = load_config(config_path)
    except Gocov2LcovError as e:
        raise click.ClickException(str(e)) from e

    try:
        configure_logging(config.logging, verbose=verbose, stdout_reserved=outfile is None)
    except Gocov2LcovError as e:
        raise click.ClickException(str(e)) from e
    structlog.contextvars.bind_contextvars(profile=str(infile) if infile else "<stdin>")

    try:
        if infile is None:
            grouping = read_profile(click.get_binary_stream("stdin"), config=config)
        else:
            with infile.open("rb") as src:
                grouping = read_profile(src, config=config)
    except Gocov2LcovError as e:
        raise click.ClickException(str(e)) from e

    try:
        if outfile is None:
            emit(grouping, click.get_binary_stream("stdout"))
        else:
            with outfile.open("wb") as dst:
                emit(grouping, dst)
    except OSError as e:
        raise click.ClickException(f"Failed to write LCOV output: {e}") from e

    if summary:
        for stats in compute_file_stats(grouping):
            click.echo(
                f"  {stats['path']}: {stats['coverage_percent']:.1f}% "
                f"({stats['lines_hit']}/{stats['lines_found']} lines)",
                err=True,
            )
        click.echo(build_text_summary(grouping), err=True)


if __name__ == "__main__":
    cli()
