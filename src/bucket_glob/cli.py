"""Command-line interface for bucket-glob.

Lists the objects of a bucket whose keys match a glob pattern:

    bucket-glob "gs://my-bucket/logs/**/*.log"
    bucket-glob "s3://my-bucket/data/*.csv"

Credentials are discovered by the storage client libraries. Matches are
printed on stdout; errors and logs go to stderr.
"""

import sys
from typing import Annotated, Optional, Sequence

import typer

from . import __version__
from .core import get_logger, settings
from .core.exceptions import BucketGlobError
from .unified import search

logger = get_logger(__name__)

NO_MATCH_MESSAGE = "No objects found matching the pattern."

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

app = typer.Typer(
    name="bucket-glob",
    help="List bucket objects whose keys match a glob pattern.",
    add_completion=False,
    context_settings=CONTEXT_SETTINGS,
)


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        typer.echo(f"bucket-glob {__version__}")
        raise typer.Exit()


@app.command(context_settings=CONTEXT_SETTINGS)
def list_cmd(
    path: Annotated[
        str,
        typer.Argument(
            help="Path with glob pattern, e.g. gs://bucket/logs/**/*.log",
            show_default=False,
        ),
    ],
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version.",
        ),
    ] = None,
) -> None:
    """
    List objects whose keys match a glob pattern.

    Patterns support * (within one path segment), ** (any number of
    segments), ? (one character), [...] classes and {a,b} alternatives.
    A path naming only a bucket lists every object in it.

    Example: bucket-glob "gs://my-bucket/logs/**/*.log"
    """
    found = False
    try:
        for uri in search(path, config=settings):
            typer.echo(uri)
            found = True

    except BucketGlobError as e:
        logger.error("Search failed", path=path, error=str(e))
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if not found:
        typer.echo(NO_MATCH_MESSAGE)


def run(args: Optional[Sequence[str]] = None) -> None:
    """Console entry point.

    Usage errors exit with status 1 rather than the default of 2.
    """
    try:
        app(args=list(args) if args is not None else None, prog_name="bucket-glob")
    except SystemExit as e:
        sys.exit(1 if e.code == 2 else e.code)


if __name__ == "__main__":
    run()
