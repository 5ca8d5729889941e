"""bookmark-extract CLI."""

import os
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from . import __version__
from .config import get_settings
from .engine import Dispatcher, Processor, default_extractors
from .errors import BookmarkExtractError
from .logging_config import setup_colored_logging
from .paths import default_paths
from .printer import FORMAT_SPECS, Printer

ERROR_EXIT_CODE = 2


def _use_utf8_console() -> None:
    """Windows consoles default to a legacy codepage; bookmark titles need UTF-8."""
    if sys.platform == "win32" and hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8")


def _silence_stdout() -> None:
    """Point stdout at devnull so the interpreter's final flush cannot fail again."""
    try:
        fd = sys.stdout.fileno()
    except (OSError, ValueError):
        # No file descriptor behind stdout (captured output); nothing to redirect.
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)
    os.close(devnull)


@click.command()
@click.argument("paths", nargs=-1, type=click.Path(path_type=Path))
@click.option(
    "-f",
    "--format",
    "format_spec",
    default=None,
    metavar="SPEC",
    help="Fields to print, in order: any arrangement of t(itle), u(rl), d(escription). Default: tud",
)
@click.option("-s", "--schemeless", is_flag=True, help="Also treat bare host names in .txt files as URLs")
@click.option("--list-formats", is_flag=True, help="Print the recognized format specs and exit")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@click.version_option(__version__, prog_name="bookmark-extract")
def cli(paths, format_spec, schemeless, list_formats, verbose):
    """Print bookmarks from browser profiles and text files, one per line.

    PATHS may be Safari .plist files, Firefox .sqlite databases, Chromium
    "Bookmarks" files, Internet Explorer "Favorites" folders, .txt files and
    .md files. Without PATHS the default browser locations of this system
    are searched.

    A successful run exits with status 1 unless
    BOOKMARK_EXTRACT_SUCCESS_EXIT_CODE says otherwise; errors exit with 2.
    """
    if list_formats:
        for spec in FORMAT_SPECS:
            click.echo(spec)
        return

    setup_colored_logging(verbose)

    try:
        settings = get_settings()
    except ValidationError as e:
        click.echo(f"Error loading settings: {e}", err=True)
        sys.exit(ERROR_EXIT_CODE)

    _use_utf8_console()

    try:
        printer = Printer(format_spec or settings.format, stream=sys.stdout)
        dispatcher = Dispatcher(
            default_extractors(
                schemeless=schemeless or settings.schemeless,
                temp_dir=settings.temp_dir,
                favorites_encoding=settings.favorites_encoding,
            )
        )

        targets = list(paths) or default_paths()
        if not targets:
            raise BookmarkExtractError("no bookmark sources found in the default locations")

        Processor(dispatcher, printer).run(targets)
        sys.stdout.flush()
    except BrokenPipeError:
        # The reader (e.g. head) stopped early; that is not an error.
        _silence_stdout()
        sys.exit(settings.success_exit_code)
    except BookmarkExtractError as e:
        sys.stdout.flush()
        click.echo(f"Error: {e}", err=True)
        sys.exit(ERROR_EXIT_CODE)

    sys.exit(settings.success_exit_code)


if __name__ == "__main__":
    cli()
