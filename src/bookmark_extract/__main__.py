"""Entry point for `python -m bookmark_extract`."""

from .cli import cli

if __name__ == "__main__":
    cli(prog_name="bookmark-extract")
