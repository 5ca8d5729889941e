"""bookmark-extract: bookmarks from browser profiles and text files as one line per record."""

__version__ = "0.1.0"
