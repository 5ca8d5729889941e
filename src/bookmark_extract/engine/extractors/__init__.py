"""Bookmark extractors for different source formats."""

from .base import Extractor
from .chrome import ChromeExtractor
from .favorites import FavoritesExtractor
from .firefox import FirefoxExtractor
from .markdown import MarkdownExtractor
from .safari import SafariExtractor
from .text import TextExtractor

__all__ = [
    "Extractor",
    "ChromeExtractor",
    "FavoritesExtractor",
    "FirefoxExtractor",
    "MarkdownExtractor",
    "SafariExtractor",
    "TextExtractor",
]
