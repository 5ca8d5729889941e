"""Extraction engine."""

from .dispatcher import Dispatcher, default_extractors
from .processor import Processor

__all__ = ["Dispatcher", "Processor", "default_extractors"]
