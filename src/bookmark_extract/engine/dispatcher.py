"""Classification of input paths and routing to extractors."""

import logging
from pathlib import Path
from typing import Iterator, Optional, Sequence

from ..capabilities import CapabilityRegistry, default_registry
from ..errors import ClassificationError
from ..schema import Record, Source
from .extractors import (
    ChromeExtractor,
    Extractor,
    FavoritesExtractor,
    FirefoxExtractor,
    MarkdownExtractor,
    SafariExtractor,
    TextExtractor,
)

logger = logging.getLogger(__name__)


def default_extractors(
    schemeless: bool = False,
    temp_dir: Optional[Path] = None,
    favorites_encoding: str = "utf-8-sig",
) -> list[Extractor]:
    """Built-in extractors in classification order (first match wins)."""
    return [
        SafariExtractor(),
        FirefoxExtractor(temp_dir=temp_dir),
        ChromeExtractor(),
        FavoritesExtractor(encoding=favorites_encoding),
        TextExtractor(schemeless=schemeless),
        MarkdownExtractor(),
    ]


class Dispatcher:
    """Picks the extractor for a path and checks its capabilities."""

    def __init__(
        self,
        extractors: Optional[Sequence[Extractor]] = None,
        registry: Optional[CapabilityRegistry] = None,
    ):
        self.extractors = list(extractors) if extractors is not None else default_extractors()
        self.registry = registry if registry is not None else default_registry()

    def _get_extractor(self, path: Path) -> Optional[Extractor]:
        """Find the first extractor that can handle this path."""
        for extractor in self.extractors:
            if extractor.can_handle(path):
                return extractor
        return None

    def classify(self, path: Path) -> Source:
        """Classify ``path`` by name and file/directory kind.

        Raises:
            ClassificationError: If no extractor matches.
        """
        extractor = self._get_extractor(path)
        if extractor is None:
            raise ClassificationError(path)
        return Source(path=path, kind=extractor.kind, is_directory=extractor.directory)

    def dispatch(self, path: Path) -> Iterator[Record]:
        """Classify ``path`` and return its extractor's record iterator."""
        extractor = self._get_extractor(path)
        if extractor is None:
            raise ClassificationError(path)

        self.registry.require(extractor.requires, path)
        logger.debug(f"[DISPATCH] {path} -> {extractor.__class__.__name__}")
        return extractor.extract(path)
