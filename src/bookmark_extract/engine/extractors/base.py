"""Base extractor interface."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import ClassVar, Iterator

from ...schema import Record, SourceKind


class Extractor(ABC):
    """Base class for bookmark extractors.

    Subclasses declare the source kind they produce, the suffix their input
    name must end with, whether that input is a directory, and the names of
    the capabilities they need (see ``bookmark_extract.capabilities``).
    """

    kind: ClassVar[SourceKind]
    suffix: ClassVar[str]
    directory: ClassVar[bool] = False
    requires: ClassVar[tuple[str, ...]] = ()

    def can_handle(self, path: Path) -> bool:
        """Check if this extractor can handle the given path."""
        if not path.name.endswith(self.suffix):
            return False
        return path.is_dir() if self.directory else path.is_file()

    @abstractmethod
    def extract(self, path: Path) -> Iterator[Record]:
        """Yield the bookmark records stored at ``path``."""
        pass
