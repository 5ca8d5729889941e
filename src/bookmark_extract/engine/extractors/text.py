"""Plain text bookmark extractor."""

import logging
from pathlib import Path
from typing import Iterator, Optional

from ... import capabilities
from ...errors import SourceIOError
from ...schema import Record, SourceKind
from .base import Extractor
from .uri import URIMatcher

logger = logging.getLogger(__name__)


class TextExtractor(Extractor):
    """Reads ``title URL description`` lines from plain text files."""

    kind = SourceKind.PLAIN_TEXT
    suffix = ".txt"
    requires = (capabilities.URI_MATCHER,)

    def __init__(self, schemeless: bool = False):
        self.matcher = URIMatcher(schemeless=schemeless)

    def parse_line(self, line: str) -> Optional[Record]:
        """Split a line around its first URL. Lines without one give None."""
        match = self.matcher.find(line)
        if match is None:
            return None
        return Record(
            title=line[: match.start()].strip(),
            url=match.group(),
            description=line[match.end():].strip(),
        )

    def extract(self, path: Path) -> Iterator[Record]:
        try:
            with path.open(encoding="utf-8") as f:
                for lineno, line in enumerate(f, start=1):
                    record = self.parse_line(line)
                    if record is None:
                        logger.debug(f"[TEXT] {path.name}:{lineno}: no URL, skipped")
                        continue
                    yield record
        except (OSError, UnicodeDecodeError) as e:
            raise SourceIOError(f"cannot read {path}: {e}", path) from e
