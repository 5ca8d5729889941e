"""Markdown link extractor."""

import logging
import re
from pathlib import Path
from typing import Iterator, Optional

from ...errors import SourceIOError
from ...schema import Record, SourceKind
from .base import Extractor

logger = logging.getLogger(__name__)

# Image links (![alt](src)) are not bookmarks. URLs may hold one level of
# balanced parentheses, as in Wikipedia article links.
LINK_PATTERN = re.compile(
    r"(?<!!)\[(?P<title>[^\]]*)\]"
    r"\((?P<url>(?:[^()\s]|\([^()\s]*\))+)\)"
    r"(?P<description>.*)"
)


class MarkdownExtractor(Extractor):
    """Reads ``[title](url) description`` lines from markdown files."""

    kind = SourceKind.MARKDOWN
    suffix = ".md"

    def parse_line(self, line: str) -> Optional[Record]:
        match = LINK_PATTERN.search(line)
        if match is None:
            return None
        return Record(
            title=match.group("title").strip(),
            url=match.group("url"),
            description=match.group("description").strip(),
        )

    def extract(self, path: Path) -> Iterator[Record]:
        try:
            with path.open(encoding="utf-8") as f:
                for lineno, line in enumerate(f, start=1):
                    record = self.parse_line(line)
                    if record is None:
                        logger.debug(f"[MARKDOWN] {path.name}:{lineno}: no link, skipped")
                        continue
                    yield record
        except (OSError, UnicodeDecodeError) as e:
            raise SourceIOError(f"cannot read {path}: {e}", path) from e
