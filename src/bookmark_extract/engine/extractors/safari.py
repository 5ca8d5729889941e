"""Safari ``Bookmarks.plist`` extractor."""

import logging
import plistlib
from pathlib import Path
from typing import Any, Iterator, Optional
from xml.parsers.expat import ExpatError

from ... import capabilities
from ...errors import ParseError, SourceIOError
from ...schema import Record, SourceKind
from .base import Extractor

logger = logging.getLogger(__name__)

URL_KEY = "URLString"
TITLE_KEY = "title"
DESCRIPTION_KEY = "PreviewText"


def load_plist(path: Path) -> Any:
    """Decode a binary or XML property list into Python objects."""
    try:
        with path.open("rb") as f:
            data = f.read()
    except OSError as e:
        raise SourceIOError(f"cannot read {path}: {e}", path) from e

    if not data.strip():
        raise ParseError(f"empty property list: {path}", path)

    try:
        tree = plistlib.loads(data)
    except (plistlib.InvalidFileException, ExpatError, ValueError, TypeError, OverflowError) as e:
        raise ParseError(f"invalid property list {path}: {e}", path) from e

    return tree


def find_string(node: dict, key: str) -> Optional[str]:
    """Case-insensitive lookup of ``key``, own keys first, then nested dicts.

    Only the first string value found is returned.
    """
    wanted = key.lower()
    for name, value in node.items():
        if name.lower() == wanted and isinstance(value, str):
            return value
    for value in node.values():
        if isinstance(value, dict):
            found = find_string(value, key)
            if found is not None:
                return found
    return None


def walk_leaves(node: Any) -> Iterator[dict]:
    """Depth-first walk yielding every dict that carries a URL string."""
    if isinstance(node, dict):
        if isinstance(node.get(URL_KEY), str):
            yield node
            return
        for value in node.values():
            yield from walk_leaves(value)
    elif isinstance(node, list):
        for item in node:
            yield from walk_leaves(item)


class SafariExtractor(Extractor):
    """Extracts bookmark leaves, including Reading List items, from Safari."""

    kind = SourceKind.SAFARI_PLIST
    suffix = ".plist"
    requires = (capabilities.PLIST_DECODER,)

    def extract(self, path: Path) -> Iterator[Record]:
        tree = load_plist(path)
        logger.debug(f"[SAFARI] Decoded {path.name} ({type(tree).__name__} root)")
        for leaf in walk_leaves(tree):
            yield Record(
                title=find_string(leaf, TITLE_KEY) or "",
                url=leaf[URL_KEY],
                description=find_string(leaf, DESCRIPTION_KEY) or "",
            )
