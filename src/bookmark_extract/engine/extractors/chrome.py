"""Chromium ``Bookmarks`` JSON extractor."""

import json
import logging
from pathlib import Path
from typing import Any, Iterator

from ... import capabilities
from ...errors import ParseError, SourceIOError
from ...schema import Record, SourceKind
from .base import Extractor

logger = logging.getLogger(__name__)

ROOT_FOLDERS = ("bookmark_bar", "other")


class ChromeExtractor(Extractor):
    """Extracts bookmarks from Chrome, Chromium, Edge and Brave profiles.

    Only the direct children of the bookmark bar and the "Other bookmarks"
    folder are read. Entries inside subfolders are not visited.
    """

    kind = SourceKind.CHROME_JSON
    suffix = "Bookmarks"
    requires = (capabilities.JSON_DECODER,)

    def load(self, path: Path) -> Any:
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SourceIOError(f"cannot read {path}: {e}", path) from e
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise ParseError(f"invalid JSON in {path}: {e}", path) from e

    def extract(self, path: Path) -> Iterator[Record]:
        data = self.load(path)
        if not isinstance(data, dict):
            raise ParseError(f"unexpected bookmarks layout in {path}: top level is not an object", path)
        roots = data.get("roots", {})
        if not isinstance(roots, dict):
            raise ParseError(f"unexpected bookmarks layout in {path}: 'roots' is not an object", path)

        for root_key in ROOT_FOLDERS:
            root = roots.get(root_key)
            if not isinstance(root, dict):
                logger.debug(f"[CHROME] {path.name}: no '{root_key}' folder")
                continue
            children = root.get("children", [])
            if not isinstance(children, list):
                raise ParseError(
                    f"unexpected bookmarks layout in {path}: '{root_key}' children is not a list", path
                )
            for child in children:
                if not isinstance(child, dict):
                    continue
                yield Record(
                    title=child.get("name") or "",
                    url=child.get("url") or "",
                )
