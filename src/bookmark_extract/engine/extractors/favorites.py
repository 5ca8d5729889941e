"""Internet Explorer / legacy Edge favorites folder extractor."""

import configparser
import logging
import os
from pathlib import Path
from typing import Iterator, Optional

from ... import capabilities
from ...errors import SourceIOError
from ...schema import Record, SourceKind
from .base import Extractor

logger = logging.getLogger(__name__)

SHORTCUT_SECTION = "InternetShortcut"
SHORTCUT_EXTENSION = ".url"


def shortcut_title(path: Path) -> str:
    """File name without its ``.url`` extension."""
    name = path.name
    if name.lower().endswith(SHORTCUT_EXTENSION):
        return name[: -len(SHORTCUT_EXTENSION)]
    return name


class FavoritesExtractor(Extractor):
    """Reads every internet shortcut below a ``Favorites`` directory."""

    kind = SourceKind.IE_FAVORITES
    suffix = "Favorites"
    directory = True
    requires = (
        capabilities.WINDOWS_FAVORITES,
        capabilities.DIRECTORY_WALKER,
        capabilities.INI_PARSER,
    )

    def __init__(self, encoding: str = "utf-8-sig"):
        self.encoding = encoding

    def read_shortcut(self, path: Path) -> Optional[str]:
        """Return the shortcut's URL, or None if the file is not a shortcut."""
        parser = configparser.ConfigParser(interpolation=None, strict=False)
        try:
            with path.open(encoding=self.encoding) as f:
                parser.read_file(f)
        except (configparser.Error, UnicodeDecodeError, OSError) as e:
            logger.debug(f"[FAVORITES] Skipping {path}: {e}")
            return None
        if not parser.has_option(SHORTCUT_SECTION, "URL"):
            return None
        return parser.get(SHORTCUT_SECTION, "URL")

    def extract(self, path: Path) -> Iterator[Record]:
        def on_error(error: OSError) -> None:
            raise SourceIOError(f"cannot walk {path}: {error}", path) from error

        for root, dirs, files in os.walk(path, onerror=on_error):
            dirs.sort()
            for name in sorted(files):
                file_path = Path(root) / name
                url = self.read_shortcut(file_path)
                if url is None:
                    continue
                yield Record(title=shortcut_title(file_path), url=url)
