"""Firefox ``places.sqlite`` extractor."""

import logging
from pathlib import Path
from typing import Iterator, Optional

from ... import capabilities
from ...errors import ParseError, SourceIOError
from ...schema import Record, SourceKind
from ...utils import temporary_copy
from .base import Extractor

logger = logging.getLogger(__name__)

TAGS_ROOT_GUID = "tags________"

# Tag entries are untitled moz_bookmarks rows pointing at the same place as
# the bookmark, parented by a tag folder that lives under the tags root. They
# are aggregated into the description and never reported on their own.
BOOKMARKS_QUERY = f"""
    SELECT
        b.title,
        p.url,
        tags.names
    FROM moz_bookmarks b
    JOIN moz_places p ON p.id = b.fk
    LEFT JOIN (
        SELECT
            entry.fk AS fk,
            group_concat(folder.title, ' ') AS names
        FROM moz_bookmarks entry
        JOIN moz_bookmarks folder ON folder.id = entry.parent
        WHERE folder.parent = (
            SELECT id FROM moz_bookmarks WHERE guid = '{TAGS_ROOT_GUID}'
        )
        GROUP BY entry.fk
    ) tags ON tags.fk = b.fk
    WHERE b.type = 1
      AND b.title IS NOT NULL
      AND b.parent NOT IN (
          SELECT id FROM moz_bookmarks
          WHERE parent = (SELECT id FROM moz_bookmarks WHERE guid = '{TAGS_ROOT_GUID}')
      )
      AND p.url NOT LIKE 'place:%'
    ORDER BY b.id
"""


class FirefoxExtractor(Extractor):
    """Extracts bookmarks and their tags from a Firefox profile database.

    The database is copied to a temporary directory first because a running
    Firefox keeps ``places.sqlite`` locked. The copy is opened read-only and
    deleted once extraction ends.
    """

    kind = SourceKind.FIREFOX_DB
    suffix = ".sqlite"
    requires = (capabilities.SQLITE_DRIVER,)

    def __init__(self, temp_dir: Optional[Path] = None):
        self.temp_dir = temp_dir

    def query(self, db_path: Path, source: Path) -> Iterator[Record]:
        """Run the bookmark query against ``db_path`` opened read-only."""
        import sqlite3

        conn = None
        try:
            conn = sqlite3.connect(f"{db_path.resolve().as_uri()}?mode=ro", uri=True)
            cursor = conn.execute(BOOKMARKS_QUERY)
            for title, url, tags in cursor:
                yield Record(title=title, url=url, description=tags or "")
        except sqlite3.Error as e:
            raise ParseError(f"cannot read bookmarks from {source}: {e}", source) from e
        finally:
            if conn is not None:
                conn.close()

    def extract(self, path: Path) -> Iterator[Record]:
        try:
            with temporary_copy(path, self.temp_dir) as copy:
                logger.debug(f"[FIREFOX] Copied {path} to {copy}")
                yield from self.query(copy, path)
        except OSError as e:
            raise SourceIOError(f"cannot copy {path} to a temporary location: {e}", path) from e
