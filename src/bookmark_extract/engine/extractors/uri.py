"""Recognition of URLs in free text.

Strict mode accepts schemed URIs only (``https://...``, ``ftp://...`` and
opaque schemes such as ``mailto:``). Schemeless mode also accepts bare
host-like tokens (``example.com/page``), which catches more bookmarks at the
cost of false positives such as file names.
"""

import re
from typing import Optional

_HIER_URI = r"[A-Za-z][A-Za-z0-9+.\-]*://[^\s<>\"]+"
_OPAQUE_URI = r"(?:mailto|news|urn|tel|data|javascript|about|magnet):[^\s<>\"]+"
_BARE_HOST = (
    r"(?:[A-Za-z0-9](?:[A-Za-z0-9\-]{0,61}[A-Za-z0-9])?\.)+"
    r"[A-Za-z]{2,63}"
    r"(?::\d{1,5})?"
    r"(?:[/?#][^\s<>\"]*)?"
)

STRICT_PATTERN = re.compile(rf"(?:{_HIER_URI}|{_OPAQUE_URI})")
SCHEMELESS_PATTERN = re.compile(rf"(?:{_HIER_URI}|{_OPAQUE_URI}|{_BARE_HOST})")

_TOKEN = re.compile(r"\S+")


class URIMatcher:
    """Finds the first whitespace-delimited URI token in a line."""

    def __init__(self, schemeless: bool = False):
        self.schemeless = schemeless
        self.pattern = SCHEMELESS_PATTERN if schemeless else STRICT_PATTERN

    def is_uri(self, token: str) -> bool:
        return self.pattern.fullmatch(token) is not None

    def find(self, line: str) -> Optional[re.Match]:
        """Return the match of the first token that is a URI, or None.

        In schemeless mode a schemed URI anywhere on the line is preferred;
        bare hosts are only used when the line has none.
        """
        passes = [STRICT_PATTERN, SCHEMELESS_PATTERN] if self.schemeless else [STRICT_PATTERN]
        for pattern in passes:
            for token in _TOKEN.finditer(line):
                if pattern.fullmatch(token.group()):
                    return token
        return None
