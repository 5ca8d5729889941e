"""Registry of the external collaborators extractors depend on.

Each extractor declares the capability names it needs. The dispatcher asks
the registry before invoking an extractor, so a missing SQL driver or an
unsupported platform is reported by name instead of failing mid-extraction.
"""

import importlib.util
import logging
import sys
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from .errors import MissingCapabilityError, PathLike, UnsupportedPlatformError

logger = logging.getLogger(__name__)

PLIST_DECODER = "plist-decoder"
SQLITE_DRIVER = "sqlite-driver"
JSON_DECODER = "json-decoder"
INI_PARSER = "ini-parser"
DIRECTORY_WALKER = "directory-walker"
URI_MATCHER = "uri-matcher"
WINDOWS_FAVORITES = "windows-favorites"


@dataclass
class Capability:
    """A named external collaborator and how to detect it."""

    name: str
    description: str
    probe: Callable[[], bool]
    hint: str = ""
    platform_bound: bool = False


def module_probe(module_name: str) -> Callable[[], bool]:
    """Build a probe that succeeds when ``module_name`` is importable."""

    def probe() -> bool:
        try:
            return importlib.util.find_spec(module_name) is not None
        except (ImportError, ValueError):
            return False

    return probe


def platform_probe(*platforms: str) -> Callable[[], bool]:
    """Build a probe that succeeds when running on one of ``platforms``."""

    def probe() -> bool:
        return any(sys.platform.startswith(p) for p in platforms)

    return probe


class CapabilityRegistry:
    """Name-indexed set of capabilities."""

    def __init__(self, capabilities: Optional[Iterable[Capability]] = None):
        self._capabilities: dict[str, Capability] = {}
        for capability in capabilities or ():
            self.register(capability)

    def register(self, capability: Capability) -> None:
        self._capabilities[capability.name] = capability

    def get(self, name: str) -> Capability:
        try:
            return self._capabilities[name]
        except KeyError:
            raise MissingCapabilityError(name, hint="no such capability is registered") from None

    def names(self) -> list[str]:
        return list(self._capabilities)

    def is_available(self, name: str) -> bool:
        if name not in self._capabilities:
            return False
        return bool(self._capabilities[name].probe())

    def require(self, names: Iterable[str], path: Optional[PathLike] = None) -> None:
        """Raise for the first capability in ``names`` that is unavailable."""
        for name in names:
            capability = self.get(name)
            if capability.probe():
                continue
            logger.debug(f"[DISPATCH] Capability unavailable: {name}")
            if capability.platform_bound:
                raise UnsupportedPlatformError(name, path, capability.hint)
            raise MissingCapabilityError(name, path, capability.hint)


def default_registry() -> CapabilityRegistry:
    """Registry describing the collaborators of the built-in extractors."""
    return CapabilityRegistry(
        [
            Capability(PLIST_DECODER, "property list decoder", module_probe("plistlib"),
                       hint="plistlib is missing from this Python build"),
            Capability(SQLITE_DRIVER, "SQLite database driver", module_probe("sqlite3"),
                       hint="rebuild Python with SQLite support to read places.sqlite"),
            Capability(JSON_DECODER, "JSON decoder", module_probe("json")),
            Capability(INI_PARSER, "INI-style config parser", module_probe("configparser")),
            Capability(DIRECTORY_WALKER, "recursive directory walker", module_probe("os")),
            Capability(URI_MATCHER, "URI recognizer", module_probe("bookmark_extract.engine.extractors.uri")),
            Capability(WINDOWS_FAVORITES, "Internet Explorer/Edge favorites", platform_probe("win32", "cygwin"),
                       hint="favorites folders are only read on Windows", platform_bound=True),
        ]
    )
