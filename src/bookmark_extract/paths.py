"""Default bookmark locations for each operating system."""

import os
import sys
from pathlib import Path
from typing import Mapping, Optional

# Chromium-family profile roots, relative to the per-OS base directory
_CHROMIUM_MAC = [
    "Google/Chrome",
    "Chromium",
    "Microsoft Edge",
    "BraveSoftware/Brave-Browser",
]
_CHROMIUM_LINUX = [
    "google-chrome",
    "chromium",
    "microsoft-edge",
    "BraveSoftware/Brave-Browser",
]
_CHROMIUM_WINDOWS = [
    "Google/Chrome/User Data",
    "Chromium/User Data",
    "Microsoft/Edge/User Data",
    "BraveSoftware/Brave-Browser/User Data",
]


def _glob(base: Path, pattern: str) -> list[Path]:
    if not base.is_dir():
        return []
    return sorted(base.glob(pattern))


def _chromium_bookmarks(base: Path, browsers: list[str]) -> list[Path]:
    found = []
    for browser in browsers:
        found.extend(_glob(base / browser, "*/Bookmarks"))
    return found


def candidate_paths(
    platform: Optional[str] = None,
    home: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> list[Path]:
    """Every default location for ``platform``, existing or not.

    Glob patterns are expanded, so profile directories that do not exist
    contribute nothing.
    """
    platform = platform or sys.platform
    home = home or Path.home()
    environ = os.environ if environ is None else environ

    if platform == "darwin":
        support = home / "Library" / "Application Support"
        return [
            home / "Library" / "Safari" / "Bookmarks.plist",
            *_glob(support / "Firefox" / "Profiles", "*/places.sqlite"),
            *_chromium_bookmarks(support, _CHROMIUM_MAC),
        ]

    if platform.startswith("win") or platform == "cygwin":
        profile = Path(environ.get("USERPROFILE", home))
        appdata = Path(environ.get("APPDATA", profile / "AppData" / "Roaming"))
        local = Path(environ.get("LOCALAPPDATA", profile / "AppData" / "Local"))
        return [
            profile / "Favorites",
            *_glob(appdata / "Mozilla" / "Firefox" / "Profiles", "*/places.sqlite"),
            *_chromium_bookmarks(local, _CHROMIUM_WINDOWS),
        ]

    config = Path(environ.get("XDG_CONFIG_HOME", home / ".config"))
    return [
        *_glob(home / ".mozilla" / "firefox", "*/places.sqlite"),
        *_glob(home / "snap" / "firefox" / "common" / ".mozilla" / "firefox", "*/places.sqlite"),
        *_chromium_bookmarks(config, _CHROMIUM_LINUX),
    ]


def default_paths(
    platform: Optional[str] = None,
    home: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> list[Path]:
    """Default locations that exist on this machine, in a fixed order."""
    return [p for p in candidate_paths(platform, home, environ) if p.exists()]
