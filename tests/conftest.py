"""Shared pytest fixtures for bookmark-extract tests."""

import json
import plistlib
import sqlite3
from pathlib import Path

import pytest

from bookmark_extract.capabilities import Capability, CapabilityRegistry, default_registry
from bookmark_extract.config import Settings


def build_places_db(path: Path) -> Path:
    """Create a minimal Firefox places.sqlite with bookmarks and tags."""
    conn = sqlite3.connect(path)
    conn.executescript(
        """
        CREATE TABLE moz_places (
            id INTEGER PRIMARY KEY,
            url LONGVARCHAR,
            title LONGVARCHAR
        );
        CREATE TABLE moz_bookmarks (
            id INTEGER PRIMARY KEY,
            type INTEGER,
            fk INTEGER DEFAULT NULL,
            parent INTEGER,
            position INTEGER,
            title LONGVARCHAR,
            guid TEXT
        );

        INSERT INTO moz_places (id, url, title) VALUES
            (1, 'https://example.com/a', 'Page A'),
            (2, 'https://example.org/b', 'Page B'),
            (3, 'place:sort=8&maxResults=10', NULL),
            (4, 'https://untitled.example/', NULL);

        -- folders: root, menu, tags root
        INSERT INTO moz_bookmarks (id, type, fk, parent, position, title, guid) VALUES
            (1, 2, NULL, 0, 0, '', 'root________'),
            (2, 2, NULL, 1, 0, 'menu', 'menu________'),
            (4, 2, NULL, 1, 1, 'tags', 'tags________');

        -- bookmarks
        INSERT INTO moz_bookmarks (id, type, fk, parent, position, title, guid) VALUES
            (10, 1, 1, 2, 0, 'Example A', 'bookmark-a'),
            (11, 1, 2, 2, 1, 'Example B', 'bookmark-b'),
            (12, 1, 3, 2, 2, 'Recent Tags', 'smart-query'),
            (13, 1, 4, 2, 3, NULL, 'untitled');

        -- tag folders and tag entries
        INSERT INTO moz_bookmarks (id, type, fk, parent, position, title, guid) VALUES
            (20, 2, NULL, 4, 0, 'python', 'tag-python'),
            (21, 2, NULL, 4, 1, 'reading', 'tag-reading'),
            (30, 1, 1, 20, 0, NULL, 'entry-a-python'),
            (31, 1, 1, 21, 0, NULL, 'entry-a-reading'),
            (32, 1, 2, 21, 1, NULL, 'entry-b-reading');
        """
    )
    conn.commit()
    conn.close()
    return path


@pytest.fixture
def places_db(tmp_path: Path) -> Path:
    """A Firefox places database in its own profile directory."""
    profile = tmp_path / "profile"
    profile.mkdir()
    return build_places_db(profile / "places.sqlite")


@pytest.fixture
def safari_tree() -> dict:
    """Parsed Safari Bookmarks.plist with a folder, a leaf and a Reading List item."""
    return {
        "WebBookmarkType": "WebBookmarkTypeList",
        "Title": "",
        "Children": [
            {
                "WebBookmarkType": "WebBookmarkTypeList",
                "Title": "BookmarksBar",
                "Children": [
                    {
                        "WebBookmarkType": "WebBookmarkTypeLeaf",
                        "URLString": "https://www.python.org/",
                        "URIDictionary": {"title": "Python"},
                    },
                    {
                        "WebBookmarkType": "WebBookmarkTypeList",
                        "Title": "Nested",
                        "Children": [
                            {
                                "WebBookmarkType": "WebBookmarkTypeLeaf",
                                "URLString": "https://docs.python.org/3/",
                                "URIDictionary": {"title": "Docs"},
                            }
                        ],
                    },
                ],
            },
            {
                "WebBookmarkType": "WebBookmarkTypeList",
                "Title": "com.apple.ReadingList",
                "Children": [
                    {
                        "WebBookmarkType": "WebBookmarkTypeLeaf",
                        "URLString": "https://example.com/article",
                        "URIDictionary": {"title": "An Article"},
                        "ReadingList": {"PreviewText": "A short preview"},
                    }
                ],
            },
        ],
    }


@pytest.fixture
def safari_plist(tmp_path: Path, safari_tree: dict) -> Path:
    """Safari bookmarks written as a binary plist."""
    path = tmp_path / "Bookmarks.plist"
    path.write_bytes(plistlib.dumps(safari_tree, fmt=plistlib.FMT_BINARY))
    return path


@pytest.fixture
def chrome_data() -> dict:
    """Chromium Bookmarks JSON with a nested folder in the bookmark bar."""
    return {
        "checksum": "0123456789abcdef",
        "roots": {
            "bookmark_bar": {
                "name": "Bookmarks bar",
                "type": "folder",
                "children": [
                    {"name": "Python", "type": "url", "url": "https://www.python.org/"},
                    {
                        "name": "Work",
                        "type": "folder",
                        "children": [
                            {"name": "Nested", "type": "url", "url": "https://nested.example/"}
                        ],
                    },
                ],
            },
            "other": {
                "name": "Other bookmarks",
                "type": "folder",
                "children": [
                    {"name": "Example", "type": "url", "url": "https://example.com/"},
                ],
            },
            "synced": {
                "name": "Mobile bookmarks",
                "type": "folder",
                "children": [
                    {"name": "Mobile", "type": "url", "url": "https://mobile.example/"},
                ],
            },
        },
        "version": 1,
    }


@pytest.fixture
def chrome_bookmarks(tmp_path: Path, chrome_data: dict) -> Path:
    """Chromium Bookmarks file on disk."""
    profile = tmp_path / "Default"
    profile.mkdir()
    path = profile / "Bookmarks"
    path.write_text(json.dumps(chrome_data), encoding="utf-8")
    return path


@pytest.fixture
def favorites_dir(tmp_path: Path) -> Path:
    """A Favorites folder with shortcuts, a subfolder and noise."""
    favorites = tmp_path / "Favorites"
    (favorites / "Links").mkdir(parents=True)
    (favorites / "Python.url").write_text(
        "[InternetShortcut]\nURL=https://www.python.org/\n", encoding="utf-8"
    )
    (favorites / "Links" / "Example.url").write_text(
        "[DEFAULT]\nBASEURL=https://example.com/\n[InternetShortcut]\nURL=https://example.com/\nIconIndex=0\n",
        encoding="utf-8",
    )
    (favorites / "desktop.ini").write_text("[.ShellClassInfo]\nLocalizedResourceName=Favorites\n", encoding="utf-8")
    (favorites / "notes.url").write_text("not an ini file at all\n", encoding="utf-8")
    return favorites


@pytest.fixture
def sample_text() -> str:
    """Plain text bookmarks with noise lines."""
    return """plain text example http://example.txt with a description
this line has no link at all

https://bare.example/only-url
Docs https://docs.python.org/3/
"""


@pytest.fixture
def sample_markdown() -> str:
    """Markdown bookmarks with noise lines."""
    return """# Reading list

[markdown example](http://example.md) with a description
- [Python](https://www.python.org/)
Plain paragraph without links.
"""


@pytest.fixture
def text_file(tmp_path: Path, sample_text: str) -> Path:
    path = tmp_path / "links.txt"
    path.write_text(sample_text, encoding="utf-8")
    return path


@pytest.fixture
def markdown_file(tmp_path: Path, sample_markdown: str) -> Path:
    path = tmp_path / "links.md"
    path.write_text(sample_markdown, encoding="utf-8")
    return path


@pytest.fixture
def windows_registry() -> CapabilityRegistry:
    """Default registry, but reporting Windows favorites as available."""
    registry = default_registry()
    registry.register(
        Capability("windows-favorites", "Internet Explorer/Edge favorites", lambda: True, platform_bound=True)
    )
    return registry


@pytest.fixture
def settings(monkeypatch) -> Settings:
    """Settings isolated from the developer's environment."""
    for name in ("FORMAT", "SCHEMELESS", "SUCCESS_EXIT_CODE", "TEMP_DIR", "FAVORITES_ENCODING"):
        monkeypatch.delenv(f"BOOKMARK_EXTRACT_{name}", raising=False)
    return Settings(_env_file=None)
