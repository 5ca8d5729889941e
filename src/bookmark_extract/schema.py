"""Pydantic models for bookmark records and classified sources."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class Record(BaseModel):
    """A normalized bookmark. Absent fields are empty strings, never None."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    url: str = ""
    description: str = ""


class SourceKind(str, Enum):
    """Input formats the dispatcher knows how to route."""

    SAFARI_PLIST = "SafariPlist"
    FIREFOX_DB = "FirefoxDB"
    CHROME_JSON = "ChromeJSON"
    IE_FAVORITES = "IEFavorites"
    PLAIN_TEXT = "PlainText"
    MARKDOWN = "Markdown"


class Source(BaseModel):
    """A classified input path, consumed once by its extractor."""

    path: Path
    kind: SourceKind
    is_directory: bool = Field(default=False, description="Only true for IE favorites folders")
