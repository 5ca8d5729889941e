"""Exception hierarchy for bookmark extraction."""

from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, Path]


class BookmarkExtractError(Exception):
    """Base class for every fatal error raised while extracting bookmarks."""

    def __init__(self, message: str, path: Optional[PathLike] = None):
        super().__init__(message)
        self.message = message
        self.path = Path(path) if path is not None else None

    def __str__(self) -> str:
        return self.message


class ClassificationError(BookmarkExtractError):
    """No extractor matches the given path."""

    def __init__(self, path: PathLike):
        super().__init__(f"unable to process file: {path}", path)


class ParseError(BookmarkExtractError):
    """Source content is malformed or could not be decoded."""


class SourceIOError(BookmarkExtractError):
    """A source could not be read, copied or walked."""


class MissingCapabilityError(BookmarkExtractError):
    """An external collaborator an extractor depends on is unavailable."""

    def __init__(self, capability: str, path: Optional[PathLike] = None, hint: str = ""):
        super().__init__(self._describe(capability, path, hint), path)
        self.capability = capability

    @staticmethod
    def _describe(capability: str, path: Optional[PathLike], hint: str) -> str:
        message = f"missing module: {capability} is required"
        if path is not None:
            message += f" to process {path}"
        if hint:
            message += f" ({hint})"
        return message


class UnsupportedPlatformError(MissingCapabilityError):
    """The capability exists only on another operating system."""

    @staticmethod
    def _describe(capability: str, path: Optional[PathLike], hint: str) -> str:
        message = f"{capability} is not supported on this platform"
        if path is not None:
            message += f": {path}"
        if hint:
            message += f" ({hint})"
        return message


class ConfigError(BookmarkExtractError):
    """Invalid configuration, such as an unrecognized format spec."""
