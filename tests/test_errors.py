"""Tests for bookmark_extract.errors module."""

from pathlib import Path

from bookmark_extract.errors import (
    BookmarkExtractError,
    ClassificationError,
    MissingCapabilityError,
    ParseError,
    UnsupportedPlatformError,
)


class TestErrors:
    """Tests for the exception hierarchy."""

    def test_classification_message_names_path(self):
        """Classification errors identify the offending path."""
        error = ClassificationError("/tmp/unknown.bin")

        assert str(error) == "unable to process file: /tmp/unknown.bin"
        assert error.path == Path("/tmp/unknown.bin")

    def test_missing_capability_names_capability(self):
        """Missing capability errors name what is missing."""
        error = MissingCapabilityError("sqlite-driver", "places.sqlite", hint="install it")

        assert error.capability == "sqlite-driver"
        assert "missing module: sqlite-driver" in str(error)
        assert "places.sqlite" in str(error)
        assert "install it" in str(error)

    def test_unsupported_platform_is_missing_capability(self):
        """Platform errors are a kind of missing capability."""
        error = UnsupportedPlatformError("windows-favorites", "Favorites")

        assert isinstance(error, MissingCapabilityError)
        assert str(error) == "windows-favorites is not supported on this platform: Favorites"

    def test_all_errors_share_base(self):
        """Every error kind derives from BookmarkExtractError."""
        assert issubclass(ParseError, BookmarkExtractError)
        assert issubclass(ClassificationError, BookmarkExtractError)
        assert ParseError("bad").path is None
