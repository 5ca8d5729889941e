"""Shared utility functions for bookmark-extract."""

import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional


@contextmanager
def temporary_copy(source: Path, temp_dir: Optional[Path] = None) -> Iterator[Path]:
    """Copy a file into a private temporary directory.

    The directory and the copy are removed when the context exits, whether
    it exits normally or through an exception.

    Args:
        source: The file to copy
        temp_dir: Parent for the temporary directory (system default if None)

    Yields:
        Path of the copy, keeping the original file name
    """
    with tempfile.TemporaryDirectory(prefix="bookmark-extract-", dir=temp_dir) as scratch:
        dest = Path(scratch) / source.name
        shutil.copyfile(source, dest)
        yield dest
