"""Run loop: every input path, in order, through dispatcher and printer."""

import logging
from pathlib import Path
from typing import Iterable

from ..printer import Printer
from .dispatcher import Dispatcher

logger = logging.getLogger(__name__)


class Processor:
    """Orchestrates the pipeline: classify -> extract -> print.

    Paths are processed one at a time in the order given and each record is
    printed as soon as it is produced. The first error aborts the run.
    """

    def __init__(self, dispatcher: Dispatcher, printer: Printer):
        self.dispatcher = dispatcher
        self.printer = printer

    def process_path(self, path: Path) -> int:
        """Print every record of one source. Returns the number printed."""
        logger.info(f"[PROCESSOR] Starting: {path}")
        count = 0
        for record in self.dispatcher.dispatch(path):
            self.printer.print_record(record)
            count += 1
        logger.info(f"[PROCESSOR] {path}: {count} bookmarks")
        return count

    def run(self, paths: Iterable[Path]) -> int:
        """Process all paths. Returns the total number of records printed."""
        total = 0
        for path in paths:
            total += self.process_path(Path(path))
        return total
