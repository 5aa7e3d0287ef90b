import logging
import time
from pathlib import Path
from typing import Callable, List, Optional

from .cleanup import DepthOrderedCleanup
from .models import FlattenSettings, FlattenSummary, MoveResult
from .mover import SafeMover
from .progress import NullProgress, ProgressReporter
from .scanner import TreeScanner
from .utils import ensure_root

log = logging.getLogger(__name__)

class Flattener:
    """Moves every file below root into root, then deletes the emptied folders.

    Runs sequentially and stops at the first error; whatever was already moved
    or deleted stays that way.
    """

    def __init__(self, root, settings: Optional[FlattenSettings] = None,
                 reporter: Optional[ProgressReporter] = None,
                 sleep: Callable[[float], None] = time.sleep):
        self.root: Path = ensure_root(str(root))
        self.settings = settings or FlattenSettings()
        self.reporter = reporter or NullProgress()
        self.scanner = TreeScanner(self.root)
        self.mover = SafeMover(self.settings, sleep=sleep)
        self.cleanup = DepthOrderedCleanup(self.settings, sleep=sleep)

    def run(self) -> FlattenSummary:
        candidates = self.scanner.plan()
        log.info("Flattening %s: %d files to move", self.root, len(candidates))

        self.reporter.start(len(candidates))
        try:
            moved: List[MoveResult] = []
            for c in candidates:
                moved.append(self.mover.move_one(c))
                self.reporter.advance()

            # captured only now, after every file has left its folder
            directories = self.scanner.enumerate_directories()
            removed = self.cleanup.run(directories)
        finally:
            self.reporter.stop()

        renamed = sum(1 for r in moved if r.reason)
        log.info("Moved %d files (%d renamed), deleted %d folders",
                 len(moved), renamed, len(removed))
        return FlattenSummary(self.root, moved, removed)
