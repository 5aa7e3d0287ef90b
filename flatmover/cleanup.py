import logging
import os
import shutil
import time
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from .errors import CleanupError
from .models import FlattenSettings
from .utils import sort_by_depth

log = logging.getLogger(__name__)

class DepthOrderedCleanup:
    """Removes emptied folders, deepest first, so no removal trips over children."""

    def __init__(self, settings: Optional[FlattenSettings] = None,
                 sleep: Callable[[float], None] = time.sleep):
        self.settings = settings or FlattenSettings()
        self.sleep = sleep

    def run(self, directories: Iterable[Path]) -> List[Path]:
        self.sleep(self.settings.cleanup_delay)

        removed: List[Path] = []
        for d in sort_by_depth(directories):
            if d.is_symlink():
                self._remove(d, os.unlink)
            elif not d.exists():
                log.debug("Already gone: %s", d)
                continue
            else:
                self._check_no_files(d)
                self._remove(d, shutil.rmtree)
            removed.append(d)
        return removed

    def _check_no_files(self, folder: Path) -> None:
        for dirpath, _, filenames in os.walk(folder):
            if filenames:
                leftover = Path(dirpath) / filenames[0]
                log.error("Refusing to delete %s, it still contains %s", folder, leftover)
                raise CleanupError(f"Cannot delete {folder}: still contains {leftover}")

    def _remove(self, folder: Path, remove: Callable) -> None:
        try:
            remove(folder)
        except OSError as e:
            log.error("Could not delete %s: %s", folder, e)
            raise CleanupError(f"Error deleting directory {folder}: {e}") from e
        log.debug("Deleted %s", folder)
