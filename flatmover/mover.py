import logging
import os
import shutil
import time
from pathlib import Path
from typing import Callable, Optional

from .errors import MoveError
from .models import FlattenSettings, MoveCandidate, MoveResult
from .utils import unique_path

log = logging.getLogger(__name__)

class SafeMover:
    """Copy+delete mover that never overwrites and retries transient I/O errors."""

    def __init__(self, settings: Optional[FlattenSettings] = None,
                 sleep: Callable[[float], None] = time.sleep):
        self.settings = settings or FlattenSettings()
        self.sleep = sleep

    def move_one(self, candidate: MoveCandidate) -> MoveResult:
        src, dest_file = candidate.src, candidate.dst
        reason = ""
        max_attempts = self.settings.max_attempts

        for attempt in range(1, max_attempts + 1):
            try:
                self._move_attempt(src, dest_file)
            except FileExistsError:
                # always count from the original name: a.txt -> a_1.txt -> a_2.txt
                renamed = unique_path(candidate.dst)
                log.info("%s already exists, using %s", dest_file.name, renamed.name)
                dest_file = renamed
                reason = "exists, renamed"
                continue
            except PermissionError as e:
                log.error("Permission denied moving %s: %s", src, e)
                raise MoveError(f"Permission denied moving {src}: {e}") from e
            except OSError as e:
                if attempt == max_attempts:
                    log.error("Giving up on %s: %s", src, e)
                    raise MoveError(f"Failed to move {src} after {max_attempts} attempts: {e}") from e
                delay = self.settings.backoff(attempt)
                log.warning("Attempt %d/%d for %s failed (%s), retrying in %.2fs",
                            attempt, max_attempts, src, e, delay)
                self.sleep(delay)
                continue

            log.debug("Moved %s -> %s", src, dest_file)
            return MoveResult(src, dest_file, attempts=attempt, reason=reason)

        raise MoveError(f"Failed to move {src} after {max_attempts} attempts")

    def _move_attempt(self, src: Path, dst: Path) -> None:
        created = False
        try:
            # "x" fails instead of truncating when the name is taken
            with open(src, "rb") as fsrc, open(dst, "xb") as fdst:
                created = True
                shutil.copyfileobj(fsrc, fdst)
        except OSError:
            # a partial copy would look like a collision on the next attempt
            if created:
                os.remove(dst)
            raise

        try:
            os.remove(src)
        except OSError:
            os.remove(dst)
            raise
