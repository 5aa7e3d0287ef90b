import logging
import os
from pathlib import Path
from typing import Iterator, List

from .errors import EnumerationError
from .models import MoveCandidate

log = logging.getLogger(__name__)

class TreeScanner:
    """Walks everything below a root folder. Read-only; any walk error aborts."""

    def __init__(self, root: Path):
        self.root = root

    def _walk(self) -> Iterator[tuple]:
        def on_error(err: OSError):
            where = err.filename or self.root
            raise EnumerationError(f"Cannot read {where}: {err.strerror or err}") from err

        for dirpath, dirnames, filenames in os.walk(self.root, onerror=on_error):
            yield Path(dirpath), dirnames, filenames

    def enumerate_files(self) -> List[Path]:
        files: List[Path] = []
        for folder, _, filenames in self._walk():
            if folder == self.root:
                continue
            for name in filenames:
                p = folder / name
                try:
                    st = p.stat()
                except OSError as e:
                    raise EnumerationError(f"Cannot stat {p}: {e.strerror or e}") from e
                if not p.is_file():
                    log.debug("Skipping non-regular file %s (mode %o)", p, st.st_mode)
                    continue
                files.append(p)
        return files

    def enumerate_directories(self) -> List[Path]:
        dirs: List[Path] = []
        for folder, dirnames, _ in self._walk():
            # symlinked folders show up here but are never descended into;
            # the ones sitting directly in root belong to root and are kept
            for d in dirnames:
                p = folder / d
                if folder == self.root and p.is_symlink():
                    continue
                dirs.append(p)
        return dirs

    def plan(self) -> List[MoveCandidate]:
        return [MoveCandidate(p, self.root / p.name) for p in self.enumerate_files()]
