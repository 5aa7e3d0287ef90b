import os
from pathlib import Path

from .defaults import COLLISION_SEPARATOR
from .errors import InvalidPathError

def ensure_root(path_str: str) -> Path:
    """Return a resolved Path object and ensure it is an existing directory."""
    p = Path(path_str).expanduser().resolve()
    if not p.exists():
        raise InvalidPathError(f"Path does not exist: {p}")
    if not p.is_dir():
        raise InvalidPathError(f"Not a directory: {p}")
    return p


def is_taken(path: Path) -> bool:
    # a dangling symlink still occupies the name
    return path.exists() or path.is_symlink()


def unique_path(dest: Path) -> Path:
    """
    If dest is taken, append '_1', '_2', ... before the suffix.
    Returns a Path that does not exist.
    """
    if not is_taken(dest):
        return dest

    stem = dest.stem
    suffix = dest.suffix
    parent = dest.parent
    i = 1
    while True:
        candidate = parent / f"{stem}{COLLISION_SEPARATOR}{i}{suffix}"
        if not is_taken(candidate):
            return candidate
        i += 1


def path_depth(path: Path) -> int:
    return str(path).count(os.sep)


def sort_by_depth(dirs):
    """Deepest first, by separator count."""
    return sorted(dirs, key=path_depth, reverse=True)
