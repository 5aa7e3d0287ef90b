from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from .defaults import DEFAULT_MAX_ATTEMPTS, DEFAULT_BASE_DELAY, DEFAULT_CLEANUP_DELAY
from .errors import SettingsError

@dataclass(frozen=True)
class FlattenSettings:
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    base_delay: float = DEFAULT_BASE_DELAY
    cleanup_delay: float = DEFAULT_CLEANUP_DELAY

    def __post_init__(self):
        if self.max_attempts < 1:
            raise SettingsError(f"max_attempts must be at least 1, got {self.max_attempts}")
        if self.base_delay < 0 or self.cleanup_delay < 0:
            raise SettingsError("Delays cannot be negative.")

    def backoff(self, attempt: int) -> float:
        """Delay after the given failed attempt (1-based)."""
        return self.base_delay * (2 ** (attempt - 1))

@dataclass(frozen=True)
class MoveCandidate:
    src: Path
    dst: Path

@dataclass(frozen=True)
class MoveResult:
    src: Path
    dst: Path
    attempts: int
    reason: str = ""  # e.g., "exists, renamed"


@dataclass(frozen=True)
class FlattenSummary:
    root: Path
    moved: List[MoveResult] = field(default_factory=list)
    removed_dirs: List[Path] = field(default_factory=list)
