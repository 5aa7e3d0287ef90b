# Timing heuristics for filesystems that are slow to show finished removals.
DEFAULT_MAX_ATTEMPTS = 5
DEFAULT_BASE_DELAY = 0.1  # seconds, doubled after every failed attempt
DEFAULT_CLEANUP_DELAY = 0.5  # seconds, observed once before cleanup starts

COLLISION_SEPARATOR = "_"
