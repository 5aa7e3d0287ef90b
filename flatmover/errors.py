class FlatMoverError(Exception):
    """Base error for the project."""

class InvalidPathError(FlatMoverError):
    pass

class SettingsError(FlatMoverError):
    pass

class EnumerationError(FlatMoverError):
    """The tree walk could not read an entry."""

class MoveError(FlatMoverError):
    pass

class CleanupError(FlatMoverError):
    pass
