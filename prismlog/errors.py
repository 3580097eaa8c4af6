# errors.py


class PrismlogError(Exception):
    """Base class for all prismlog errors."""


class InvalidColorNotation(PrismlogError, ValueError):
    """A color string could not be matched against any known notation."""

    def __init__(self, notation: str):
        super().__init__(f"Unknown color notation '{notation}'")
        self.notation = notation


class LogStorageError(PrismlogError, OSError):
    """Appending a line to the persistent log file failed."""
