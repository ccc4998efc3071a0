"""
Error taxonomy for the record store.
"""


class GymtrackerError(Exception):
    """Base class for all gymtracker errors."""


class StoreUnavailableError(GymtrackerError):
    """The backing store could not be opened, read, or written."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Storage at '{path}' is unavailable: {reason}")
        self.path = path
        self.reason = reason


class RecordNotFoundError(GymtrackerError):
    """A single-result lookup found no entry for its key."""

    def __init__(self, index: str, key: str | None = None):
        if key is None:
            message = f"No data found in '{index}', insert data and try again."
        else:
            message = f"No data found for '{key}' in '{index}', insert data and try again."
        super().__init__(message)
        self.index = index
        self.key = key


class InvalidRecordError(GymtrackerError):
    """The store rejected a record's field values."""

    def __init__(self, reason: str):
        super().__init__(f"Workout rejected by the store: {reason}")
        self.reason = reason
