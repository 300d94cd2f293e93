"""Domain errors for the time clock."""


class TimeClockError(Exception):
    """Base class for recoverable time clock failures."""

    message = "Time clock error"

    def __init__(self, worker_id: str = "", message: str = None):
        self.worker_id = worker_id
        super().__init__(message or self.message)


class AlreadyClockedInError(TimeClockError):
    """Worker already has an active time block for the day."""

    message = "Worker is already clocked in"


class NotClockedInError(TimeClockError):
    """Worker has no active time block for the day."""

    message = "Worker is not currently clocked in"


class InvalidWorkerError(TimeClockError):
    """Worker identifier is missing or blank."""

    message = "Invalid worker"
