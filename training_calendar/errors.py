"""Exceptions raised inside training_calendar. None of them escape the repository."""


class TrainingCalendarError(Exception):
    """Base class for package errors."""


class ResourceUnavailable(TrainingCalendarError):
    """A named resource could not be read or has the wrong top-level shape."""

    def __init__(self, name: str, reason: str = ""):
        self.name = name
        self.reason = reason
        msg = f"Resource '{name}' unavailable"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class DecodeError(TrainingCalendarError, ValueError):
    """A record (or one of its fields) does not match the expected format."""
