"""Exception classes for replit_audio."""

from typing import Optional


class AudioError(Exception):
    """Base exception for all audio client errors."""
    pass


class AudioIOError(AudioError):
    """Raised when the command channel or status file cannot be opened, read or written."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        self.message = message
        if path is not None:
            super().__init__(f"{message} ({path})")
        else:
            super().__init__(message)


class StatusParseError(AudioError):
    """Raised when the status snapshot is not a valid status document."""
    pass


class TimestampFormatError(StatusParseError):
    """Raised when a start or end timestamp does not match the status time format."""
    pass


class SourceNotFoundError(AudioError):
    """Raised when no status record matches an identity or provisional name."""

    def __init__(self, message: str, key=None):
        self.key = key
        super().__init__(message)


class ConfirmTimeoutError(AudioError):
    """Raised when a created source does not show up in the status snapshot in time."""

    def __init__(self, message: str, name: Optional[str] = None, timeout: float = 0.0):
        self.name = name
        self.timeout = timeout
        super().__init__(message)


class CommandEncodeError(AudioError):
    """Raised when a command cannot be serialized for the daemon."""
    pass


class AudioFormatError(AudioError):
    """Raised when a file format cannot be inferred from its path."""
    pass
