"""File-backed command channel and status reader."""

import os
from pathlib import Path
from typing import Union
from replit_audio.core.exceptions import AudioIOError
from replit_audio.core.interfaces import ICommandChannel, IStatusReader
from replit_audio.utils.log import get_logger

logger = get_logger(__name__)

PathLike = Union[str, Path]


class FileCommandChannel(ICommandChannel):
    """
    Append-only writer for the daemon's command file.

    The file belongs to the daemon and is never created here; a missing
    channel means the daemon is not set up. Writes are not locked, so
    concurrent writers must serialize themselves if they need ordering.
    """

    def __init__(self, path: PathLike):
        self.path = Path(path)

    def append(self, payload: str) -> None:
        """Append one serialized command."""
        try:
            fd = os.open(self.path, os.O_WRONLY | os.O_APPEND)
        except OSError as e:
            raise AudioIOError(f"Error in opening command channel: {e}", str(self.path)) from e

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
        except OSError as e:
            raise AudioIOError(f"Error in writing to command channel: {e}", str(self.path)) from e

        logger.debug(f"Appended {len(payload)} bytes to {self.path}")


class FileStatusReader(IStatusReader):
    """Reader for the daemon's status snapshot file."""

    def __init__(self, path: PathLike):
        self.path = Path(path)

    def read(self) -> str:
        """Read the whole snapshot."""
        try:
            return self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise AudioIOError(f"Error in reading status file: {e}", str(self.path)) from e
