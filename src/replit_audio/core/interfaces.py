"""Protocol interfaces for the daemon's file boundary."""

from typing import Protocol


class ICommandChannel(Protocol):
    """Interface for the write side of the daemon's command channel."""

    def append(self, payload: str) -> None:
        """
        Append one serialized command to the channel.

        Args:
            payload: Serialized command.

        Raises:
            AudioIOError: If the channel cannot be opened or written.
        """
        ...


class IStatusReader(Protocol):
    """Interface for the read side of the daemon's status snapshot."""

    def read(self) -> str:
        """
        Read the current status document.

        Returns:
            Raw document text.

        Raises:
            AudioIOError: If the snapshot cannot be read.
        """
        ...
