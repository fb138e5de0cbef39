"""Audio handle and AudioUpdate classes."""

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING
from replit_audio.core.models import AudioType, SourceStatus
from replit_audio.ipc.encoding import encode_update
from replit_audio.utils.log import get_logger
from replit_audio.utils.timefmt import parse_timestamp

if TYPE_CHECKING:
    from replit_audio.api.client import AudioClient

logger = get_logger(__name__)


@dataclass
class AudioUpdate:
    """New playback parameters for a running source."""

    volume: float = 1.0
    """Volume sent as is; the daemon decides its range."""

    paused: bool = False
    """Whether the source is paused."""

    does_loop: bool = False
    """Whether the source loops."""

    loop_count: int = -1
    """Number of loops. Use a negative count to loop forever."""

    @classmethod
    def from_status(cls, status: SourceStatus) -> "AudioUpdate":
        """Seed an update with a source's currently published parameters."""
        return cls(
            volume=status.volume,
            paused=status.paused,
            does_loop=status.loop != 0,
            loop_count=status.loop,
        )


class Audio:
    """
    Reference to a source the daemon is playing.

    Only AudioBuilder.build() creates these. Every getter reads the status
    snapshot again, so values are as fresh as the daemon's last write. Once
    the daemon drops the source, getters raise SourceNotFoundError.
    """

    def __init__(self, source_id: int, audio_type: AudioType, client: "AudioClient"):
        self._id = source_id
        self._audio_type = audio_type
        self._client = client

    def __repr__(self) -> str:
        return f"Audio(id={self._id}, type={self._audio_type!r})"

    @property
    def id(self) -> int:
        """Identity assigned by the daemon."""
        return self._id

    def get_id(self) -> int:
        """Get the identity assigned by the daemon."""
        return self._id

    def get_type(self) -> AudioType:
        """Get the file or tone this source was created from."""
        return self._audio_type

    def get_status(self) -> SourceStatus:
        """
        Get the source's current status record.

        Raises:
            SourceNotFoundError: If the source is no longer in the snapshot.
            AudioIOError: If the snapshot cannot be read.
            StatusParseError: If the snapshot is malformed.
        """
        return self._client.resolver.find_by_identity(self._id)

    def get_name(self) -> str:
        """Get the name of the source."""
        return self.get_status().name

    def get_volume(self) -> float:
        """Get the volume of the source."""
        return self.get_status().volume

    def get_duration(self) -> int:
        """Get the duration of the source in milliseconds."""
        return self.get_status().duration

    def get_remaining(self) -> int:
        """Get the remaining time of the source in milliseconds."""
        return self.get_status().remaining

    def is_paused(self) -> bool:
        """Get whether the source is paused."""
        return self.get_status().paused

    def get_loop(self) -> int:
        """Get the number of times the source will loop."""
        return self.get_status().loop

    def get_start_time(self) -> datetime:
        """
        Get the start time of the source.

        Raises:
            TimestampFormatError: If the published start time is malformed.
        """
        return parse_timestamp(self.get_status().start_time)

    def get_end_time(self) -> datetime:
        """
        Get the end time of the source.

        Raises:
            TimestampFormatError: If the published end time is malformed.
        """
        return parse_timestamp(self.get_status().end_time)

    def update(self, update: AudioUpdate) -> None:
        """
        Send new playback parameters for this source.

        Does not wait for the daemon. A query right after may still show the
        old values.

        Raises:
            AudioIOError: If the command channel cannot be written.
            CommandEncodeError: If the update cannot be encoded.
        """
        self._client.send_command(encode_update(self._id, update))
        logger.debug(f"Sent update for audio {self._id}: {update}")

    def set_volume(self, volume: float) -> None:
        """Change only the volume."""
        update = AudioUpdate.from_status(self.get_status())
        update.volume = volume
        self.update(update)

    def pause(self) -> None:
        """Pause the source."""
        update = AudioUpdate.from_status(self.get_status())
        update.paused = True
        self.update(update)

    def resume(self) -> None:
        """Resume a paused source."""
        update = AudioUpdate.from_status(self.get_status())
        update.paused = False
        self.update(update)

    def set_loop(self, does_loop: bool, loop_count: int = -1) -> None:
        """Change whether and how often the source loops."""
        update = AudioUpdate.from_status(self.get_status())
        update.does_loop = does_loop
        update.loop_count = loop_count
        self.update(update)
