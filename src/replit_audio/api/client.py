"""AudioClient - main public API."""

import threading
from typing import Any, Dict, Optional
from replit_audio.api.audio import Audio
from replit_audio.api.builder import AudioBuilder
from replit_audio.core.interfaces import ICommandChannel, IStatusReader
from replit_audio.core.models import (
    AudioConfig,
    AudioType,
    FileSource,
    FileType,
    StatusSnapshot,
    ToneSource,
    ToneType,
)
from replit_audio.ipc.encoding import dump_command
from replit_audio.ipc.files import FileCommandChannel, FileStatusReader
from replit_audio.status.resolver import StatusResolver
from replit_audio.utils.log import get_logger

logger = get_logger(__name__)


class AudioClient:
    """
    Facade over the daemon's command channel and status snapshot.

    Holds no playback state of its own; the daemon owns all of it.
    """

    def __init__(
        self,
        config: Optional[AudioConfig] = None,
        channel: Optional[ICommandChannel] = None,
        reader: Optional[IStatusReader] = None,
    ):
        """
        Initialize AudioClient.

        Args:
            config: Client configuration (default: AudioConfig()).
            channel: Optional command channel (default: FileCommandChannel on config.command_path).
            reader: Optional status reader (default: FileStatusReader on config.status_path).
        """
        self._config = config if config is not None else AudioConfig()
        self._channel = channel if channel is not None else FileCommandChannel(self._config.command_path)
        reader = reader if reader is not None else FileStatusReader(self._config.status_path)
        self._resolver = StatusResolver(reader)

    @property
    def config(self) -> AudioConfig:
        """Client configuration."""
        return self._config

    @property
    def resolver(self) -> StatusResolver:
        """Status resolver reading this client's snapshot."""
        return self._resolver

    def send_command(self, record: Dict[str, Any]) -> None:
        """
        Serialize a command record and append it to the command channel.

        Raises:
            CommandEncodeError: If the record cannot be serialized.
            AudioIOError: If the channel cannot be written.
        """
        payload = dump_command(record)
        self._channel.append(payload)
        logger.debug(f"Sent command: {payload}")

    def builder(self, audio_type: AudioType) -> AudioBuilder:
        """Create a builder that plays through this client."""
        return AudioBuilder(audio_type, client=self)

    def play_file(
        self,
        path: str,
        *,
        file_type: Optional[FileType] = None,
        volume: float = 1.0,
        does_loop: bool = False,
        loop_count: int = -1,
    ) -> Audio:
        """
        Play an audio file.

        Args:
            path: Path of the file as seen by the daemon.
            file_type: File format (default: inferred from the extension).
            volume: Volume. Default: 1.0.
            does_loop: Whether to loop. Default: False.
            loop_count: Number of loops, negative for infinite. Default: -1.

        Returns:
            Audio handle.

        Raises:
            AudioFormatError: If file_type is omitted and cannot be inferred.
        """
        if file_type is None:
            source = FileSource.from_path(path)
        else:
            source = FileSource(file_type, path)
        return (
            self.builder(source)
            .volume(volume)
            .does_loop(does_loop)
            .loop_count(loop_count)
            .build()
        )

    def play_tone(
        self,
        tone: ToneType,
        pitch: float,
        duration: float,
        *,
        volume: float = 1.0,
        does_loop: bool = False,
        loop_count: int = -1,
    ) -> Audio:
        """
        Play a tone.

        Args:
            tone: Waveform.
            pitch: Frequency in Hz.
            duration: Length in seconds.
            volume: Volume. Default: 1.0.
            does_loop: Whether to loop. Default: False.
            loop_count: Number of loops, negative for infinite. Default: -1.

        Returns:
            Audio handle.
        """
        return (
            self.builder(ToneSource(tone, pitch, duration))
            .volume(volume)
            .does_loop(does_loop)
            .loop_count(loop_count)
            .build()
        )

    def parse_status(self) -> StatusSnapshot:
        """Read and parse the daemon's current status snapshot."""
        return self._resolver.parse_status()

    def is_running(self) -> bool:
        """Get whether any audio source is playing."""
        return self._resolver.is_running()

    def is_disabled(self) -> bool:
        """Get whether the audio daemon is disabled."""
        return self._resolver.is_disabled()


_default_client: Optional[AudioClient] = None
_default_lock = threading.Lock()


def get_default_client() -> AudioClient:
    """Get the client on the default paths, creating it on first use."""
    global _default_client
    with _default_lock:
        if _default_client is None:
            _default_client = AudioClient()
        return _default_client


def set_default_client(client: Optional[AudioClient]) -> None:
    """Replace the default client. None restores the default paths on next use."""
    global _default_client
    with _default_lock:
        _default_client = client


def is_running() -> bool:
    """Get whether any audio source is playing, using the default client."""
    return get_default_client().is_running()


def is_disabled() -> bool:
    """Get whether the audio daemon is disabled, using the default client."""
    return get_default_client().is_disabled()
