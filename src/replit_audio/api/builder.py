"""AudioBuilder - creates sources and waits for the daemon to confirm them."""

from typing import Optional, TYPE_CHECKING
from replit_audio.api.audio import Audio
from replit_audio.concurrency.poll import poll_until
from replit_audio.core.exceptions import (
    AudioIOError,
    ConfirmTimeoutError,
    SourceNotFoundError,
    StatusParseError,
)
from replit_audio.core.models import AudioType
from replit_audio.core.naming import next_provisional_name
from replit_audio.ipc.encoding import encode_create
from replit_audio.utils.log import get_logger

if TYPE_CHECKING:
    from replit_audio.api.client import AudioClient

logger = get_logger(__name__)

# The snapshot may be missing, half written or not yet contain the new source.
_NOT_YET = (AudioIOError, StatusParseError, SourceNotFoundError)


class AudioBuilder:
    """
    Collects playback parameters for a file or tone and starts it.

    Setters return the builder so calls can be chained:

        audio = AudioBuilder(ToneSource(ToneType.SQUARE, 440.0, 2.0)).volume(0.5).build()
    """

    def __init__(self, audio_type: AudioType, client: Optional["AudioClient"] = None):
        """
        Initialize AudioBuilder.

        Args:
            audio_type: File or tone to play.
            client: Optional client (default: the module-level default client).
        """
        if client is None:
            # Lazy import; the client module imports this one
            from replit_audio.api.client import get_default_client
            client = get_default_client()

        self._client = client
        self._audio_type = audio_type
        self._name: Optional[str] = None
        self._volume = 1.0
        self._does_loop = False
        self._loop_count = -1

    def name(self, name: str) -> "AudioBuilder":
        """
        Set the provisional name of the source.

        By default every build() uses a fresh name. A fixed name is not
        recommended: if several sources share it, build() returns whichever
        one the status snapshot lists first.
        """
        self._name = name
        return self

    def volume(self, volume: float) -> "AudioBuilder":
        """Set the volume. Default: 1.0."""
        self._volume = volume
        return self

    def does_loop(self, does_loop: bool) -> "AudioBuilder":
        """Set whether the source loops. Default: no looping."""
        self._does_loop = does_loop
        return self

    def loop_count(self, loop_count: int) -> "AudioBuilder":
        """
        Set the number of times to loop.

        Only has an effect together with does_loop(True). Default: -1 (forever).
        """
        self._loop_count = loop_count
        return self

    def build(self) -> Audio:
        """
        Start the source and wait until the daemon publishes it.

        Can be called several times to play the same configuration again.
        Blocks until the source shows up in the status snapshot or the
        configured timeout elapses.

        Returns:
            Audio handle bound to the daemon-assigned identity.

        Raises:
            AudioIOError: If the command channel cannot be opened or written.
            CommandEncodeError: If the parameters cannot be encoded.
            ConfirmTimeoutError: If the source does not appear in time. The
                daemon may still start it later.
        """
        config = self._client.config
        name = self._name if self._name is not None else next_provisional_name(config.name_prefix)

        record = encode_create(
            name, self._audio_type, self._volume, self._does_loop, self._loop_count
        )
        self._client.send_command(record)
        logger.debug(f"Sent create command for {name} ({self._audio_type.kind})")

        resolver = self._client.resolver
        try:
            status = poll_until(
                lambda: resolver.find_by_name(name),
                timeout=config.confirm_timeout,
                interval=config.poll_interval,
                retry_on=_NOT_YET,
                what=f"audio source {name}",
            )
        except ConfirmTimeoutError as e:
            raise ConfirmTimeoutError(
                f"Timed out while waiting for {config.status_path} to list {name}",
                name=name,
                timeout=config.confirm_timeout,
            ) from e.__cause__

        logger.debug(f"Audio source {name} confirmed with id {status.id}")
        return Audio(status.id, self._audio_type, self._client)
