"""
replit_audio - client for a file-controlled audio playback daemon.

This package plays audio files and tones by writing commands to the
daemon's command channel and reading the status snapshot it publishes,
with support for looping, volume control, pausing and querying running
sources.
"""

from replit_audio.api.audio import Audio, AudioUpdate
from replit_audio.api.builder import AudioBuilder
from replit_audio.api.client import (
    AudioClient,
    get_default_client,
    is_disabled,
    is_running,
    set_default_client,
)
from replit_audio.core.models import (
    AudioConfig,
    AudioType,
    FileSource,
    FileType,
    SourceStatus,
    StatusSnapshot,
    ToneSource,
    ToneType,
)
from replit_audio.core.exceptions import (
    AudioError,
    AudioFormatError,
    AudioIOError,
    CommandEncodeError,
    ConfirmTimeoutError,
    SourceNotFoundError,
    StatusParseError,
    TimestampFormatError,
)

__version__ = "0.1.0"

__all__ = [
    "Audio",
    "AudioUpdate",
    "AudioBuilder",
    "AudioClient",
    "get_default_client",
    "set_default_client",
    "is_running",
    "is_disabled",
    "AudioConfig",
    "AudioType",
    "FileSource",
    "FileType",
    "SourceStatus",
    "StatusSnapshot",
    "ToneSource",
    "ToneType",
    "AudioError",
    "AudioFormatError",
    "AudioIOError",
    "CommandEncodeError",
    "ConfirmTimeoutError",
    "SourceNotFoundError",
    "StatusParseError",
    "TimestampFormatError",
]
