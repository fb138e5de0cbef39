"""Tests for create-and-confirm (using NullDaemon)."""

import json
import math
import time
import pytest
from replit_audio.api.audio import Audio
from replit_audio.api.builder import AudioBuilder
from replit_audio.api.client import AudioClient
from replit_audio.backends.null_daemon import NullDaemon
from replit_audio.core.exceptions import (
    AudioIOError,
    CommandEncodeError,
    ConfirmTimeoutError,
)
from replit_audio.core.models import AudioConfig, FileSource, FileType, ToneSource, ToneType


def create_test_client(daemon: NullDaemon, timeout: float = 2.0) -> AudioClient:
    """Create a client talking to an in-memory daemon."""
    config = AudioConfig(confirm_timeout=timeout, poll_interval=0.0)
    return AudioClient(config, channel=daemon, reader=daemon)


def test_build_tone():
    """Test the default tone scenario."""
    daemon = NullDaemon()
    client = create_test_client(daemon)

    audio = AudioBuilder(ToneSource(ToneType.SQUARE, 440.0, 2.0), client=client).build()

    assert isinstance(audio, Audio)
    assert audio.get_volume() == 1.0
    assert audio.get_loop() == 0
    assert audio.get_duration() == 2000
    assert audio.get_type() == ToneSource(ToneType.SQUARE, 440.0, 2.0)
    assert not client.is_disabled()
    assert client.is_running()


def test_build_looping_file():
    """Test the looping file scenario."""
    daemon = NullDaemon()
    client = create_test_client(daemon)

    audio = (
        AudioBuilder(FileSource(FileType.WAV, "audio.wav"), client=client)
        .volume(1.0)
        .does_loop(True)
        .loop_count(-1)
        .build()
    )

    assert audio.get_volume() == 1.0
    assert audio.get_loop() == -1
    audio.get_duration()
    audio.get_remaining()
    audio.get_start_time()
    audio.get_end_time()
    audio.is_paused()
    assert client.is_running()
    assert not client.is_disabled()


def test_build_sends_one_create_command():
    """Test the command the builder appends."""
    daemon = NullDaemon()
    client = create_test_client(daemon)

    audio = AudioBuilder(ToneSource(ToneType.SINE, 220.0, 1.5), client=client).volume(0.25).build()

    assert len(daemon.commands) == 1
    command = daemon.commands[0]
    assert command["Type"] == "tone"
    assert command["Volume"] == 0.25
    assert command["DoesLoop"] is False
    assert command["LoopCount"] == -1
    assert command["Args"] == {"WaveType": 0, "Pitch": 220.0, "Seconds": 1.5}
    assert audio.get_name() == command["Name"]


def test_build_waits_for_publication():
    """Test that build polls until the daemon publishes the source."""
    daemon = NullDaemon(publish_after=5)
    client = create_test_client(daemon)

    audio = AudioBuilder(ToneSource(ToneType.SAW, 330.0, 1.0), client=client).build()

    assert audio.get_duration() == 1000


def test_build_tolerates_malformed_snapshot():
    """Test that half-written snapshots during polling are retried."""
    daemon = NullDaemon(malformed_reads=3)
    client = create_test_client(daemon)

    audio = AudioBuilder(ToneSource(ToneType.TRIANGLE, 440.0, 0.5), client=client).build()

    assert audio.get_duration() == 500


def test_build_timeout():
    """Test that build gives up when the daemon never publishes the source."""
    daemon = NullDaemon()
    daemon.accepting = False
    client = create_test_client(daemon, timeout=0.05)

    start = time.monotonic()
    with pytest.raises(ConfirmTimeoutError) as exc_info:
        AudioBuilder(ToneSource(ToneType.SQUARE, 440.0, 2.0), client=client).name("lost").build()
    elapsed = time.monotonic() - start

    assert exc_info.value.name == "lost"
    assert exc_info.value.timeout == 0.05
    assert elapsed < 1.0


def test_build_channel_unavailable():
    """Test that a channel failure is raised at once, without polling."""
    daemon = NullDaemon()
    daemon.available = False
    client = create_test_client(daemon, timeout=5.0)

    start = time.monotonic()
    with pytest.raises(AudioIOError):
        AudioBuilder(ToneSource(ToneType.SQUARE, 440.0, 2.0), client=client).build()
    assert time.monotonic() - start < 1.0


def test_build_invalid_volume():
    """Test that unencodable parameters fail before anything is sent."""
    daemon = NullDaemon()
    client = create_test_client(daemon)

    with pytest.raises(CommandEncodeError):
        AudioBuilder(ToneSource(ToneType.SQUARE, 440.0, 2.0), client=client).volume(math.nan).build()

    assert daemon.commands == []


def test_volume_not_clamped():
    """Test that volume is sent as given."""
    daemon = NullDaemon()
    client = create_test_client(daemon)

    audio = AudioBuilder(ToneSource(ToneType.SQUARE, 440.0, 2.0), client=client).volume(2.5).build()

    assert audio.get_volume() == 2.5


def test_build_repeatedly():
    """Test that one builder can start several independent sources."""
    daemon = NullDaemon()
    client = create_test_client(daemon)
    builder = AudioBuilder(ToneSource(ToneType.SINE, 440.0, 1.0), client=client)

    first = builder.build()
    second = builder.build()

    assert first.id != second.id
    assert first.get_name() != second.get_name()


def test_fixed_name_resolves_to_first_match():
    """Test that a reused name resolves to the first listed source."""
    daemon = NullDaemon()
    client = create_test_client(daemon)
    builder = AudioBuilder(ToneSource(ToneType.SINE, 440.0, 1.0), client=client).name("shared")

    first = builder.build()
    second = builder.build()

    assert first.id == second.id
    assert len(daemon.sources()) == 2


def test_play_file_infers_format():
    """Test play_file with format inference."""
    daemon = NullDaemon()
    client = create_test_client(daemon)

    audio = client.play_file("song.mp3", volume=0.5)

    assert daemon.commands[0]["Type"] == "mp3"
    assert daemon.commands[0]["Args"] == {"Path": "song.mp3"}
    assert audio.get_type() == FileSource(FileType.MP3, "song.mp3")
    assert audio.get_volume() == 0.5


def test_play_tone():
    """Test play_tone convenience."""
    daemon = NullDaemon()
    client = create_test_client(daemon)

    audio = client.play_tone(ToneType.SQUARE, 440.0, 2.0, does_loop=True, loop_count=3)

    assert audio.get_loop() == 3


class StaleRecordReader:
    """Status reader listing an incomplete record before the daemon's own."""

    def __init__(self, daemon: NullDaemon):
        self.daemon = daemon

    def read(self) -> str:
        document = json.loads(self.daemon.read())
        document["Sources"].insert(0, {"ID": 99, "Name": "stale"})
        return json.dumps(document)


def test_build_with_malformed_sibling_record():
    """Test that an incomplete unrelated record does not block confirmation."""
    daemon = NullDaemon()
    client = AudioClient(AudioConfig(confirm_timeout=0.5, poll_interval=0.0),
                         channel=daemon, reader=StaleRecordReader(daemon))

    audio = client.builder(ToneSource(ToneType.SQUARE, 440.0, 2.0)).build()

    assert audio.get_duration() == 2000
