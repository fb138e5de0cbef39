"""Tests for command encoding."""

import math
import pytest
from replit_audio.api.audio import AudioUpdate
from replit_audio.core.exceptions import AudioFormatError, CommandEncodeError
from replit_audio.core.models import FileSource, FileType, ToneSource, ToneType
from replit_audio.ipc.encoding import dump_command, encode_create, encode_update


def test_encode_tone():
    """Test the wire form of a tone create command."""
    record = encode_create("py_audio_0", ToneSource(ToneType.SQUARE, 440, 2), 1.0, False, -1)

    assert dump_command(record) == (
        '{"Name":"py_audio_0","Type":"tone","Volume":1.0,"DoesLoop":false,'
        '"LoopCount":-1,"Args":{"WaveType":3,"Pitch":440.0,"Seconds":2.0}}'
    )


def test_encode_file():
    """Test the wire form of a file create command."""
    record = encode_create("song", FileSource(FileType.AIFF, "/music/a.aiff"), 0.5, True, 3)

    assert dump_command(record) == (
        '{"Name":"song","Type":"aiff","Volume":0.5,"DoesLoop":true,'
        '"LoopCount":3,"Args":{"Path":"/music/a.aiff"}}'
    )


def test_encode_update():
    """Test the wire form of an update command."""
    record = encode_update(12, AudioUpdate(volume=0.2, paused=True, does_loop=False, loop_count=0))

    assert dump_command(record) == (
        '{"ID":12,"Volume":0.2,"Paused":true,"DoesLoop":false,"LoopCount":0}'
    )


def test_type_discriminators():
    """Test the daemon's type strings and wave codes."""
    assert [t.value for t in FileType] == ["wav", "aiff", "mp3"]
    assert [int(t) for t in ToneType] == [0, 1, 2, 3]
    assert ToneSource(ToneType.SINE, 1.0, 1.0).kind == "tone"
    assert FileSource(FileType.MP3, "x.mp3").kind == "mp3"


@pytest.mark.parametrize("volume", [math.nan, math.inf, "loud", None, True])
def test_encode_invalid_volume(volume):
    """Test rejected volumes."""
    with pytest.raises(CommandEncodeError):
        encode_create("x", ToneSource(ToneType.SINE, 440.0, 1.0), volume, False, -1)


@pytest.mark.parametrize("loop_count", [1.5, "2", None, False])
def test_encode_invalid_loop_count(loop_count):
    """Test rejected loop counts."""
    with pytest.raises(CommandEncodeError):
        encode_update(1, AudioUpdate(loop_count=loop_count))


def test_encode_non_finite_pitch():
    """Test that a non-finite tone parameter cannot be serialized."""
    record = encode_create("x", ToneSource(ToneType.SINE, math.inf, 1.0), 1.0, False, -1)

    with pytest.raises(CommandEncodeError):
        dump_command(record)


def test_encode_unknown_source():
    """Test that only file and tone sources are accepted."""
    with pytest.raises(CommandEncodeError):
        encode_create("x", "audio.wav", 1.0, False, -1)


def test_file_type_from_path():
    """Test format inference from extensions."""
    assert FileType.from_path("a.wav") is FileType.WAV
    assert FileType.from_path("A.WAVE") is FileType.WAV
    assert FileType.from_path("dir/b.aif") is FileType.AIFF
    assert FileType.from_path("c.mp3") is FileType.MP3
    assert FileSource.from_path("c.mp3") == FileSource(FileType.MP3, "c.mp3")

    with pytest.raises(AudioFormatError):
        FileType.from_path("d.ogg")
