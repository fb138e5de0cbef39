"""Example: Use the client against the in-memory daemon, no audio output."""

import logging

from replit_audio import AudioClient, AudioConfig, AudioUpdate, FileSource, ToneSource, ToneType
from replit_audio.backends.null_daemon import NullDaemon
from replit_audio.utils.log import set_log_level

if __name__ == "__main__":
    set_log_level(logging.DEBUG)

    daemon = NullDaemon(publish_after=2)
    client = AudioClient(AudioConfig(), channel=daemon, reader=daemon)

    tone = client.builder(ToneSource(ToneType.SQUARE, 440.0, 2.0)).build()
    print(f"Tone {tone.id}: volume={tone.get_volume()}, loop={tone.get_loop()}, "
          f"duration={tone.get_duration()} ms")

    music = client.builder(FileSource.from_path("audio.wav")).does_loop(True).build()
    music.update(AudioUpdate(volume=0.5, paused=True, does_loop=True, loop_count=-1))
    print(f"Music {music.id}: volume={music.get_volume()}, paused={music.is_paused()}, "
          f"started={music.get_start_time().isoformat()}")

    print(f"Running: {client.is_running()}, disabled: {client.is_disabled()}")
