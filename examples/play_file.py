"""Example: Play an audio file through the audio daemon."""

import sys
import time

from replit_audio import AudioBuilder, AudioError, FileSource, is_disabled

if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python play_file.py <path_to_audio_file> [loop_count]")
        sys.exit(1)

    path = sys.argv[1]
    loop_count = int(sys.argv[2]) if len(sys.argv) > 2 else 0

    try:
        if is_disabled():
            print("Audio is disabled")
            sys.exit(1)

        source = FileSource.from_path(path)
        audio = (
            AudioBuilder(source)
            .does_loop(loop_count != 0)
            .loop_count(loop_count)
            .build()
        )
        print(f"Playing {path} as source {audio.id} ({audio.get_duration()} ms)")

        # Wait until the daemon drops the source
        try:
            while True:
                print(f"Remaining: {audio.get_remaining()} ms", end="\r")
                time.sleep(0.25)
        except AudioError:
            print("\nPlayback completed")
        except KeyboardInterrupt:
            print("\nInterrupted, pausing...")
            audio.pause()

    except AudioError as e:
        print(f"Error: {e}")
        sys.exit(1)
