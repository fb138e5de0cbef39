"""Example: Play a scale of tones with different waveforms."""

import sys
import time

from replit_audio import AudioClient, AudioError, ToneType

if __name__ == "__main__":
    client = AudioClient()
    pitches = [261.63, 293.66, 329.63, 349.23, 392.00, 440.00, 493.88, 523.25]

    try:
        for i, pitch in enumerate(pitches):
            tone = list(ToneType)[i % len(ToneType)]
            audio = client.play_tone(tone, pitch, 0.4, volume=0.5)
            print(f"{tone.name.lower():>8} {pitch:7.2f} Hz -> source {audio.id}")
            time.sleep(0.4)
    except AudioError as e:
        print(f"Error: {e}")
        sys.exit(1)
