"""Validation utilities."""

import math
from replit_audio.core.exceptions import CommandEncodeError


def validate_volume(volume: float) -> float:
    """
    Validate a volume before it is sent.

    The range is not clamped; the daemon decides what a volume means.
    Only values that cannot be encoded are rejected.
    """
    if isinstance(volume, bool) or not isinstance(volume, (int, float)):
        raise CommandEncodeError(f"Volume must be a number, got {volume!r}")
    if not math.isfinite(volume):
        raise CommandEncodeError(f"Volume must be finite, got {volume!r}")
    return float(volume)


def validate_loop_count(loop_count: int) -> int:
    """Validate a loop count. Negative means loop forever."""
    if isinstance(loop_count, bool) or not isinstance(loop_count, int):
        raise CommandEncodeError(f"Loop count must be an integer, got {loop_count!r}")
    return loop_count
