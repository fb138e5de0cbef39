"""Provisional names for correlating create commands with status records."""

import threading


class ProvisionalNameCounter:
    """
    Monotonically increasing counter shared by every builder in the process.

    Starts at 0 when the module is imported and is never reset, so names
    drawn from one counter are pairwise distinct for the lifetime of the
    process. Names are not unique across processes.
    """

    def __init__(self, start: int = 0):
        self._next = start
        self._lock = threading.Lock()

    def next_value(self) -> int:
        """Return the current value and advance the counter."""
        with self._lock:
            value = self._next
            self._next += 1
        return value

    def next_name(self, prefix: str) -> str:
        """Return a fresh provisional name with the given prefix."""
        return f"{prefix}{self.next_value()}"


# Process-scoped; lives as long as the interpreter.
_counter = ProvisionalNameCounter()


def next_provisional_name(prefix: str = "py_audio_") -> str:
    """Return a fresh process-unique provisional name."""
    return _counter.next_name(prefix)
