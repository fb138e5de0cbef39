"""Daemon stand-ins."""

from replit_audio.backends.null_daemon import NullDaemon

__all__ = ["NullDaemon"]
