"""Status snapshot resolution."""

from replit_audio.status.resolver import StatusResolver

__all__ = ["StatusResolver"]
