"""Wire format and file transport for the daemon's command and status files."""

from replit_audio.ipc.encoding import dump_command, encode_create, encode_update
from replit_audio.ipc.files import FileCommandChannel, FileStatusReader

__all__ = [
    "dump_command",
    "encode_create",
    "encode_update",
    "FileCommandChannel",
    "FileStatusReader",
]
