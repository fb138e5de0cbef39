"""Command records understood by the audio daemon."""

import json
from typing import Any, Dict, TYPE_CHECKING
from replit_audio.core.exceptions import CommandEncodeError
from replit_audio.core.models import AudioType, FileSource, ToneSource
from replit_audio.utils.validate import validate_loop_count, validate_volume

if TYPE_CHECKING:
    from replit_audio.api.audio import AudioUpdate


def _encode_args(source: AudioType) -> Dict[str, Any]:
    if isinstance(source, FileSource):
        return {"Path": str(source.path)}
    if isinstance(source, ToneSource):
        return {
            "WaveType": int(source.tone),
            "Pitch": float(source.pitch),
            "Seconds": float(source.duration),
        }
    raise CommandEncodeError(f"Unsupported audio source: {source!r}")


def encode_create(
    name: str,
    source: AudioType,
    volume: float,
    does_loop: bool,
    loop_count: int,
) -> Dict[str, Any]:
    """
    Build the record that asks the daemon to start a new source.

    Args:
        name: Provisional name used to find the source in the status snapshot.
        source: File or tone to play.
        volume: Playback volume.
        does_loop: Whether the source loops.
        loop_count: Number of loops, negative for infinite.

    Returns:
        Command record with keys in the order the daemon expects.

    Raises:
        CommandEncodeError: If a parameter cannot be encoded.
    """
    args = _encode_args(source)
    return {
        "Name": name,
        "Type": source.kind,
        "Volume": validate_volume(volume),
        "DoesLoop": bool(does_loop),
        "LoopCount": validate_loop_count(loop_count),
        "Args": args,
    }


def encode_update(source_id: int, update: "AudioUpdate") -> Dict[str, Any]:
    """
    Build the record that changes a running source.

    Args:
        source_id: Identity assigned by the daemon.
        update: New playback parameters.

    Returns:
        Command record with keys in the order the daemon expects.
    """
    return {
        "ID": source_id,
        "Volume": validate_volume(update.volume),
        "Paused": bool(update.paused),
        "DoesLoop": bool(update.does_loop),
        "LoopCount": validate_loop_count(update.loop_count),
    }


def dump_command(record: Dict[str, Any]) -> str:
    """
    Serialize a command record to compact JSON.

    Raises:
        CommandEncodeError: If the record holds non-finite or non-JSON values.
    """
    try:
        return json.dumps(record, separators=(",", ":"), allow_nan=False)
    except (TypeError, ValueError) as e:
        raise CommandEncodeError(f"Cannot encode command: {e}") from e
