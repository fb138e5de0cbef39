"""Data models and configuration classes."""

import math
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
from replit_audio.core.exceptions import AudioFormatError, StatusParseError


class FileType(Enum):
    """Audio file formats understood by the daemon."""

    WAV = "wav"
    AIFF = "aiff"
    MP3 = "mp3"

    @classmethod
    def from_path(cls, path: str) -> "FileType":
        """
        Infer the file type from a path's extension.

        Args:
            path: Path to an audio file.

        Returns:
            Matching FileType.

        Raises:
            AudioFormatError: If the extension is not supported.
        """
        ext = Path(path).suffix.lower()
        file_type = _EXTENSIONS.get(ext)
        if file_type is None:
            raise AudioFormatError(
                f"Cannot infer audio format for {path}. "
                f"Supported extensions: {', '.join(sorted(_EXTENSIONS))}"
            )
        return file_type


_EXTENSIONS: Dict[str, FileType] = {
    ".wav": FileType.WAV,
    ".wave": FileType.WAV,
    ".aif": FileType.AIFF,
    ".aiff": FileType.AIFF,
    ".mp3": FileType.MP3,
}


class ToneType(IntEnum):
    """Tone waveforms; the value is the daemon's wave type code."""

    SINE = 0
    TRIANGLE = 1
    SAW = 2
    SQUARE = 3


@dataclass(frozen=True)
class FileSource:
    """An audio file to play."""

    file_type: FileType
    """Format of the file."""

    path: str
    """Path of the file as seen by the daemon."""

    @property
    def kind(self) -> str:
        """Command type discriminator."""
        return self.file_type.value

    @classmethod
    def from_path(cls, path: str) -> "FileSource":
        """Create a file source, inferring the format from the extension."""
        return cls(FileType.from_path(path), path)


@dataclass(frozen=True)
class ToneSource:
    """A synthesized tone to play."""

    tone: ToneType
    """Waveform of the tone."""

    pitch: float
    """Frequency in Hz."""

    duration: float
    """Length in seconds."""

    @property
    def kind(self) -> str:
        """Command type discriminator."""
        return "tone"


AudioType = Union[FileSource, ToneSource]


@dataclass
class AudioConfig:
    """Configuration for AudioClient."""

    command_path: str = "/tmp/audio"
    """Command channel the daemon reads from."""

    status_path: str = "/tmp/audioStatus.json"
    """Status snapshot the daemon publishes."""

    confirm_timeout: float = 2.0
    """Seconds to wait for a created source to appear in the status snapshot."""

    poll_interval: float = 0.001
    """Sleep between status polls in seconds. 0 spins without sleeping."""

    name_prefix: str = "py_audio_"
    """Prefix of generated provisional names."""


def _require(record: Dict[str, Any], key: str, kinds, what: str):
    if key not in record:
        raise StatusParseError(f"{what} is missing field {key!r}")
    value = record[key]
    # bool is an int subclass; JSON true/false must not pass as a number
    if isinstance(value, bool) and bool not in kinds:
        raise StatusParseError(f"{what} field {key!r} has invalid value {value!r}")
    if not isinstance(value, kinds):
        raise StatusParseError(f"{what} field {key!r} has invalid value {value!r}")
    if isinstance(value, float) and not math.isfinite(value):
        raise StatusParseError(f"{what} field {key!r} is not finite: {value!r}")
    return value


@dataclass
class SourceStatus:
    """One playback source as published in the status snapshot."""

    id: int
    name: str
    volume: float
    paused: bool
    loop: int
    duration: int
    """Total duration in milliseconds."""
    remaining: int
    """Remaining time in milliseconds."""
    start_time: str
    end_time: str
    extra: Dict[str, Any] = field(default_factory=dict)
    """Any other fields of the record, e.g. file or tone parameters."""

    _KNOWN = (
        "ID", "Name", "Volume", "Paused", "Loop",
        "Duration", "Remaining", "StartTime", "EndTime",
    )

    @classmethod
    def from_dict(cls, record: Any) -> "SourceStatus":
        """
        Build a SourceStatus from a decoded status record.

        Raises:
            StatusParseError: If a documented field is missing or mistyped.
        """
        if not isinstance(record, dict):
            raise StatusParseError(f"Source record is not an object: {record!r}")
        what = "Source record"
        return cls(
            id=_require(record, "ID", (int,), what),
            name=_require(record, "Name", (str,), what),
            volume=float(_require(record, "Volume", (int, float), what)),
            paused=_require(record, "Paused", (bool,), what),
            loop=_require(record, "Loop", (int,), what),
            duration=int(_require(record, "Duration", (int, float), what)),
            remaining=int(_require(record, "Remaining", (int, float), what)),
            start_time=_require(record, "StartTime", (str,), what),
            end_time=_require(record, "EndTime", (str,), what),
            extra={k: v for k, v in record.items() if k not in cls._KNOWN},
        )


@dataclass
class StatusSnapshot:
    """
    The daemon's published state at one point in time.

    Source records are kept as decoded and validated only when read, so one
    incomplete record does not hide the others from lookups.
    """

    running: bool
    """Whether any source is playing."""

    disabled: bool
    """Whether the audio daemon is disabled."""

    records: List[Any] = field(default_factory=list)
    """Source records as decoded from the document."""

    @classmethod
    def from_dict(cls, document: Any) -> "StatusSnapshot":
        """
        Build a StatusSnapshot from a decoded status document.

        Only the top-level fields are validated here.

        Raises:
            StatusParseError: If the document is not a valid status object.
        """
        if not isinstance(document, dict):
            raise StatusParseError("Status document is not a JSON object")
        what = "Status document"
        running = _require(document, "Running", (bool,), what)
        disabled = _require(document, "Disabled", (bool,), what)
        records = document.get("Sources")
        if records is None:
            records = []
        elif not isinstance(records, list):
            raise StatusParseError("Status document field 'Sources' is not an array")
        return cls(running=running, disabled=disabled, records=records)

    @property
    def sources(self) -> List[SourceStatus]:
        """
        All source records, validated.

        Raises:
            StatusParseError: If any record is malformed.
        """
        return [SourceStatus.from_dict(r) for r in self.records]

    def _find(self, key: str, value) -> Optional[SourceStatus]:
        for record in self.records:
            if not isinstance(record, dict):
                continue
            candidate = record.get(key)
            if not isinstance(candidate, bool) and candidate == value:
                return SourceStatus.from_dict(record)
        return None

    def find_by_id(self, source_id: int) -> Optional[SourceStatus]:
        """
        Return the first record with the given identity, or None.

        Raises:
            StatusParseError: If the matching record is malformed.
        """
        return self._find("ID", source_id)

    def find_by_name(self, name: str) -> Optional[SourceStatus]:
        """
        Return the first record with the given provisional name, or None.

        Raises:
            StatusParseError: If the matching record is malformed.
        """
        return self._find("Name", name)
