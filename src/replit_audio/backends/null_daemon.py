"""In-memory stand-in for the audio daemon (no actual audio output)."""

import json
import threading
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional
from replit_audio.core.exceptions import AudioIOError
from replit_audio.core.interfaces import ICommandChannel, IStatusReader
from replit_audio.utils.log import get_logger

logger = get_logger(__name__)


def format_timestamp(moment: datetime) -> str:
    """Format a UTC datetime the way the daemon writes timestamps."""
    return moment.strftime("%Y-%m-%dT%H:%M:%S.%f") + "000Z"


class NullDaemon(ICommandChannel, IStatusReader):
    """
    Daemon stand-in serving as both command channel and status reader.

    Create commands become status records with sequential IDs. A record is
    published only after `publish_after` further status reads, so callers
    have to poll for it like they would against the real daemon. Update
    commands change the matching record in place.
    """

    def __init__(
        self,
        publish_after: int = 0,
        file_duration_ms: int = 1000,
        malformed_reads: int = 0,
        running: Optional[bool] = None,
        disabled: bool = False,
    ):
        """
        Initialize NullDaemon.

        Args:
            publish_after: Status reads a new source stays unpublished for.
            file_duration_ms: Duration reported for file sources.
            malformed_reads: Number of initial reads returning a truncated document.
            running: Fixed Running flag (default: whether any source is published).
            disabled: Disabled flag to report.
        """
        self.publish_after = publish_after
        self.file_duration_ms = file_duration_ms
        self.malformed_reads = malformed_reads
        self.running = running
        self.disabled = disabled
        self.accepting = True
        self.available = True
        self.commands: List[Dict[str, Any]] = []
        self._sources: List[Dict[str, Any]] = []
        self._pending: List[List[Any]] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def append(self, payload: str) -> None:
        """Receive one serialized command."""
        if not self.available:
            raise AudioIOError("Error in opening command channel: daemon unavailable", "<null>")
        command = json.loads(payload)
        with self._lock:
            self.commands.append(command)
            if not self.accepting:
                logger.debug(f"NullDaemon: ignoring command {command}")
                return
            if "ID" in command:
                self._apply_update(command)
            else:
                self._pending.append([self.publish_after, self._create_record(command)])

    def read(self) -> str:
        """Return the current status document."""
        if not self.available:
            raise AudioIOError("Error in reading status file: daemon unavailable", "<null>")
        with self._lock:
            self._advance_pending()
            if self.malformed_reads > 0:
                self.malformed_reads -= 1
                return '{"Running": true, "Sources": ['
            running = self.running if self.running is not None else bool(self._sources)
            document = {
                "Running": running,
                "Disabled": self.disabled,
                "Sources": [dict(s) for s in self._sources],
            }
        return json.dumps(document)

    def remove(self, source_id: int) -> None:
        """Drop a source from the snapshot, as when it finishes playing."""
        with self._lock:
            self._sources = [s for s in self._sources if s["ID"] != source_id]

    def sources(self) -> List[Dict[str, Any]]:
        """Published status records."""
        with self._lock:
            return [dict(s) for s in self._sources]

    def _advance_pending(self) -> None:
        still_pending = []
        for entry in self._pending:
            if entry[0] <= 0:
                self._sources.append(entry[1])
                logger.debug(f"NullDaemon: published {entry[1]['Name']} as {entry[1]['ID']}")
            else:
                entry[0] -= 1
                still_pending.append(entry)
        self._pending = still_pending

    def _create_record(self, command: Dict[str, Any]) -> Dict[str, Any]:
        args = command.get("Args", {})
        if command["Type"] == "tone":
            duration = int(args["Seconds"] * 1000)
        else:
            duration = self.file_duration_ms

        start = datetime.now(timezone.utc)
        record = {
            "ID": self._next_id,
            "Name": command["Name"],
            "Type": command["Type"],
            "Volume": command["Volume"],
            "Paused": False,
            "Loop": command["LoopCount"] if command["DoesLoop"] else 0,
            "Duration": duration,
            "Remaining": duration,
            "StartTime": format_timestamp(start),
            "EndTime": format_timestamp(start + timedelta(milliseconds=duration)),
        }
        record.update(args)
        self._next_id += 1
        return record

    def _apply_update(self, command: Dict[str, Any]) -> None:
        for record in self._sources:
            if record["ID"] == command["ID"]:
                record["Volume"] = command["Volume"]
                record["Paused"] = command["Paused"]
                record["Loop"] = command["LoopCount"] if command["DoesLoop"] else 0
                return
        logger.debug(f"NullDaemon: update for unknown source {command['ID']}")
