"""Resolver for the daemon's status snapshot."""

import json
from replit_audio.core.exceptions import SourceNotFoundError, StatusParseError
from replit_audio.core.interfaces import IStatusReader
from replit_audio.core.models import SourceStatus, StatusSnapshot
from replit_audio.utils.log import get_logger

logger = get_logger(__name__)


def _reject_constant(name: str):
    raise StatusParseError(f"Error in parsing status JSON: non-finite number {name}")


class StatusResolver:
    """
    Reads the status snapshot and looks up source records.

    Nothing is cached: the daemon may rewrite the snapshot at any time, so
    every call reads and parses the whole document again. Snapshots are
    small, so the repeated parsing is accepted.
    """

    def __init__(self, reader: IStatusReader):
        """
        Initialize resolver.

        Args:
            reader: Source of the raw status document.
        """
        self._reader = reader

    def _load(self) -> StatusSnapshot:
        text = self._reader.read()
        try:
            document = json.loads(text, parse_constant=_reject_constant)
        except ValueError as e:
            raise StatusParseError(f"Error in parsing status JSON: {e}") from e
        return StatusSnapshot.from_dict(document)

    def parse_status(self) -> StatusSnapshot:
        """
        Read and parse the current snapshot, validating every source record.

        Returns:
            Parsed StatusSnapshot.

        Raises:
            AudioIOError: If the snapshot cannot be read.
            StatusParseError: If the snapshot or any record in it is malformed.
        """
        snapshot = self._load()
        snapshot.sources  # validates every record
        return snapshot

    def find_by_identity(self, source_id: int) -> SourceStatus:
        """
        Find the record with the given daemon-assigned identity.

        Other records in the snapshot are not validated.

        Raises:
            SourceNotFoundError: If no record has this identity.
            StatusParseError: If the snapshot or the matching record is malformed.
        """
        source = self._load().find_by_id(source_id)
        if source is None:
            raise SourceNotFoundError(f"No audio source found with id {source_id}", source_id)
        return source

    def find_by_name(self, name: str) -> SourceStatus:
        """
        Find the first record with the given provisional name.

        Other records in the snapshot are not validated.

        Raises:
            SourceNotFoundError: If no record has this name.
            StatusParseError: If the snapshot or the matching record is malformed.
        """
        source = self._load().find_by_name(name)
        if source is None:
            raise SourceNotFoundError(f"No audio source found with name {name}", name)
        return source

    def is_running(self) -> bool:
        """Whether the daemon reports any source playing."""
        return self._load().running

    def is_disabled(self) -> bool:
        """Whether the daemon reports itself disabled."""
        return self._load().disabled
