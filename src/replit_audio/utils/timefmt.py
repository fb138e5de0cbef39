"""Status snapshot timestamp parsing."""

import re
from datetime import datetime, timezone
from replit_audio.core.exceptions import TimestampFormatError

# yyyy-mm-ddThh:mm:ss[.fffffffff]Z, fraction of 1 to 9 digits or none, always UTC
_TIMESTAMP = re.compile(
    r"(\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})(?:\.(\d{1,9}))?Z",
    re.ASCII,
)


def parse_timestamp(value: str) -> datetime:
    """
    Parse a status timestamp into a timezone-aware UTC datetime.

    The fraction is optional; the daemon leaves it out when it is zero.
    Fractions finer than a microsecond are truncated.

    Args:
        value: Timestamp string from the status snapshot.

    Returns:
        Parsed datetime in UTC.

    Raises:
        TimestampFormatError: If the value does not match the fixed format.
    """
    match = _TIMESTAMP.fullmatch(value) if isinstance(value, str) else None
    if match is None:
        raise TimestampFormatError(f"Invalid status timestamp: {value!r}")

    whole, fraction = match.groups()
    try:
        parsed = datetime.strptime(whole, "%Y-%m-%dT%H:%M:%S")
    except ValueError as e:
        raise TimestampFormatError(f"Invalid status timestamp: {value!r} ({e})") from e

    micros = int(fraction[:6].ljust(6, "0")) if fraction else 0
    return parsed.replace(microsecond=micros, tzinfo=timezone.utc)
