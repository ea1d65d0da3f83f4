from datetime import datetime, timezone
from typing import Optional

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def convert_to_timestamp(value: Optional[datetime]) -> Optional[int]:
    """Convert a datetime to whole seconds since the Unix epoch.

    Naive datetimes are taken to be in UTC.

    Raises:
        ValueError: If the value is before 1970-01-01.
    """
    if value is None:
        return None

    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)

    if value < _EPOCH:
        raise ValueError("Time can't be before 1970, January 1!")

    return int((value - _EPOCH).total_seconds())


def convert_from_timestamp(timestamp: int) -> datetime:
    return datetime.fromtimestamp(timestamp, tz=timezone.utc)
