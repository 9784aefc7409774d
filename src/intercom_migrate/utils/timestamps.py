"""Timestamp formatting for Zendesk payloads."""

from datetime import datetime, timezone
from typing import Union

ISO_FORMAT = '%Y-%m-%dT%H:%M:%SZ'


def iso_time(posix: Union[int, float]) -> str:
    """Format POSIX seconds as a UTC ISO-8601 string.

    Fractions of a second are dropped.

    >>> iso_time(0)
    '1970-01-01T00:00:00Z'
    """
    return datetime.fromtimestamp(posix, tz=timezone.utc).strftime(ISO_FORMAT)
