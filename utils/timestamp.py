"""Millisecond timestamp utilities."""

import time
from datetime import datetime, timedelta, timezone


def epoch_millis():
    """Current time in milliseconds since Unix epoch. Negative before the epoch."""
    return time.time_ns() // 1_000_000


def from_millis(epoch_ms):
    """UTC datetime for a millisecond timestamp."""
    seconds, millis = divmod(epoch_ms, 1000)
    return datetime.fromtimestamp(seconds, tz=timezone.utc) + timedelta(milliseconds=millis)


def format_timestamp(epoch_ms=None):
    """Format timestamp as ISO 8601 with milliseconds."""
    if epoch_ms is None:
        epoch_ms = epoch_millis()

    return from_millis(epoch_ms).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"
