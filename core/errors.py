"""Custom errors with tracking IDs."""

import secrets

from codec.sortable64 import DecodeError, encode
from utils.timestamp import format_timestamp

__all__ = ["Tiny64Error", "ClockError", "ConfigError", "DecodeError", "tracking_id"]


def tracking_id():
    """Random 11-character token for tagging errors and crash reports."""
    return encode(secrets.randbits(64))


class Tiny64Error(Exception):
    """Base error with unique ID and timestamp for tracking."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.error_id = tracking_id()
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause

    def __str__(self):
        return f"[{self.error_id}] {super().__str__()}"


class ClockError(Tiny64Error):
    """System clock cannot produce a valid timestamp field."""

    def __init__(self, message, clock_ms=None, **kwargs):
        context = kwargs.pop("context", {})
        if clock_ms is not None:
            context["clock_ms"] = clock_ms
        super().__init__(message, context=context, **kwargs)


class ConfigError(Tiny64Error):
    """Invalid configuration values."""

    def __init__(self, message, field=None, **kwargs):
        context = kwargs.pop("context", {})
        if field:
            context["field"] = field
        super().__init__(message, context=context, **kwargs)
