"""Crash handling utilities."""

import json
import os
import sys
import traceback

from core.errors import tracking_id
from utils.timestamp import format_timestamp

# No crash file unless configure() sets one
_crash_log = None


def configure(crash_file):
    """Set crash log file path from config. None disables the file."""
    global _crash_log
    _crash_log = crash_file


def _write_crash(crash_id, timestamp, exc_name, exc_msg, tb):
    """Append crash to file. Never raises."""
    if not _crash_log:
        return
    try:
        log_dir = os.path.dirname(_crash_log)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        record = {"id": crash_id, "timestamp": timestamp, "type": exc_name, "msg": exc_msg, "traceback": tb}
        with open(_crash_log, "a") as f:
            f.write(json.dumps(record) + "\n")
    except Exception:
        pass


def log_crash(exc_type, exc_value, exc_tb):
    """Log uncaught exception to stderr and file. Never raises."""
    try:
        crash_id = tracking_id()
        timestamp = format_timestamp()
        exc_name = exc_type.__name__ if exc_type else "Unknown"
        exc_msg = str(exc_value) if exc_value else ""
        tb = "".join(traceback.format_exception(exc_type, exc_value, exc_tb))

        sys.stderr.write(f"\n{'=' * 60}\nCRASH [{crash_id}] {timestamp}\n{'=' * 60}\n")
        sys.stderr.write(f"{exc_name}: {exc_msg}\n{'-' * 60}\n{tb}{'=' * 60}\n\n")
        _write_crash(crash_id, timestamp, exc_name, exc_msg, tb)
    except Exception:
        pass


def install_crash_handler():
    """Install global sync exception handler."""
    sys.excepthook = log_crash
