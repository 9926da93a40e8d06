from internal.logging import LogLevel, StructuredLogger, get_logger, parse_level
from core.errors import ClockError, ConfigError, DecodeError, Tiny64Error

__all__ = [
    "LogLevel",
    "StructuredLogger",
    "get_logger",
    "parse_level",
    "Tiny64Error",
    "ClockError",
    "ConfigError",
    "DecodeError",
]
