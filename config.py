"""Configuration for applications embedding the generator.

The tiny64 command line reads no configuration and always runs on Config()
defaults. Embedding code builds these objects directly or via load_config(path)
and passes them to Generator(config=...) and tiny64.main(config=...).
"""

import json
from pathlib import Path

from core.errors import ConfigError

OVERFLOW_WAIT_MODES = ("spin", "sleep")


class GeneratorConfig:
    __slots__ = ("overflow_wait", "sleep_interval")

    def __init__(self, overflow_wait="spin", sleep_interval=0.0001):
        if overflow_wait not in OVERFLOW_WAIT_MODES:
            raise ConfigError(f"overflow_wait must be one of {OVERFLOW_WAIT_MODES}", field="overflow_wait")
        if sleep_interval < 0:
            raise ConfigError("sleep_interval must be >= 0", field="sleep_interval")
        self.overflow_wait = overflow_wait
        self.sleep_interval = sleep_interval


class LoggingConfig:
    __slots__ = ("level", "crash_file")

    def __init__(self, level="WARN", crash_file=None):
        self.level = level
        self.crash_file = crash_file


class Config:
    __slots__ = ("generator", "logging")

    def __init__(self, generator=None, logging=None):
        self.generator = generator or GeneratorConfig()
        self.logging = logging or LoggingConfig()

    @classmethod
    def from_dict(cls, d):
        return cls(
            GeneratorConfig(**d.get("generator", {})),
            LoggingConfig(**d.get("logging", {})),
        )


def load_config(path=None):
    """Load config from an explicit JSON file. Defaults when no path is given or the file is missing."""
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        return Config()

    with open(config_path) as file:
        return Config.from_dict(json.load(file))
