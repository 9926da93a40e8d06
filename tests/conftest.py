"""Pytest fixtures for all tests."""

import io
import sys

import pytest

import generation.generator
import internal.logging
from config import GeneratorConfig
from generation.generator import Generator
from internal.logging import LogLevel, StructuredLogger


class FakeClock:
    """Millisecond clock that returns scripted readings, then holds the last one."""

    def __init__(self, *readings):
        self.readings = list(readings)
        self.calls = 0

    def __call__(self):
        self.calls += 1
        if len(self.readings) > 1:
            return self.readings.pop(0)
        return self.readings[0]

    def push(self, *readings):
        """Queue readings after the current one."""
        self.readings.extend(readings)

    def set(self, reading):
        """Replace all pending readings with a single held one."""
        self.readings = [reading]


class FixedRandom:
    def __init__(self, value=0):
        self.value = value

    def __call__(self):
        return self.value


@pytest.fixture(autouse=True)
def isolate_globals(monkeypatch):
    """Fresh logger, per-thread generator context and excepthook for every test."""
    monkeypatch.setattr(internal.logging, "_logger", None)
    monkeypatch.setattr(generation.generator, "_context", generation.generator.threading.local())
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)


@pytest.fixture
def log_stream():
    """Capture structured log lines at DEBUG level."""
    stream = io.StringIO()
    StructuredLogger.configure(min_level=LogLevel.DEBUG, stream=stream)
    return stream


@pytest.fixture
def clock():
    return FakeClock(1_700_000_000_000)


@pytest.fixture
def generator(clock):
    """Generator driven by a fake clock and a constant random field."""
    return Generator(config=GeneratorConfig(), clock=clock, random_bits=FixedRandom(0))
