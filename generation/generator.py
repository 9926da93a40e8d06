"""
Time-ordered 64-bit identifier generation.

Each Generator owns one (last_timestamp_ms, sequence) pair. Within a
millisecond the sequence counts up from 0; when all 4096 values are used
the call blocks until the clock moves on. The low 10 bits are random so
that independent generators (other threads, other processes) rarely
collide on the same (timestamp, sequence) pair.

Known limitation: a clock that steps backwards is not detected. The
sequence resets and the emitted IDs sort before earlier ones.
"""

import secrets
import threading
import time

from codec.sortable64 import decode, encode
from config import GeneratorConfig
from core.errors import ClockError
from generation.layout import MAX_SEQUENCE, RANDOM_BITS, pack, unpack
from internal.logging import get_logger
from utils.timestamp import epoch_millis


def now_millis():
    """Current time in milliseconds since Unix epoch.

    Raises ClockError if the system clock reports a time before the epoch.
    """
    clock_ms = epoch_millis()
    if clock_ms < 0:
        raise ClockError("System time is before Unix epoch", clock_ms=clock_ms)
    return clock_ms


def random_10bit():
    return secrets.randbits(RANDOM_BITS)


class Generator:
    """Produces monotonically ordered identifiers for one execution context.

    An instance may be shared between threads; the state update is done
    under a lock. The module-level functions give every thread its own
    instance instead.
    """

    def __init__(self, config=None, clock=None, random_bits=None):
        self.config = config or GeneratorConfig()
        self._clock = clock or now_millis
        self._random_bits = random_bits or random_10bit
        self._lock = threading.Lock()
        self._log = get_logger()
        self._last_timestamp_ms = 0
        self._sequence = 0

    @property
    def state(self):
        """Snapshot of (last_timestamp_ms, sequence)."""
        with self._lock:
            return (self._last_timestamp_ms, self._sequence)

    def next_id(self):
        """Next identifier as an unsigned 64-bit integer."""
        with self._lock:
            now = self._clock()
            if now == self._last_timestamp_ms:
                sequence = (self._sequence + 1) % (MAX_SEQUENCE + 1)
                if sequence == 0:
                    now = self._wait_next_millisecond(now)
            else:
                sequence = 0

            self._last_timestamp_ms = now
            self._sequence = sequence

        return pack(now, sequence, self._random_bits())

    def generate_id(self):
        """Next identifier as an 11-character sortable string."""
        return encode(self.next_id())

    def _wait_next_millisecond(self, current):
        self._log.debug("sequence exhausted, waiting for next millisecond", timestamp_ms=current)
        sleep = self.config.overflow_wait == "sleep"
        now = self._clock()
        while now == current:
            if sleep:
                time.sleep(self.config.sleep_interval)
            now = self._clock()
        return now


_context = threading.local()


def get_generator():
    """Generator owned by the calling thread, created on first use."""
    generator = getattr(_context, "generator", None)
    if generator is None:
        generator = _context.generator = Generator()
    return generator


def next_id():
    return get_generator().next_id()


def generate_id():
    """One 11-character identifier from the calling thread's generator."""
    return get_generator().generate_id()


def generate_ids(count):
    """List of count identifiers, in generation order."""
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    generator = get_generator()
    return [generator.generate_id() for _ in range(count)]


def parse_id(token):
    """Fields of an encoded identifier."""
    return unpack(decode(token))
