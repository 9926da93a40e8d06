"""Bit layout of a 64-bit identifier.

    [ 42 bits: timestamp (ms since Unix epoch) ]
    [ 12 bits: sequence number                ]
    [ 10 bits: randomness                     ]
"""

from utils.timestamp import from_millis

TIMESTAMP_BITS = 42
SEQUENCE_BITS = 12
RANDOM_BITS = 10

TIMESTAMP_MASK = (1 << TIMESTAMP_BITS) - 1  # 0x3FF_FFFF_FFFF
SEQUENCE_MASK = (1 << SEQUENCE_BITS) - 1
RANDOM_MASK = (1 << RANDOM_BITS) - 1

SEQUENCE_SHIFT = RANDOM_BITS
TIMESTAMP_SHIFT = SEQUENCE_BITS + RANDOM_BITS

MAX_SEQUENCE = SEQUENCE_MASK


class IdFields:
    """Unpacked fields of an identifier."""

    __slots__ = ("timestamp_ms", "sequence", "random")

    def __init__(self, timestamp_ms, sequence, random):
        self.timestamp_ms = timestamp_ms
        self.sequence = sequence
        self.random = random

    @property
    def datetime(self):
        """UTC creation time. Only meaningful until the 42-bit timestamp wraps (year 2109)."""
        return from_millis(self.timestamp_ms)

    def __eq__(self, other):
        if not isinstance(other, IdFields):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __hash__(self):
        return hash(self.as_tuple())

    def __repr__(self):
        return f"IdFields(timestamp_ms={self.timestamp_ms}, sequence={self.sequence}, random={self.random})"

    def as_tuple(self):
        return (self.timestamp_ms, self.sequence, self.random)

    def to_dict(self):
        return {
            "timestamp_ms": self.timestamp_ms,
            "sequence": self.sequence,
            "random": self.random,
            "datetime": self.datetime.isoformat(),
        }


def pack(timestamp_ms, sequence, random_bits):
    """Pack fields into a 64-bit value. Each field is truncated to its width."""
    return (
        ((timestamp_ms & TIMESTAMP_MASK) << TIMESTAMP_SHIFT)
        | ((sequence & SEQUENCE_MASK) << SEQUENCE_SHIFT)
        | (random_bits & RANDOM_MASK)
    )


def unpack(value):
    """Split a 64-bit value into its fields."""
    return IdFields(
        (value >> TIMESTAMP_SHIFT) & TIMESTAMP_MASK,
        (value >> SEQUENCE_SHIFT) & SEQUENCE_MASK,
        value & RANDOM_MASK,
    )
