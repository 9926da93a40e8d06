"""
Sortable base64 - fixed-length text form of 64-bit identifiers.

URL-safe base64 over the 8 big-endian bytes of the value, no padding
character, with the alphabet reordered by ASCII code so that string
order matches unsigned numeric order.

The 8 bytes split into two full 3-byte groups (8 symbols) and a trailing
2-byte group (3 symbols, the last one carrying 4 data bits and 2 zero
bits). That is the same as reading ``value << 2`` as eleven 6-bit digits.
"""

ALPHABET = "-0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ_abcdefghijklmnopqrstuvwxyz"
ENCODED_LENGTH = 11
MAX_VALUE = (1 << 64) - 1

_PAD_BITS = ENCODED_LENGTH * 6 - 64
_INDEX = {char: i for i, char in enumerate(ALPHABET)}


class DecodeError(ValueError):
    """Token is not the encoding of any 64-bit identifier."""

    def __init__(self, message, token=None):
        super().__init__(message)
        self.token = token
        self.context = {"token": token} if token is not None else {}


def encode(value):
    """Encode an unsigned 64-bit integer as an 11-character sortable string."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected int, got {type(value).__name__}")
    if not 0 <= value <= MAX_VALUE:
        raise ValueError(f"value out of unsigned 64-bit range: {value}")

    n = value << _PAD_BITS
    chars = []
    for _ in range(ENCODED_LENGTH):
        n, digit = divmod(n, 64)
        chars.append(ALPHABET[digit])

    return "".join(reversed(chars))


def decode(token):
    """Decode an 11-character sortable string back to its 64-bit integer."""
    if not isinstance(token, str):
        raise DecodeError(f"expected str, got {type(token).__name__}")
    if len(token) != ENCODED_LENGTH:
        raise DecodeError(f"expected {ENCODED_LENGTH} characters, got {len(token)}", token=token)

    n = 0
    for char in token:
        digit = _INDEX.get(char)
        if digit is None:
            raise DecodeError(f"invalid character {char!r}", token=token)
        n = (n << 6) | digit

    if n & ((1 << _PAD_BITS) - 1):
        raise DecodeError("non-zero padding bits in final character", token=token)

    return n >> _PAD_BITS


def is_valid(token):
    """True if token is the encoding of some 64-bit value."""
    try:
        decode(token)
    except DecodeError:
        return False
    return True
