from codec.sortable64 import ALPHABET, ENCODED_LENGTH, DecodeError, decode, encode, is_valid

__all__ = ["ALPHABET", "ENCODED_LENGTH", "DecodeError", "encode", "decode", "is_valid"]
