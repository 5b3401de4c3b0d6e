"""Base62 codec for byte strings and unsigned 64-bit integers."""

from __future__ import annotations

from base62codec.base62 import (
    STD_ALPHABET,
    Base62Error,
    Base62OverflowError,
    Encoding,
    MAX_UINT64,
    InvalidCharacterError,
    StdEncoding,
    decode,
    decode_strict,
    decode_uint64,
    encode,
    encode_uint64,
)


__version__ = "0.1.0"

__all__ = [
    "STD_ALPHABET",
    "Base62Error",
    "Base62OverflowError",
    "Encoding",
    "MAX_UINT64",
    "InvalidCharacterError",
    "StdEncoding",
    "decode",
    "decode_strict",
    "decode_uint64",
    "encode",
    "encode_uint64",
]
