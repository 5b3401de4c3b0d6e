"""Base62 encoding of arbitrary byte strings and unsigned 64-bit integers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Self


if TYPE_CHECKING:
    from collections.abc import Buffer


_RADIX = 62

# Ten digits per chunk: 62**10 < 2**63, so a chunk always fits a machine word
_CHUNK_DIGITS = 10
_CHUNK_RADIX = _RADIX**_CHUNK_DIGITS
# Multiplier for a chunk of n digits, indexed by n (0..10)
_CHUNK_POWERS = tuple(_RADIX**n for n in range(_CHUNK_DIGITS + 1))

MAX_UINT64 = (1 << 64) - 1
# 62**11 > 2**64, so eleven digits hold any unsigned 64-bit value
_UINT64_MAX_DIGITS = 11

# Decode map entry for bytes that are not part of the alphabet
_INVALID = 0xFF

STD_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"


class Base62Error(ValueError):
    """Raised when base62 decoding fails."""


class InvalidCharacterError(Base62Error):
    """Raised when a string contains a symbol outside the alphabet."""

    def __init__(self, char: str, string: str | bytes) -> None:
        self.char = char
        self.string = string
        super().__init__(f"invalid character {char!r} in decoding a base62 string {string!r}")


class Base62OverflowError(Base62Error):
    """Raised when a decoded value does not fit in an unsigned 64-bit integer."""

    def __init__(self, string: str | bytes) -> None:
        self.string = string
        super().__init__(f"overflow in decoding a base62 string {string!r}")


def _as_symbols(string: str | bytes) -> bytes:
    """Return the raw symbol bytes of a str or bytes input.

    Raises:
        InvalidCharacterError: If a str character has no single-byte form.
        TypeError: If string is neither str nor a bytes-like object.
    """
    if isinstance(string, str):
        try:
            return string.encode("latin-1")
        except UnicodeEncodeError as e:
            raise InvalidCharacterError(string[e.start], string) from e
    return memoryview(string).tobytes()


class Encoding:
    """A base62 alphabet together with its reverse lookup table.

    The alphabet is an ordered sequence of 62 distinct single-byte symbols;
    the symbol at index 0 is the zero digit, which also marks leading zero
    bytes in the arbitrary-length encoding.

    Example:
        >>> enc = Encoding("0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
        >>> enc.encode(b"-1")
        '30B'
        >>> enc.decode("30B")
        b'-1'
        >>> enc.encode_uint64(0)
        '0'

    Note:
        The alphabet is not checked for length or duplicates. With fewer than
        62 symbols, or repeated ones, results for the affected digits are
        undefined. Instances are never mutated after construction and may be
        shared freely between threads.
    """

    __slots__ = ("_alphabet", "_decode_map", "_zero_symbol")

    def __init__(self, alphabet: str | bytes) -> None:
        """Build the table for an alphabet.

        Args:
            alphabet: The 62 symbols in digit order, as bytes or a latin-1 str.
        """
        if isinstance(alphabet, str):
            alphabet = alphabet.encode("latin-1")
        self._alphabet = bytes(alphabet)
        decode_map = bytearray([_INVALID]) * 256
        for digit, symbol in enumerate(self._alphabet[:_RADIX]):
            decode_map[symbol] = digit
        self._decode_map = bytes(decode_map)
        self._zero_symbol = self._alphabet[0]

    @property
    def alphabet(self) -> str:
        """The alphabet symbols in digit order."""
        return self._alphabet.decode("latin-1")

    @property
    def zero_symbol(self) -> str:
        """The symbol for digit 0."""
        return chr(self._zero_symbol)

    def __repr__(self) -> str:
        """Return a detailed representation."""
        return f"Encoding({self.alphabet!r})"

    def __hash__(self) -> int:
        """Return hash for use in sets and dict keys."""
        return hash(self._alphabet)

    def __eq__(self, other: object) -> bool:
        """Check equality with another Encoding."""
        if isinstance(other, Encoding):
            return self._alphabet == other._alphabet
        return NotImplemented

    def __copy__(self) -> Self:
        """Return self (Encodings are immutable)."""
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        """Return self (Encodings are immutable)."""
        return self

    def __reduce__(self) -> tuple[type[Self], tuple[bytes]]:
        """Support pickling for multiprocessing, caching, etc."""
        return (type(self), (self._alphabet,))

    def encode(self, data: Buffer) -> str:
        """Encode a byte string of any length.

        Each leading zero byte becomes one zero symbol at the front of the
        result, so ``bytes(3)`` encodes to three zero symbols and ``b""`` to
        an empty string.

        Raises:
            TypeError: If data does not support the buffer protocol.
        """
        data = memoryview(data).tobytes()
        alphabet = self._alphabet
        num = int.from_bytes(data, "big")

        # Digits are collected least significant first and reversed at the end
        digits = bytearray()
        while num > 0:
            num, chunk = divmod(num, _CHUNK_RADIX)
            if num == 0:
                # Most significant chunk: no padding
                while chunk > 0:
                    chunk, digit = divmod(chunk, _RADIX)
                    digits.append(alphabet[digit])
            else:
                for _ in range(_CHUNK_DIGITS):
                    chunk, digit = divmod(chunk, _RADIX)
                    digits.append(alphabet[digit])

        leading_zeros = len(data) - len(data.lstrip(b"\x00"))
        digits.extend(alphabet[:1] * leading_zeros)
        digits.reverse()
        return digits.decode("latin-1")

    def decode_strict(self, string: str | bytes) -> bytes:
        """Decode a string produced by :meth:`encode`.

        Raises:
            InvalidCharacterError: If any symbol is not part of the alphabet.
        """
        symbols = _as_symbols(string)
        digits = symbols.translate(self._decode_map)
        bad = digits.find(_INVALID)
        if bad >= 0:
            raise InvalidCharacterError(chr(symbols[bad]), string)

        num = 0
        for start in range(0, len(digits), _CHUNK_DIGITS):
            chunk = digits[start : start + _CHUNK_DIGITS]
            value = 0
            for digit in chunk:
                value = value * _RADIX + digit
            num = num * _CHUNK_POWERS[len(chunk)] + value

        magnitude = num.to_bytes((num.bit_length() + 7) // 8, "big")
        leading_zeros = len(symbols) - len(symbols.lstrip(self._alphabet[:1]))
        return b"\x00" * leading_zeros + magnitude

    def decode(self, string: str | bytes) -> bytes:
        """Decode a string produced by :meth:`encode`.

        Returns an empty byte string if any symbol is not part of the
        alphabet, wherever it occurs. An empty result therefore cannot be
        told apart from invalid input; use :meth:`decode_strict` when the
        difference matters.
        """
        try:
            return self.decode_strict(string)
        except InvalidCharacterError:
            return b""

    def encode_uint64(self, num: int) -> str:
        """Encode an unsigned 64-bit integer; zero encodes to the zero symbol.

        Raises:
            TypeError: If num is not an int.
            ValueError: If num is outside the unsigned 64-bit range.
        """
        if not isinstance(num, int) or isinstance(num, bool):
            raise TypeError(f"Expected int, got {type(num).__name__}")
        if not 0 <= num <= MAX_UINT64:
            raise ValueError(f"Value must be in range [0, 2**64 - 1], got {num}")
        if num == 0:
            return self.zero_symbol

        result = bytearray(_UINT64_MAX_DIGITS)
        pos = _UINT64_MAX_DIGITS
        while num > 0:
            num, digit = divmod(num, _RADIX)
            pos -= 1
            result[pos] = self._alphabet[digit]
        return result[pos:].decode("latin-1")

    def decode_uint64(self, string: str | bytes) -> int:
        """Decode a string produced by :meth:`encode_uint64`.

        Raises:
            InvalidCharacterError: If any symbol is not part of the alphabet.
            Base62OverflowError: If the value exceeds 2**64 - 1.
        """
        symbols = _as_symbols(string)
        num = 0
        for symbol in symbols:
            digit = self._decode_map[symbol]
            if digit == _INVALID:
                raise InvalidCharacterError(chr(symbol), string)
            num = num * _RADIX + digit
            if num > MAX_UINT64:
                raise Base62OverflowError(string)
        return num


StdEncoding = Encoding(STD_ALPHABET)

encode = StdEncoding.encode
decode = StdEncoding.decode
decode_strict = StdEncoding.decode_strict
encode_uint64 = StdEncoding.encode_uint64
decode_uint64 = StdEncoding.decode_uint64
