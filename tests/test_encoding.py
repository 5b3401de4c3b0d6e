from __future__ import annotations

import copy
import pickle

import pytest

from base62codec import STD_ALPHABET, Encoding, StdEncoding

from .conftest import REVERSED_CASE_ALPHABET, ReversedCaseEncoding


class TestEncodingConstruction:
    def test_std_encoding_alphabet(self) -> None:
        assert StdEncoding.alphabet == STD_ALPHABET
        assert StdEncoding.zero_symbol == "0"

    def test_accepts_bytes_alphabet(self) -> None:
        enc = Encoding(STD_ALPHABET.encode())
        assert enc == StdEncoding

    def test_decode_map_inverts_alphabet(self) -> None:
        for digit, symbol in enumerate(STD_ALPHABET):
            assert StdEncoding.decode_uint64(symbol) == digit
            assert StdEncoding.encode_uint64(digit) == symbol

    def test_zero_symbol_follows_alphabet(self) -> None:
        assert ReversedCaseEncoding.zero_symbol == "A"


class TestCustomAlphabet:
    def test_encode_uses_custom_symbols(self) -> None:
        # Same digits as the standard "30B", mapped through the new alphabet
        assert ReversedCaseEncoding.encode(b"-1") == "DAl"

    def test_leading_zero_bytes_use_custom_zero_symbol(self) -> None:
        assert ReversedCaseEncoding.encode(bytes(3)) == "AAA"
        assert ReversedCaseEncoding.decode("AAA") == bytes(3)

    def test_roundtrip(self) -> None:
        raw = b"\x00\x00custom alphabet"
        assert ReversedCaseEncoding.decode(ReversedCaseEncoding.encode(raw)) == raw

    def test_uint64_roundtrip(self) -> None:
        assert ReversedCaseEncoding.encode_uint64(0) == "A"
        encoded = ReversedCaseEncoding.encode_uint64(1234567890)
        assert ReversedCaseEncoding.decode_uint64(encoded) == 1234567890

    def test_encodings_coexist(self) -> None:
        raw = b"shared input"
        assert StdEncoding.encode(raw) != ReversedCaseEncoding.encode(raw)
        assert StdEncoding.decode(StdEncoding.encode(raw)) == raw

    def test_non_alphabet_symbols_of_std_are_valid_digits_here(self) -> None:
        enc = Encoding("!" + REVERSED_CASE_ALPHABET[1:])
        assert enc.decode_uint64("!") == 0
        assert StdEncoding.decode("!") == b""


class TestEncodingValueSemantics:
    def test_equality_and_hash(self) -> None:
        assert Encoding(STD_ALPHABET) == StdEncoding
        assert hash(Encoding(STD_ALPHABET)) == hash(StdEncoding)
        assert Encoding(REVERSED_CASE_ALPHABET) != StdEncoding

    def test_not_equal_to_other_types(self) -> None:
        assert StdEncoding != STD_ALPHABET

    def test_repr_shows_alphabet(self) -> None:
        assert repr(StdEncoding) == f"Encoding({STD_ALPHABET!r})"

    def test_copy_returns_self(self) -> None:
        assert copy.copy(StdEncoding) is StdEncoding
        assert copy.deepcopy(StdEncoding) is StdEncoding

    def test_pickle_roundtrip(self) -> None:
        restored = pickle.loads(pickle.dumps(ReversedCaseEncoding))  # noqa: S301
        assert restored == ReversedCaseEncoding
        assert restored.encode(b"-1") == "DAl"

    def test_has_no_instance_dict(self) -> None:
        with pytest.raises(AttributeError):
            StdEncoding.extra = 1  # type: ignore[attr-defined]

    def test_alphabet_is_read_only(self) -> None:
        with pytest.raises(AttributeError):
            StdEncoding.alphabet = "x"  # type: ignore[misc]
