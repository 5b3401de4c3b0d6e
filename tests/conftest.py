"""Shared test fixtures and Hypothesis strategies."""

from __future__ import annotations

from hypothesis import strategies as st

from base62codec import MAX_UINT64, STD_ALPHABET, Encoding


# =============================================================================
# Alphabets
# =============================================================================

# Standard alphabet reordered: uppercase, lowercase, digits
REVERSED_CASE_ALPHABET = STD_ALPHABET[36:] + STD_ALPHABET[10:36] + STD_ALPHABET[:10]
ReversedCaseEncoding = Encoding(REVERSED_CASE_ALPHABET)


# =============================================================================
# Hypothesis Strategies
# =============================================================================

# Strategy for valid base62 characters
base62_char_strategy = st.sampled_from(STD_ALPHABET)

# Strategy for valid base62 strings of any length
base62_strategy = st.text(base62_char_strategy, max_size=200)

# Strategy for characters outside the standard alphabet
invalid_char_strategy = st.characters().filter(lambda c: c not in STD_ALPHABET)

# Strategy for byte strings, often starting with zero bytes
bytes_strategy = st.one_of(
    st.binary(max_size=300),
    st.builds(lambda n, b: bytes(n) + b, st.integers(0, 20), st.binary(max_size=40)),
)

uint64_strategy = st.integers(min_value=0, max_value=MAX_UINT64)
