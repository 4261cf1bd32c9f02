"""Scalars modulo l, the prime order of the Ed25519 prime-order subgroup.

Scalars are plain Python integers in the range ``[0, l)``.
"""

from functools import lru_cache

L = 2**252 + 27742317777372353535851937790883648493
"""The prime order of the Ed25519 prime-order subgroup."""

SCALAR_SIZE = 32


def _check_length(data: bytes) -> bytes:
    data = bytes(data)
    if len(data) != SCALAR_SIZE:
        raise ValueError(f"a scalar is encoded in {SCALAR_SIZE} bytes, got {len(data)}")
    return data


def from_bytes_mod_order(data: bytes) -> int:
    """Interpret 32 little-endian bytes as an integer and reduce it modulo l."""
    return int.from_bytes(_check_length(data), "little") % L


def from_canonical_bytes(data: bytes) -> int:
    """Decode 32 little-endian bytes which must already be reduced modulo l."""
    value = int.from_bytes(_check_length(data), "little")
    if value >= L:
        raise ValueError("scalar encoding is not reduced modulo l")
    return value


def scalar_to_bytes(value: int) -> bytes:
    """Encode a scalar, reduced modulo l, as 32 little-endian bytes."""
    return (value % L).to_bytes(SCALAR_SIZE, "little")


@lru_cache(maxsize=None)
def inv_eight() -> int:
    """The inverse of 8 modulo l."""
    return pow(8, -1, L)