"""Keccak-256 hashing and hashing to scalars."""

from Crypto.Hash import keccak

from .scalar import from_bytes_mod_order


def keccak256(data: bytes) -> bytes:
    """The original Keccak-256 hash (not SHA3-256)."""
    return keccak.new(digest_bits=256, data=bytes(data)).digest()


def keccak256_to_scalar(data: bytes) -> int:
    """Hash data to a scalar as keccak256(data) mod l.

    Raises ArithmeticError in the practically impossible case the result is zero.
    """
    scalar = from_bytes_mod_order(keccak256(data))
    if scalar == 0:
        raise ArithmeticError(f"keccak256(preimage) is 0 mod l; preimage: {bytes(data)!r}")
    return scalar