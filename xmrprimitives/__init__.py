"""Monero primitives: scalars, Ed25519 points, Keccak hashing, serialization, commitments and decoys."""

__version__ = "0.1.0"

__all__ = [
    "commitment",
    "decoys",
    "edwards",
    "hashing",
    "scalar",
    "serialize",
    "unreduced_scalar",
]