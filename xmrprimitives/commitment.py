"""Transparent contents of a Pedersen commitment."""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO

from .scalar import L, scalar_to_bytes
from .serialize import read_scalar, read_u64, write_u64

_U64_MAX = 2**64 - 1


@dataclass(eq=True)
class Commitment:
    """The mask and amount behind a Pedersen commitment.

    The serialization offered here is not one defined by the Monero protocol.
    """

    mask: int
    amount: int

    def __post_init__(self) -> None:
        if not 0 <= self.mask < L:
            raise ValueError("mask must be a scalar reduced modulo l")
        if not 0 <= self.amount <= _U64_MAX:
            raise ValueError(f"{self.amount} does not fit in a u64")

    @classmethod
    def zero(cls) -> Commitment:
        """A commitment to zero, with a mask of 1 so it is not the identity."""
        return cls(mask=1, amount=0)

    def write(self, stream: BinaryIO) -> None:
        """Write the mask followed by the little-endian amount."""
        stream.write(self.serialize())

    def serialize(self) -> bytes:
        """Serialize to 40 bytes: 32 for the mask, 8 for the amount."""
        return scalar_to_bytes(self.mask) + write_u64(self.amount)

    @classmethod
    def read(cls, stream: BinaryIO) -> Commitment:
        """Read a commitment, raising DecodeError on invalid data."""
        mask = read_scalar(stream)
        amount = read_u64(stream)
        return cls(mask=mask, amount=amount)

    def __repr__(self) -> str:
        return f"Commitment(amount={self.amount}, ...)"