"""Decoy data used when producing ring signatures."""

from __future__ import annotations

from io import BytesIO
from itertools import accumulate
from typing import BinaryIO, Iterable, Sequence

from .edwards import EdwardsPoint
from .serialize import (
    DecodeError,
    read_byte,
    read_point,
    read_varint,
    write_point,
    write_varint,
)

_U64_MAX = 2**64 - 1
_U8_MAX = 255

RingMember = tuple[EdwardsPoint, EdwardsPoint]


class Decoys:
    """A ring, the on-chain offsets of its members, and the signer's index.

    ``offsets`` hold the position of the first member, then each member's
    distance from the prior one.
    """

    __slots__ = ("_offsets", "_signer_index", "_ring")

    def __init__(
        self,
        offsets: Iterable[int],
        signer_index: int,
        ring: Iterable[Sequence[EdwardsPoint]],
    ) -> None:
        offsets = tuple(offsets)
        ring_members = []
        for member in ring:
            key, commitment = member
            ring_members.append((key, commitment))
        ring_tuple = tuple(ring_members)

        if len(offsets) > _U8_MAX:
            raise ValueError("a ring may have at most 255 members")
        if len(offsets) != len(ring_tuple):
            raise ValueError("offsets and ring differ in length")
        if not 0 <= signer_index <= _U8_MAX or signer_index >= len(ring_tuple):
            raise ValueError("signer index is out of range")
        if any(not 0 <= offset <= _U64_MAX for offset in offsets):
            raise ValueError("offsets must fit in a u64")
        if sum(offsets) > _U64_MAX:
            raise ValueError("offsets do not form representable positions")

        self._offsets = offsets
        self._signer_index = signer_index
        self._ring = ring_tuple

    def __len__(self) -> int:
        return len(self._offsets)

    def offsets(self) -> tuple[int, ...]:
        """The positions of the ring members, as offsets from the prior member."""
        return self._offsets

    def signer_index(self) -> int:
        """The index of the signer within the ring."""
        return self._signer_index

    def ring(self) -> tuple[RingMember, ...]:
        """The ring of (key, commitment) pairs."""
        return self._ring

    def positions(self) -> list[int]:
        """The absolute positions of the ring members within the blockchain."""
        return list(accumulate(self._offsets))

    def signer_ring_members(self) -> RingMember:
        """The (key, commitment) pair of the signer."""
        return self._ring[self._signer_index]

    def write(self, stream: BinaryIO) -> None:
        """Write the decoys; this is not a Monero protocol serialization."""
        stream.write(self.serialize())

    def serialize(self) -> bytes:
        """Serialize the decoys; this is not a Monero protocol serialization."""
        out = bytearray(write_varint(len(self._offsets)))
        for offset in self._offsets:
            out += write_varint(offset)
        out.append(self._signer_index)
        for key, commitment in self._ring:
            out += write_point(key)
            out += write_point(commitment)
        return bytes(out)

    @classmethod
    def read(cls, stream: BinaryIO) -> Decoys:
        """Read decoys, raising DecodeError on invalid data."""
        count = read_varint(stream)
        offsets = [read_varint(stream) for _ in range(count)]
        signer_index = read_byte(stream)
        ring = [(read_point(stream), read_point(stream)) for _ in range(len(offsets))]
        try:
            return cls(offsets, signer_index, ring)
        except ValueError as exc:
            raise DecodeError("invalid Decoys") from exc

    @classmethod
    def from_bytes(cls, data: bytes) -> Decoys:
        """Read decoys from a byte string."""
        return cls.read(BytesIO(data))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Decoys):
            return NotImplemented
        return (
            self._offsets == other._offsets
            and self._signer_index == other._signer_index
            and self._ring == other._ring
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Decoys(offsets={list(self._offsets)!r}, ring={list(self._ring)!r}, ...)"