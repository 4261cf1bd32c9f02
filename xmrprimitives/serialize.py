"""Reading and writing the primitive encodings used by Monero structures.

Readers take a binary stream with a ``read`` method; writers return bytes.
"""

from __future__ import annotations

from typing import BinaryIO

from .edwards import EdwardsPoint
from .scalar import from_canonical_bytes

_U64_MAX = 2**64 - 1
_CONTINUATION = 0x80


class DecodeError(ValueError):
    """Raised when bytes do not hold a valid encoding."""


def read_exact(stream: BinaryIO, size: int) -> bytes:
    """Read exactly ``size`` bytes, raising DecodeError on a short read."""
    data = stream.read(size)
    if data is None or len(data) != size:
        raise DecodeError(f"expected {size} bytes, stream ended early")
    return bytes(data)


def read_byte(stream: BinaryIO) -> int:
    """Read a single byte."""
    return read_exact(stream, 1)[0]


def read_u64(stream: BinaryIO) -> int:
    """Read a little-endian unsigned 64-bit integer."""
    return int.from_bytes(read_exact(stream, 8), "little")


def write_u64(value: int) -> bytes:
    """Encode an unsigned 64-bit integer in little-endian order."""
    if not 0 <= value <= _U64_MAX:
        raise ValueError(f"{value} does not fit in a u64")
    return value.to_bytes(8, "little")


def read_varint(stream: BinaryIO) -> int:
    """Read a canonical 7-bit little-endian varint holding a u64."""
    result = 0
    shift = 0
    while True:
        byte = read_byte(stream)
        if shift and byte == 0:
            raise DecodeError("non-canonical varint")
        result |= (byte & ~_CONTINUATION & 0xFF) << shift
        if result > _U64_MAX:
            raise DecodeError("varint overflow")
        shift += 7
        if not byte & _CONTINUATION:
            return result
        if shift >= 64:
            raise DecodeError("varint overflow")


def write_varint(value: int) -> bytes:
    """Encode a u64 as a 7-bit little-endian varint."""
    if not 0 <= value <= _U64_MAX:
        raise ValueError(f"{value} does not fit in a u64")
    out = bytearray()
    while True:
        low = value & 0x7F
        value >>= 7
        if value:
            out.append(low | _CONTINUATION)
        else:
            out.append(low)
            return bytes(out)


def read_scalar(stream: BinaryIO) -> int:
    """Read a scalar, which must be reduced."""
    try:
        return from_canonical_bytes(read_exact(stream, 32))
    except DecodeError:
        raise
    except ValueError as exc:
        raise DecodeError(str(exc)) from exc


def read_point(stream: BinaryIO) -> EdwardsPoint:
    """Read a point, rejecting invalid and non-canonical encodings."""
    data = read_exact(stream, 32)
    try:
        point = EdwardsPoint.decompress(data)
    except ValueError as exc:
        raise DecodeError(str(exc)) from exc
    if point.compress() != data:
        raise DecodeError("non-canonical point encoding")
    return point


def write_point(point: EdwardsPoint) -> bytes:
    """Encode a point in its 32-byte compressed form."""
    return point.compress()