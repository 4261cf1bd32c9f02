import io

import pytest

from xmrprimitives.edwards import EdwardsPoint, P, basepoint
from xmrprimitives.scalar import L, scalar_to_bytes
from xmrprimitives.serialize import (
    DecodeError,
    read_byte,
    read_exact,
    read_point,
    read_scalar,
    read_u64,
    read_varint,
    write_point,
    write_u64,
    write_varint,
)


def _has_x_coordinate(y):
    """Whether x^2 = (y^2 - 1) / (d y^2 + 1) has a solution modulo p."""
    d = (-121665 * pow(121666, -1, P)) % P
    x_squared = (y * y - 1) * pow(d * y * y + 1, -1, P) % P
    return x_squared == 0 or pow(x_squared, (P - 1) // 2, P) == 1


def test_read_exact_short():
    with pytest.raises(DecodeError):
        read_exact(io.BytesIO(b"abc"), 4)


def test_read_exact_and_byte():
    stream = io.BytesIO(b"\x07xyz")
    assert read_byte(stream) == 7
    assert read_exact(stream, 3) == b"xyz"
    with pytest.raises(DecodeError):
        read_byte(stream)


@pytest.mark.parametrize("value", [0, 1, 255, 2**32, 2**64 - 1])
def test_u64_round_trip(value):
    encoded = write_u64(value)
    assert len(encoded) == 8
    assert read_u64(io.BytesIO(encoded)) == value


def test_u64_out_of_range():
    with pytest.raises(ValueError):
        write_u64(2**64)
    with pytest.raises(ValueError):
        write_u64(-1)


def test_varint_known_encodings():
    assert write_varint(0) == b"\x00"
    assert write_varint(127) == b"\x7f"
    assert write_varint(300) == b"\xac\x02"


@pytest.mark.parametrize("value", [0, 1, 127, 128, 300, 16383, 16384, 2**63, 2**64 - 1])
def test_varint_round_trip(value):
    stream = io.BytesIO(write_varint(value) + b"tail")
    assert read_varint(stream) == value
    assert stream.read() == b"tail"


def test_varint_max_length():
    assert len(write_varint(2**64 - 1)) == 10


def test_varint_non_canonical():
    with pytest.raises(DecodeError):
        read_varint(io.BytesIO(b"\x80\x00"))


def test_varint_overflow():
    with pytest.raises(DecodeError):
        read_varint(io.BytesIO(b"\xff" * 9 + b"\x02"))
    with pytest.raises(DecodeError):
        read_varint(io.BytesIO(b"\xff" * 9 + b"\x81\x01"))


def test_varint_truncated():
    with pytest.raises(DecodeError):
        read_varint(io.BytesIO(b"\x80"))


def test_write_varint_out_of_range():
    with pytest.raises(ValueError):
        write_varint(2**64)


def test_scalar_round_trip():
    assert read_scalar(io.BytesIO(scalar_to_bytes(L - 1))) == L - 1


def test_scalar_unreduced_rejected():
    with pytest.raises(DecodeError):
        read_scalar(io.BytesIO(L.to_bytes(32, "little")))


def test_point_round_trip():
    point = 5 * basepoint()
    assert read_point(io.BytesIO(write_point(point))) == point


def test_point_unreduced_y_rejected():
    data = P.to_bytes(32, "little")
    assert EdwardsPoint.decompress(data) == EdwardsPoint.decompress(bytes(32))
    with pytest.raises(DecodeError):
        read_point(io.BytesIO(data))


def test_point_negative_zero_rejected():
    data = b"\x01" + b"\x00" * 30 + b"\x80"
    assert EdwardsPoint.decompress(data) == EdwardsPoint.identity()
    with pytest.raises(DecodeError):
        read_point(io.BytesIO(data))


def test_point_off_curve_rejected():
    off_curve = [y for y in range(2, 40) if not _has_x_coordinate(y)]
    assert off_curve
    for y in off_curve:
        with pytest.raises(DecodeError):
            read_point(io.BytesIO(y.to_bytes(32, "little")))