from io import BytesIO

import pytest

from xmrprimitives.decoys import Decoys
from xmrprimitives.edwards import basepoint
from xmrprimitives.serialize import DecodeError, write_point


def _ring(size):
    g = basepoint()
    return [(g * (2 * i + 1), g * (2 * i + 2)) for i in range(size)]


def test_accessors():
    ring = _ring(3)
    decoys = Decoys([5, 1, 2], 1, ring)
    assert len(decoys) == 3
    assert decoys.offsets() == (5, 1, 2)
    assert decoys.signer_index() == 1
    assert decoys.ring() == tuple(ring)
    assert decoys.signer_ring_members() == ring[1]


def test_positions_accumulate_offsets():
    decoys = Decoys([5, 1, 2], 0, _ring(3))
    assert decoys.positions() == [5, 6, 8]


def test_positions_first_is_first_offset():
    decoys = Decoys([42], 0, _ring(1))
    assert decoys.positions() == [42]


def test_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        Decoys([1, 2], 0, _ring(3))


def test_rejects_signer_index_out_of_range():
    with pytest.raises(ValueError):
        Decoys([1, 2], 2, _ring(2))


def test_rejects_empty_ring():
    with pytest.raises(ValueError):
        Decoys([], 0, [])


def test_rejects_too_many_members():
    g = basepoint()
    ring = [(g, g)] * 256
    with pytest.raises(ValueError):
        Decoys([1] * 256, 0, ring)


def test_accepts_maximum_members():
    g = basepoint()
    ring = [(g, g)] * 255
    assert len(Decoys([1] * 255, 254, ring)) == 255


def test_rejects_overflowing_positions():
    with pytest.raises(ValueError):
        Decoys([2**64 - 1, 1], 0, _ring(2))


def test_accepts_maximal_position():
    decoys = Decoys([2**64 - 2, 1], 0, _ring(2))
    assert decoys.positions()[-1] == 2**64 - 1


def test_serialize_layout():
    ring = _ring(2)
    data = Decoys([3, 4], 1, ring).serialize()
    assert data[:4] == bytes([2, 3, 4, 1])
    assert data[4:36] == write_point(ring[0][0])
    assert data[36:68] == write_point(ring[0][1])
    assert len(data) == 4 + 2 * 64


def test_round_trip():
    decoys = Decoys([1000, 300, 7], 2, _ring(3))
    assert Decoys.read(BytesIO(decoys.serialize())) == decoys


def test_write_matches_serialize():
    decoys = Decoys([1, 1], 0, _ring(2))
    stream = BytesIO()
    decoys.write(stream)
    assert stream.getvalue() == decoys.serialize()


def test_read_rejects_invalid_signer_index():
    ring = _ring(2)
    data = bytearray(Decoys([3, 4], 1, ring).serialize())
    data[3] = 2
    with pytest.raises(DecodeError):
        Decoys.read(BytesIO(bytes(data)))


def test_read_rejects_truncated_data():
    data = Decoys([3, 4], 1, _ring(2)).serialize()[:-1]
    with pytest.raises(DecodeError):
        Decoys.read(BytesIO(data))


def test_equality_considers_signer_index():
    ring = _ring(2)
    assert Decoys([1, 2], 0, ring) != Decoys([1, 2], 1, ring)
    assert Decoys([1, 2], 0, ring) == Decoys([1, 2], 0, ring)