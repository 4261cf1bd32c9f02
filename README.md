# xmrprimitives

Building blocks for working with the Monero protocol in pure Python.

## Modules

- `xmrprimitives.scalar`: scalars modulo *l*, the prime order of the Ed25519
  subgroup, held as plain integers. `from_bytes_mod_order` reduces 32
  little-endian bytes, `from_canonical_bytes` rejects unreduced encodings with
  `ValueError`, `scalar_to_bytes` encodes, and `inv_eight()` gives the inverse
  of 8 modulo *l*. The constant `L` holds *l*.
- `xmrprimitives.edwards`: `EdwardsPoint`, an Ed25519 point supporting `+`,
  unary `-`, `-`, multiplication by an integer scalar (either side, taken
  modulo *l*), equality and hashing. `EdwardsPoint.identity()`,
  `EdwardsPoint.decompress(data)` and `point.compress()` build and encode
  points; `basepoint()` returns the generator G.
- `xmrprimitives.hashing`: `keccak256(data)` (original Keccak-256, not
  SHA3-256) and `keccak256_to_scalar(data)`, which reduces the digest modulo
  *l* and raises `ArithmeticError` if the result is zero.
- `xmrprimitives.serialize`: readers taking a binary stream
  (`read_exact`, `read_byte`, `read_u64`, `read_varint`, `read_scalar`,
  `read_point`) and writers returning bytes (`write_u64`, `write_varint`,
  `write_point`). Malformed or short input raises `DecodeError`, a subclass of
  `ValueError`. Varints must be canonical and fit in 64 bits; points must be
  valid and canonically encoded.
- `xmrprimitives.commitment`: `Commitment(mask, amount)`, the transparent
  contents of a Pedersen commitment. `Commitment.zero()` has mask 1 and amount
  0. `serialize()` gives 40 bytes (mask, then little-endian amount), `write`
  writes them to a stream, and `Commitment.read` reads them back. Its `repr`
  shows the amount but never the mask.
- `xmrprimitives.decoys`: `Decoys(offsets, signer_index, ring)`, validated on
  construction (at most 255 members, matching lengths, signer index in range,
  offsets summing within 64 bits; otherwise `ValueError`). It offers `len()`,
  `offsets()`, `signer_index()`, `ring()` of `(key, commitment)` pairs,
  `positions()` (the running sums of the offsets), `signer_ring_members()`,
  `serialize()`, `write`, `Decoys.read` and `Decoys.from_bytes`.
- `xmrprimitives.unreduced_scalar`: `UnreducedScalar(data)` keeps 32 raw bytes.
  `ref10_slide_scalar_vartime()` recovers the scalar the reference
  implementation's `slide` routine actually used for those bytes, as needed to
  verify legacy Borromean range proofs; `non_adjacent_form()` exposes the
  width-5 digits it works from. `write` and `UnreducedScalar.read` move the raw
  bytes.

## Example

```python
import io

from xmrprimitives.commitment import Commitment
from xmrprimitives.edwards import basepoint
from xmrprimitives.hashing import keccak256, keccak256_to_scalar
from xmrprimitives.unreduced_scalar import UnreducedScalar

digest = keccak256(b"hello")            # 32 bytes
challenge = keccak256_to_scalar(b"hello")
point = challenge * basepoint()

commitment = Commitment(mask=challenge, amount=5)
data = commitment.serialize()
assert Commitment.read(io.BytesIO(data)) == commitment

raw = bytes.fromhex(
    "cb2be144948166d0a9edb831ea586da0c376efa217871505ad77f6ff80f203f8"
)
recovered = UnreducedScalar(raw).ref10_slide_scalar_vartime()
```

## What this package does not do

It does not compute a commitment as a curve point: there is no second
generator H here, so `Commitment` only holds and serializes the mask and
amount. It also has no precomputed tables for G. The serializations of
`Commitment` and `Decoys` are this package's own, not protocol formats.

The point arithmetic and scalar recovery do not run in constant time. Use them
only on public data.

## Running the tests

```
pip install -e .[test]
pytest
```