"""Scalars as stored by legacy parts of Monero, possibly unreduced."""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO

from .scalar import L, SCALAR_SIZE, from_bytes_mod_order
from .serialize import read_exact

_BITS = 256
_WINDOW = 6
# The odd scalars 1, 3, ..., 15, indexed by value // 2.
_ODD_SCALARS = tuple(2 * i + 1 for i in range(8))


@dataclass(frozen=True)
class UnreducedScalar:
    """32 bytes which may encode a value not reduced modulo l."""

    data: bytes

    def __post_init__(self) -> None:
        data = bytes(self.data)
        if len(data) != SCALAR_SIZE:
            raise ValueError(f"an unreduced scalar is {SCALAR_SIZE} bytes, got {len(data)}")
        object.__setattr__(self, "data", data)

    def write(self, stream: BinaryIO) -> None:
        """Write the raw 32 bytes."""
        stream.write(self.data)

    @classmethod
    def read(cls, stream: BinaryIO) -> UnreducedScalar:
        """Read 32 raw bytes."""
        return cls(read_exact(stream, SCALAR_SIZE))

    def _bits(self) -> list[int]:
        return [(self.data[i // 8] >> (i % 8)) & 1 for i in range(_BITS)]

    def non_adjacent_form(self) -> list[int]:
        """The width-5 non-adjacent form as ref10's ``slide`` computes it.

        This intentionally reproduces that function's incorrect outputs for
        some inputs. It is not constant time and is for public data only.
        """
        naf = self._bits()
        for i in range(_BITS):
            if naf[i] == 0:
                continue
            for b in range(1, _WINDOW):
                if i + b >= _BITS:
                    break
                potential_carry = naf[i + b] << b
                if potential_carry == 0:
                    continue
                if naf[i] + potential_carry <= 15:
                    naf[i] += potential_carry
                    naf[i + b] = 0
                elif naf[i] - potential_carry >= -15:
                    naf[i] -= potential_carry
                    for k in range(i + b, _BITS):
                        if naf[k] == 0:
                            naf[k] = 1
                            break
                        naf[k] = 0
                else:
                    break
        return naf

    def ref10_slide_scalar_vartime(self) -> int:
        """Recover the scalar ref10's ``slide`` interpreted these bytes as.

        Needed to verify legacy Borromean range proofs, whose scalars were
        not checked to be reduced. Not constant time; public data only.
        """
        if not self.data[31] & 0x80:
            return from_bytes_mod_order(self.data)

        recovered = 0
        for digit in reversed(self.non_adjacent_form()):
            recovered = 2 * recovered
            if digit > 0:
                recovered += _ODD_SCALARS[digit // 2]
            elif digit < 0:
                recovered -= _ODD_SCALARS[(-digit) // 2]
            recovered %= L
        return recovered