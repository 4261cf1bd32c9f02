"""Points on the Ed25519 curve in extended twisted Edwards coordinates."""

from __future__ import annotations

from functools import lru_cache

from .scalar import L

P = 2**255 - 19
D = (-121665 * pow(121666, -1, P)) % P
_D2 = (2 * D) % P
_SQRT_M1 = pow(2, (P - 1) // 4, P)


def _recover_x(y: int, sign: int) -> int:
    y2 = y * y % P
    u = (y2 - 1) % P
    v = (D * y2 + 1) % P
    v3 = v * v % P * v % P
    v7 = v3 * v3 % P * v % P
    x = u * v3 % P * pow(u * v7 % P, (P - 5) // 8, P) % P
    vx2 = v * x % P * x % P
    if vx2 == u:
        pass
    elif vx2 == (-u) % P:
        x = x * _SQRT_M1 % P
    else:
        raise ValueError("bytes do not encode a point on the curve")
    if (x & 1) != sign:
        x = (-x) % P
    return x


class EdwardsPoint:
    """An Ed25519 point. Points are immutable; scalars are taken modulo l."""

    __slots__ = ("_x", "_y", "_z", "_t")

    def __init__(self, x: int, y: int, z: int, t: int) -> None:
        self._x = x % P
        self._y = y % P
        self._z = z % P
        self._t = t % P

    @classmethod
    def _from_affine(cls, x: int, y: int) -> EdwardsPoint:
        return cls(x, y, 1, x * y)

    @classmethod
    def identity(cls) -> EdwardsPoint:
        """The neutral element."""
        return cls(0, 1, 1, 0)

    @classmethod
    def decompress(cls, data: bytes) -> EdwardsPoint:
        """Decode a 32-byte compressed point, raising ValueError if invalid."""
        data = bytes(data)
        if len(data) != 32:
            raise ValueError(f"a point is encoded in 32 bytes, got {len(data)}")
        encoded = int.from_bytes(data, "little")
        sign = encoded >> 255
        y = (encoded & ((1 << 255) - 1)) % P
        return cls._from_affine(_recover_x(y, sign), y)

    def compress(self) -> bytes:
        """Encode this point as 32 bytes: y with the sign of x in the top bit."""
        z_inv = pow(self._z, -1, P)
        x = self._x * z_inv % P
        y = self._y * z_inv % P
        return (y | ((x & 1) << 255)).to_bytes(32, "little")

    def __add__(self, other: object) -> EdwardsPoint:
        if not isinstance(other, EdwardsPoint):
            return NotImplemented
        a = (self._y - self._x) * (other._y - other._x) % P
        b = (self._y + self._x) * (other._y + other._x) % P
        c = self._t * _D2 % P * other._t % P
        d = self._z * 2 * other._z % P
        e = b - a
        f = d - c
        g = d + c
        h = b + a
        return EdwardsPoint(e * f, g * h, f * g, e * h)

    def __neg__(self) -> EdwardsPoint:
        return EdwardsPoint(-self._x, self._y, self._z, -self._t)

    def __sub__(self, other: object) -> EdwardsPoint:
        if not isinstance(other, EdwardsPoint):
            return NotImplemented
        return self + (-other)

    def __mul__(self, scalar: object) -> EdwardsPoint:
        if not isinstance(scalar, int) or isinstance(scalar, bool):
            return NotImplemented
        n = scalar % L
        result = EdwardsPoint.identity()
        addend = self
        while n:
            if n & 1:
                result = result + addend
            addend = addend + addend
            n >>= 1
        return result

    def __rmul__(self, scalar: object) -> EdwardsPoint:
        return self.__mul__(scalar)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EdwardsPoint):
            return NotImplemented
        return (
            self._x * other._z - other._x * self._z
        ) % P == 0 and (self._y * other._z - other._y * self._z) % P == 0

    def __hash__(self) -> int:
        return hash(self.compress())

    def __repr__(self) -> str:
        return f"EdwardsPoint({self.compress().hex()})"


@lru_cache(maxsize=None)
def basepoint() -> EdwardsPoint:
    """The Ed25519 generator G."""
    y = 4 * pow(5, -1, P) % P
    return EdwardsPoint._from_affine(_recover_x(y, 0), y)