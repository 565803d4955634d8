from enum import Enum
from typing import Sequence

from joblib import Parallel, delayed
from py_ecc import optimized_bls12_381, optimized_bn128
from py_ecc.fields.optimized_field_elements import FQ2

from .utils import get_n_jobs


class CurveType(Enum):
    BN128 = optimized_bn128
    BN254 = optimized_bn128
    ALT_BN128 = optimized_bn128
    BLS12_381 = optimized_bls12_381


def _scalar_mul(point, scalar):
    return point * scalar


class EllipticCurve:
    def __init__(self, curve: str):
        if curve not in CurveType.__members__:
            raise ValueError(f"Unsupported curve: {curve}")

        self.name = curve
        self.curve = CurveType[curve].value
        self.order = self.curve.curve_order
        self.field_modulus = self.curve.field_modulus

    def G1(self):
        """
        Return generator G1 of the curve
        """
        return Curve(self.curve.G1, self.name)

    def G2(self):
        """
        Return generator G2 of the curve
        """
        return Curve(self.curve.G2, self.name)

    def identity_g1(self):
        """
        Return point at infinity of G1
        """
        return Curve(self.curve.Z1, self.name)

    def identity_g2(self):
        """
        Return point at infinity of G2
        """
        return Curve(self.curve.Z2, self.name)

    def pairing(self, a, b):
        """
        Compute pairing, that is `e(a, b)`, where `a in G1` and `b in G2`
        """
        return self.curve.pairing(b.point, a.point)

    def pairing_check(self, pairs: Sequence[tuple]) -> bool:
        """
        Check that the product of `e(a[i], b[i])` is equal to one,
        sharing a single final exponentiation between all Miller loops
        """
        assert len(pairs) > 0, "At least one pair is required"

        acc = self.curve.FQ12.one()
        for a, b in pairs:
            acc *= self.curve.pairing(b.point, a.point, final_exponentiate=False)

        return self.curve.final_exponentiate(acc) == self.curve.FQ12.one()

    def batch_mul(self, g, s: Sequence[int]):
        """
        Perform EC multiplication in parallel batch
        where g is Elliptic Curve point(s) and s is scalars
        """
        if not isinstance(g, list):
            g = [g] * len(s)

        assert len(g) == len(s), "Length of points and scalars must be equal"

        if len(g) == 0:
            return []

        return Parallel(n_jobs=get_n_jobs())(
            delayed(_scalar_mul)(point, scalar) for point, scalar in zip(g, s)
        )

    def multiexp(self, g: Sequence, s: Sequence[int]):
        """
        Perform Multi-Scalar-Multiplication (MSM)
        to compute sum of g[i] * s[i] where g is
        Elliptic Curve point and s is scalar
        """
        assert len(g) > 0
        assert len(g) == len(s), "Length of points and scalars must be equal"

        total = g[0] * 0
        for point in self.batch_mul(list(g), s):
            total += point

        return total


class Curve:
    def __init__(self, point: tuple, crv: str):
        self.name = crv
        self.point = point

    @property
    def curve(self):
        return CurveType[self.name].value

    def _wrap(self, point):
        return Curve(point, self.name)

    def is_g2(self) -> bool:
        return isinstance(self.point[0], FQ2)

    def __add__(self, other):
        if not isinstance(other, Curve):
            raise TypeError(
                f"Addition of {type(self)} with {type(other)} is not allowed"
            )

        return self._wrap(self.curve.add(self.point, other.point))

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        if not isinstance(other, Curve):
            raise TypeError(
                f"Subtraction of {type(self)} with {type(other)} is not allowed"
            )

        return self._wrap(self.curve.add(self.point, self.curve.neg(other.point)))

    def __mul__(self, other):
        if not isinstance(other, int):
            raise TypeError(
                f"Multiplication of {type(self)} with {type(other)} is not allowed"
            )

        # py_ecc recursion only terminates for non-negative scalars
        scalar = other % self.curve.curve_order
        return self._wrap(self.curve.multiply(self.point, scalar))

    def __rmul__(self, other):
        return self.__mul__(other)

    def __neg__(self):
        return self._wrap(self.curve.neg(self.point))

    def __eq__(self, other):
        if not isinstance(other, Curve):
            return NotImplemented
        if self.curve is not other.curve or self.is_g2() != other.is_g2():
            return False

        return self.curve.eq(self.point, other.point)

    def __str__(self) -> str:
        if self.is_zero():
            return "Infinity"
        return f"{self.curve.normalize(self.point)}"

    def __repr__(self) -> str:
        return self.__str__()

    def is_zero(self) -> bool:
        return self.curve.is_inf(self.point)

    def is_on_curve(self) -> bool:
        b = self.curve.b2 if self.is_g2() else self.curve.b
        return self.curve.is_on_curve(self.point, b)
