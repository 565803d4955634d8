import logging
from typing import List, Sequence

from ..ecc import Curve, EllipticCurve
from ..polynomial import divide_by_linear
from ..setup import SRS, generate_srs
from .base import VectorCommitmentScheme

logger = logging.getLogger(__name__)


class KZGFK(VectorCommitmentScheme):
    """
    KZG commitment to a vector in evaluation form over the SRS domain,
    with single-point openings computed from the coefficient form.

    Args:
        srs: `SRS` from `generate_srs`, shared read-only
    """

    def __init__(self, srs: SRS):
        super().__init__()
        self.srs = srs
        self.E = EllipticCurve(srs.curve)
        self.order = self.E.order
        self.n = srs.size

    @classmethod
    def setup(cls, n: int, curve: str = "BLS12_381") -> "KZGFK":
        """Run the trusted setup for vectors of length `n` and bind to it"""
        return cls(generate_srs(n, curve))

    def _check_vector(self, vector: Sequence[int]):
        if len(vector) != self.n:
            raise ValueError(
                f"Vector length must equal domain size {self.n}, got {len(vector)}"
            )

    def _check_index(self, index: int):
        if not isinstance(index, int):
            raise TypeError(f"Index must be an integer, got {type(index)}")
        if not 0 <= index < self.n:
            raise IndexError(f"Index {index} is out of range [0, {self.n})")

    def commit(self, vector: Sequence[int]) -> Curve:
        """
        Commit to `vector`, the evaluations of `p(X)` over the domain.
        Returns `g1 * p(tau)`.
        """
        self._check_vector(vector)
        logger.debug("Committing to vector of size %d", self.n)

        poly = self.srs.domain.inverse_transform(vector)
        return self.E.multiexp(self.srs.tau_powers_g1, poly)

    def quotient(self, vector: Sequence[int], index: int) -> List[int]:
        """
        Coefficients of `(p(X) - p(z)) / (X - z)` where `z` is
        the `index`th domain element
        """
        self._check_vector(vector)
        self._check_index(index)

        poly = self.srs.domain.inverse_transform(vector)
        z = self.srs.domain.element(index)

        return divide_by_linear(poly, z, self.order)

    def open(self, vector: Sequence[int], index: int) -> Curve:
        """
        Prove that `vector[index]` is the value committed at `index`.
        Returns `g1 * q(tau)` for the quotient `q`.
        """
        quotient = self.quotient(vector, index)
        logger.debug("Opening vector of size %d at index %d", self.n, index)

        return self.E.multiexp(self.srs.tau_powers_g1[: len(quotient)], quotient)

    def verify(self, index: int, element: int, commitment: Curve, proof: Curve) -> bool:
        """
        Check `e(commitment - g1 * element, g2) == e(proof, g2 * tau - g2 * z)`
        """
        if not isinstance(index, int) or not 0 <= index < self.n:
            return False

        g1 = self.srs.tau_powers_g1[0]
        g2 = self.srs.tau_powers_g2[0]
        z = self.srs.domain.element(index)

        lhs = commitment - g1 * (element % self.order)
        rhs = self.srs.tau_powers_g2[1] - g2 * z

        # e(lhs, g2) * e(-proof, rhs) == 1
        return self.E.pairing_check([(lhs, g2), (-proof, rhs)])

    def update(
        self, commitment: Curve, index: int, old_element: int, new_element: int
    ) -> Curve:
        """
        Commitment to the same vector with `vector[index]` changed
        from `old_element` to `new_element`
        """
        self._check_index(index)
        logger.debug("Updating commitment at index %d", index)

        delta = (new_element - old_element) % self.order
        return commitment + self.srs.lagrange_g1[index] * delta

    def update_open_i(
        self,
        proof: Curve,
        index: int,
        old_element: int,
        new_element: int,
        open_index=None,
    ) -> Curve:
        """
        Opening proof at `open_index` (defaults to `index`) after
        `vector[index]` changed from `old_element` to `new_element`
        """
        if open_index is None:
            open_index = index

        self._check_index(index)
        self._check_index(open_index)
        logger.debug(
            "Updating proof at index %d for change at index %d", open_index, index
        )

        delta = (new_element - old_element) % self.order

        if open_index == index:
            # opening is linear in the vector
            unit = [0] * self.n
            unit[index] = 1
            return proof + self.open(unit, index) * delta

        # L_i(X) / (X - w_j) == (L_i(X) - w_i / w_j * L_j(X)) / (w_i - w_j)
        w_i = self.srs.domain.element(index)
        w_j = self.srs.domain.element(open_index)
        ratio = w_i * pow(w_j, -1, self.order) % self.order
        scale = delta * pow(w_i - w_j, -1, self.order) % self.order

        lagrange = self.srs.lagrange_g1
        return proof + (lagrange[index] - lagrange[open_index] * ratio) * scale
