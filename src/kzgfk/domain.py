from typing import List, Sequence

from .ntt import build_omega, intt, ntt


class Domain:
    """
    Multiplicative subgroup `{1, w, w^2, ..., w^(n-1)}` of Fp
    used to move vectors between evaluation and coefficient form.

    Args:
        size: number of points, a power of two dividing `p - 1`
        p: scalar field order
    """

    def __init__(self, size: int, p: int):
        self.size = size
        self.p = p
        self._w, self._w_inv = build_omega(size, p)

    @property
    def omega(self) -> int:
        return self._w[1 % self.size]

    def _check_length(self, values: Sequence):
        if len(values) != self.size:
            raise ValueError(
                f"Expected {self.size} values for this domain, got {len(values)}"
            )

    def element(self, i: int) -> int:
        """
        get `i`th element of the evaluation domain
        """
        if not 0 <= i < self.size:
            raise IndexError(f"Index {i} is out of domain of size {self.size}")
        return self._w[i]

    def elements(self) -> List[int]:
        """
        get all elements of the evaluation domain
        """
        return list(self._w)

    def transform(self, coeffs: Sequence[int]) -> List[int]:
        """
        Perform FFT from given `coeffs`
        """
        self._check_length(coeffs)
        return ntt(coeffs, self._w, self.p)

    def inverse_transform(self, evals: Sequence[int]) -> List[int]:
        """
        Perform inverse FFT from given `evals`
        """
        self._check_length(evals)
        return intt(evals, self._w_inv, self.p)

    def inverse_transform_points(self, points: Sequence) -> list:
        """
        Perform inverse FFT over elliptic curve points.
        Applied to `[g * tau^i]` it yields `[g * L_i(tau)]`,
        the commitments to the Lagrange basis of this domain.
        """
        self._check_length(points)
        ninv = pow(self.size, -1, self.p)
        return [point * ninv for point in _fft_points(list(points), self._w_inv)]


def _fft_points(vals, roots):
    if len(vals) == 1:
        return vals

    L = _fft_points(vals[::2], roots[::2])
    R = _fft_points(vals[1::2], roots[::2])
    o = [None] * len(vals)
    for i, (x, y) in enumerate(zip(L, R)):
        y_times_root = y * roots[i]
        o[i] = x + y_times_root
        o[i + len(L)] = x - y_times_root
    return o
