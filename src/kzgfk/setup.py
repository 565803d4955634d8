"""Trusted setup module of the KZG vector commitment"""

import logging
from typing import Tuple

from .domain import Domain
from .ecc import Curve, EllipticCurve
from .errors import DomainError, SetupError
from .utils import get_random_int

logger = logging.getLogger(__name__)


class SRS:
    """
    Structured reference string: powers of a discarded secret `tau`
    in G1 and G2, plus the Lagrange basis commitments in G1.

    Read-only once constructed, so a single instance can be shared
    between any number of provers and verifiers.
    """

    def __init__(self, domain: Domain, curve: str, tau_G1, tau_G2, lagrange_G1):
        assert len(tau_G1) == len(tau_G2) == len(lagrange_G1) == domain.size

        self.__domain = domain
        self.__curve = curve
        self.__tau_G1 = tuple(tau_G1)
        self.__tau_G2 = tuple(tau_G2)
        self.__lagrange_G1 = tuple(lagrange_G1)

    @property
    def domain(self) -> Domain:
        return self.__domain

    @property
    def curve(self) -> str:
        return self.__curve

    @property
    def size(self) -> int:
        return self.__domain.size

    @property
    def tau_powers_g1(self) -> Tuple[Curve, ...]:
        """`g1 * tau^i` for `i` in `[0, n)`"""
        return self.__tau_G1

    @property
    def tau_powers_g2(self) -> Tuple[Curve, ...]:
        """`g2 * tau^i` for `i` in `[0, n)`"""
        return self.__tau_G2

    @property
    def lagrange_g1(self) -> Tuple[Curve, ...]:
        """`g1 * L_i(tau)` for `i` in `[0, n)`"""
        return self.__lagrange_G1

    def __repr__(self):
        return f"SRS(curve={self.__curve}, size={self.size})"


def generate_srs(n: int, curve: str = "BLS12_381") -> SRS:
    """
    Generate the structured reference string for vectors of length `n`

    Args:
        n: domain size, a power of two greater than one
        curve: `BN254` or `BLS12_381`
    """
    try:
        E = EllipticCurve(curve)
    except ValueError as exc:
        raise SetupError(str(exc)) from exc

    if not isinstance(n, int) or n < 2:
        raise SetupError(f"Domain size must be an integer of at least 2, got {n!r}")

    try:
        domain = Domain(n, E.order)
    except DomainError as exc:
        raise SetupError(f"Unsupported domain size {n}: {exc}") from exc

    logger.info("Generating SRS of size %d over %s", n, curve)

    # generate random toxic waste
    tau = get_random_int(E.order - 1)

    tau_G1 = [E.G1()]
    tau_G2 = [E.G2()]
    for _ in range(1, n):
        tau_G1.append(tau_G1[-1] * tau)
        tau_G2.append(tau_G2[-1] * tau)

    lagrange_G1 = domain.inverse_transform_points(tau_G1)

    logger.debug("SRS of size %d ready", n)

    return SRS(domain, curve, tau_G1, tau_G2, lagrange_G1)
