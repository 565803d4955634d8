import random

import pytest
from kzgfk.constant import BN254_SCALAR_FIELD, BLS12_381_SCALAR_FIELD
from kzgfk.ecc import EllipticCurve
from kzgfk.polynomial import PolynomialRing, divide_by_linear


def test_univariate_polynomial():

    for p in (BN254_SCALAR_FIELD, BLS12_381_SCALAR_FIELD):

        a = PolynomialRing([1, 2, 3], p)
        b = PolynomialRing([2, 3, 4], p)

        assert a + b == PolynomialRing([3, 5, 7], p)
        assert b - a == PolynomialRing([1, 1, 1], p)
        assert a - b == PolynomialRing([p - 1, p - 1, p - 1], p)
        assert a * b == PolynomialRing([2, 7, 16, 17, 12], p)
        assert (a * b / a)[0] == b
        assert (a * b / b)[0] == a
        assert (a * b / b)[1].is_zero()

        assert a + 5 == PolynomialRing([6, 2, 3], p)
        assert a - 1 == PolynomialRing([0, 2, 3], p)
        assert a * 2 == PolynomialRing([2, 4, 6], p)

        assert a(2) == (1 + 2 * 2 + 2**2 * 3) % p
        assert b(2) == (2 + 2 * 3 + 2**2 * 4) % p


def test_polynomial_division_remainder():
    p = BN254_SCALAR_FIELD

    # x^2 + 1 = (x - 1)(x + 1) + 2
    q, r = PolynomialRing([1, 0, 1], p) / PolynomialRing([-1, 1], p)

    assert q == PolynomialRing([1, 1], p)
    assert r == PolynomialRing([2], p)

    with pytest.raises(ZeroDivisionError):
        PolynomialRing([1, 2], p) / PolynomialRing([0], p)


def test_divide_by_linear():

    for p in (BN254_SCALAR_FIELD, BLS12_381_SCALAR_FIELD):
        coeffs = [random.randint(0, p - 1) for _ in range(6)]
        z = random.randint(1, p - 1)

        f = PolynomialRing(coeffs, p)
        expected, remainder = (f - f(z)) / PolynomialRing([-z, 1], p)

        assert remainder.is_zero()
        assert divide_by_linear(coeffs, z, p) == expected.coeffs()


def test_divide_by_linear_small():
    p = BN254_SCALAR_FIELD

    # (3x^2 + 2x + 1 - 17) / (x - 2) = 3x + 8
    assert divide_by_linear([1, 2, 3], 2, p) == [8, 3]
    # degree one: (2x + 1 - f(z)) / (x - z) = 2
    assert divide_by_linear([1, 2], 12345, p) == [2]

    with pytest.raises(ValueError):
        divide_by_linear([7], 2, p)


@pytest.mark.parametrize("crv", ["BN254", "BLS12_381"])
def test_group_arithmetic(crv):
    E = EllipticCurve(crv)
    G1 = E.G1()
    G2 = E.G2()

    assert G1 * 2 == G1 + G1
    assert G1 * 3 - G1 == G1 * 2
    assert G1 * -1 == -G1
    assert G1 * E.order == E.identity_g1()
    assert (G1 - G1).is_zero()
    assert G2 * 5 - G2 * 2 == G2 * 3
    assert G1 * 3 == 3 * G1
    assert G1 != G2
    assert (G1 * 7).is_on_curve() and (G2 * 7).is_on_curve()

    with pytest.raises(TypeError):
        G1 * 1.5
    with pytest.raises(TypeError):
        G1 + 1


def test_multiexp():
    E = EllipticCurve("BN254")
    points = [E.G1() * i for i in range(1, 5)]
    scalars = [5, 0, 7, E.order - 1]

    expected = E.identity_g1()
    for point, scalar in zip(points, scalars):
        expected += point * scalar

    assert E.multiexp(points, scalars) == expected
    assert E.batch_mul(E.G1(), [2, 3]) == [E.G1() * 2, E.G1() * 3]


def test_pairing_bilinearity():
    E = EllipticCurve("BN254")
    a = random.randint(1, E.order - 1)
    b = random.randint(1, E.order - 1)

    G1 = E.G1()
    G2 = E.G2()

    assert E.pairing(G1 * a, G2 * b) == E.pairing(G1 * (a * b), G2)
    assert E.pairing_check([(G1 * a, G2 * b), (-(G1 * (a * b)), G2)])
    assert not E.pairing_check([(G1 * a, G2 * b), (-(G1 * (a * b + 1)), G2)])


def test_unsupported_curve():
    with pytest.raises(ValueError):
        EllipticCurve("SECP256K1")
