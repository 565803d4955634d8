from typing import List, Sequence


class PolynomialRing:
    def __init__(self, coeffs, p):
        """
        Initialize the polynomial with coefficients.

        coeffs: List of coefficients, where coeffs[i] is the coefficient of x^i.
        p: Prime number representing the finite field.
        """
        self.__coeffs = [int(coeff) % p for coeff in coeffs]
        self.p = p

    def coeffs(self):
        """Return the list of coefficents of the polynomial."""
        return self.__coeffs

    def degree(self):
        """Return the degree of the polynomial."""
        return len(self.__coeffs) - 1

    def is_zero(self):
        """Return the boolean whether the polynomial is equal to zero"""
        return all(c == 0 for c in self.__coeffs)

    def __bool__(self):
        return not self.is_zero()

    def __eq__(self, other):
        if not isinstance(other, PolynomialRing):
            return NotImplemented
        return self.p == other.p and _trim(self.coeffs()) == _trim(other.coeffs())

    def __str__(self):
        """Return the string representation of the polynomial."""
        if self.is_zero():
            return "0"

        terms = []
        for i, coeff in enumerate(self.__coeffs):
            if coeff != 0:
                if i == 0:
                    terms.append(str(coeff))
                elif i == 1:
                    terms.append(f"{coeff}*x" if coeff != 1 else "x")
                else:
                    terms.append(f"{coeff}*x^{i}" if coeff != 1 else f"x^{i}")

        return " + ".join(terms[::-1])

    def __repr__(self):
        return self.__str__()

    def __add__(self, other):
        if isinstance(other, int):
            coeffs = self.coeffs()[:]
            coeffs[0] += other

            return PolynomialRing(coeffs, self.p)

        max_degree = max(self.degree(), other.degree())
        result_coeffs = [
            (self.coeffs()[i] if i <= self.degree() else 0)
            + (other.coeffs()[i] if i <= other.degree() else 0)
            for i in range(max_degree + 1)
        ]
        return PolynomialRing(result_coeffs, self.p)

    def __radd__(self, other):
        return self.__add__(other)

    def __neg__(self):
        """Negate polynomial coefficients"""
        return PolynomialRing([-c for c in self.coeffs()], self.p)

    def __sub__(self, other):
        if isinstance(other, int):
            coeffs = self.coeffs()[:]
            coeffs[0] -= other

            return PolynomialRing(coeffs, self.p)

        return self + (-other)

    def __mul__(self, other):
        if isinstance(other, int):
            return PolynomialRing([c * other for c in self.coeffs()], self.p)

        result_coeffs = [0] * (self.degree() + other.degree() + 1)
        for i, a in enumerate(self.coeffs()):
            for j, b in enumerate(other.coeffs()):
                result_coeffs[i + j] = (result_coeffs[i + j] + a * b) % self.p

        return PolynomialRing(result_coeffs, self.p)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        """
        Divide two polynomials.
        Return quotient and remainder
        """
        if other.is_zero():
            raise ZeroDivisionError("Division by zero")

        divisor = _trim(other.coeffs())
        if self.degree() < len(divisor) - 1:
            return PolynomialRing([0], self.p), PolynomialRing(self.coeffs(), self.p)

        dividend = self.coeffs()[:]

        n = len(divisor) - 1
        lead_inv = pow(divisor[n], -1, self.p)
        quotient = [0] * (self.degree() - n + 1)

        for k in reversed(range(0, len(quotient))):
            quotient[k] = dividend[n + k] * lead_inv % self.p
            for j in range(k, n + k + 1):
                dividend[j] = (dividend[j] - quotient[k] * divisor[j - k]) % self.p

        remainder = dividend[:n] or [0]

        return PolynomialRing(quotient, self.p), PolynomialRing(remainder, self.p)

    def __call__(self, point: int) -> int:
        """Evaluate the polynomial at point with Horner's rule"""
        if not isinstance(point, int):
            raise TypeError(f"Invalid argument: {point}")

        result = 0
        for c in reversed(self.coeffs()):
            result = (result * point + c) % self.p
        return result


def _trim(coeffs):
    coeffs = list(coeffs)
    while len(coeffs) > 1 and coeffs[-1] == 0:
        coeffs.pop()
    return coeffs


def divide_by_linear(coeffs: Sequence[int], z: int, p: int) -> List[int]:
    """
    Synthetic division of `f(X) - f(z)` by `(X - z)`.

    Returns the `len(coeffs) - 1` quotient coefficients, lowest degree first:
    `q[n-2] = f[n-1]` and `q[j] = f[j+1] + z * q[j+1]` downwards.
    """
    n = len(coeffs)
    if n < 2:
        raise ValueError("Polynomial must have at least two coefficients")

    quotient = [0] * (n - 1)
    quotient[n - 2] = coeffs[n - 1] % p
    for j in range(n - 3, -1, -1):
        quotient[j] = (coeffs[j + 1] + quotient[j + 1] * z) % p

    return quotient
