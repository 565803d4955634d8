"""
Stockham NTT algorithm
which is much faster than recursive NTT with divide-and-conquer
Source: https://github.com/pdroalves/fft_ntt_comparison/blob/master/stockham/stockham_ntt.py
"""

from .constant import MULTIPLICATIVE_GENERATOR
from .errors import DomainError
from .utils import is_power_of_two


def get_primitive_root(n, p):
    """Return a primitive `n`-th root of unity over Fp"""
    if not is_power_of_two(n):
        raise DomainError(f"Domain size must be a power of two, got {n}")
    if (p - 1) % n != 0:
        raise DomainError(f"Field of order {p} has no subgroup of size {n}")

    omega = pow(MULTIPLICATIVE_GENERATOR, (p - 1) // n, p)

    assert pow(omega, n, p) == 1
    if n > 1 and pow(omega, n // 2, p) == 1:
        raise DomainError(f"No primitive root of unity of order {n}")

    return omega


def build_omega(n, p):
    """Return powers of the primitive `n`-th root and of its inverse"""
    omega = get_primitive_root(n, p)

    w = [1] * n
    for j in range(1, n):
        w[j] = w[j - 1] * omega % p

    # omega^-j == omega^(n-j)
    w_inv = [w[-j % n] for j in range(n)]

    return w, w_inv


def ntt(data, w, p):
    """Evaluate coefficients `data` at the powers of root `w[1]`"""
    N = len(data)
    assert is_power_of_two(N)
    R = 2
    Ns = 1
    a = [x % p for x in data]
    b = [0] * N
    while Ns < N:
        for j in range(N // R):
            _ntt_iteration(j, N, R, Ns, a, b, w, p)
        a, b = b, a
        Ns = Ns * R
    return a


def intt(data, w_inv, p):
    """Interpolate evaluations `data` back into coefficients"""
    ninv = pow(len(data), -1, p)

    transformed_values = ntt(data, w_inv, p)
    return [ninv * tv % p for tv in transformed_values]


def _ntt_iteration(j, N, R, Ns, data0, data1, w, p):
    v = [0] * R
    idx_s = j
    w_index = ((j % Ns) * N) // (Ns * R)
    assert ((j % Ns) * N) % (Ns * R) == 0

    for r in range(R):
        v[r] = data0[idx_s + r * (N // R)] * w[r * w_index] % p

    v = _butterfly(v, p)
    idx_d = _expand(j, Ns, R)
    for r in range(R):
        data1[idx_d + r * Ns] = v[r]


def _butterfly(v, p):
    return [(v[0] + v[1]) % p, (v[0] - v[1]) % p]


def _expand(idx_l, n1, n2):
    return (idx_l // n1) * n1 * n2 + (idx_l % n1)
