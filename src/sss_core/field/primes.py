"""Primality checks for the field modulus."""
from __future__ import annotations

import secrets

_SMALL_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)

MERSENNE_521 = 2**521 - 1


def is_probable_prime(n: int, rounds: int = 40) -> bool:
    """Miller-Rabin test with random witnesses in ``[2, n - 2]``."""

    if n < 2:
        return False
    for p in _SMALL_PRIMES:
        if n % p == 0:
            return n == p

    # n - 1 = 2^s * d
    d = n - 1
    s = 0
    while d % 2 == 0:
        d //= 2
        s += 1

    for _ in range(rounds):
        a = secrets.randbelow(n - 3) + 2
        x = pow(a, d, n)
        if x == 1 or x == n - 1:
            continue
        for __ in range(s - 1):
            x = pow(x, 2, n)
            if x == n - 1:
                break
        else:
            return False
    return True


__all__ = ["MERSENNE_521", "is_probable_prime"]
