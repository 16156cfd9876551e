"""Lagrange interpolation at x = 0 over the prime field Z/pZ."""
from __future__ import annotations

from typing import Sequence

from ..errors import DegenerateField, InsufficientShares, NoModularInverse
from ..models import Point


def mod_inverse(value: int, prime: int) -> int:
    try:
        return pow(value, -1, prime)
    except ValueError:
        raise NoModularInverse(value, prime) from None


def interpolate(points: Sequence[Point], prime: int) -> int:
    """Return f(0) mod ``prime`` for the polynomial through ``points``.

    Every intermediate product is reduced modulo ``prime``. The basis
    numerator uses ``(0 - x_j)`` and the denominator ``(x_i - x_j)``, both
    normalized into ``[0, prime)``.

    Raises
    ------
    InsufficientShares
        If ``points`` is empty.
    DegenerateField
        If two x-coordinates are congruent modulo ``prime``.
    NoModularInverse
        If a denominator is not invertible, i.e. ``prime`` is not prime.
    """

    if prime < 2:
        raise NoModularInverse(0, prime)
    if not points:
        raise InsufficientShares("No points to interpolate", available=0, required=1)

    secret = 0
    for i, point_i in enumerate(points):
        numerator = 1
        denominator = 1
        for j, point_j in enumerate(points):
            if i == j:
                continue
            diff = (point_i.x - point_j.x) % prime
            if diff == 0:
                raise DegenerateField(point_i.x, point_j.x)
            numerator = (numerator * (-point_j.x % prime)) % prime
            denominator = (denominator * diff) % prime
        basis = (numerator * mod_inverse(denominator, prime)) % prime
        secret = (secret + (point_i.y % prime) * basis) % prime
    return secret


__all__ = ["interpolate", "mod_inverse"]
