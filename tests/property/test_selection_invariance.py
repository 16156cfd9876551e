from itertools import combinations

from hypothesis import given, settings, strategies as st

from sss_core.field.interpolator import interpolate
from sss_core.field.primes import MERSENNE_521
from sss_core.models import Point
from sss_core.selection import select

PRIMES = [2**61 - 1, 2**127 - 1, MERSENNE_521]


def _evaluate(coefficients: list[int], x: int, prime: int) -> int:
    y = 0
    for coefficient in reversed(coefficients):
        y = (y * x + coefficient) % prime
    return y


@st.composite
def sharings(draw):
    prime = draw(st.sampled_from(PRIMES))
    k = draw(st.integers(min_value=1, max_value=6))
    n = draw(st.integers(min_value=k, max_value=k + 3))
    coefficients = draw(st.lists(st.integers(min_value=0, max_value=prime - 1), min_size=k, max_size=k))
    xs = draw(st.lists(st.integers(min_value=1, max_value=2**60), min_size=n, max_size=n, unique=True))
    points = [Point(x, _evaluate(coefficients, x, prime)) for x in xs]
    return prime, k, coefficients[0], points


@settings(max_examples=60, deadline=None)
@given(sharings())
def test_any_k_points_recover_the_secret(sharing) -> None:
    prime, k, secret, points = sharing
    for subset in combinations(points, k):
        assert interpolate(list(subset), prime) == secret


@settings(max_examples=60, deadline=None)
@given(sharings(), st.randoms(use_true_random=False))
def test_selection_is_independent_of_input_order(sharing, rng) -> None:
    prime, k, secret, points = sharing
    shuffled = list(points)
    rng.shuffle(shuffled)
    assert select(shuffled, k) == select(points, k)
    assert interpolate(select(shuffled, k), prime) == secret
