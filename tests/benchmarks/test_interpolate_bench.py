import pytest

from sss_core.field.interpolator import interpolate
from sss_core.field.primes import MERSENNE_521
from sss_core.models import Point


@pytest.mark.bench
def test_interpolate_throughput(benchmark):
    coefficients = [(7919 * (i + 1)) ** 9 % MERSENNE_521 for i in range(16)]

    def _evaluate(x: int) -> int:
        y = 0
        for coefficient in reversed(coefficients):
            y = (y * x + coefficient) % MERSENNE_521
        return y

    points = [Point(x, _evaluate(x)) for x in range(1, 17)]
    assert benchmark(lambda: interpolate(points, MERSENNE_521)) == coefficients[0]
