"""Prime field arithmetic."""
from .interpolator import interpolate, mod_inverse
from .primes import MERSENNE_521, is_probable_prime

__all__ = ["interpolate", "mod_inverse", "MERSENNE_521", "is_probable_prime"]
