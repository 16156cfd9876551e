"""Threshold guard and deterministic point selection."""
from __future__ import annotations

from typing import Dict, List, Sequence

from .errors import DuplicateShare, InsufficientShares
from .models import Point, Threshold


def check_threshold(n: int, k: int) -> Threshold:
    """Reject impossible thresholds before any share is decoded."""

    threshold = Threshold(n=n, k=k)
    threshold.check()
    return threshold


def select(points: Sequence[Point], k: int) -> List[Point]:
    """Return the ``k`` points with the smallest x-coordinates.

    Ordering uses exact integer comparison so repeated runs on the same input
    pick the same points. Duplicates are kept; see :func:`ensure_distinct`.
    """

    if k < 1:
        raise InsufficientShares(f"Threshold must be positive, got k={k}", available=len(points), required=k)
    if len(points) < k:
        raise InsufficientShares(
            f"Need {k} shares to reconstruct the secret, got {len(points)}",
            available=len(points),
            required=k,
        )
    return sorted(points, key=lambda point: point.x)[:k]


def ensure_distinct(points: Sequence[Point], prime: int) -> None:
    seen: Dict[int, Point] = {}
    for point in points:
        residue = point.x % prime
        previous = seen.get(residue)
        if previous is not None:
            raise DuplicateShare(previous.share_id, point.share_id, residue)
        seen[residue] = point


__all__ = ["check_threshold", "select", "ensure_distinct"]
