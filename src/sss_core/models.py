"""Shared domain models used across SSS Core."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .errors import InsufficientShares, SecretSharingError


@dataclass(frozen=True, slots=True)
class Point:
    x: int
    y: int
    share_id: Optional[str] = field(default=None, compare=False)


@dataclass(frozen=True, slots=True)
class Threshold:
    """Declared share totals: ``n`` available, ``k`` required."""

    n: int
    k: int

    def check(self) -> None:
        if self.k < 1 or self.n < 1:
            raise InsufficientShares(
                f"Invalid threshold (n={self.n}, k={self.k})", available=self.n, required=self.k
            )
        if self.n < self.k:
            raise InsufficientShares(
                f"Threshold k={self.k} exceeds declared share count n={self.n}",
                available=self.n,
                required=self.k,
            )


@dataclass(slots=True)
class ReconstructionOutcome:
    source: Path
    secret: Optional[int] = None
    error: Optional[SecretSharingError] = None

    @property
    def ok(self) -> bool:
        return self.secret is not None and self.error is None
