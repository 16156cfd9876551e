"""Central exception hierarchy for secret reconstruction."""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence

# Formatting larger ints trips the interpreter's int/str digit limit.
_MAX_DISPLAY_BITS = 4096


def describe_int(value: int) -> str:
    if value.bit_length() > _MAX_DISPLAY_BITS:
        return f"<{value.bit_length()}-bit integer>"
    return str(value)


class SecretSharingError(Exception):
    """Base exception for all reconstruction failures"""


class ShareDecodeError(SecretSharingError):
    """Raised when a single share record cannot be decoded"""

    def __init__(self, message: str, share_id: Optional[str] = None) -> None:
        super().__init__(message)
        self.share_id = share_id


class MalformedIdentifier(ShareDecodeError):
    """Raised when a share identifier is not a decimal numeral"""

    def __init__(self, identifier: str) -> None:
        super().__init__(f"Share identifier {identifier!r} is not a decimal integer", share_id=identifier)
        self.identifier = identifier


class MalformedValue(ShareDecodeError):
    """Raised when a share value does not parse under its declared base"""

    def __init__(self, message: str, *, share_id: Optional[str] = None, value: str = "", base: object = None) -> None:
        super().__init__(message, share_id=share_id)
        self.value = value
        self.base = base


class MalformedShares(SecretSharingError):
    """Raised once per document with every share that failed to decode"""

    def __init__(self, errors: Sequence[ShareDecodeError]) -> None:
        self.errors: List[ShareDecodeError] = list(errors)
        details = "; ".join(str(error) for error in self.errors)
        super().__init__(f"{len(self.errors)} malformed share(s): {details}")


class InsufficientShares(SecretSharingError):
    """Raised when fewer usable shares than the threshold are available"""

    def __init__(self, message: str, *, available: int, required: int) -> None:
        super().__init__(message)
        self.available = available
        self.required = required


class DuplicateShare(SecretSharingError):
    """Raised when two selected shares collide on their x-coordinate"""

    def __init__(self, first: Optional[str], second: Optional[str], x: int) -> None:
        super().__init__(
            f"Shares {first!r} and {second!r} share x-coordinate {describe_int(x)} modulo the field prime"
        )
        self.first = first
        self.second = second
        self.x = x


class DegenerateField(SecretSharingError):
    """Raised when a Lagrange denominator vanishes modulo the prime"""

    def __init__(self, x_i: int, x_j: int) -> None:
        super().__init__(
            f"x-coordinates {describe_int(x_i)} and {describe_int(x_j)} are congruent modulo the field prime"
        )
        self.x_i = x_i
        self.x_j = x_j


class NoModularInverse(SecretSharingError):
    """Raised when a denominator has no inverse; the modulus is not a usable prime"""

    def __init__(self, value: int, prime: int) -> None:
        super().__init__(f"{describe_int(value)} has no inverse modulo {describe_int(prime)}")
        self.value = value
        self.prime = prime


class InvalidShareDocument(SecretSharingError):
    """Raised when a share document is unreadable or fails schema validation"""

    def __init__(self, message: str, source: Optional[Path] = None) -> None:
        super().__init__(f"{source}: {message}" if source else message)
        self.source = source


__all__ = [
    "describe_int",
    "SecretSharingError",
    "ShareDecodeError",
    "MalformedIdentifier",
    "MalformedValue",
    "MalformedShares",
    "InsufficientShares",
    "DuplicateShare",
    "DegenerateField",
    "NoModularInverse",
    "InvalidShareDocument",
]
