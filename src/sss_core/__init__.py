"""Shamir secret reconstruction over a prime field."""
from .codec.decoder import decode, decode_shares, encode
from .errors import (
    DegenerateField,
    DuplicateShare,
    InsufficientShares,
    InvalidShareDocument,
    MalformedIdentifier,
    MalformedShares,
    MalformedValue,
    NoModularInverse,
    SecretSharingError,
    ShareDecodeError,
)
from .field.interpolator import interpolate
from .models import Point, ReconstructionOutcome, Threshold
from .reconstruct import reconstruct, reconstruct_files, reconstruct_path
from .selection import check_threshold, ensure_distinct, select
from .version import __version__

__all__ = [
    "DegenerateField",
    "DuplicateShare",
    "InsufficientShares",
    "InvalidShareDocument",
    "MalformedIdentifier",
    "MalformedShares",
    "MalformedValue",
    "NoModularInverse",
    "Point",
    "ReconstructionOutcome",
    "SecretSharingError",
    "ShareDecodeError",
    "Threshold",
    "__version__",
    "check_threshold",
    "decode",
    "decode_shares",
    "encode",
    "ensure_distinct",
    "interpolate",
    "reconstruct",
    "reconstruct_files",
    "reconstruct_path",
    "select",
]
