"""Reconstruction orchestration for share documents and batches of files."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

import structlog

from .codec.decoder import decode_shares
from .config import AppConfig, DEFAULT_CONFIG
from .errors import InvalidShareDocument, SecretSharingError
from .field.interpolator import interpolate
from .models import ReconstructionOutcome
from .schema import ShareDocument, document_from_path
from .selection import check_threshold, ensure_distinct, select

logger = structlog.get_logger(__name__)


def reconstruct(document: ShareDocument, prime: int, *, reject_duplicates: bool = True) -> int:
    """Recover the secret encoded by ``document`` in the field of ``prime``.

    The declared threshold is checked before any share is decoded. All
    malformed shares are reported together. The ``k`` points with the
    smallest x-coordinates are interpolated at zero.
    """

    threshold = check_threshold(document.keys.n, document.keys.k)
    points = decode_shares(document.iter_records())
    chosen = select(points, threshold.k)
    if reject_duplicates:
        ensure_distinct(chosen, prime)
    return interpolate(chosen, prime)


def reconstruct_path(path: Path, config: AppConfig = DEFAULT_CONFIG) -> int:
    document = document_from_path(path)
    return reconstruct(
        document,
        config.field.prime,
        reject_duplicates=config.selection.reject_duplicates,
    )


def reconstruct_files(paths: Iterable[Path], config: AppConfig = DEFAULT_CONFIG) -> List[ReconstructionOutcome]:
    """Attempt every file independently; a failing file never stops the batch."""

    outcomes: List[ReconstructionOutcome] = []
    for path in paths:
        try:
            secret = reconstruct_path(path, config)
        except InvalidShareDocument as exc:
            logger.warning("reconstruct.skipped", path=str(path), detail=str(exc))
            outcomes.append(ReconstructionOutcome(source=path, error=exc))
            continue
        except SecretSharingError as exc:
            logger.warning(
                "reconstruct.failed",
                path=str(path),
                error=type(exc).__name__,
                detail=str(exc),
            )
            outcomes.append(ReconstructionOutcome(source=path, error=exc))
            continue
        logger.info("reconstruct.success", path=str(path), secret_bits=secret.bit_length())
        outcomes.append(ReconstructionOutcome(source=path, secret=secret))
    return outcomes


__all__ = ["reconstruct", "reconstruct_path", "reconstruct_files"]
