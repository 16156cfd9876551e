"""Share decoding: radix text to exact integers."""
from __future__ import annotations

import sys
from contextlib import contextmanager
from functools import lru_cache
from typing import Iterable, Iterator, List, Tuple

import regex

from ..errors import MalformedIdentifier, MalformedShares, MalformedValue, ShareDecodeError, describe_int
from ..models import Point

MIN_BASE = 2
MAX_BASE = 36
DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

_IDENTIFIER = regex.compile(r"[0-9]+", regex.ASCII)


@contextmanager
def _unlimited_int_digits() -> Iterator[None]:
    """Lift the interpreter's int/str digit limit for validated numerals."""

    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(0)
    try:
        yield
    finally:
        sys.set_int_max_str_digits(previous)


def _to_int(text: str, radix: int) -> int:
    with _unlimited_int_digits():
        return int(text, radix)


@lru_cache(maxsize=MAX_BASE)
def _digit_pattern(base: int) -> regex.Pattern:
    # ASCII keeps case folding away from look-alikes such as the Kelvin sign.
    return regex.compile(f"[{regex.escape(DIGITS[:base])}]+", regex.ASCII | regex.IGNORECASE)


def parse_base(raw: int | str, *, share_id: str | None = None) -> int:
    """Return ``raw`` as a radix in ``[2, 36]`` or raise :class:`MalformedValue`."""

    if isinstance(raw, bool):
        raise MalformedValue(f"Base {raw!r} is not an integer", share_id=share_id, base=raw)
    if isinstance(raw, str):
        text = raw.strip()
        if not _IDENTIFIER.fullmatch(text):
            raise MalformedValue(f"Base {raw!r} is not a decimal integer", share_id=share_id, base=raw)
        base = _to_int(text, 10)
    elif isinstance(raw, int):
        base = raw
    else:
        raise MalformedValue(f"Base {raw!r} is not an integer", share_id=share_id, base=raw)
    if not MIN_BASE <= base <= MAX_BASE:
        raise MalformedValue(
            f"Base {describe_int(base)} is outside the supported range {MIN_BASE}-{MAX_BASE}",
            share_id=share_id,
            base=raw,
        )
    return base


def decode_value(value_text: str, base: int | str, *, share_id: str | None = None) -> int:
    radix = parse_base(base, share_id=share_id)
    error = MalformedValue(
        f"Value {value_text!r} is not a valid base-{radix} numeral",
        share_id=share_id,
        value=str(value_text),
        base=radix,
    )
    if not isinstance(value_text, str) or not _digit_pattern(radix).fullmatch(value_text):
        raise error
    try:
        return _to_int(value_text, radix)
    except ValueError:
        raise error from None


def decode_identifier(identifier: str) -> int:
    if not isinstance(identifier, str) or not _IDENTIFIER.fullmatch(identifier):
        raise MalformedIdentifier(str(identifier))
    return _to_int(identifier, 10)


def decode(identifier: str, value_text: str, base: int | str) -> Point:
    """Decode one share record into a :class:`Point`.

    ``identifier`` becomes the x-coordinate and must be a plain decimal
    numeral. ``value_text`` becomes the y-coordinate and must consist solely
    of digits valid for ``base`` (letters are case-insensitive). Signs,
    whitespace, underscores and radix prefixes are rejected even though
    :func:`int` would accept some of them.
    """

    x = decode_identifier(identifier)
    y = decode_value(value_text, base, share_id=identifier)
    return Point(x=x, y=y, share_id=identifier)


def decode_shares(records: Iterable[Tuple[str, int | str, str]]) -> List[Point]:
    """Decode ``(identifier, base, value)`` records, reporting every failure at once."""

    points: List[Point] = []
    errors: List[ShareDecodeError] = []
    for identifier, base, value in records:
        try:
            points.append(decode(identifier, value, base))
        except ShareDecodeError as exc:
            errors.append(exc)
    if errors:
        raise MalformedShares(errors)
    return points


def encode(value: int, base: int) -> str:
    """Render a non-negative integer in ``base`` using lowercase digits."""

    radix = parse_base(base)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"Only non-negative integers can be encoded, got {value!r}")
    if value == 0:
        return "0"
    digits: List[str] = []
    while value:
        value, remainder = divmod(value, radix)
        digits.append(DIGITS[remainder])
    return "".join(reversed(digits))


__all__ = [
    "MIN_BASE",
    "MAX_BASE",
    "decode",
    "decode_identifier",
    "decode_value",
    "decode_shares",
    "encode",
    "parse_base",
]
