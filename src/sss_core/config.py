"""Configuration loading utilities for SSS Core."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Optional

import regex
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .field.primes import MERSENNE_521, is_probable_prime
from .paths import default_config_path

_POWER_FORM = regex.compile(r"\s*2\s*(?:\^|\*\*)\s*([0-9]+)\s*-\s*([0-9]+)\s*", regex.ASCII)


def parse_prime(value: Any) -> int:
    """Accept an int, a numeric literal (``"0x..."`` or decimal) or ``2^e-c``."""

    if isinstance(value, bool):
        raise ValueError("Prime modulus must be an integer")
    if isinstance(value, int):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Unsupported prime modulus value: {value!r}")
    match = _POWER_FORM.fullmatch(value)
    if match:
        exponent, offset = (int(group) for group in match.groups())
        return 2**exponent - offset
    try:
        return int(value.strip(), 0)
    except ValueError:
        raise ValueError(f"Prime modulus {value!r} is not an integer expression") from None


class FieldConfig(BaseModel):
    prime: int = Field(default=MERSENNE_521, description="Prime modulus of the interpolation field")

    model_config = ConfigDict(frozen=True)

    @field_validator("prime", mode="before")
    @classmethod
    def _parse_prime(cls, value: Any) -> int:
        return parse_prime(value)

    @field_validator("prime")
    @classmethod
    def _validate_prime(cls, value: int) -> int:
        if not is_probable_prime(value):
            raise ValueError(f"Field modulus {value} is not prime")
        return value


class SelectionConfig(BaseModel):
    reject_duplicates: bool = Field(
        default=True,
        description="Fail with DuplicateShare before interpolating colliding x-coordinates",
    )

    model_config = ConfigDict(frozen=True)


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO", description="Logging verbosity level")

    model_config = ConfigDict(frozen=True)

    def normalized_level(self) -> str:
        return self.level.upper()


class AppConfig(BaseModel):
    field: FieldConfig = Field(default_factory=FieldConfig)
    selection: SelectionConfig = Field(default_factory=SelectionConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(frozen=True)


DEFAULT_CONFIG = AppConfig()


def config_search_paths(explicit: Optional[Path] = None) -> Iterable[Path]:
    if explicit:
        yield explicit
    yield Path.cwd() / ".sss" / "config.yaml"
    yield default_config_path()


def load_config(path: Optional[Path] = None) -> AppConfig:
    for candidate in config_search_paths(path):
        if candidate.is_file():
            with candidate.open("r", encoding="utf-8") as handle:
                data = yaml.safe_load(handle) or {}
            try:
                return AppConfig.model_validate(data)
            except ValidationError as exc:
                raise ValueError(f"Invalid configuration in {candidate}: {exc}") from exc
    return DEFAULT_CONFIG.model_copy(deep=True)


def dump_default_config(target: Path) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(DEFAULT_CONFIG.model_dump(mode="json"), handle, sort_keys=False)


__all__ = [
    "AppConfig",
    "DEFAULT_CONFIG",
    "FieldConfig",
    "LoggingConfig",
    "SelectionConfig",
    "config_search_paths",
    "dump_default_config",
    "load_config",
    "parse_prime",
]
