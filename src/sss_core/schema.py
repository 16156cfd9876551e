"""Share document schemas."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterator, Tuple

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .errors import InvalidShareDocument


class _ShareLoader(yaml.SafeLoader):
    """Safe loader that keeps YAML 1.1 integers (``010``, ``0x10``, ``1_0``) as their source text."""


_ShareLoader.add_constructor("tag:yaml.org,2002:int", yaml.SafeLoader.construct_scalar)


class ThresholdKeys(BaseModel):
    n: int = Field(ge=1, description="Total number of shares issued")
    k: int = Field(ge=1, description="Minimum shares needed to reconstruct")

    model_config = ConfigDict(frozen=True)


class ShareRecord(BaseModel):
    base: str
    value: str

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("base", mode="before")
    @classmethod
    def _base_as_text(cls, value: Any) -> Any:
        # Radix checks happen in the decoder so they are reported per share.
        # Only JSON numbers arrive here; YAML integers are kept as text.
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class ShareDocument(BaseModel):
    keys: ThresholdKeys
    shares: Dict[str, ShareRecord] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="before")
    @classmethod
    def _collect_share_records(cls, data: Any) -> Any:
        """Treat every top-level key except ``keys`` as a share record."""

        if not isinstance(data, dict) or "shares" in data:
            return data
        shares = {key: value for key, value in data.items() if key != "keys"}
        collected: Dict[str, Any] = {"shares": shares}
        if "keys" in data:
            collected["keys"] = data["keys"]
        return collected

    def iter_records(self) -> Iterator[Tuple[str, str, str]]:
        for identifier, record in self.shares.items():
            yield identifier, record.base, record.value


def document_from_data(raw: Any, source: Path | None = None) -> ShareDocument:
    try:
        return ShareDocument.model_validate(raw)
    except ValidationError as exc:
        raise InvalidShareDocument(f"Invalid share document: {exc}", source=source) from exc


def document_from_path(path: Path) -> ShareDocument:
    try:
        with path.open("r", encoding="utf-8") as handle:
            if path.suffix.lower() in {".yaml", ".yml"}:
                raw = yaml.load(handle, Loader=_ShareLoader)
            else:
                raw = json.load(handle)
    except OSError as exc:
        raise InvalidShareDocument(f"Cannot read share document: {exc}", source=path) from exc
    except (ValueError, yaml.YAMLError) as exc:
        # JSONDecodeError, UnicodeDecodeError and integer digit limits are ValueErrors.
        raise InvalidShareDocument(f"Cannot parse share document: {exc}", source=path) from exc
    return document_from_data(raw, source=path)


__all__ = [
    "ShareDocument",
    "ShareRecord",
    "ThresholdKeys",
    "document_from_data",
    "document_from_path",
]
