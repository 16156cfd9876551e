"""Structured logging setup for SSS Core."""
from __future__ import annotations

import logging
import sys
from typing import Dict

import structlog

_DEFAULT_LEVEL = "info"
_SENSITIVE_KEYS = frozenset({"secret", "value", "y"})


def configure_logging(level: str | None = None) -> None:
    """Configure structlog for the application.

    Log lines are JSON objects with the keys ``level``, ``ts``, ``msg`` and
    ``component`` plus whatever context the caller binds. Reconstructed
    secrets and share values are redacted by a processor even if a caller
    binds them; callers log ``secret_bits`` instead.
    """

    log_level = (level or _DEFAULT_LEVEL).lower()
    numeric_level = _level_from_str(log_level)

    logging.basicConfig(
        level=numeric_level,
        handlers=[logging.StreamHandler(sys.stderr)],
        format="%(message)s",
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso", key="ts"),
            structlog.stdlib.add_log_level,
            _component_processor,
            _rename_event_to_msg,
            _redact_share_values,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=True,
    )


def _component_processor(
    logger: structlog.BoundLoggerBase, _name: str, event_dict: dict[str, object]
) -> dict[str, object]:
    """Ensure every log record carries a ``component`` field."""

    component = event_dict.get("component")
    if component is None:
        logger_name = getattr(logger, "name", None) or "sss_core"
        event_dict["component"] = logger_name
    return event_dict


def _redact_share_values(
    _logger: structlog.BoundLoggerBase, _name: str, event_dict: dict[str, object]
) -> dict[str, object]:
    """Replace secrets and share y-values with their bit length."""

    for key in _SENSITIVE_KEYS.intersection(event_dict):
        value = event_dict[key]
        if isinstance(value, int) and not isinstance(value, bool):
            event_dict[key] = f"<redacted {value.bit_length()}-bit>"
        else:
            event_dict[key] = "<redacted>"
    return event_dict


def _rename_event_to_msg(
    _logger: structlog.BoundLoggerBase, _name: str, event_dict: dict[str, object]
) -> dict[str, object]:
    if "msg" not in event_dict:
        event_dict["msg"] = event_dict.pop("event", "")
    return event_dict


def _level_from_str(level: str) -> int:
    mapping: Dict[str, int] = {
        "critical": logging.CRITICAL,
        "error": logging.ERROR,
        "warning": logging.WARNING,
        "info": logging.INFO,
        "debug": logging.DEBUG,
    }
    return mapping.get(level, logging.INFO)


__all__ = ["configure_logging"]
