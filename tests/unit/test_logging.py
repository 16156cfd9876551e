from pathlib import Path

from sss_core import paths
from sss_core.logging import _redact_share_values


def test_secret_and_share_values_are_redacted() -> None:
    event = {"msg": "reconstruct.success", "secret": 2**100 + 1, "value": "deadbeef", "path": "a.json"}
    redacted = _redact_share_values(None, "info", dict(event))
    assert redacted["secret"] == "<redacted 101-bit>"
    assert redacted["value"] == "<redacted>"
    assert redacted["path"] == "a.json"


def test_events_without_share_values_pass_through() -> None:
    event = {"msg": "reconstruct.failed", "secret_bits": 521}
    assert _redact_share_values(None, "warning", dict(event)) == event


def test_default_config_path_is_under_config_dir() -> None:
    target = paths.default_config_path()
    assert target.name == "config.yaml"
    assert target.parent == paths.runtime_config_dir()
    assert isinstance(target, Path)
