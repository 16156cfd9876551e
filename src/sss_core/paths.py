"""Shared filesystem path helpers for SSS Core."""
from __future__ import annotations

import sys
from pathlib import Path

from platformdirs import PlatformDirs

_APP_NAME = "SSS Core"
_LINUX_APP_NAME = "sss-core"


def runtime_config_dir() -> Path:
    """Return the per-user configuration directory."""
    if sys.platform in {"win32", "darwin"}:
        dirs = PlatformDirs(appname=_APP_NAME, appauthor=False, roaming=True)
    else:
        dirs = PlatformDirs(appname=_LINUX_APP_NAME, appauthor=False, roaming=False)
    return Path(dirs.user_config_path)


def default_config_path() -> Path:
    """Return the per-user location of ``config.yaml``."""
    return runtime_config_dir() / "config.yaml"
