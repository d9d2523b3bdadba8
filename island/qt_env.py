from __future__ import annotations

import os

_QUIET_RULES = "*.debug=false;qt.qpa.*=false"
_STALE_KEYS = ("QT_PLUGIN_PATH", "QT_QPA_PLATFORM_PLUGIN_PATH")


def prepare_qt_environment() -> None:
    """Run before PySide6 is imported; stderr stays readable for our own logs."""
    os.environ.setdefault("QT_LOGGING_RULES", _QUIET_RULES)
    # Plugin paths inherited from another Qt install load mismatched binaries;
    # PySide6 finds its own plugins once these are gone.
    for key in _STALE_KEYS:
        os.environ.pop(key, None)
