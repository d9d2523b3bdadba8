"""User-tunable timings and window behaviour, stored in QSettings."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)

ORGANIZATION = "DynamicIsland"
APPLICATION = "Island"
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def open_settings() -> QSettings:
    return QSettings(ORGANIZATION, APPLICATION)


def _coerce_int(raw, default: int, low: int, high: int) -> int:
    if isinstance(raw, bool):
        return default
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, float):
        value = int(raw)
    elif isinstance(raw, str):
        try:
            value = int(raw.strip())
        except ValueError:
            return default
    else:
        return default
    return max(low, min(high, value))


def _coerce_bool(raw, default: bool) -> bool:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, (int, float)):
        return bool(raw)
    if isinstance(raw, str):
        return raw.strip().lower() in {"1", "true", "yes", "on"}
    return default


@dataclass
class IslandSettings:
    notification_timeout_ms: int = 5000
    pause_collapse_ms: int = 3000
    progress_interval_ms: int = 1000
    resize_delay_ms: int = 40
    top_margin: int = 10
    keep_on_top: bool = True
    log_level: str = "INFO"

    @classmethod
    def load(cls, settings: QSettings | None = None) -> IslandSettings:
        store = settings if settings is not None else open_settings()
        defaults = cls()
        level = str(store.value("logging/level", defaults.log_level)).strip().upper()
        if level not in _LOG_LEVELS:
            logger.warning("Unknown log level %r in settings, using %s", level, defaults.log_level)
            level = defaults.log_level
        return cls(
            notification_timeout_ms=_coerce_int(
                store.value("timing/notification_timeout_ms"), defaults.notification_timeout_ms, 0, 600_000
            ),
            pause_collapse_ms=_coerce_int(
                store.value("timing/pause_collapse_ms"), defaults.pause_collapse_ms, 0, 600_000
            ),
            progress_interval_ms=_coerce_int(
                store.value("timing/progress_interval_ms"), defaults.progress_interval_ms, 1, 60_000
            ),
            resize_delay_ms=_coerce_int(
                store.value("timing/resize_delay_ms"), defaults.resize_delay_ms, 0, 100
            ),
            top_margin=_coerce_int(store.value("window/top_margin"), defaults.top_margin, 0, 2000),
            keep_on_top=_coerce_bool(store.value("window/keep_on_top"), defaults.keep_on_top),
            log_level=level,
        )

    def save(self, settings: QSettings | None = None) -> None:
        store = settings if settings is not None else open_settings()
        store.setValue("timing/notification_timeout_ms", self.notification_timeout_ms)
        store.setValue("timing/pause_collapse_ms", self.pause_collapse_ms)
        store.setValue("timing/progress_interval_ms", self.progress_interval_ms)
        store.setValue("timing/resize_delay_ms", self.resize_delay_ms)
        store.setValue("window/top_margin", self.top_margin)
        store.setValue("window/keep_on_top", self.keep_on_top)
        store.setValue("logging/level", self.log_level)
        store.sync()
