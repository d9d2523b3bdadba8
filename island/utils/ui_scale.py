from __future__ import annotations

from PySide6.QtCore import QCoreApplication
from PySide6.QtGui import QGuiApplication, QScreen

_BASE_DPI = 96.0
_MIN_SCALE = 0.85
_MAX_SCALE = 2.0


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def screen_scale(screen: QScreen | None) -> float:
    if screen is None:
        return 1.0
    try:
        logical_dpi = float(screen.logicalDotsPerInch())
    except RuntimeError:
        # Screen can be destroyed during monitor transitions.
        return 1.0
    if logical_dpi <= 0:
        return 1.0
    return _clamp(logical_dpi / _BASE_DPI, _MIN_SCALE, _MAX_SCALE)


def current_app_scale(app: QCoreApplication | None) -> float:
    if app is not None:
        raw = app.property("ui_scale_factor")
        if isinstance(raw, (int, float)):
            return _clamp(float(raw), _MIN_SCALE, _MAX_SCALE)
    return screen_scale(QGuiApplication.primaryScreen())


def px(value: int, scale: float) -> int:
    return max(1, int(round(value * scale)))
