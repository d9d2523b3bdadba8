from __future__ import annotations

from PySide6.QtCore import QSize
from PySide6.QtGui import QColor, QIcon
from PySide6.QtWidgets import QAbstractButton
from qfluentwidgets import FluentIcon as FIF
from qfluentwidgets import Theme, setTheme, setThemeColor

from .design_tokens import island_palette


def init_fluent_theme() -> None:
    try:
        setTheme(Theme.DARK)
        setThemeColor(QColor(island_palette()["notify_accent"]))
    except Exception:  # noqa: BLE001
        # Theme setup should never block window construction.
        return


def fluent_icon(*names: str) -> QIcon | None:
    for name in names:
        try:
            icon_enum = getattr(FIF, name)
        except AttributeError:
            continue
        try:
            icon = icon_enum.icon()
        except Exception:  # noqa: BLE001
            continue
        if isinstance(icon, QIcon) and not icon.isNull():
            return icon
    return None


def apply_icon_button(button: QAbstractButton, icon: QIcon | None, fallback: str, *, icon_size: int) -> None:
    if icon is not None:
        button.setIcon(icon)
        button.setText("")
        button.setIconSize(QSize(icon_size, icon_size))
        button.setProperty("iconOnly", True)
        return
    button.setIcon(QIcon())
    button.setProperty("iconOnly", False)
    button.setText(fallback)
