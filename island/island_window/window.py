"""Frameless top-of-screen host window for the island."""
from __future__ import annotations

import sys

from PySide6.QtCore import QEvent, Qt, Signal
from PySide6.QtGui import QGuiApplication, QMouseEvent
from PySide6.QtWidgets import QApplication, QFrame, QStackedWidget, QVBoxLayout, QWidget

from island.core.controller import IslandController
from island.core.events import ControlClick, UserClick
from island.core.geometry import resolve
from island.core.progress import ProgressReadout
from island.core.types import NotificationSnapshot, TrackSnapshot, VisualState
from island.settings import IslandSettings
from island.utils.ui_scale import current_app_scale

from . import styles
from .views import CompactView, MusicView, NotificationView


class IslandWindow(QWidget):
    """
    Owns the physical window. It only renders what the controller decides
    and reports clicks back; it never changes state on its own.
    """

    islandClicked = Signal()
    controlClicked = Signal(object)

    def __init__(self, settings: IslandSettings | None = None, parent=None) -> None:
        super().__init__(parent)
        self._settings = settings or IslandSettings()
        self.setObjectName("islandRoot")
        self.setWindowTitle("Dynamic Island")
        self.setWindowFlags(Qt.WindowType.FramelessWindowHint | Qt.WindowType.Tool)
        self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground, True)
        self.set_keep_on_top(self._settings.keep_on_top)

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(0)
        self.card = QFrame(self)
        self.card.setObjectName("islandCard")
        card_layout = QVBoxLayout(self.card)
        card_layout.setContentsMargins(0, 0, 0, 0)

        self.stack = QStackedWidget(self.card)
        self.compact_view = CompactView(self.stack)
        self.music_view = MusicView(self.stack)
        self.notification_view = NotificationView(self.stack)
        self._views: dict[VisualState, QWidget] = {
            VisualState.COMPACT: self.compact_view,
            VisualState.MUSIC: self.music_view,
            VisualState.NOTIFICATION: self.notification_view,
        }
        for view in self._views.values():
            self.stack.addWidget(view)
        card_layout.addWidget(self.stack)
        root.addWidget(self.card)

        self.music_view.controlClicked.connect(self.controlClicked.emit)
        self._apply_scaled_ui()
        initial = resolve(VisualState.COMPACT)
        self.resize_island(initial.width, initial.height)

    def bind(self, controller: IslandController) -> None:
        controller.stateChanged.connect(self.show_state)
        controller.trackChanged.connect(self.set_track)
        controller.notificationChanged.connect(self.set_notification)
        controller.progressChanged.connect(self.set_progress)
        self.islandClicked.connect(lambda: controller.post(UserClick()))
        self.controlClicked.connect(lambda action: controller.post(ControlClick(action)))

    def current_view(self) -> QWidget:
        return self.stack.currentWidget()

    def resize_island(self, width: int, height: int) -> None:
        self.setFixedSize(width, height)
        self._place_at_top()

    def show_state(self, state: VisualState) -> None:
        self.stack.setCurrentWidget(self._views[state])

    def set_track(self, track: TrackSnapshot | None) -> None:
        self.compact_view.set_track(track)
        self.music_view.set_track(track)

    def set_notification(self, notification: NotificationSnapshot | None) -> None:
        self.notification_view.set_notification(notification)

    def set_progress(self, readout: ProgressReadout) -> None:
        self.music_view.set_progress(readout)

    def set_keep_on_top(self, keep_on_top: bool) -> None:
        self.setWindowFlag(Qt.WindowType.WindowStaysOnTopHint, keep_on_top)
        if sys.platform == "darwin":
            self.setAttribute(Qt.WidgetAttribute.WA_MacAlwaysShowToolWindow, keep_on_top)
        if self.isVisible():
            self.show()

    def _apply_scaled_ui(self) -> None:
        self.setStyleSheet(styles.build_island_stylesheet(current_app_scale(QApplication.instance())))

    def _place_at_top(self) -> None:
        screen = self.screen() or QGuiApplication.primaryScreen()
        if screen is None:
            return
        area = screen.availableGeometry()
        x = area.left() + (area.width() - self.width()) // 2
        y = area.top() + self._settings.top_margin
        self.move(x, y)

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            self.islandClicked.emit()
            event.accept()
            return
        super().mousePressEvent(event)

    def event(self, event) -> bool:
        if event.type() == QEvent.Type.ScreenChangeInternal:
            self._apply_scaled_ui()
            self._place_at_top()
        return super().event(event)
