"""Scrolling label for track titles wider than the music view."""
from __future__ import annotations

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QPaintEvent, QPainter
from PySide6.QtWidgets import QLabel


class MarqueeLabel(QLabel):
    def __init__(self, text: str = "", parent=None) -> None:
        super().__init__(text, parent)
        self._full_text = text
        self._offset = 0
        self._gap = 36
        self._timer = QTimer(self)
        self._timer.setInterval(60)
        self._timer.timeout.connect(self._tick)

    def marqueeText(self) -> str:
        return self._full_text

    def setMarqueeText(self, text: str) -> None:
        if text == self._full_text:
            return
        self._full_text = text
        self.setToolTip(text)
        self._offset = 0
        self._update_scroll_state()
        self.update()

    def is_scrolling(self) -> bool:
        return self._timer.isActive()

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        self._update_scroll_state()

    def hideEvent(self, event) -> None:
        self._timer.stop()
        super().hideEvent(event)

    def showEvent(self, event) -> None:
        super().showEvent(event)
        self._update_scroll_state()

    def _text_width(self) -> int:
        return self.fontMetrics().horizontalAdvance(self._full_text)

    def _tick(self) -> None:
        text_width = self._text_width()
        if text_width <= self.width():
            self._offset = 0
            return
        self._offset = (self._offset + 1) % (text_width + self._gap)
        self.update()

    def _update_scroll_state(self) -> None:
        if self._text_width() > self.width() and self.isVisible():
            if not self._timer.isActive():
                self._timer.start()
        else:
            self._timer.stop()
            self._offset = 0

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.TextAntialiasing, True)
        painter.setPen(self.palette().color(self.foregroundRole()))
        rect = self.contentsRect()
        painter.setClipRect(rect)
        fm = self.fontMetrics()
        text_width = fm.horizontalAdvance(self._full_text)
        if text_width <= rect.width():
            painter.drawText(rect, Qt.AlignmentFlag.AlignVCenter | Qt.AlignmentFlag.AlignLeft, self._full_text)
            return
        baseline = rect.y() + (rect.height() + fm.ascent() - fm.descent()) // 2
        start_x = rect.x() - self._offset
        painter.drawText(start_x, baseline, self._full_text)
        painter.drawText(start_x + text_width + self._gap, baseline, self._full_text)
