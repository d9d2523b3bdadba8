"""Compact, music and notification views shown inside the island card."""
from __future__ import annotations

from pathlib import Path

from PySide6.QtCore import Qt, QUrl, Signal
from PySide6.QtGui import QPixmap
from PySide6.QtWidgets import QHBoxLayout, QLabel, QProgressBar, QVBoxLayout, QWidget
from qfluentwidgets import TransparentToolButton

from island.core.progress import EMPTY_READOUT, ProgressReadout
from island.core.types import ControlAction, NotificationSnapshot, TrackSnapshot
from island.utils.fluent_compat import apply_icon_button, fluent_icon

from .marquee_label import MarqueeLabel

_PROGRESS_STEPS = 1000


def load_art_pixmap(art_url: str | None) -> QPixmap | None:
    """Album art from a local path or ``file://`` URL; remote art is not fetched."""
    if not art_url:
        return None
    url = QUrl(art_url)
    if url.isLocalFile():
        path = url.toLocalFile()
    elif not url.scheme() or len(url.scheme()) == 1:
        # Bare paths, including Windows drive letters parsed as a scheme.
        path = art_url
    else:
        return None
    if not Path(path).is_file():
        return None
    pixmap = QPixmap(path)
    return None if pixmap.isNull() else pixmap


class CompactView(QWidget):
    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self.setObjectName("compactView")
        layout = QHBoxLayout(self)
        layout.setContentsMargins(14, 0, 14, 0)
        self.title_label = QLabel("")
        self.title_label.setObjectName("compactTitle")
        self.title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.title_label, 1)

    def set_track(self, track: TrackSnapshot | None) -> None:
        # Idle-with-track preview: a short hint of what is loaded.
        self.title_label.setText(track.title if track is not None else "")


class MusicView(QWidget):
    controlClicked = Signal(object)

    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self.setObjectName("musicView")
        self.setProperty("paused", True)
        self._playing = False

        root = QVBoxLayout(self)
        root.setContentsMargins(18, 16, 18, 12)
        root.setSpacing(8)

        top_row = QHBoxLayout()
        top_row.setSpacing(12)
        self.album_art = QLabel("")
        self.album_art.setObjectName("albumArt")
        self.album_art.setFixedSize(48, 48)
        self.album_art.setAlignment(Qt.AlignmentFlag.AlignCenter)
        info = QVBoxLayout()
        info.setSpacing(2)
        self.title_label = MarqueeLabel("", self)
        self.title_label.setObjectName("trackTitle")
        self.title_label.setMinimumHeight(20)
        self.artist_label = QLabel("")
        self.artist_label.setObjectName("trackArtist")
        info.addWidget(self.title_label)
        info.addWidget(self.artist_label)
        top_row.addWidget(self.album_art)
        top_row.addLayout(info, 1)

        progress_row = QHBoxLayout()
        progress_row.setSpacing(8)
        self.elapsed_label = QLabel(EMPTY_READOUT.elapsed)
        self.elapsed_label.setObjectName("timeLabel")
        self.progress_bar = QProgressBar()
        self.progress_bar.setObjectName("trackProgress")
        self.progress_bar.setRange(0, _PROGRESS_STEPS)
        self.progress_bar.setTextVisible(False)
        self.remaining_label = QLabel(EMPTY_READOUT.remaining)
        self.remaining_label.setObjectName("timeLabel")
        progress_row.addWidget(self.elapsed_label)
        progress_row.addWidget(self.progress_bar, 1)
        progress_row.addWidget(self.remaining_label)

        controls = QHBoxLayout()
        controls.setSpacing(18)
        self.prev_button = TransparentToolButton(self)
        self.prev_button.setToolTip("Previous")
        self.prev_button.clicked.connect(lambda: self.controlClicked.emit(ControlAction.PREVIOUS))
        self.play_button = TransparentToolButton(self)
        self.play_button.setToolTip("Play / Pause")
        self.play_button.clicked.connect(lambda: self.controlClicked.emit(ControlAction.PLAY_PAUSE))
        self.next_button = TransparentToolButton(self)
        self.next_button.setToolTip("Next")
        self.next_button.clicked.connect(lambda: self.controlClicked.emit(ControlAction.NEXT))
        controls.addStretch(1)
        controls.addWidget(self.prev_button)
        controls.addWidget(self.play_button)
        controls.addWidget(self.next_button)
        controls.addStretch(1)

        root.addLayout(top_row)
        root.addLayout(progress_row)
        root.addLayout(controls)

        apply_icon_button(self.prev_button, fluent_icon("LEFT_ARROW", "CARE_LEFT_SOLID"), "⏮", icon_size=16)
        apply_icon_button(self.next_button, fluent_icon("RIGHT_ARROW", "CARE_RIGHT_SOLID"), "⏭", icon_size=16)
        self._sync_play_button()

    def is_playing(self) -> bool:
        return self._playing

    def set_track(self, track: TrackSnapshot | None) -> None:
        if track is None:
            self.title_label.setMarqueeText("")
            self.artist_label.setText("")
            self._set_art(None)
            self._set_playing(False)
            return
        self.title_label.setMarqueeText(track.title)
        self.artist_label.setText(track.artist)
        self._set_art(track.art_url)
        self._set_playing(track.playing)

    def set_progress(self, readout: ProgressReadout) -> None:
        self.progress_bar.setValue(int(round(readout.percent / 100 * _PROGRESS_STEPS)))
        self.elapsed_label.setText(readout.elapsed)
        self.remaining_label.setText(readout.remaining)

    def _set_art(self, art_url: str | None) -> None:
        pixmap = load_art_pixmap(art_url)
        if pixmap is None:
            self.album_art.setPixmap(QPixmap())
            self.album_art.setText("♪")
            return
        self.album_art.setText("")
        self.album_art.setPixmap(
            pixmap.scaled(
                self.album_art.size(),
                Qt.AspectRatioMode.KeepAspectRatioByExpanding,
                Qt.TransformationMode.SmoothTransformation,
            )
        )

    def _set_playing(self, playing: bool) -> None:
        self._playing = playing
        self.setProperty("paused", not playing)
        # Re-polish so the [paused] selector is re-evaluated.
        self.style().unpolish(self)
        self.style().polish(self)
        self._sync_play_button()

    def _sync_play_button(self) -> None:
        if self._playing:
            apply_icon_button(self.play_button, fluent_icon("PAUSE", "PAUSE_BOLD"), "⏸", icon_size=20)
        else:
            apply_icon_button(self.play_button, fluent_icon("PLAY", "PLAY_SOLID"), "▶", icon_size=20)


class NotificationView(QWidget):
    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self.setObjectName("notificationView")
        layout = QHBoxLayout(self)
        layout.setContentsMargins(16, 10, 16, 10)
        layout.setSpacing(12)
        badge = QLabel("🔔")
        badge.setObjectName("notifyBadge")
        badge.setFixedSize(28, 28)
        badge.setAlignment(Qt.AlignmentFlag.AlignCenter)
        text_col = QVBoxLayout()
        text_col.setSpacing(2)
        self.title_label = QLabel("")
        self.title_label.setObjectName("notificationTitle")
        self.body_label = QLabel("")
        self.body_label.setObjectName("notificationBody")
        self.body_label.setWordWrap(True)
        text_col.addWidget(self.title_label)
        text_col.addWidget(self.body_label)
        layout.addWidget(badge)
        layout.addLayout(text_col, 1)

    def set_notification(self, notification: NotificationSnapshot | None) -> None:
        if notification is None:
            self.title_label.setText("")
            self.body_label.setText("")
            return
        self.title_label.setText(notification.title)
        self.body_label.setText(notification.body)
