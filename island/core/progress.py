"""Local playback clock between authoritative track updates."""
from __future__ import annotations

from typing import NamedTuple

from PySide6.QtCore import QObject, QTimer, Signal

from .types import TrackSnapshot

MICROSECONDS_PER_SECOND = 1_000_000


class ProgressReadout(NamedTuple):
    percent: float
    elapsed: str
    remaining: str


EMPTY_READOUT = ProgressReadout(percent=0.0, elapsed="0:00", remaining="-0:00")


def format_time(microseconds: int) -> str:
    total = max(0, int(microseconds)) // MICROSECONDS_PER_SECOND
    minute = total // 60
    second = total % 60
    return f"{minute}:{second:02d}"


def render_progress(track: TrackSnapshot | None) -> ProgressReadout:
    if track is None or not track.length:
        return EMPTY_READOUT
    percent = max(0.0, min(100.0, track.position / track.length * 100))
    return ProgressReadout(
        percent=percent,
        elapsed=format_time(track.position),
        remaining="-" + format_time(track.length - track.position),
    )


class ProgressSimulator(QObject):
    """
    Advances ``track.position`` by one second per tick while the track plays.

    Owns exactly one repeating timer; ``start`` always stops a previous run.
    """

    progressChanged = Signal(object)

    def __init__(
        self,
        interval_ms: int = 1000,
        step_us: int = MICROSECONDS_PER_SECOND,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._step_us = step_us
        self._track: TrackSnapshot | None = None
        self._timer = QTimer(self)
        self._timer.setInterval(max(1, int(interval_ms)))
        self._timer.timeout.connect(self._tick)

    def start(self, track: TrackSnapshot | None) -> None:
        self.stop()
        if track is None or not track.playing:
            return
        self._track = track
        self._timer.start()

    def stop(self) -> None:
        self._timer.stop()
        self._track = None

    def is_running(self) -> bool:
        return self._timer.isActive()

    def render_once(self, track: TrackSnapshot | None) -> ProgressReadout:
        readout = render_progress(track)
        self.progressChanged.emit(readout)
        return readout

    def _tick(self) -> None:
        track = self._track
        if track is None or not track.playing:
            self.stop()
            return
        track.position += self._step_us
        self.render_once(track)
