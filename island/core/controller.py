"""Island presentation state machine."""
from __future__ import annotations

import logging
from collections.abc import Callable

from PySide6.QtCore import QObject, Qt, Signal

from island.settings import IslandSettings

from .auto_collapse import AutoCollapseTimer
from .events import ControlClick, Event, NotificationArrived, TrackUpdate, UserClick
from .geometry import GeometryResolver
from .progress import ProgressReadout, ProgressSimulator
from .types import ControlAction, NotificationSnapshot, TrackSnapshot, VisualState

logger = logging.getLogger(__name__)


class IslandController(QObject):
    """
    Owns the current visual state and track snapshot.

    Events are delivered one at a time through ``post`` (queued on the Qt
    event loop) or ``handle``; ``set_state`` is the only transition entry
    point. Display code binds to the signals and never mutates state.
    """

    stateChanged = Signal(object)
    trackChanged = Signal(object)
    notificationChanged = Signal(object)
    progressChanged = Signal(object)
    eventPosted = Signal(object)

    def __init__(
        self,
        resize_fn: Callable[[int, int], None],
        dispatch_control_fn: Callable[[ControlAction], None],
        settings: IslandSettings | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._settings = settings or IslandSettings()
        self._dispatch_control_fn = dispatch_control_fn
        self._state = VisualState.COMPACT
        self._track: TrackSnapshot | None = None
        self._notification: NotificationSnapshot | None = None

        self._geometry = GeometryResolver(resize_fn, self._settings.resize_delay_ms, self)
        self._progress = ProgressSimulator(self._settings.progress_interval_ms, parent=self)
        self._progress.progressChanged.connect(self._on_progress)
        self._auto_collapse = AutoCollapseTimer(self._on_auto_collapse, self)
        self.eventPosted.connect(self.handle, Qt.ConnectionType.QueuedConnection)

    @property
    def state(self) -> VisualState:
        return self._state

    @property
    def track(self) -> TrackSnapshot | None:
        return self._track

    @property
    def notification(self) -> NotificationSnapshot | None:
        return self._notification

    @property
    def auto_collapse(self) -> AutoCollapseTimer:
        return self._auto_collapse

    @property
    def progress(self) -> ProgressSimulator:
        return self._progress

    def start(self) -> None:
        """Run the entry actions of the initial state once."""
        self._geometry.apply(self._state)
        self.stateChanged.emit(self._state)
        self._progress.render_once(self._track)

    def shutdown(self) -> None:
        self._auto_collapse.cancel()
        self._progress.stop()

    def post(self, event: Event) -> None:
        self.eventPosted.emit(event)

    def handle(self, event: Event) -> None:
        try:
            if isinstance(event, TrackUpdate):
                self._on_track_update(event.track)
            elif isinstance(event, NotificationArrived):
                self._on_notification(event.notification)
            elif isinstance(event, UserClick):
                self._on_user_click()
            elif isinstance(event, ControlClick):
                self._on_control_click(event.action)
            else:
                logger.warning("Dropping unsupported event %r", event)
        except Exception:  # noqa: BLE001
            logger.exception("Event %r failed; state left at %s", event, self._state.value)

    def set_state(self, new_state: VisualState) -> None:
        if new_state == self._state:
            return
        logger.debug("Island %s -> %s", self._state.value, new_state.value)
        self._state = new_state
        self._auto_collapse.cancel()

        if new_state == VisualState.COMPACT:
            self._progress.stop()
        elif new_state == VisualState.MUSIC:
            self._progress.start(self._track)
            self._progress.render_once(self._track)
        self._geometry.apply(new_state)
        self.stateChanged.emit(new_state)

        if new_state == VisualState.NOTIFICATION:
            self._auto_collapse.schedule(
                self._settings.notification_timeout_ms,
                self._resting_state,
                origin=VisualState.NOTIFICATION,
            )

    def _resting_state(self) -> VisualState:
        return VisualState.MUSIC if self._track is not None else VisualState.COMPACT

    def _on_track_update(self, track: TrackSnapshot) -> None:
        self._track = track
        self.trackChanged.emit(track)
        self._progress.render_once(track)

        if track.playing and self._state != VisualState.NOTIFICATION:
            if self._auto_collapse.origin() == VisualState.MUSIC:
                # Playback resumed before the pause collapse fired.
                self._auto_collapse.cancel()
            self.set_state(VisualState.MUSIC)
            self._progress.start(track)
            return

        if not track.playing and self._state == VisualState.MUSIC:
            self._auto_collapse.schedule(
                self._settings.pause_collapse_ms,
                lambda: VisualState.COMPACT,
                origin=VisualState.MUSIC,
            )
            self._progress.stop()
            return

        if self._state == VisualState.NOTIFICATION:
            # Keep the clock following playback; the notification timer is untouched.
            self._progress.start(track)
            return

        self._progress.stop()

    def _on_notification(self, notification: NotificationSnapshot) -> None:
        self._notification = notification
        self.notificationChanged.emit(notification)
        if self._state == VisualState.NOTIFICATION:
            # A newer notification replaces the visible one and gets a full window.
            self._auto_collapse.schedule(
                self._settings.notification_timeout_ms,
                self._resting_state,
                origin=VisualState.NOTIFICATION,
            )
            return
        self.set_state(VisualState.NOTIFICATION)

    def _on_user_click(self) -> None:
        if self._state == VisualState.COMPACT and self._track is not None:
            self.set_state(VisualState.MUSIC)
        elif self._state == VisualState.MUSIC:
            self.set_state(VisualState.COMPACT)

    def _on_control_click(self, action: ControlAction) -> None:
        try:
            self._dispatch_control_fn(action)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Control %s was not delivered: %s", action.value, exc)

    def _on_auto_collapse(self, origin: VisualState, target: VisualState) -> None:
        if self._state != origin:
            logger.debug("Stale auto-collapse from %s ignored in %s", origin.value, self._state.value)
            return
        self.set_state(target)

    def _on_progress(self, readout: ProgressReadout) -> None:
        self.progressChanged.emit(readout)
