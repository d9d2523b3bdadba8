"""Single pending reversion out of a transient state."""
from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import QObject, QTimer

from .types import VisualState


class AutoCollapseTimer(QObject):
    """
    Owns one single-shot timer. Scheduling always cancels the previous one.

    On fire, ``fire_fn(origin, target)`` is called with the target evaluated
    at fire time, since it depends on what the controller knows by then.
    """

    def __init__(
        self,
        fire_fn: Callable[[VisualState, VisualState], None],
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._fire_fn = fire_fn
        self._target_fn: Callable[[], VisualState] | None = None
        self._origin: VisualState | None = None
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._on_timeout)

    def schedule(
        self,
        delay_ms: int,
        target_fn: Callable[[], VisualState],
        origin: VisualState,
    ) -> None:
        self.cancel()
        self._target_fn = target_fn
        self._origin = origin
        self._timer.start(max(0, int(delay_ms)))

    def cancel(self) -> None:
        self._timer.stop()
        self._target_fn = None
        self._origin = None

    def is_pending(self) -> bool:
        return self._timer.isActive()

    def origin(self) -> VisualState | None:
        return self._origin if self.is_pending() else None

    def remaining_ms(self) -> int:
        return self._timer.remainingTime() if self.is_pending() else -1

    def _on_timeout(self) -> None:
        target_fn = self._target_fn
        origin = self._origin
        self._target_fn = None
        self._origin = None
        if target_fn is None or origin is None:
            return
        self._fire_fn(origin, target_fn())
