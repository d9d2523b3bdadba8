"""State to window size mapping and the resize side effect."""
from __future__ import annotations

import logging
from collections.abc import Callable
from functools import partial

from PySide6.QtCore import QObject, QTimer

from .types import Geometry, VisualState

logger = logging.getLogger(__name__)

MAX_RESIZE_DELAY_MS = 100

GEOMETRY: dict[VisualState, Geometry] = {
    VisualState.COMPACT: Geometry(150, 37),
    VisualState.MUSIC: Geometry(380, 180),
    VisualState.NOTIFICATION: Geometry(350, 80),
}


def resolve(state: VisualState) -> Geometry:
    return GEOMETRY[state]


class GeometryResolver(QObject):
    def __init__(
        self,
        resize_fn: Callable[[int, int], None],
        delay_ms: int = 0,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._resize_fn = resize_fn
        self._delay_ms = max(0, min(MAX_RESIZE_DELAY_MS, int(delay_ms)))

    @property
    def delay_ms(self) -> int:
        return self._delay_ms

    def apply(self, state: VisualState) -> Geometry:
        geometry = resolve(state)
        if self._delay_ms == 0:
            self._request_resize(geometry)
        else:
            # Lets the view transition start before the window changes size.
            QTimer.singleShot(self._delay_ms, partial(self._request_resize, geometry))
        return geometry

    def _request_resize(self, geometry: Geometry) -> None:
        try:
            self._resize_fn(geometry.width, geometry.height)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Resize to %sx%s failed: %s", geometry.width, geometry.height, exc)
