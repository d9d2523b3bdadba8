"""Inbound JSON-lines channel from the media status producer."""
from __future__ import annotations

import json
import logging
from typing import TextIO

from PySide6.QtCore import QObject, Signal

from island.core.events import event_from_message

logger = logging.getLogger(__name__)


class EventReader(QObject):
    """
    Reads one JSON object per line and emits the parsed island event.

    Meant to run on a daemon worker thread; ``received`` is delivered to the
    controller through a queued connection.
    """

    received = Signal(object)
    finished = Signal()

    def __init__(self, stream: TextIO) -> None:
        super().__init__()
        self._stream = stream
        self._stopped = False

    def stop(self) -> None:
        self._stopped = True

    def run(self) -> None:
        try:
            for raw in self._stream:
                if self._stopped:
                    break
                self._handle_line(raw)
        except (OSError, ValueError) as exc:
            logger.warning("Event stream closed unexpectedly: %s", exc)
        self.finished.emit()

    def _handle_line(self, raw: str) -> None:
        line = raw.strip()
        if not line:
            return
        try:
            message = json.loads(line)
        except json.JSONDecodeError as exc:
            logger.warning("Skipping malformed event line %r: %s", line[:120], exc)
            return
        if not isinstance(message, dict):
            logger.warning("Skipping non-object event line %r", line[:120])
            return
        try:
            event = event_from_message(message)
        except (ValueError, TypeError, OverflowError) as exc:
            logger.warning("Skipping unparseable event %r: %s", line[:120], exc)
            return
        if event is not None:
            self.received.emit(event)
