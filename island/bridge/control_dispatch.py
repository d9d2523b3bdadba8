"""Outbound media-control channel."""
from __future__ import annotations

import json
import logging
from typing import TextIO

from island.core.types import ControlAction

logger = logging.getLogger(__name__)


class ControlDispatcher:
    """Writes one ``{"type": "control", "action": ...}`` line per control click."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def dispatch(self, action: ControlAction) -> None:
        payload = {"type": "control", "action": action.value}
        try:
            self._stream.write(json.dumps(payload) + "\n")
            self._stream.flush()
        except (OSError, ValueError) as exc:
            logger.warning("Could not forward %s: %s", action.value, exc)
