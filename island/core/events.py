"""Inbound event shapes and tolerant payload parsing."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Union

from .types import ControlAction, NotificationSnapshot, TrackSnapshot

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on", "playing"}


@dataclass(frozen=True)
class TrackUpdate:
    track: TrackSnapshot


@dataclass(frozen=True)
class NotificationArrived:
    notification: NotificationSnapshot


@dataclass(frozen=True)
class UserClick:
    pass


@dataclass(frozen=True)
class ControlClick:
    action: ControlAction


Event = Union[TrackUpdate, NotificationArrived, UserClick, ControlClick]


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (list, tuple)):
        # Player metadata often reports artists as a list.
        return ", ".join(str(v).strip() for v in value if str(v).strip())
    return str(value).strip()


def _flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    return False


def _microseconds(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return 0
    if isinstance(value, float) and not math.isfinite(value):
        # json accepts NaN and Infinity, and "1e400" parses to inf.
        return 0
    if isinstance(value, (int, float)):
        return max(0, int(value))
    return 0


def track_from_payload(payload: dict[str, Any]) -> TrackSnapshot:
    art_url = _text(payload.get("artUrl"))
    return TrackSnapshot(
        title=_text(payload.get("title")),
        artist=_text(payload.get("artist")),
        art_url=art_url or None,
        playing=_flag(payload.get("playing")),
        position=_microseconds(payload.get("position")),
        length=_microseconds(payload.get("length")),
    )


def notification_from_payload(payload: dict[str, Any]) -> NotificationSnapshot:
    return NotificationSnapshot(
        title=_text(payload.get("title")),
        body=_text(payload.get("body")),
    )


def control_action_from_text(value: Any) -> ControlAction | None:
    raw = _text(value)
    for action in ControlAction:
        if action.value == raw:
            return action
    return None


def event_from_message(message: dict[str, Any]) -> Event | None:
    """
    Build an event from a ``{"type": ...}`` envelope.

    Returns None (and logs) for anything that is not one of the four
    known shapes; malformed fields inside a known shape degrade to
    placeholders instead.
    """
    kind = _text(message.get("type"))
    if kind == "trackUpdate":
        return TrackUpdate(track_from_payload(message))
    if kind == "notification":
        return NotificationArrived(notification_from_payload(message))
    if kind == "userClick":
        return UserClick()
    if kind == "controlClick":
        action = control_action_from_text(message.get("action"))
        if action is None:
            logger.warning("Ignoring control click with unknown action %r", message.get("action"))
            return None
        return ControlClick(action)
    logger.warning("Ignoring message with unknown type %r", kind)
    return None
