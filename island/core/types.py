"""Shared types for the island state machine."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple


class VisualState(Enum):
    COMPACT = "compact"
    MUSIC = "music"
    NOTIFICATION = "notification"


class ControlAction(Enum):
    PLAY_PAUSE = "playPause"
    NEXT = "next"
    PREVIOUS = "previous"


@dataclass
class TrackSnapshot:
    """
    Last authoritative playback update.

    Positions and lengths are in microseconds. ``length == 0`` means unknown.
    ``position`` is advanced in place by the progress simulator between updates.
    """

    title: str
    artist: str
    art_url: str | None = None
    playing: bool = False
    position: int = 0
    length: int = 0


class NotificationSnapshot(NamedTuple):
    title: str
    body: str


class Geometry(NamedTuple):
    width: int
    height: int
