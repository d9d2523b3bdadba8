"""Island state machine: states, timers, geometry, and the controller."""
from .auto_collapse import AutoCollapseTimer
from .controller import IslandController
from .events import (
    ControlClick,
    Event,
    NotificationArrived,
    TrackUpdate,
    UserClick,
    event_from_message,
    notification_from_payload,
    track_from_payload,
)
from .geometry import GEOMETRY, GeometryResolver, resolve
from .progress import EMPTY_READOUT, ProgressReadout, ProgressSimulator, format_time, render_progress
from .types import ControlAction, Geometry, NotificationSnapshot, TrackSnapshot, VisualState

__all__ = [
    "AutoCollapseTimer",
    "ControlAction",
    "ControlClick",
    "EMPTY_READOUT",
    "Event",
    "GEOMETRY",
    "Geometry",
    "GeometryResolver",
    "IslandController",
    "NotificationArrived",
    "NotificationSnapshot",
    "ProgressReadout",
    "ProgressSimulator",
    "TrackSnapshot",
    "TrackUpdate",
    "UserClick",
    "VisualState",
    "event_from_message",
    "format_time",
    "notification_from_payload",
    "render_progress",
    "resolve",
    "track_from_payload",
]
