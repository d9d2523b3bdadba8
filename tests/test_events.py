from __future__ import annotations

import pytest

from island.core.events import (
    ControlClick,
    NotificationArrived,
    TrackUpdate,
    UserClick,
    control_action_from_text,
    event_from_message,
    notification_from_payload,
    track_from_payload,
)
from island.core.types import ControlAction, NotificationSnapshot


def test_track_payload_is_parsed():
    track = track_from_payload(
        {
            "title": " Blue ",
            "artist": ["A", "B"],
            "artUrl": "file:///tmp/cover.png",
            "playing": True,
            "position": 1_500_000,
            "length": 240_000_000,
        }
    )
    assert track.title == "Blue"
    assert track.artist == "A, B"
    assert track.art_url == "file:///tmp/cover.png"
    assert track.playing is True
    assert track.position == 1_500_000
    assert track.length == 240_000_000


def test_track_payload_degrades_to_placeholders():
    track = track_from_payload({"position": "soon", "length": -5, "artUrl": ""})
    assert track.title == ""
    assert track.artist == ""
    assert track.art_url is None
    assert track.playing is False
    assert track.position == 0
    assert track.length == 0


@pytest.mark.parametrize(
    "raw, expected",
    [("Playing", True), ("paused", False), ("1", True), (0, False), (None, False), ([], False)],
)
def test_playing_flag(raw, expected):
    assert track_from_payload({"playing": raw}).playing is expected


def test_notification_payload():
    assert notification_from_payload({"title": "Hi", "body": None}) == NotificationSnapshot("Hi", "")


def test_control_action_lookup():
    assert control_action_from_text("playPause") == ControlAction.PLAY_PAUSE
    assert control_action_from_text("next") == ControlAction.NEXT
    assert control_action_from_text("stop") is None


def test_event_envelopes():
    assert isinstance(event_from_message({"type": "trackUpdate", "title": "x"}), TrackUpdate)
    assert isinstance(event_from_message({"type": "notification", "title": "x"}), NotificationArrived)
    assert event_from_message({"type": "userClick"}) == UserClick()
    assert event_from_message({"type": "controlClick", "action": "previous"}) == ControlClick(
        ControlAction.PREVIOUS
    )


def test_unknown_messages_are_dropped(caplog):
    assert event_from_message({"type": "volume"}) is None
    assert event_from_message({}) is None
    assert event_from_message({"type": "controlClick", "action": "shuffle"}) is None
    assert "unknown type" in caplog.text
    assert "unknown action" in caplog.text


@pytest.mark.parametrize("raw", [float("nan"), float("inf"), float("-inf"), "1e400", "nan", "-Infinity"])
def test_non_finite_times_degrade_to_zero(raw):
    track = track_from_payload({"title": "x", "position": raw, "length": raw})
    assert track.position == 0
    assert track.length == 0


def test_overflowing_position_string_yields_event():
    event = event_from_message({"type": "trackUpdate", "position": "1e400"})
    assert isinstance(event, TrackUpdate)
    assert event.track.position == 0
