from __future__ import annotations

import io
import json

from island.bridge.control_dispatch import ControlDispatcher
from island.bridge.event_reader import EventReader
from island.core.events import ControlClick, NotificationArrived, TrackUpdate, UserClick
from island.core.types import ControlAction


def _read_all(text: str) -> tuple[list, list]:
    reader = EventReader(io.StringIO(text))
    events: list = []
    done: list = []
    reader.received.connect(events.append)
    reader.finished.connect(lambda: done.append(True))
    reader.run()
    return events, done


def test_reader_emits_events_in_order(qapp):
    lines = [
        {"type": "trackUpdate", "title": "One", "playing": True},
        {"type": "notification", "title": "Ping", "body": "pong"},
        {"type": "userClick"},
        {"type": "controlClick", "action": "next"},
    ]
    events, done = _read_all("\n".join(json.dumps(line) for line in lines) + "\n")
    assert [type(e) for e in events] == [TrackUpdate, NotificationArrived, UserClick, ControlClick]
    assert events[0].track.title == "One"
    assert done == [True]


def test_reader_skips_bad_lines(qapp, caplog):
    text = '\n{not json\n[1, 2]\n{"type": "mystery"}\n{"type": "userClick"}\n'
    events, done = _read_all(text)
    assert events == [UserClick()]
    assert done == [True]
    assert "malformed" in caplog.text
    assert "non-object" in caplog.text


def test_stopped_reader_emits_nothing(qapp):
    reader = EventReader(io.StringIO('{"type": "userClick"}\n'))
    events: list = []
    reader.received.connect(events.append)
    reader.stop()
    reader.run()
    assert events == []


def test_dispatcher_writes_control_lines():
    out = io.StringIO()
    dispatcher = ControlDispatcher(out)
    dispatcher.dispatch(ControlAction.PLAY_PAUSE)
    dispatcher.dispatch(ControlAction.PREVIOUS)
    lines = out.getvalue().splitlines()
    assert [json.loads(line) for line in lines] == [
        {"type": "control", "action": "playPause"},
        {"type": "control", "action": "previous"},
    ]


def test_dispatcher_survives_closed_stream(caplog):
    out = io.StringIO()
    out.close()
    ControlDispatcher(out).dispatch(ControlAction.NEXT)
    assert "Could not forward next" in caplog.text


def test_non_finite_numbers_do_not_stop_the_reader(qapp):
    text = (
        '{"type": "trackUpdate", "title": "A", "position": NaN, "length": 1000}\n'
        '{"type": "trackUpdate", "title": "B", "length": Infinity}\n'
        '{"type": "trackUpdate", "title": "C", "position": 1e400}\n'
        '{"type": "notification", "title": "Still here", "body": ""}\n'
    )
    events, done = _read_all(text)
    assert [type(e) for e in events] == [TrackUpdate, TrackUpdate, TrackUpdate, NotificationArrived]
    assert [e.track.position for e in events[:3]] == [0, 0, 0]
    assert events[1].track.length == 0
    assert events[3].notification.title == "Still here"
    assert done == [True]


def test_unparseable_event_is_skipped_per_line(qapp, monkeypatch, caplog):
    from island.bridge import event_reader

    parse = event_reader.event_from_message

    def fragile(message):
        if message.get("title") == "bad":
            raise OverflowError("too big")
        return parse(message)

    monkeypatch.setattr(event_reader, "event_from_message", fragile)
    events, done = _read_all('{"type": "notification", "title": "bad"}\n{"type": "userClick"}\n')
    assert events == [UserClick()]
    assert done == [True]
    assert "unparseable" in caplog.text


def test_reader_on_daemon_thread_feeds_the_controller(controller, qtbot):
    import threading

    from island.core.types import VisualState

    reader = EventReader(io.StringIO('{"type": "trackUpdate", "title": "Far", "playing": true}\n'))
    reader.received.connect(controller.post)
    worker = threading.Thread(target=reader.run, daemon=True)
    worker.start()
    qtbot.waitUntil(lambda: controller.state == VisualState.MUSIC, timeout=2000)
    worker.join(timeout=1)
    assert not worker.is_alive()
    assert controller.track.title == "Far"
