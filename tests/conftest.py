from __future__ import annotations

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from island.core.controller import IslandController
from island.core.types import TrackSnapshot
from island.settings import IslandSettings


class Recorder:
    def __init__(self) -> None:
        self.resizes: list[tuple[int, int]] = []
        self.controls: list = []

    def resize(self, width: int, height: int) -> None:
        self.resizes.append((width, height))

    def dispatch(self, action) -> None:
        self.controls.append(action)


@pytest.fixture
def fast_settings() -> IslandSettings:
    return IslandSettings(
        notification_timeout_ms=300,
        pause_collapse_ms=150,
        progress_interval_ms=20,
        resize_delay_ms=0,
    )


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def controller(qapp, recorder, fast_settings):
    ctrl = IslandController(
        resize_fn=recorder.resize,
        dispatch_control_fn=recorder.dispatch,
        settings=fast_settings,
    )
    yield ctrl
    ctrl.shutdown()


def make_track(playing: bool = True, position: int = 0, length: int = 200_000_000, title: str = "Song") -> TrackSnapshot:
    return TrackSnapshot(
        title=title,
        artist="Artist",
        art_url=None,
        playing=playing,
        position=position,
        length=length,
    )


@pytest.fixture
def track_factory():
    return make_track
