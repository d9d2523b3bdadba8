from __future__ import annotations

from island.core.geometry import GEOMETRY, MAX_RESIZE_DELAY_MS, GeometryResolver, resolve
from island.core.types import Geometry, VisualState


def test_every_state_has_fixed_dimensions():
    assert set(GEOMETRY) == set(VisualState)
    assert resolve(VisualState.COMPACT) == Geometry(150, 37)
    assert resolve(VisualState.MUSIC) == Geometry(380, 180)
    assert resolve(VisualState.NOTIFICATION) == Geometry(350, 80)


def test_apply_issues_exactly_one_resize(qapp, recorder):
    resolver = GeometryResolver(recorder.resize)
    geometry = resolver.apply(VisualState.MUSIC)
    assert geometry == Geometry(380, 180)
    assert recorder.resizes == [(380, 180)]


def test_delay_is_capped(qapp, recorder):
    assert GeometryResolver(recorder.resize, delay_ms=5000).delay_ms == MAX_RESIZE_DELAY_MS
    assert GeometryResolver(recorder.resize, delay_ms=-3).delay_ms == 0


def test_delayed_apply_does_not_block(qtbot, recorder):
    resolver = GeometryResolver(recorder.resize, delay_ms=30)
    resolver.apply(VisualState.NOTIFICATION)
    assert recorder.resizes == []
    qtbot.waitUntil(lambda: recorder.resizes == [(350, 80)], timeout=1000)


def test_resize_failure_is_not_propagated(qapp, caplog):
    def broken(width, height):
        raise RuntimeError("window gone")

    GeometryResolver(broken).apply(VisualState.COMPACT)
    assert "window gone" in caplog.text
