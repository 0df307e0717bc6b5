"""
Tests for FrameDriver (fps update, tick, draw in one frame)
"""

from unittest.mock import MagicMock

import pytest

from engine.fps_meter import NO_DATA
from engine.frame_driver import FrameDriver
from models.config import SpiralConfig
from models.errors import CanvasNotFoundError
from services.canvas_store import CanvasStateStore


@pytest.fixture
def driver(store):
    return FrameDriver(store)


class TestRenderFrame:
    """Per-frame control flow for one canvas."""

    def test_first_frame_has_no_interval(self, driver, store, surface):
        canvas_id = store.create_canvas()
        assert driver.render_frame(canvas_id, surface, 600, now_ms=1000) == NO_DATA

    def test_interval_after_second_frame(self, driver, store, surface):
        canvas_id = store.create_canvas()
        driver.render_frame(canvas_id, surface, 600, now_ms=1000)
        assert driver.render_frame(canvas_id, surface, 600, now_ms=1016) == 16
        assert driver.frames_rendered == 2

    def test_empty_canvas_draws_nothing(self, driver, store, surface):
        canvas_id = store.create_canvas()
        driver.render_frame(canvas_id, surface, 600, now_ms=0)
        assert surface.stroke_count == 0
        assert list(store.get_canvas(canvas_id).recent_frame_timestamps) == [0]

    def test_spirals_ticked_before_drawing(self, store, surface):
        canvas_id = store.create_canvas()
        spiral_id = store.create_spiral(canvas_id)
        spiral = store.get_spiral(canvas_id, spiral_id)
        spiral.velocities.streak_length = 0.05

        seen = []
        renderer = MagicMock()
        renderer.draw.side_effect = lambda s, _surface, _mul: seen.append(s.properties.streak_length) or 0
        driver = FrameDriver(store, renderer=renderer)

        driver.render_frame(canvas_id, surface, 600, now_ms=0)

        assert seen == [pytest.approx(0.15)]
        renderer.draw.assert_called_once_with(spiral, surface, 600)

    def test_every_spiral_drawn(self, store, surface):
        canvas_id = store.create_canvas()
        for _ in range(3):
            store.create_spiral(canvas_id)
        renderer = MagicMock()
        renderer.draw.return_value = 0
        driver = FrameDriver(store, renderer=renderer)

        driver.render_frame(canvas_id, surface, 600, now_ms=0)

        assert renderer.draw.call_count == 3

    def test_default_spiral_strokes_reach_surface(self, driver, store, surface):
        canvas_id = store.create_canvas()
        store.create_spiral(canvas_id)
        driver.render_frame(canvas_id, surface, 600, now_ms=0)
        assert surface.stroke_count > 0
        assert set(surface.colors_used()) == {"#000000"}

    def test_unknown_canvas(self, driver, surface):
        with pytest.raises(CanvasNotFoundError):
            driver.render_frame("missing", surface, 600, now_ms=0)
        assert driver.frames_rendered == 0

    def test_uses_store_fps_buffer_size(self, store):
        assert FrameDriver(store).fps_meter.buffer_size == store.config.fps_buffer_size

    def test_configured_window_larger_than_default(self, surface):
        store = CanvasStateStore(SpiralConfig(fps_buffer_size=120))
        canvas_id = store.create_canvas()
        driver = FrameDriver(store)
        for ts in range(0, 150 * 16, 16):
            driver.render_frame(canvas_id, surface, 600, now_ms=ts)
        assert len(store.get_canvas(canvas_id).recent_frame_timestamps) == 120
