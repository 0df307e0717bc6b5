"""
FrameDriver - one animation frame for one canvas.

Runs the per-frame control flow in order:
  1. FpsMeter.update on the canvas
  2. tick every spiral
  3. draw every spiral onto the caller's surface

Scheduling (when to call render_frame) stays with the caller.
"""

from __future__ import annotations
from typing import Optional

from engine.animation import tick_canvas
from engine.fps_meter import FpsMeter
from engine.renderer import SpiralRenderer
from services.canvas_store import CanvasStateStore
from surfaces.surface_interface import IDrawingSurface
from utils.logger import get_category_logger, LogCategory

log = get_category_logger(LogCategory.RENDER)


class FrameDriver:
    """
    Example:
        driver = FrameDriver(store)
        interval_ms = driver.render_frame(canvas_id, surface, multiplier=600)
    """

    def __init__(
        self,
        store: CanvasStateStore,
        renderer: Optional[SpiralRenderer] = None,
        fps_meter: Optional[FpsMeter] = None,
    ):
        self.store = store
        self.renderer = renderer or SpiralRenderer(store.config)
        self.fps_meter = fps_meter or FpsMeter(store.config.fps_buffer_size)
        self.frames_rendered = 0

    def render_frame(
        self,
        canvas_id: str,
        surface: IDrawingSurface,
        multiplier: float,
        now_ms: Optional[int] = None,
    ) -> int:
        """
        Advance and draw one frame of a canvas

        Raises:
            CanvasNotFoundError: Unknown canvas ID

        Returns:
            Smoothed frame interval from FpsMeter (ms, -1 without data)
        """
        canvas = self.store.get_canvas(canvas_id)
        interval_ms = self.fps_meter.update(canvas, now_ms)

        tick_canvas(canvas)
        segments = 0
        for spiral in canvas.spirals.values():
            segments += self.renderer.draw(spiral, surface, multiplier)

        self.frames_rendered += 1
        log.debug(
            "Frame rendered",
            canvas_id=canvas_id,
            spirals=len(canvas.spirals),
            segments=segments,
            interval_ms=interval_ms,
        )
        return interval_ms
