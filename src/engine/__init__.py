"""
Spiral engine

- geometry: parametric curve positions
- animation: per-frame property tick with boundary bounce
- renderer: curve sampling and stroke output
- fps_meter: smoothed frame interval per canvas
- frame_driver: per-frame flow for one canvas
"""

from .geometry import compute_position
from .animation import tick_spiral, tick_canvas
from .renderer import SpiralRenderer, draw_spiral
from .fps_meter import FpsMeter, interval_to_fps
from .frame_driver import FrameDriver

__all__ = [
    "compute_position",
    "tick_spiral",
    "tick_canvas",
    "SpiralRenderer",
    "draw_spiral",
    "FpsMeter",
    "interval_to_fps",
    "FrameDriver",
]
