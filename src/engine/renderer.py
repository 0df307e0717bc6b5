"""
SpiralRenderer - samples a spiral's curve and strokes it segment by segment.

Rendering per frame (no caching between frames):
  end = streak_length * Pi * sampling_density
  t = 0, resolution, 2*resolution, ... while t <= end
  one stroked line per sample, from the previous pixel to the current one,
  colored by the spiral's gradient at t / end
"""

from __future__ import annotations
import math
from typing import Optional, Tuple

import numpy as np

from models.config import SpiralConfig
from models.spiral import Spiral
from engine.geometry import compute_position
from surfaces.surface_interface import IDrawingSurface
from utils.colors import interpolate_along_gradient
from utils.logger import get_category_logger, LogCategory

log = get_category_logger(LogCategory.RENDER)


def _to_pixel(value: float):
    """int for finite values; inf/nan pass through unrounded"""
    return int(value) if math.isfinite(value) else value


class SpiralRenderer:
    """
    Stateless spiral renderer.

    Example:
        renderer = SpiralRenderer(config)
        renderer.draw(spiral, surface, multiplier=600)   # 600x600 px surface
    """

    def __init__(self, config: Optional[SpiralConfig] = None):
        config = config or SpiralConfig()
        self.resolution = config.resolution
        self.sampling_density = config.sampling_density
        self.coordinate_extent = config.coordinate_extent

    def sweep_end(self, spiral: Spiral) -> float:
        """Total angle sampled for the spiral's current streak length"""
        return spiral.properties.streak_length * math.pi * self.sampling_density

    def sample_angles(self, end: float) -> np.ndarray:
        """Angles 0, resolution, 2*resolution, ... up to and including end"""
        if not math.isfinite(end) or end < 0:
            return np.empty(0, dtype=np.float64)
        count = math.floor(end / self.resolution) + 1
        angles = np.arange(count, dtype=np.float64) * self.resolution
        return angles[angles <= end]

    def scale(self, x, y, multiplier: float) -> Tuple[np.ndarray, np.ndarray]:
        """
        Map curve coordinates onto surface pixels

        pixel = round((coord / extent + 0.5) * multiplier), ties rounded up.
        """
        with np.errstate(invalid='ignore'):
            px = np.floor((np.asarray(x) / self.coordinate_extent + 0.5) * multiplier + 0.5)
            py = np.floor((np.asarray(y) / self.coordinate_extent + 0.5) * multiplier + 0.5)
        return px, py

    def draw(self, spiral: Spiral, surface: IDrawingSurface, multiplier: float) -> int:
        """
        Stroke the spiral onto a surface

        Args:
            spiral: Spiral to draw (read only)
            surface: Target surface
            multiplier: Surface size in pixels (curve space is scaled to it)

        Returns:
            Number of stroked segments
        """
        end = self.sweep_end(spiral)
        angles = self.sample_angles(end)
        if angles.size == 0:
            log.debug("Nothing to draw", streak_length=spiral.properties.streak_length)
            return 0

        xs, ys = compute_position(spiral, angles)
        px, py = self.scale(xs, ys, multiplier)
        with np.errstate(divide='ignore', invalid='ignore'):
            ratios = angles / end

        start_x, start_y = _to_pixel(float(px[0])), _to_pixel(float(py[0]))
        for i in range(angles.size):
            x, y = _to_pixel(float(px[i])), _to_pixel(float(py[i]))
            surface.begin_path()
            surface.move_to(start_x, start_y)
            surface.line_to(x, y)
            surface.set_stroke_color(interpolate_along_gradient(float(ratios[i]), spiral.colors))
            surface.stroke()
            start_x, start_y = x, y

        log.debug(
            "Spiral drawn",
            type=spiral.type.name,
            segments=angles.size,
            multiplier=multiplier,
        )
        return int(angles.size)


_default_renderer = SpiralRenderer()


def draw_spiral(spiral: Spiral, surface: IDrawingSurface, multiplier: float) -> int:
    """Draw with default settings (one-degree resolution, density 2000)"""
    return _default_renderer.draw(spiral, surface, multiplier)
