"""
Kernel configuration model

Values loaded from config.yaml by ConfigManager. Every field has a built-in
default, so components can run without any configuration file.
"""

import math
from dataclasses import dataclass, field

from models.enums import LogLevel
from models.canvas import FPS_BUFFER_SIZE
from models.spiral import Spiral, default_spiral

RESOLUTION = math.pi / 180          # One degree per sampled segment
SAMPLING_DENSITY = 2000             # end = streak_length * Pi * SAMPLING_DENSITY
COORDINATE_EXTENT = 4               # Curve coordinates span roughly [-4, 4]
DEFAULT_BACKGROUND = '#ffffff'


@dataclass(frozen=True)
class SpiralConfig:
    """
    Immutable kernel settings

    Attributes:
        fps_buffer_size: Max timestamps kept per canvas for frame smoothing
        resolution: Angular step between samples (radians)
        sampling_density: Angular extent multiplier applied to streak length
        coordinate_extent: Curve-space span mapped onto the surface size
        default_background: Background of newly created canvases
        default_spiral: Template for newly created spirals (copied per spiral)
        log_level: Minimum log level
        log_colors: ANSI colors in log output
    """
    fps_buffer_size: int = FPS_BUFFER_SIZE
    resolution: float = RESOLUTION
    sampling_density: float = SAMPLING_DENSITY
    coordinate_extent: float = COORDINATE_EXTENT
    default_background: str = DEFAULT_BACKGROUND
    default_spiral: Spiral = field(default_factory=default_spiral)
    log_level: LogLevel = LogLevel.INFO
    log_colors: bool = True

    def new_spiral(self) -> Spiral:
        """Fresh copy of the default spiral template"""
        return self.default_spiral.copy()
