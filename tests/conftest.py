import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from models.config import SpiralConfig
from models.enums import LogLevel, SpiralType
from models.spiral import Spiral, SpiralProperties
from services.canvas_store import CanvasStateStore
from surfaces.virtual_surface import VirtualSurface
from utils.logger import configure_logger


@pytest.fixture(autouse=True)
def quiet_logger():
    """Keep test output readable; restore defaults afterwards."""
    configure_logger(LogLevel.ERROR, use_colors=False)
    yield
    configure_logger(LogLevel.INFO, use_colors=True)


@pytest.fixture
def store():
    return CanvasStateStore(SpiralConfig())


@pytest.fixture
def surface():
    return VirtualSurface()


@pytest.fixture
def make_spiral():
    """Factory for spirals with explicit properties."""
    def _make(
        spiral_type=SpiralType.HYPOTROCHOID,
        static_size=0.5,
        dynamic_size=0.8,
        offset=0.2,
        streak_length=0.1,
        velocities=None,
        colors=None,
    ):
        return Spiral(
            type=spiral_type,
            properties=SpiralProperties(
                static_size=static_size,
                dynamic_size=dynamic_size,
                offset=offset,
                streak_length=streak_length,
            ),
            velocities=velocities or SpiralProperties(),
            colors=colors or ['#000000'],
        )
    return _make
