"""
Models package - Data models for the spiral canvas kernel
"""

from .enums import SpiralType, SpiralProperty, LogLevel, LogCategory
from .color import Color
from .spiral import Spiral, SpiralProperties, DEFAULT_SPIRAL, default_spiral
from .canvas import CanvasState, FPS_BUFFER_SIZE
from .config import SpiralConfig
from .errors import (
    DomainError,
    NotFoundError,
    CanvasNotFoundError,
    SpiralNotFoundError,
    ConfigError,
)

__all__ = [
    'SpiralType',
    'SpiralProperty',
    'LogLevel',
    'LogCategory',
    'Color',
    'Spiral',
    'SpiralProperties',
    'DEFAULT_SPIRAL',
    'default_spiral',
    'CanvasState',
    'FPS_BUFFER_SIZE',
    'SpiralConfig',
    'DomainError',
    'NotFoundError',
    'CanvasNotFoundError',
    'SpiralNotFoundError',
    'ConfigError',
]
