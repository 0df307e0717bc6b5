"""
Enums for the spiral canvas kernel
"""

from enum import Enum, auto


class SpiralType(Enum):
    """
    Roulette curve families

    HYPOTROCHOID: rolling circle moves inside the static circle
    EPITROCHOID: rolling circle moves outside the static circle
    """
    HYPOTROCHOID = auto()
    EPITROCHOID = auto()


class SpiralProperty(Enum):
    """Animated spiral property fields (attribute name as value)"""
    STATIC_SIZE = "static_size"        # Radius of the circle that doesn't move
    DYNAMIC_SIZE = "dynamic_size"      # Radius of the rolling circle
    OFFSET = "offset"                  # Pen offset from the rolling circle's center
    STREAK_LENGTH = "streak_length"    # Curve length as a multiple of Pi


class LogLevel(Enum):
    """Log severity levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class LogCategory(Enum):
    """Log categories for grouping related events"""
    CONFIG = auto()      # Configuration loading, validation
    CANVAS = auto()      # Canvas creation, reset, removal
    SPIRAL = auto()      # Spiral creation, removal, property evolution
    RENDER = auto()      # Curve sampling and stroke output
    FPS = auto()         # Frame interval measurement
    SYSTEM = auto()      # Startup, shutdown, errors

    GENERAL = auto()    # Default general category
