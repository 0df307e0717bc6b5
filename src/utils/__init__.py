"""
Utility functions for the spiral canvas kernel
"""

from .colors import (
    round_half_up,
    hex_to_rgb,
    rgb_to_hex,
    interpolate_componentwise,
    interpolate_along_gradient,
)

__all__ = [
    'round_half_up',
    'hex_to_rgb',
    'rgb_to_hex',
    'interpolate_componentwise',
    'interpolate_along_gradient',
]
