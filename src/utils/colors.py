"""
Color conversion utilities

Pure functions for hex color decoding/encoding and gradient interpolation.
Colors cross the kernel boundary as 7-character "#rrggbb" strings.
"""

import math
from typing import Optional, Sequence, Tuple


def round_half_up(value: float) -> int:
    """
    Round to nearest integer, ties towards +infinity

    Python's round() uses banker's rounding (126.5 -> 126); gradient and
    pixel math expects 126.5 -> 127 and -16.5 -> -16.

    Example:
        round_half_up(127.5)   # 128
        round_half_up(-16.5)   # -16
    """
    return math.floor(value + 0.5)


def hex_to_rgb(color: str) -> Tuple[int, int, int]:
    """
    Decode "#rrggbb" into (r, g, b)

    Args:
        color: Hex color string (case-insensitive)

    Returns:
        (r, g, b) tuple with values 0-255

    Example:
        hex_to_rgb("#ff8000")  # (255, 128, 0)
    """
    return (
        int(color[1:3], 16),
        int(color[3:5], 16),
        int(color[5:7], 16),
    )


def component_to_hex(component: float) -> str:
    """Encode one channel as two lower-case hex digits (rounded half-up)"""
    return format(round_half_up(component), '02x')[-2:]


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """
    Encode channels into "#rrggbb"

    Channels may be fractional (interpolation results); each one is rounded
    half-up before encoding.

    Example:
        rgb_to_hex(255, 127.5, 0)  # "#ff8000"
    """
    return f"#{component_to_hex(r)}{component_to_hex(g)}{component_to_hex(b)}"


def interpolate_componentwise(ratio: float, start: str, end: str) -> str:
    """
    Linear blend between two hex colors, each channel independently

    Args:
        ratio: 0.0 = start, 1.0 = end
        start: Start color "#rrggbb"
        end: End color "#rrggbb"

    Returns:
        Blended color "#rrggbb"

    Example:
        interpolate_componentwise(0.5, "#000000", "#ffffff")  # "#808080"
    """
    rs, gs, bs = hex_to_rgb(start)
    re, ge, be = hex_to_rgb(end)
    return rgb_to_hex(
        rs + ratio * (re - rs),
        gs + ratio * (ge - gs),
        bs + ratio * (be - bs),
    )


def interpolate_along_gradient(ratio: float, colors: Sequence[str]) -> Optional[str]:
    """
    Pick a color along evenly spaced gradient stops

    Stop i sits at i / (len(colors) - 1). Ratios between stops blend the two
    neighbours; ratios that land outside the stops (or aren't finite, e.g. a
    zero-length streak giving 0/0) fall back to the first stop.

    Args:
        ratio: Position along the gradient, normally 0.0-1.0
        colors: Gradient stops "#rrggbb" (single entry = solid color)

    Returns:
        Color "#rrggbb", or None for an empty stop list

    Example:
        interpolate_along_gradient(0.25, ["#000000", "#ffffff", "#000000"])  # "#808080"
    """
    if not colors:
        return None

    index = ratio * (len(colors) - 1)
    if not math.isfinite(index):
        return colors[0]

    lower = math.floor(index)
    upper = math.ceil(index)
    if lower < 0 or upper >= len(colors):
        return colors[0]

    return interpolate_componentwise(index % 1, colors[lower], colors[upper])
