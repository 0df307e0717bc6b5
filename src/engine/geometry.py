"""
Spiral geometry - parametric roulette curves

Hypotrochoid (rolling circle inside the static one) and epitrochoid (rolling
circle outside). Computations go through numpy so a zero-sized rolling circle
produces inf/nan coordinates instead of raising ZeroDivisionError.
"""

from typing import Tuple, Union

import numpy as np

from models.enums import SpiralType
from models.spiral import Spiral

ArrayLike = Union[float, np.ndarray]


def compute_position(spiral: Spiral, t: ArrayLike) -> Tuple[ArrayLike, ArrayLike]:
    """
    Point on the spiral's curve at angle t

    Uses the current property values only (pure, no side effects).

    Args:
        spiral: Spiral (type + properties)
        t: Angle in radians (unbounded), or numpy array of angles

    Returns:
        (x, y) as floats for scalar t, as arrays for array t

    Example:
        x, y = compute_position(spiral, 0.0)   # (R - r + O, 0) for a hypotrochoid
    """
    props = spiral.properties
    R = np.float64(props.static_size)
    r = np.float64(props.dynamic_size)
    O = np.float64(props.offset)
    t = np.asarray(t, dtype=np.float64)

    with np.errstate(divide='ignore', invalid='ignore'):
        if spiral.type is SpiralType.HYPOTROCHOID:
            k = (R - r) / r
            x = (R - r) * np.cos(t) + O * np.cos(k * t)
            y = (R - r) * np.sin(t) - O * np.sin(k * t)
        elif spiral.type is SpiralType.EPITROCHOID:
            k = (R + r) / r
            x = (R + r) * np.cos(t) - O * np.cos(k * t)
            y = (R + r) * np.sin(t) - O * np.sin(k * t)
        else:
            raise ValueError(f"Unknown spiral type: {spiral.type}")

    if x.ndim == 0:
        return float(x), float(y)
    return x, y
