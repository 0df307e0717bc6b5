"""
Spiral animation tick

Per-frame property evolution. Each property moves by its velocity; crossing
the [0, 1] range flips the velocity direction. Values are never clamped, so a
property can sit one step outside the range until the next tick brings it back.
"""

from models.canvas import CanvasState
from models.enums import SpiralProperty
from models.spiral import Spiral


def tick_spiral(spiral: Spiral) -> Spiral:
    """
    Advance one spiral by one frame (mutates in place)

    For every property: value += velocity, then
      value > 1 -> velocity = -abs(velocity)
      value < 0 -> velocity = +abs(velocity)

    Example:
        staticSize 0.95 / velocity 0.1  -> 1.05 / -0.1
        staticSize 0.05 / velocity -0.1 -> -0.05 / 0.1

    Returns:
        The same spiral (for chaining)
    """
    props = spiral.properties
    velocities = spiral.velocities

    for prop in SpiralProperty:
        value = props.get(prop) + velocities.get(prop)
        props.set(prop, value)

        if value > 1:
            velocities.set(prop, -abs(velocities.get(prop)))
        elif value < 0:
            velocities.set(prop, abs(velocities.get(prop)))

    return spiral


def tick_canvas(canvas: CanvasState) -> int:
    """Tick every spiral on a canvas; returns the number of spirals ticked"""
    for spiral in canvas.spirals.values():
        tick_spiral(spiral)
    return len(canvas.spirals)
