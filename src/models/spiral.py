"""Spiral domain models"""

from dataclasses import dataclass, field, replace
from typing import List

from models.enums import SpiralType, SpiralProperty


@dataclass
class SpiralProperties:
    """
    Four numeric spiral fields.

    Used twice per spiral: once for the current values (kept around 0-1 by
    the tick rule) and once for the per-frame velocities.
    """
    static_size: float = 0.0      # Radius of the circle that doesn't move
    dynamic_size: float = 0.0     # Radius of the rolling circle
    offset: float = 0.0           # Pen offset from the rolling circle's center
    streak_length: float = 0.0    # Curve length as a multiple of Pi

    def get(self, prop: SpiralProperty) -> float:
        return getattr(self, prop.value)

    def set(self, prop: SpiralProperty, value: float) -> None:
        setattr(self, prop.value, value)

    def copy(self) -> 'SpiralProperties':
        return replace(self)


@dataclass
class Spiral:
    """
    One animated roulette curve.

    - type: which parametric formula applies
    - properties: current values
    - velocities: per-frame delta for each property
    - colors: one entry = solid color, more = gradient along the curve
    """
    type: SpiralType
    properties: SpiralProperties
    velocities: SpiralProperties = field(default_factory=SpiralProperties)
    colors: List[str] = field(default_factory=lambda: ['#000000'])

    def copy(self) -> 'Spiral':
        """Deep copy (properties, velocities and colors are not shared)"""
        return Spiral(
            type=self.type,
            properties=self.properties.copy(),
            velocities=self.velocities.copy(),
            colors=list(self.colors),
        )


DEFAULT_SPIRAL = Spiral(
    type=SpiralType.HYPOTROCHOID,
    properties=SpiralProperties(
        static_size=0.5,
        dynamic_size=0.8,
        offset=0.2,
        streak_length=0.1,
    ),
    velocities=SpiralProperties(),
    colors=['#000000'],
)


def default_spiral() -> Spiral:
    """Fresh spiral with default values (never hand out DEFAULT_SPIRAL itself)"""
    return DEFAULT_SPIRAL.copy()
