from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple
from surfaces.surface_interface import IDrawingSurface

Point = Tuple[float, float]


@dataclass(frozen=True)
class StrokeSegment:
    """One stroked path: polyline points and the color it was stroked with"""
    points: Tuple[Point, ...]
    color: Optional[str]

    @property
    def start(self) -> Point:
        return self.points[0]

    @property
    def end(self) -> Point:
        return self.points[-1]


class VirtualSurface(IDrawingSurface):
    """
    In-memory drawing surface.

    Records every stroke instead of rasterizing it; used for headless runs
    and tests.
    """

    def __init__(self):
        self.stroke_color: Optional[str] = None
        self._path: List[Point] = []
        self._segments: List[StrokeSegment] = []

    @property
    def segments(self) -> List[StrokeSegment]:
        return self._segments

    @property
    def stroke_count(self) -> int:
        return len(self._segments)

    def begin_path(self) -> None:
        self._path = []

    def move_to(self, x: float, y: float) -> None:
        self._path = [(x, y)]

    def line_to(self, x: float, y: float) -> None:
        self._path.append((x, y))

    def set_stroke_color(self, color: str) -> None:
        self.stroke_color = color

    def stroke(self) -> None:
        if len(self._path) < 2:
            return
        self._segments.append(StrokeSegment(points=tuple(self._path), color=self.stroke_color))

    def colors_used(self) -> List[Optional[str]]:
        """Stroke colors in drawing order"""
        return [segment.color for segment in self._segments]

    def clear(self) -> None:
        self._path = []
        self._segments = []
