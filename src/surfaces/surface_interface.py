# surfaces/surface_interface.py
"""
IDrawingSurface Protocol
========================
Drawing abstraction the renderer strokes onto.
Minimal contract for any 2D backend (HTML-canvas-like contexts, image buffers,
recording surfaces).
"""

from __future__ import annotations
from typing import Protocol


class IDrawingSurface(Protocol):
    """
    Protocol defining the path-stroking surface interface.

    Per segment the renderer calls, in order:
    - begin_path: start a new path
    - move_to: place the pen at the segment start
    - line_to: add a line to the segment end
    - set_stroke_color: color used by the next stroke
    - stroke: draw the current path
    """

    def begin_path(self) -> None:
        """Discard the current path and start a new one."""
        ...

    def move_to(self, x: float, y: float) -> None:
        """Start a new sub-path at (x, y)."""
        ...

    def line_to(self, x: float, y: float) -> None:
        """Connect the last point to (x, y)."""
        ...

    def set_stroke_color(self, color: str) -> None:
        """Set stroke color ("#rrggbb") for subsequent strokes."""
        ...

    def stroke(self) -> None:
        """Draw the current path with the current stroke color."""
        ...
