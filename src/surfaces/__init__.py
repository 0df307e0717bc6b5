"""
Drawing surfaces

- surface_interface: IDrawingSurface protocol consumed by the renderer
- virtual_surface: recording in-memory surface
"""

from .surface_interface import IDrawingSurface
from .virtual_surface import VirtualSurface, StrokeSegment

__all__ = ['IDrawingSurface', 'VirtualSurface', 'StrokeSegment']
