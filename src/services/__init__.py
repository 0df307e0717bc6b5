"""Services layer"""

from .canvas_store import CanvasStateStore, IdGenerator

__all__ = [
    "CanvasStateStore",
    "IdGenerator",
]
