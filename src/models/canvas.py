"""Canvas domain model"""

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict

from models.spiral import Spiral

FPS_BUFFER_SIZE = 80


@dataclass
class CanvasState:
    """
    One independent animation surface.

    Attributes:
        spirals: Spirals currently rendered on this canvas, by spiral ID
        recent_frame_timestamps: Frame timestamps in ms, most recent first
        background: Canvas background color "#rrggbb"
    """
    spirals: Dict[str, Spiral] = field(default_factory=dict)
    recent_frame_timestamps: Deque[int] = field(
        default_factory=lambda: deque(maxlen=FPS_BUFFER_SIZE)
    )
    background: str = '#ffffff'

    @classmethod
    def create(cls, background: str = '#ffffff', fps_buffer_size: int = FPS_BUFFER_SIZE) -> 'CanvasState':
        return cls(
            spirals={},
            recent_frame_timestamps=deque(maxlen=fps_buffer_size),
            background=background,
        )

    def __repr__(self) -> str:
        return (
            f"CanvasState(spirals={len(self.spirals)}, "
            f"frames={len(self.recent_frame_timestamps)}, "
            f"background={self.background})"
        )
