"""Canvas store - registry of canvases and their spirals"""

import itertools
from typing import Dict, List, Optional

from models.canvas import CanvasState
from models.config import SpiralConfig
from models.errors import CanvasNotFoundError, SpiralNotFoundError
from models.spiral import Spiral
from utils.enum_helper import EnumHelper
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.CANVAS)


class IdGenerator:
    """
    Monotonic string identifiers ("0", "1", "2", ...)

    Shared by canvases and spirals of one store; IDs are never reused, even
    after the owning canvas or spiral is removed.
    """

    def __init__(self, start: int = 0):
        self._counter = itertools.count(start)

    def next_id(self) -> str:
        return str(next(self._counter))


class CanvasStateStore:
    """
    Owns every CanvasState and, through them, every Spiral.

    Other components get canvases/spirals by lookup and operate on them for
    the duration of a call; they never keep the only reference.

    Example:
        store = CanvasStateStore()
        canvas_id = store.create_canvas()
        spiral_id = store.create_spiral(canvas_id)
        spiral = store.get_spiral(canvas_id, spiral_id)
        spiral.velocities.offset = 0.01
    """

    def __init__(self, config: Optional[SpiralConfig] = None, id_generator: Optional[IdGenerator] = None):
        self.config = config or SpiralConfig()
        self._ids = id_generator or IdGenerator()
        self._canvases: Dict[str, CanvasState] = {}

    # ------------------------------------------------------------------
    # Canvas operations
    # ------------------------------------------------------------------

    def create_canvas(self) -> str:
        """Register a new empty canvas and return its ID"""
        canvas_id = self._ids.next_id()
        self._canvases[canvas_id] = CanvasState.create(
            background=self.config.default_background,
            fps_buffer_size=self.config.fps_buffer_size,
        )
        log.info("Canvas created", canvas_id=canvas_id)
        return canvas_id

    def get_canvas(self, canvas_id: str) -> CanvasState:
        """
        Get canvas by ID

        Raises:
            CanvasNotFoundError: Unknown canvas ID
        """
        canvas = self._canvases.get(canvas_id)
        if canvas is None:
            log.warn("Canvas not found", canvas_id=canvas_id)
            raise CanvasNotFoundError(canvas_id)
        return canvas

    def reset_canvas(self, canvas_id: str) -> None:
        """Remove all spirals; background and frame timestamps are kept"""
        canvas = self.get_canvas(canvas_id)
        removed = len(canvas.spirals)
        canvas.spirals = {}
        log.info("Canvas reset", canvas_id=canvas_id, removed_spirals=removed)

    def remove_canvas(self, canvas_id: str) -> CanvasState:
        """Unregister a canvas (and its spirals); returns the removed state"""
        canvas = self.get_canvas(canvas_id)
        del self._canvases[canvas_id]
        log.info("Canvas removed", canvas_id=canvas_id, spirals=len(canvas.spirals))
        return canvas

    def get_all_canvases(self) -> Dict[str, CanvasState]:
        """All canvases by ID (shallow copy of the registry)"""
        return dict(self._canvases)

    @property
    def canvas_ids(self) -> List[str]:
        return list(self._canvases)

    # ------------------------------------------------------------------
    # Spiral operations
    # ------------------------------------------------------------------

    def create_spiral(self, canvas_id: str) -> str:
        """Add a default spiral to a canvas and return its ID"""
        canvas = self.get_canvas(canvas_id)
        spiral_id = self._ids.next_id()
        spiral = self.config.new_spiral()
        canvas.spirals[spiral_id] = spiral
        log.info(
            "Spiral created",
            category=LogCategory.SPIRAL,
            canvas_id=canvas_id,
            spiral_id=spiral_id,
            type=EnumHelper.to_string(spiral.type, lowercase=True),
        )
        return spiral_id

    def get_spiral(self, canvas_id: str, spiral_id: str) -> Spiral:
        """
        Get spiral by canvas and spiral ID

        Raises:
            CanvasNotFoundError: Unknown canvas ID
            SpiralNotFoundError: Unknown spiral ID on that canvas
        """
        canvas = self.get_canvas(canvas_id)
        spiral = canvas.spirals.get(spiral_id)
        if spiral is None:
            log.warn("Spiral not found", category=LogCategory.SPIRAL, canvas_id=canvas_id, spiral_id=spiral_id)
            raise SpiralNotFoundError(canvas_id, spiral_id)
        return spiral

    def get_spirals(self, canvas_id: str) -> Dict[str, Spiral]:
        return self.get_canvas(canvas_id).spirals

    def remove_spiral(self, canvas_id: str, spiral_id: str) -> Spiral:
        """Remove one spiral from a canvas; returns the removed spiral"""
        spiral = self.get_spiral(canvas_id, spiral_id)
        del self._canvases[canvas_id].spirals[spiral_id]
        log.info("Spiral removed", category=LogCategory.SPIRAL, canvas_id=canvas_id, spiral_id=spiral_id)
        return spiral

    def __contains__(self, canvas_id: object) -> bool:
        return canvas_id in self._canvases

    def __len__(self) -> int:
        return len(self._canvases)
