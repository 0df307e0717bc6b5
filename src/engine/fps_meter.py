"""
FpsMeter - smoothed frame interval per canvas.

Keeps the newest frame timestamps on the canvas (most recent first) and
reports the median gap between adjacent frames in milliseconds. Despite the
name the value is an interval, not frames per second; use interval_to_fps()
when a rate is needed.
"""

from __future__ import annotations
import time
from typing import Callable, List, Optional

from models.canvas import CanvasState, FPS_BUFFER_SIZE
from utils.colors import round_half_up
from utils.logger import get_category_logger, LogCategory

log = get_category_logger(LogCategory.FPS)

NO_DATA = -1


def monotonic_ms() -> int:
    """Milliseconds since an arbitrary fixed point (monotonic clock)"""
    return int(time.monotonic() * 1000)


def median(values: List[float]) -> float:
    """Median of an already sorted list (even count -> mean of the middle two)"""
    count = len(values)
    middle = count // 2
    if count % 2 == 0:
        return (values[middle - 1] + values[middle]) / 2
    return values[middle]


def interval_to_fps(interval_ms: float) -> float:
    """Convert an FpsMeter interval into frames per second (0.0 when unknown)"""
    if interval_ms <= 0:
        return 0.0
    return 1000.0 / interval_ms


class FpsMeter:
    """
    Rolling-window frame interval estimator.

    Example:
        meter = FpsMeter()
        interval_ms = meter.update(canvas)   # call once per animation frame
    """

    def __init__(self, buffer_size: int = FPS_BUFFER_SIZE, clock: Optional[Callable[[], int]] = None):
        """
        Args:
            buffer_size: Max timestamps kept per canvas. A canvas deque with a
                smaller maxlen caps the window further, so the effective window
                is min(buffer_size, maxlen); CanvasStateStore sizes its canvases
                from SpiralConfig.fps_buffer_size, the value FrameDriver passes here.
            clock: Returns current time in ms (default: monotonic clock)
        """
        self.buffer_size = max(1, buffer_size)
        self.clock = clock or monotonic_ms

    def update(self, canvas: CanvasState, now_ms: Optional[int] = None) -> int:
        """
        Record a frame and return the smoothed frame interval

        Args:
            canvas: Canvas whose timestamp buffer is updated in place
            now_ms: Frame timestamp (default: clock())

        Returns:
            abs(round(median of non-zero adjacent gaps)) in ms, -1 without data
        """
        timestamps = canvas.recent_frame_timestamps
        timestamps.appendleft(self.clock() if now_ms is None else now_ms)
        while len(timestamps) > self.buffer_size:
            timestamps.pop()

        deltas = self.frame_deltas(list(timestamps))
        if not deltas:
            return NO_DATA

        return abs(round_half_up(median(sorted(deltas))))

    @staticmethod
    def frame_deltas(timestamps: List[int]) -> List[int]:
        """Gaps between adjacent timestamps (older minus newer), zero gaps dropped"""
        return [
            older - newer
            for newer, older in zip(timestamps, timestamps[1:])
            if older - newer
        ]
