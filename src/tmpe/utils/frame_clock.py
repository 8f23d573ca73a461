"""Host simulation frame counter.

The simulation loop advances the counter once per frame. The config
service only reads it, to throttle how often it checks the config file
for external edits.
"""

from collections.abc import Callable
from functools import lru_cache

FrameSource = Callable[[], int]

# Right shift from frame index to polling epoch (256 frames per epoch)
DEFAULT_EPOCH_SHIFT = 8


class FrameCounter:
    """Monotonically increasing frame index.

    Instances are callable so they can be passed anywhere a
    :data:`FrameSource` is expected.

    Examples:
        >>> clock = FrameCounter()
        >>> clock.advance(300)
        300
        >>> clock() >> 8
        1
    """

    def __init__(self, start: int = 0) -> None:
        if start < 0:
            raise ValueError(f"start must be >= 0, got {start}")
        self._frame = start

    @property
    def current_frame(self) -> int:
        return self._frame

    def advance(self, frames: int = 1) -> int:
        """Move the counter forward and return the new frame index."""
        if frames < 0:
            raise ValueError(f"frames must be >= 0, got {frames}")
        self._frame += frames
        return self._frame

    def __call__(self) -> int:
        return self._frame


@lru_cache
def get_frame_counter() -> FrameCounter:
    """Get the process-wide frame counter advanced by the simulation loop."""
    return FrameCounter()
