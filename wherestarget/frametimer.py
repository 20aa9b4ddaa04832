"""Frame timing and the standard colour palette."""

from __future__ import annotations

import time
from typing import Callable, Optional

ONE_SECOND = 1_000_000
"""One second in microseconds."""

MAX_DELTA_TIME_FACTOR = 5
"""A frame longer than this many target frames is treated as an outlier."""

DEFAULT_REFRESH_RATE = 60


class Colors:
    """The sixteen standard colours as 0xAARRGGBB values."""

    BLACK = 0xFF000000
    BLUE = 0xFF0000FF
    CYAN = 0xFF00FFFF
    GRAY = 0xFF808080
    GREEN = 0xFF008000
    LIME = 0xFF00FF00
    MAGENTA = 0xFFFF00FF
    MAROON = 0xFF800000
    NAVY = 0xFF000080
    OLIVE = 0xFF808000
    PURPLE = 0xFF800080
    RED = 0xFFFF0000
    SILVER = 0xFFC0C0C0
    TEAL = 0xFF008080
    WHITE = 0xFFFFFFFF
    YELLOW = 0xFFFFFF00


def _microseconds() -> int:
    return time.perf_counter_ns() // 1000


class FrameTimer:
    """Measures frame times and decides when a game update is due.

    With ``fps`` set the timer runs at a fixed rate, capped by the display's
    refresh rate; without it every frame is an update frame. ``clock`` returns
    the current time in microseconds.
    """

    def __init__(
        self,
        fps: Optional[int] = None,
        clock: Optional[Callable[[], int]] = None,
        refresh_rate: int = DEFAULT_REFRESH_RATE,
    ) -> None:
        if refresh_rate <= 0:
            raise ValueError(f"refresh rate must be positive, got {refresh_rate}")
        if fps is not None and fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self._clock = clock if clock is not None else _microseconds
        self._is_fixed_fps = fps is not None
        rate = refresh_rate if fps is None else min(fps, refresh_rate)
        self._target_elapsed_time = ONE_SECOND // rate
        self.reset()

    def reset(self) -> None:
        """Discard all measurements and start again from now."""
        self._last_time = self._clock()
        self._accumulated_time = 0
        self._start_time = self._last_time
        self._elapsed_time = ONE_SECOND
        self._frame_count = 0
        self._frame_rate = 0
        self._is_update_frame = False

    def update(self) -> None:
        """Advance the timer by one rendered frame."""
        current_time = self._clock()
        delta_time = current_time - self._last_time

        if delta_time > self._target_elapsed_time * MAX_DELTA_TIME_FACTOR:
            delta_time = self._target_elapsed_time

        if self._is_fixed_fps:
            self._accumulated_time += delta_time
            self._is_update_frame = self._accumulated_time >= self._target_elapsed_time
            if self._is_update_frame:
                self._frame_count += 1
                self._elapsed_time = self._target_elapsed_time
                self._accumulated_time -= self._target_elapsed_time
        else:
            self._is_update_frame = True
            self._frame_count += 1
            self._elapsed_time = delta_time

        if current_time - self._start_time >= ONE_SECOND:
            self._frame_rate = self._frame_count
            self._frame_count = 0
            self._start_time = current_time

        self._last_time = current_time

    @property
    def is_update_frame(self) -> bool:
        """Whether the game should be updated on this frame."""
        return self._is_update_frame

    @property
    def elapsed_time(self) -> float:
        """Time covered by the last update, in seconds."""
        return self._elapsed_time / ONE_SECOND

    @property
    def frame_rate(self) -> int:
        """Updates counted over the last full second."""
        return self._frame_rate