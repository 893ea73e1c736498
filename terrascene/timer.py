"""Frame timer with delta time and fixed-rate tick counting."""

from __future__ import annotations

import time
from typing import Callable


class Timer:
    """Measures time between updates and counts fixed-length ticks elapsed.

    ``clock`` returns the current time in seconds.
    """

    def __init__(
        self,
        fixed_tick_time: float = 1.0 / 60.0,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        if fixed_tick_time <= 0:
            raise ValueError("fixed_tick_time must be positive")
        self._fixed_tick_time = fixed_tick_time
        self._clock = clock
        self._created = clock()
        self._current_frame_time = 0.0
        self._last_frame_time = 0.0
        self._paused = False
        self._just_resumed = False
        self._current_ticks = self.fixed_rate_tick_count
        self._last_ticks = self._current_ticks

    def update(self) -> None:
        """Advance to the current time; does nothing while paused."""
        if self._paused:
            return
        now = self._clock() - self._created
        if self._just_resumed:
            self._current_frame_time = now
            self._last_frame_time = now - self._fixed_tick_time
            self._just_resumed = False
        else:
            self._last_frame_time = self._current_frame_time
            self._current_frame_time = now
        self._last_ticks = self._current_ticks
        self._current_ticks = self.fixed_rate_tick_count

    @property
    def delta_time(self) -> float:
        """Seconds between the last two updates."""
        return self._current_frame_time - self._last_frame_time

    @property
    def total_time(self) -> float:
        """Seconds from creation to the last update."""
        return self._current_frame_time

    @property
    def fixed_rate_tick_delta_count(self) -> int:
        """Fixed ticks that passed during the last update."""
        return self._current_ticks - self._last_ticks

    @property
    def fixed_rate_tick_count(self) -> int:
        """Whole fixed ticks elapsed up to the last update."""
        return int(self._current_frame_time / self._fixed_tick_time)

    @property
    def paused(self) -> bool:
        return self._paused

    def set_paused(self, paused: bool) -> None:
        """Pause or resume; after resuming the next delta is one fixed tick."""
        self._paused = paused
        if not paused:
            self._just_resumed = True