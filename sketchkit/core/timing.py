"""
Frame timing helpers for animation loops
"""

import logging
import time
from typing import Callable, Union

from .easing import EasingFunc, ease
from .utils import MathUtils


logger = logging.getLogger(__name__)


class FPSCounter:
    """
    Counts frames and publishes frames-per-second once per second.

    Example:
        fps_counter = FPSCounter()
        while running:
            fps = fps_counter.update()
    """

    def __init__(self, clock: Callable[[], float] = time.perf_counter):
        self.clock = clock
        self.fps = 0
        self.frames = 0
        self.last_time = clock()

    def update(self) -> int:
        """Count one frame and return the last published FPS"""
        self.frames += 1
        current_time = self.clock()
        if current_time >= self.last_time + 1.0:
            self.fps = self.frames
            self.frames = 0
            self.last_time = current_time
            logger.debug(f"FPS: {self.fps}")
        return self.fps


class Timer:
    """Countdown over a fixed duration, advanced by frame deltas"""

    def __init__(self, duration: float):
        self.duration = duration
        self.elapsed = 0.0
        self.running = False

    def start(self):
        self.running = True
        self.elapsed = 0.0

    def update(self, delta_time: float) -> bool:
        """
        Advance the timer.

        Returns:
            True on the update where the timer finishes, False otherwise
        """
        if self.running:
            self.elapsed += delta_time
            if self.elapsed >= self.duration:
                self.running = False
                logger.debug(f"Timer finished after {self.elapsed:.3f} (duration {self.duration})")
                return True
        return False

    def progress(self) -> float:
        """Fraction of the duration elapsed, clamped to [0, 1]"""
        if self.duration == 0:
            return 1.0
        return MathUtils.clamp(self.elapsed / self.duration, 0, 1)

    def eased_progress(self, easing: Union[str, EasingFunc] = 'linear') -> float:
        """progress() reshaped by an easing curve"""
        return ease(self.progress(), easing)

    def reset(self):
        self.elapsed = 0.0
        self.running = False
