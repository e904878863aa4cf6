"""
Math utilities for procedural animation

Range mapping, clamping, interpolation, randomization, distance and
angle helpers shared by every other module.
"""

import math
import numpy as np
from typing import Optional, Union


RngLike = Optional[Union[int, np.random.Generator]]

TWO_PI = 2 * math.pi

# Shared generator used when callers don't supply their own
_DEFAULT_RNG = np.random.default_rng()


def get_rng(rng: RngLike = None) -> np.random.Generator:
    """Resolve None, a seed, or a Generator into a Generator"""
    if rng is None:
        return _DEFAULT_RNG
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


class MathUtils:
    """Math utilities for animation calculations"""

    @staticmethod
    def map_range(
        value: float,
        start1: float,
        stop1: float,
        start2: float,
        stop2: float
    ) -> float:
        """
        Map a value from one range to another.

        A zero-width source range (start1 == stop1) gives nan or inf
        instead of raising.
        """
        with np.errstate(divide='ignore', invalid='ignore'):
            ratio = np.float64(value - start1) / np.float64(stop1 - start1)
            return float(start2 + (stop2 - start2) * ratio)

    @staticmethod
    def random_range(min_val: float, max_val: float, rng: RngLike = None) -> float:
        """Random float in [min_val, max_val)"""
        return float(get_rng(rng).random() * (max_val - min_val) + min_val)

    @staticmethod
    def random_int(min_val: int, max_val: int, rng: RngLike = None) -> int:
        """Random integer in [min_val, max_val] (inclusive)"""
        return int(math.floor(get_rng(rng).random() * (max_val - min_val + 1))) + min_val

    @staticmethod
    def clamp(value: float, min_val: float, max_val: float) -> float:
        """Clamp value between min and max"""
        return max(min_val, min(max_val, value))

    @staticmethod
    def lerp(start: float, end: float, t: float) -> float:
        """Linear interpolation between start and end (t is not clamped)"""
        return start + (end - start) * t

    @staticmethod
    def smooth_lerp(start: float, end: float, t: float) -> float:
        """Smooth interpolation with ease in-out"""
        return start + (end - start) * MathUtils.smoothstep_weight(t)

    @staticmethod
    def smoothstep_weight(f):
        """Cubic Hermite blend f^2 * (3 - 2f); works on scalars and arrays"""
        return f * f * (3 - 2 * f)

    @staticmethod
    def distance(x1: float, y1: float, x2: float, y2: float) -> float:
        """Euclidean distance between two points"""
        return math.sqrt((x2 - x1) ** 2 + (y2 - y1) ** 2)

    @staticmethod
    def normalize_angle(angle: float) -> float:
        """Normalize angle to [0, 2π)"""
        result = ((angle % TWO_PI) + TWO_PI) % TWO_PI
        # Tiny negative inputs round up to exactly 2π
        return 0.0 if result >= TWO_PI else result
