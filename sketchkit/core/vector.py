"""
2D Vector

Mutable vector for motion math. The named methods (add, subtract, multiply,
divide, normalize, limit, set_angle) change the vector in place and return
it so calls can be chained:

    velocity.add(acceleration).limit(max_speed)

The arithmetic operators build new vectors instead and leave both operands
untouched.
"""

import math
import numpy as np
from dataclasses import dataclass
from typing import Tuple

from .utils import RngLike, TWO_PI, get_rng


@dataclass
class Vector2D:
    """2D vector with in-place physics operations"""
    x: float = 0.0
    y: float = 0.0

    # -------------------------------------------------------------------------
    # In-place operations
    # -------------------------------------------------------------------------

    def add(self, v: 'Vector2D') -> 'Vector2D':
        self.x += v.x
        self.y += v.y
        return self

    def subtract(self, v: 'Vector2D') -> 'Vector2D':
        self.x -= v.x
        self.y -= v.y
        return self

    def multiply(self, n: float) -> 'Vector2D':
        self.x *= n
        self.y *= n
        return self

    def divide(self, n: float) -> 'Vector2D':
        """Divide both components; dividing by zero gives inf/nan components"""
        with np.errstate(divide='ignore', invalid='ignore'):
            self.x = float(np.float64(self.x) / n)
            self.y = float(np.float64(self.y) / n)
        return self

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalize(self) -> 'Vector2D':
        """Scale to unit length; a zero vector is left unchanged"""
        mag = self.magnitude()
        if mag > 0:
            self.divide(mag)
        return self

    def limit(self, max_mag: float) -> 'Vector2D':
        """Rescale to max_mag if currently longer than it"""
        if self.magnitude() > max_mag:
            self.normalize()
            self.multiply(max_mag)
        return self

    def set_angle(self, angle: float) -> 'Vector2D':
        """Point in direction angle (radians), keeping the current magnitude"""
        mag = self.magnitude()
        self.x = math.cos(angle) * mag
        self.y = math.sin(angle) * mag
        return self

    def angle(self) -> float:
        """Heading in radians, in (-π, π]"""
        return math.atan2(self.y, self.x)

    def copy(self) -> 'Vector2D':
        return Vector2D(self.x, self.y)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def dot(self, other: 'Vector2D') -> float:
        return self.x * other.x + self.y * other.y

    def distance_to(self, other: 'Vector2D') -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    # -------------------------------------------------------------------------
    # Operators (non-mutating)
    # -------------------------------------------------------------------------

    def __add__(self, other: 'Vector2D') -> 'Vector2D':
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Vector2D') -> 'Vector2D':
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> 'Vector2D':
        return Vector2D(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> 'Vector2D':
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> 'Vector2D':
        return self.copy().divide(scalar)

    def __neg__(self) -> 'Vector2D':
        return Vector2D(-self.x, -self.y)

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @staticmethod
    def random(rng: RngLike = None) -> 'Vector2D':
        """Unit vector pointing in a uniformly random direction"""
        angle = get_rng(rng).random() * TWO_PI
        return Vector2D(math.cos(angle), math.sin(angle))

    @staticmethod
    def from_angle(angle: float, magnitude: float = 1.0) -> 'Vector2D':
        return Vector2D(math.cos(angle) * magnitude, math.sin(angle) * magnitude)
