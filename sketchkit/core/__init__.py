"""
sketchkit - Core Utilities
"""

from .utils import MathUtils, get_rng
from .easing import (
    # Core easing functions
    linear,
    # Polynomial
    ease_in_quad, ease_out_quad, ease_in_out_quad,
    ease_in_cubic, ease_out_cubic, ease_in_out_cubic,
    # Sinusoidal
    ease_in_sine, ease_out_sine, ease_in_out_sine,
    # Exponential
    ease_in_expo, ease_out_expo, ease_in_out_expo,
    # Registry
    EASING_FUNCTIONS, get_easing, ease, ease_range,
)
from .vector import Vector2D
from .palette import (
    PALETTES, get_palette, random_color,
    hex_to_rgb, hex_to_rgba, random_hsl,
    load_palettes,
)
from .timing import FPSCounter, Timer
