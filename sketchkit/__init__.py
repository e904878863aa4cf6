"""
sketchkit - Procedural animation primitives for generative art sketches
"""

from .core import (
    MathUtils, get_rng,
    EASING_FUNCTIONS, get_easing, ease, ease_range,
    Vector2D,
    PALETTES, get_palette, random_color, hex_to_rgb, hex_to_rgba, random_hsl, load_palettes,
    FPSCounter, Timer,
)
from .procedural import noise_1d, noise_2d, fbm_2d, noise_field, Particle, ParticleOptions
from .config import SketchConfig, load_config
from .logger_setup import setup_logging

__version__ = "0.1.0"
__all__ = [
    'MathUtils',
    'get_rng',
    'EASING_FUNCTIONS',
    'get_easing',
    'ease',
    'ease_range',
    'Vector2D',
    'PALETTES',
    'get_palette',
    'random_color',
    'hex_to_rgb',
    'hex_to_rgba',
    'random_hsl',
    'load_palettes',
    'FPSCounter',
    'Timer',
    'noise_1d',
    'noise_2d',
    'fbm_2d',
    'noise_field',
    'Particle',
    'ParticleOptions',
    'SketchConfig',
    'load_config',
    'setup_logging',
]
