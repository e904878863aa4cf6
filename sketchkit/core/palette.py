"""
Color Palettes & Color Formatting

Named hex palettes for generative pieces plus conversion to the CSS-style
color strings renderers expect.

Palettes:
- cosmic, neon, retrowave: saturated, high-contrast
- sunset, fire, autumn: warm ramps
- ocean, ice, forest, spring: cool and natural tones
- pastel, monochrome: soft and neutral
"""

import logging
import yaml
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Tuple, Union

from PIL import ImageColor

from .utils import MathUtils, RngLike, get_rng


logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]          # RGB 0-255
Palette = Tuple[str, ...]             # '#RRGGBB' strings


# =============================================================================
# Palette Definitions
# =============================================================================

PALETTES: Mapping[str, Palette] = MappingProxyType({
    'cosmic': ('#FF006E', '#8338EC', '#3A86FF', '#FB5607', '#FFBE0B'),
    'sunset': ('#FF6B35', '#F7931E', '#FDC830', '#F37335', '#D62828'),
    'ocean': ('#006BA6', '#0496FF', '#00D9FF', '#83E1D8', '#CAFAFE'),
    'forest': ('#2D6A4F', '#40916C', '#52B788', '#74C69D', '#95D5B2'),
    'neon': ('#FF0080', '#00FF9F', '#00D9FF', '#FF00FF', '#FFFF00'),
    'retrowave': ('#FF0090', '#FF6C00', '#FFDD00', '#7700FF', '#00FFF6'),
    'pastel': ('#FFB4D1', '#C9A4FF', '#A4D8FF', '#FFD4A3', '#C4FFD4'),
    'monochrome': ('#FFFFFF', '#CCCCCC', '#999999', '#666666', '#333333'),
    'fire': ('#FF0000', '#FF4500', '#FF8C00', '#FFD700', '#FFF700'),
    'ice': ('#00F5FF', '#00CED1', '#4682B4', '#87CEEB', '#B0E0E6'),
    'autumn': ('#8B4513', '#D2691E', '#FF8C00', '#FFD700', '#CD853F'),
    'spring': ('#98D8C8', '#F6E58D', '#FFAAA5', '#FF8B94', '#C7CEEA'),
})


def get_palette(name: str, palettes: Mapping[str, Palette] = PALETTES) -> Palette:
    """
    Get a palette by name.

    Raises:
        ValueError: If palette name not found
    """
    if name not in palettes:
        available = ', '.join(sorted(palettes.keys()))
        raise ValueError(f"Unknown palette '{name}'. Available: {available}")
    return palettes[name]


def random_color(
    palette_name: str = 'cosmic',
    rng: RngLike = None,
    palettes: Mapping[str, Palette] = PALETTES
) -> str:
    """Pick a random color from a palette"""
    palette = get_palette(palette_name, palettes)
    return palette[int(get_rng(rng).random() * len(palette))]


# =============================================================================
# Color Conversions
# =============================================================================

def hex_to_rgb(hex_color: str) -> Color:
    """Convert '#RRGGBB' to an (r, g, b) tuple"""
    return ImageColor.getrgb(hex_color)[:3]


def hex_to_rgba(hex_color: str, alpha: float = 1) -> str:
    """Convert '#RRGGBB' to a CSS 'rgba(r, g, b, a)' string"""
    r, g, b = hex_to_rgb(hex_color)
    return f"rgba({r}, {g}, {b}, {alpha})"


def random_hsl(
    hue_min: int = 0,
    hue_max: int = 360,
    sat: float = 70,
    light: float = 50,
    rng: RngLike = None
) -> str:
    """Random CSS 'hsl(h, s%, l%)' string with hue in [hue_min, hue_max]"""
    hue = MathUtils.random_int(hue_min, hue_max, rng)
    return f"hsl({hue}, {sat}%, {light}%)"


# =============================================================================
# Palette Files
# =============================================================================

def load_palettes(
    path: Union[str, Path],
    base: Mapping[str, Palette] = PALETTES
) -> Mapping[str, Palette]:
    """
    Load extra palettes from a YAML file.

    The file holds a ``palettes`` mapping of name -> list of hex colors.
    Entries override same-named palettes from ``base``; ``base`` itself is
    left untouched and a new read-only mapping is returned.

    Raises:
        ValueError: If the file isn't shaped like a palette file or a
            color can't be parsed
    """
    path = Path(path)
    with open(path, 'r') as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict) or not isinstance(data.get('palettes', {}), dict):
        raise ValueError(f"{path}: expected a 'palettes' mapping")

    loaded = data.get('palettes', {})
    merged = dict(base)
    for name, colors in loaded.items():
        if not isinstance(colors, list) or not colors:
            raise ValueError(f"{path}: palette '{name}' must be a non-empty list of colors")
        for color in colors:
            hex_to_rgb(str(color))
        merged[str(name)] = tuple(str(c) for c in colors)

    logger.debug(f"Loaded {len(loaded)} palette(s) from {path}")
    return MappingProxyType(merged)
