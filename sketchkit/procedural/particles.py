"""
Fading Particles

A particle is a point that drifts at constant velocity and fades out over a
fixed number of frames.

Lifecycle:
- Alive: from construction (life = 0) until update() has run max_life times
- Dead: the update() call that brings life to max_life returns False

Dead particles are not removed or frozen. Whoever owns the collection drops
or respawns them; calling update() again keeps moving the particle and
pushes alpha below zero.

Example:
    particles = [Particle(x, y) for _ in range(100)]

    for frame in range(frames):
        particles = [p for p in particles if p.update()]
        for p in particles:
            renderer.circle(p.x, p.y, p.radius, p.rgba())
"""

import logging
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional, Union

from ..core.palette import PALETTES, Palette, hex_to_rgba, random_color
from ..core.utils import MathUtils, RngLike, get_rng


logger = logging.getLogger(__name__)


# =============================================================================
# Options
# =============================================================================

# Ranges used for options the caller leaves out
VELOCITY_RANGE = (-2.0, 2.0)
RADIUS_RANGE = (2.0, 5.0)
MAX_LIFE_RANGE = (50, 150)          # Frames, inclusive
DEFAULT_PALETTE = 'cosmic'


@dataclass
class ParticleOptions:
    """
    Optional particle settings.

    Any field left as None gets a random value from its default range when
    the particle is created. Zero is a real value, not "unset", except for
    max_life: a particle must live at least one frame, so a max_life of zero
    or less is replaced the same way as a missing one.
    """
    vx: Optional[float] = None
    vy: Optional[float] = None
    radius: Optional[float] = None
    color: Optional[Any] = None
    max_life: Optional[int] = None
    palette: str = DEFAULT_PALETTE

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'ParticleOptions':
        """Create from a mapping, ignoring unknown keys ('maxLife' is accepted)"""
        data = dict(data)
        if 'maxLife' in data and 'max_life' not in data:
            data['max_life'] = data.pop('maxLife')

        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in data.items() if k in valid_fields}
        return cls(**filtered)

    def resolve(
        self,
        rng: RngLike = None,
        palettes: Mapping[str, Palette] = PALETTES
    ) -> 'ParticleOptions':
        """Return a copy with every unset field filled from its default range"""
        rng = get_rng(rng)
        return replace(
            self,
            vx=self.vx if self.vx is not None else MathUtils.random_range(*VELOCITY_RANGE, rng),
            vy=self.vy if self.vy is not None else MathUtils.random_range(*VELOCITY_RANGE, rng),
            radius=self.radius if self.radius is not None else MathUtils.random_range(*RADIUS_RANGE, rng),
            color=self.color if self.color is not None else random_color(self.palette, rng, palettes),
            max_life=self.max_life if self.max_life is not None and self.max_life > 0
            else MathUtils.random_int(*MAX_LIFE_RANGE, rng),
        )


# =============================================================================
# Particle
# =============================================================================

class Particle:
    """Point particle with constant velocity and linear fade-out"""

    def __init__(
        self,
        x: float,
        y: float,
        options: Optional[Union[ParticleOptions, Mapping[str, Any]]] = None,
        rng: RngLike = None,
        palettes: Mapping[str, Palette] = PALETTES
    ):
        if options is None:
            options = ParticleOptions()
        elif not isinstance(options, ParticleOptions):
            options = ParticleOptions.from_dict(options)
        resolved = options.resolve(rng, palettes)

        self.x = x
        self.y = y
        self.vx = resolved.vx
        self.vy = resolved.vy
        self.radius = resolved.radius
        self.color = resolved.color
        self.life = 0
        self.max_life = resolved.max_life

        logger.debug(
            f"Particle created: pos=({self.x}, {self.y}), vel=({self.vx:.2f}, {self.vy:.2f}), "
            f"max_life={self.max_life}"
        )

    @property
    def alpha(self) -> float:
        """Opacity 1 - life/max_life; negative once past death"""
        return 1 - self.life / self.max_life

    @property
    def is_alive(self) -> bool:
        return self.life < self.max_life

    @property
    def progress(self) -> float:
        """Age as a fraction of max_life (exceeds 1 past death)"""
        return self.life / self.max_life

    def update(self) -> bool:
        """
        Advance one frame.

        Returns:
            True while the particle is alive, False from the frame it dies
        """
        self.x += self.vx
        self.y += self.vy
        self.life += 1
        return self.life < self.max_life

    def rgba(self) -> str:
        """CSS rgba() string of the particle color at its current alpha"""
        return hex_to_rgba(self.color, self.alpha)

    def render_state(self) -> Dict[str, Any]:
        """Everything a renderer needs to draw the particle"""
        return {
            'x': self.x,
            'y': self.y,
            'radius': self.radius,
            'color': self.color,
            'alpha': self.alpha,
        }

    def __repr__(self) -> str:
        return (
            f"Particle(x={self.x!r}, y={self.y!r}, vx={self.vx!r}, vy={self.vy!r}, "
            f"life={self.life}/{self.max_life})"
        )
