"""
Value noise for procedural motion

Smooth pseudo-random fields built by hashing integer lattice points and
blending the hashed values with a smoothstep weight. Output is in [0, 1)
and depends only on the input coordinates: the same point always gives
the same value, and neighbouring cells share their corner values so the
field is continuous across lattice boundaries.

The lattice hash is the classic shader one-liner
``fract(sin(n * 12.9898 + 78.233) * 43758.5453)``. It is not a good hash
(it repeats and clumps) but existing pieces depend on its exact output.

All functions accept plain floats or numpy arrays.
"""

import numpy as np

from ..core.utils import MathUtils


_HASH_X = 12.9898
_HASH_Y = 78.233
_HASH_SCALE = 43758.5453


def _fract(v):
    return v - np.floor(v)


def _hash_1d(i):
    return _fract(np.sin(i * _HASH_X + _HASH_Y) * _HASH_SCALE)


def _hash_2d(i, j):
    return _fract(np.sin(i * _HASH_X + j * _HASH_Y) * _HASH_SCALE)


def _as_result(value, *inputs):
    """Plain float for scalar inputs, array otherwise"""
    if all(np.ndim(v) == 0 for v in inputs):
        return float(value)
    return value


# =============================================================================
# Value Noise
# =============================================================================

def noise_1d(x):
    """1D value noise, returns value in [0, 1)"""
    xa = np.asarray(x, dtype=np.float64)
    i = np.floor(xa)
    u = MathUtils.smoothstep_weight(xa - i)

    result = MathUtils.lerp(_hash_1d(i), _hash_1d(i + 1), u)
    return _as_result(result, x)


def noise_2d(x, y):
    """2D value noise, returns value in [0, 1)"""
    xa = np.asarray(x, dtype=np.float64)
    ya = np.asarray(y, dtype=np.float64)
    i = np.floor(xa)
    j = np.floor(ya)

    u = MathUtils.smoothstep_weight(xa - i)
    v = MathUtils.smoothstep_weight(ya - j)

    # Corner hashes: a=(i, j) b=(i+1, j) c=(i, j+1) d=(i+1, j+1)
    a = _hash_2d(i, j)
    b = _hash_2d(i + 1, j)
    c = _hash_2d(i, j + 1)
    d = _hash_2d(i + 1, j + 1)

    result = MathUtils.lerp(
        MathUtils.lerp(a, b, u),
        MathUtils.lerp(c, d, u),
        v
    )
    return _as_result(result, x, y)


def fbm_2d(x, y, octaves: int = 4, lacunarity: float = 2.0, gain: float = 0.5):
    """
    Fractal Brownian Motion - layered value noise.

    Octaves are weighted by gain and normalized by the total amplitude,
    so the result stays in [0, 1).
    """
    value = 0.0
    amplitude = 1.0
    frequency = 1.0
    total_amplitude = 0.0

    for _ in range(octaves):
        value = value + amplitude * noise_2d(np.multiply(x, frequency), np.multiply(y, frequency))
        total_amplitude += amplitude
        amplitude *= gain
        frequency *= lacunarity

    if total_amplitude > 0:
        value = value / total_amplitude

    return _as_result(value, x, y)


def noise_field(
    width: int,
    height: int,
    scale: float = 10.0,
    time: float = 0.0
) -> np.ndarray:
    """
    Sample 2D value noise over a pixel grid - vectorized.

    Args:
        width, height: Grid size in pixels
        scale: Pixels per lattice cell (larger = smoother)
        time: Horizontal offset in lattice units, for scrolling fields

    Returns:
        Array of shape (height, width) with values in [0, 1)
    """
    y_coords, x_coords = np.mgrid[0:height, 0:width]
    return noise_2d(x_coords / scale + time, y_coords / scale)
