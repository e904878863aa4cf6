"""
Easing Functions

Penner-style time remapping curves over a unit interval.

Easing Types:
- Linear: Constant speed
- Quad/Cubic: Polynomial curves (smooth acceleration)
- Sine: Sinusoidal curves (gentle, natural)
- Expo: Exponential curves (dramatic)

Each type has three variants:
- ease_in: Starts slow, accelerates
- ease_out: Starts fast, decelerates
- ease_in_out: Slow-fast-slow

Inputs outside [0, 1] are not rejected; the formulas are evaluated as-is.
"""

import numpy as np
from types import MappingProxyType
from typing import Callable, Mapping, Union


EasingFunc = Callable[[float], float]


# =============================================================================
# Core Easing Functions
# =============================================================================

def linear(t: float) -> float:
    """No easing - constant velocity"""
    return t


# -----------------------------------------------------------------------------
# Polynomial Easing (Quad, Cubic)
# -----------------------------------------------------------------------------

def ease_in_quad(t: float) -> float:
    """Quadratic ease in - accelerating from zero"""
    return t * t


def ease_out_quad(t: float) -> float:
    """Quadratic ease out - decelerating to zero"""
    return t * (2 - t)


def ease_in_out_quad(t: float) -> float:
    """Quadratic ease in/out - acceleration until halfway, then deceleration"""
    if t < 0.5:
        return 2 * t * t
    return -1 + (4 - 2 * t) * t


def ease_in_cubic(t: float) -> float:
    """Cubic ease in - accelerating from zero"""
    return t * t * t


def ease_out_cubic(t: float) -> float:
    """Cubic ease out - decelerating to zero"""
    t1 = t - 1
    return t1 * t1 * t1 + 1


def ease_in_out_cubic(t: float) -> float:
    """Cubic ease in/out - smooth S-curve"""
    if t < 0.5:
        return 4 * t * t * t
    t2 = 2 * t - 2
    return (t - 1) * t2 * t2 + 1


# -----------------------------------------------------------------------------
# Sinusoidal Easing
# -----------------------------------------------------------------------------

def ease_in_sine(t: float) -> float:
    """Sinusoidal ease in - gentle start"""
    return float(1 - np.cos(t * np.pi / 2))


def ease_out_sine(t: float) -> float:
    """Sinusoidal ease out - gentle end"""
    return float(np.sin(t * np.pi / 2))


def ease_in_out_sine(t: float) -> float:
    """Sinusoidal ease in/out - very smooth, subtle"""
    return float(-(np.cos(np.pi * t) - 1) / 2)


# -----------------------------------------------------------------------------
# Exponential Easing
# -----------------------------------------------------------------------------

def ease_in_expo(t: float) -> float:
    """Exponential ease in - dramatic acceleration"""
    if t == 0:
        return 0.0
    return float(np.exp2(10 * (t - 1)))


def ease_out_expo(t: float) -> float:
    """Exponential ease out - dramatic deceleration"""
    if t == 1:
        return 1.0
    return float(1 - np.exp2(-10 * t))


def ease_in_out_expo(t: float) -> float:
    """
    Exponential ease in/out - very dramatic

    The exact endpoints are returned unchanged since the expo formula
    never quite reaches 0 or 1.
    """
    if t == 0 or t == 1:
        return float(t)
    if t < 0.5:
        return float(np.exp2(20 * t - 10) / 2)
    return float((2 - np.exp2(-20 * t + 10)) / 2)


# =============================================================================
# Easing Registry & Utilities
# =============================================================================

_EASINGS = {
    'linear': linear,

    # Polynomial
    'ease_in_quad': ease_in_quad,
    'ease_out_quad': ease_out_quad,
    'ease_in_out_quad': ease_in_out_quad,
    'ease_in_cubic': ease_in_cubic,
    'ease_out_cubic': ease_out_cubic,
    'ease_in_out_cubic': ease_in_out_cubic,

    # Sinusoidal
    'ease_in_sine': ease_in_sine,
    'ease_out_sine': ease_out_sine,
    'ease_in_out_sine': ease_in_out_sine,

    # Exponential
    'ease_in_expo': ease_in_expo,
    'ease_out_expo': ease_out_expo,
    'ease_in_out_expo': ease_in_out_expo,
}


def _camel_case(name: str) -> str:
    head, *rest = name.split('_')
    return head + ''.join(part.capitalize() for part in rest)


# Browser sketches refer to curves as easeInOutQuad etc.
_EASINGS.update({_camel_case(name): func for name, func in list(_EASINGS.items())})

EASING_FUNCTIONS: Mapping[str, EasingFunc] = MappingProxyType(_EASINGS)


def get_easing(name: str) -> EasingFunc:
    """
    Get an easing function by name.

    Args:
        name: Easing function name (e.g., 'ease_out_expo' or 'easeOutExpo')

    Returns:
        Easing function

    Raises:
        ValueError: If easing name not found
    """
    if name not in EASING_FUNCTIONS:
        available = ', '.join(sorted(n for n in EASING_FUNCTIONS if '_' in n or n == 'linear'))
        raise ValueError(f"Unknown easing '{name}'. Available: {available}")
    return EASING_FUNCTIONS[name]


def ease(t: float, easing: Union[str, EasingFunc] = 'linear') -> float:
    """
    Apply easing to a progress value.

    Unlike calling an easing function directly, t is clamped to [0, 1] first.
    """
    t = float(np.clip(t, 0.0, 1.0))

    if isinstance(easing, str):
        easing = get_easing(easing)

    return easing(t)


def ease_range(
    t: float,
    start: float,
    end: float,
    easing: Union[str, EasingFunc] = 'linear'
) -> float:
    """Interpolate between start and end with easing"""
    return start + (end - start) * ease(t, easing)
