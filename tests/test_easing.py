import math

import pytest

from sketchkit.core import easing
from sketchkit.core.easing import EASING_FUNCTIONS, ease, ease_range, get_easing


CURVE_NAMES = [
    'linear',
    'ease_in_quad', 'ease_out_quad', 'ease_in_out_quad',
    'ease_in_cubic', 'ease_out_cubic', 'ease_in_out_cubic',
    'ease_in_sine', 'ease_out_sine', 'ease_in_out_sine',
    'ease_in_expo', 'ease_out_expo', 'ease_in_out_expo',
]


def test_catalog_has_every_curve():
    for name in CURVE_NAMES:
        assert EASING_FUNCTIONS[name] is getattr(easing, name)


@pytest.mark.parametrize("name", CURVE_NAMES)
def test_curves_start_at_zero_and_end_at_one(name):
    func = get_easing(name)
    assert func(0) == pytest.approx(0, abs=1e-3)
    assert func(1) == pytest.approx(1, abs=1e-3)


@pytest.mark.parametrize("name", ['ease_in_out_quad', 'ease_in_out_cubic', 'ease_in_out_sine', 'ease_in_out_expo'])
def test_symmetric_curves_pass_through_midpoint(name):
    assert get_easing(name)(0.5) == pytest.approx(0.5)


def test_linear_is_identity():
    for t in (-1.0, 0.0, 0.3, 0.5, 1.0, 2.5):
        assert easing.linear(t) == t


def test_ease_in_out_expo_returns_endpoints_exactly():
    assert easing.ease_in_out_expo(0) == 0
    assert easing.ease_in_out_expo(1) == 1


def test_ease_in_out_expo_halves():
    assert easing.ease_in_out_expo(0.25) == pytest.approx(2 ** -5 / 2)
    assert easing.ease_in_out_expo(0.75) == pytest.approx((2 - 2 ** -5) / 2)


def test_expo_boundary_guards():
    assert easing.ease_in_expo(0) == 0
    assert easing.ease_out_expo(1) == 1
    assert easing.ease_in_expo(0.5) == pytest.approx(2 ** -5)


def test_polynomial_values():
    assert easing.ease_in_quad(0.5) == 0.25
    assert easing.ease_out_quad(0.5) == 0.75
    assert easing.ease_in_cubic(0.5) == 0.125
    assert easing.ease_out_cubic(0.5) == 0.875
    assert easing.ease_in_out_cubic(0.25) == pytest.approx(0.0625)
    assert easing.ease_in_out_cubic(0.75) == pytest.approx(0.9375)


def test_sine_values():
    assert easing.ease_in_sine(0.5) == pytest.approx(1 - math.cos(math.pi / 4))
    assert easing.ease_out_sine(0.5) == pytest.approx(math.sin(math.pi / 4))


def test_out_of_range_input_is_extrapolated():
    assert easing.ease_in_quad(2) == 4
    assert easing.ease_out_quad(-1) == -3
    assert easing.linear(1.5) == 1.5


def test_camel_case_aliases():
    assert get_easing('easeInOutExpo') is easing.ease_in_out_expo
    assert get_easing('easeOutQuad') is easing.ease_out_quad


def test_unknown_easing_raises():
    with pytest.raises(ValueError, match="Unknown easing 'wobble'"):
        get_easing('wobble')


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        EASING_FUNCTIONS['custom'] = easing.linear


def test_ease_clamps_progress():
    assert ease(1.5, 'ease_in_quad') == 1.0
    assert ease(-0.5, 'ease_in_quad') == 0.0
    assert ease(0.5, easing.ease_in_quad) == 0.25


def test_ease_range():
    assert ease_range(0.5, 10, 20) == 15
    assert ease_range(0.5, 0, 100, 'ease_in_quad') == 25


@pytest.mark.parametrize("name", CURVE_NAMES)
@pytest.mark.parametrize("t", [0.0, 0.25, 0.5, 1.0])
def test_curves_return_plain_floats(name, t):
    assert type(get_easing(name)(t)) is float


def test_expo_guards_return_floats_for_int_input():
    assert type(easing.ease_in_expo(0)) is float
    assert type(easing.ease_out_expo(1)) is float
    assert type(easing.ease_in_out_expo(0)) is float
    assert type(easing.ease_in_out_expo(1)) is float
