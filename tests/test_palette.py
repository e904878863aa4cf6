import re

import numpy as np
import pytest

from sketchkit.core.palette import (
    PALETTES, get_palette, hex_to_rgb, hex_to_rgba, load_palettes, random_color, random_hsl,
)


def test_builtin_palettes():
    assert len(PALETTES) == 12
    for name, colors in PALETTES.items():
        assert len(colors) == 5
        for color in colors:
            assert len(hex_to_rgb(color)) == 3


def test_palettes_are_read_only():
    with pytest.raises(TypeError):
        PALETTES['mine'] = ('#000000',)


def test_get_palette_unknown_name():
    with pytest.raises(ValueError, match="Unknown palette 'plaid'"):
        get_palette('plaid')


def test_random_color_comes_from_palette():
    rng = np.random.default_rng(8)
    picks = {random_color('neon', rng) for _ in range(200)}
    assert picks == set(PALETTES['neon'])


def test_random_color_defaults_to_cosmic():
    assert random_color(rng=1) in PALETTES['cosmic']


def test_hex_to_rgb():
    assert hex_to_rgb('#FF006E') == (255, 0, 110)
    assert hex_to_rgb('#ffffff') == (255, 255, 255)


def test_hex_to_rgb_rejects_garbage():
    with pytest.raises(ValueError):
        hex_to_rgb('not-a-color')


def test_hex_to_rgba():
    assert hex_to_rgba('#FF006E') == 'rgba(255, 0, 110, 1)'
    assert hex_to_rgba('#3A86FF', 0.5) == 'rgba(58, 134, 255, 0.5)'


def test_random_hsl():
    rng = np.random.default_rng(4)
    for _ in range(50):
        match = re.fullmatch(r'hsl\((\d+), 70%, 50%\)', random_hsl(rng=rng))
        assert match
        assert 0 <= int(match.group(1)) <= 360
    assert random_hsl(120, 120, 40, 60) == 'hsl(120, 40%, 60%)'


def test_load_palettes_merges_without_touching_base(tmp_path):
    path = tmp_path / 'palettes.yaml'
    path.write_text(
        "palettes:\n"
        "  dusk: ['#112233', '#445566']\n"
        "  neon: ['#000000']\n"
    )

    palettes = load_palettes(path)

    assert palettes['dusk'] == ('#112233', '#445566')
    assert palettes['neon'] == ('#000000',)
    assert palettes['cosmic'] == PALETTES['cosmic']
    assert 'dusk' not in PALETTES
    assert len(PALETTES['neon']) == 5
    with pytest.raises(TypeError):
        palettes['other'] = ('#000000',)


def test_load_palettes_rejects_bad_entries(tmp_path):
    path = tmp_path / 'bad.yaml'
    path.write_text("palettes:\n  empty: []\n")
    with pytest.raises(ValueError):
        load_palettes(path)

    path.write_text("palettes:\n  oops: ['#GGGGGG']\n")
    with pytest.raises(ValueError):
        load_palettes(path)

    path.write_text("- just\n- a list\n")
    with pytest.raises(ValueError):
        load_palettes(path)
