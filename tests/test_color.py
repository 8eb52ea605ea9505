"""Tests for color resolution."""

import pytest

from stylemesh.color import NormalizedColor, resolve_color
from stylemesh.specs import ColorObject


def test_hex_string():
    color = resolve_color("#FF0000")
    assert color.to_rgb() == (1.0, 0.0, 0.0)
    assert color.opacity is None


def test_double_hash_is_fixed():
    assert resolve_color("##FFFFFF").to_hex() == "#FFFFFF"


def test_named_color():
    assert resolve_color("blue").to_hex() == "#0000FF"
    assert resolve_color("DarkOrange").to_hex() == "#FF8C00"


def test_alpha_channel_becomes_opacity():
    color = resolve_color("#00FF0080")
    assert color.to_hex() == "#00FF00"
    assert color.opacity == pytest.approx(128 / 255)


def test_solid_object_with_opacity():
    color = resolve_color({"colorType": "solid", "value": "#336699", "opacity": 0.4})
    assert color.to_hex() == "#336699"
    assert color.opacity == 0.4


def test_solid_model_resolves():
    obj = ColorObject(colorType="solid", value="##00FF00")
    assert resolve_color(obj).to_hex() == "#00FF00"


@pytest.mark.parametrize(
    "spec",
    [
        None,
        "not-a-color",
        "none",
        "C0",
        "0.5",
        {"colorType": "gradient", "colors": ["#FF0000", "#0000FF"]},
        {"colorType": "radial-gradient", "colors": ["#FF0000"]},
        {"colorType": "solid"},
        {"value": "#FF0000"},
        42,
    ],
)
def test_unresolvable_specs_give_none(spec):
    assert resolve_color(spec) is None


def test_scale_drops_opacity():
    scaled = NormalizedColor(1.0, 0.5, 0.0, 0.3).scale(0.2)
    assert scaled.to_rgb() == pytest.approx((0.2, 0.1, 0.0))
    assert scaled.opacity is None
