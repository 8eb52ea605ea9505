"""Tests for material building and freezing."""

import pytest

from stylemesh.core.config import load_render_config
from stylemesh.core.errors import StyleMaterialError
from stylemesh.material import build_material


def test_2d_material_is_unlit_emissive():
    mat = build_material({"texture": {"color": "#FF0000"}}, is_2d=True)

    assert mat.disable_lighting is True
    assert mat.lighting_mode == "unlit"
    assert mat.emissive_color.to_hex() == "#FF0000"
    assert mat.diffuse_color is None


def test_3d_material_is_lit_with_emissive_floor():
    mat = build_material({"texture": {"color": "#FF8000"}}, is_2d=False)

    assert mat.disable_lighting is False
    assert mat.lighting_mode == "lit"
    assert mat.diffuse_color.to_hex() == "#FF8000"
    r, g, b = mat.emissive_color.to_rgb()
    assert r == pytest.approx(0.2)
    assert g == pytest.approx(0.2 * 128 / 255)
    assert b == pytest.approx(0.0)


def test_emissive_floor_follows_config(write_yaml):
    cfg = load_render_config(
        config_path=write_yaml("render.yaml", {"materials": {"lit_emissive_scale": 0.5}})
    )
    mat = build_material({"texture": {"color": "#FFFFFF"}}, is_2d=False, config=cfg)
    assert mat.emissive_color.to_rgb() == pytest.approx((0.5, 0.5, 0.5))


def test_wireframe_default_and_explicit():
    assert build_material({}, is_2d=False).wireframe is False
    assert build_material({"effect": {"wireframe": True}}, is_2d=False).wireframe is True


def test_no_color_keeps_defaults():
    mat = build_material(None, is_2d=True)
    assert mat.primary_color is None
    assert mat.name == "defaultMaterial"


def test_opacity_is_not_stored_on_material():
    mat = build_material({"texture": {"color": "#FFFFFF80"}}, is_2d=True)
    assert mat.emissive_color.to_hex() == "#FFFFFF"
    assert not hasattr(mat, "alpha")
    assert "alpha" not in mat.to_dict()


def test_material_is_frozen():
    mat = build_material({"texture": {"color": "#FF0000"}}, is_2d=True)

    assert mat.is_frozen
    with pytest.raises(StyleMaterialError, match=r"\[700\]"):
        mat.wireframe = True
    with pytest.raises(StyleMaterialError):
        mat.emissive_color = None

    assert mat.wireframe is False
    assert mat.emissive_color.to_hex() == "#FF0000"
    assert mat.freeze() is mat


def test_to_dict_uses_hex():
    out = build_material({"texture": {"color": "#00FF00"}}, is_2d=True).to_dict()
    assert out["emissive_color"] == "#00FF00"
    assert out["lighting_mode"] == "unlit"
