"""Tests for EdgeMeshFactory lines and arrowheads."""

import numpy as np
import pytest

from stylemesh.core.errors import StyleConfigError, UnknownShapeError
from stylemesh.meshes.edge import ARROW_LENGTH_FACTOR


def test_edges_share_line_template(cache, edge_factory):
    a = edge_factory.create(cache, {"style_id": "e1", "color": "#00FF00"})
    b = edge_factory.create(cache, {"styleId": "e1", "color": "#00FF00"})

    assert a.template is b.template
    assert "edge-style-e1" in a.name
    assert cache.size() == 1


def test_line_template_is_unit_segment(cache, edge_factory):
    inst = edge_factory.create(cache, {"style_id": "e1", "width": 2})
    geom = inst.geometry

    assert geom.name == "edge-line"
    assert geom.params == {"width": 2.0}
    assert np.allclose(geom.vertices, [[0, 0, -0.5], [0, 0, 0.5]])


def test_line_material_is_unlit(cache, edge_factory):
    inst = edge_factory.create(cache, {"style_id": "e1", "color": "##FF00FF"})
    assert inst.material.lighting_mode == "unlit"
    assert inst.material.emissive_color.to_hex() == "#FF00FF"
    assert inst.material.is_frozen


def test_line_opacity(cache, edge_factory):
    inst = edge_factory.create(cache, {"style_id": "e1"}, {"line": {"opacity": 0.3}})
    assert inst.visibility == 0.3


def test_patterned_line_rejected(cache, edge_factory):
    with pytest.raises(StyleConfigError, match=r"\[513\].*dash"):
        edge_factory.create(cache, {"style_id": "e1"}, {"line": {"type": "dash"}})
    assert cache.size() == 0


def test_invalid_edge_options(cache, edge_factory):
    with pytest.raises(StyleConfigError, match=r"\[532\]"):
        edge_factory.create(cache, {"style_id": "e1", "width": 0})


@pytest.mark.parametrize("arrow", [{}, {"type": None}, {"type": "none"}])
def test_no_arrow_requested(cache, edge_factory, arrow):
    assert edge_factory.create_arrow_head(cache, "e1", arrow) is None
    assert cache.size() == 0


def test_arrow_head_cached_per_type_and_mode(cache, edge_factory):
    a = edge_factory.create_arrow_head(cache, "e1", {"type": "normal", "color": "#FF0000"})
    b = edge_factory.create_arrow_head(cache, "e1", {"type": "normal", "color": "#FF0000"})
    c = edge_factory.create_arrow_head(cache, "e1", {"type": "normal"}, is_2d=True)
    d = edge_factory.create_arrow_head(cache, "e1", {"type": "diamond"})

    assert a.template is b.template
    assert a.template is not c.template
    assert a.template is not d.template
    assert "edge-arrow-e1-normal-3d" in a.name
    assert "edge-arrow-e1-normal-2d" in c.name
    assert a.material.lighting_mode == "lit"
    assert c.material.lighting_mode == "unlit"


def test_arrow_size_and_opacity(cache, edge_factory):
    inst = edge_factory.create_arrow_head(
        cache, "e1", {"type": "tee", "size": 2.0, "opacity": 0.5}
    )
    assert inst.geometry.params["length"] == pytest.approx(ARROW_LENGTH_FACTOR * 2.0)
    assert inst.visibility == 0.5


def test_sphere_arrow(cache, edge_factory):
    inst = edge_factory.create_arrow_head(cache, "e1", {"type": "sphere"})
    assert inst.geometry.name == "arrow-sphere"


def test_unknown_arrow_type(cache, edge_factory):
    with pytest.raises(UnknownShapeError, match=r"\[512\].*harpoon"):
        edge_factory.create_arrow_head(cache, "e1", {"type": "harpoon"})
    assert "edge-arrow-e1-harpoon-3d" not in cache


def test_invalid_arrow_options(cache, edge_factory):
    with pytest.raises(StyleConfigError, match=r"\[533\]"):
        edge_factory.create_arrow_head(cache, "e1", {"type": "normal", "opacity": 2})


def test_line_hit_skips_style_checks(cache, edge_factory):
    first = edge_factory.create(cache, {"style_id": "e1"})
    second = edge_factory.create(cache, {"style_id": "e1"}, {"line": {"type": "dash"}})

    assert second.template is first.template
    assert cache.hits == 1
