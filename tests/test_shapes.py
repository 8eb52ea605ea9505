"""Tests for the built-in shape and arrow creators."""

import numpy as np
import pytest

from stylemesh.shapes import (
    PolyhedronType,
    create_arrow_registry,
    create_shape_registry,
)
from stylemesh.shapes.arrows import ARROW_TYPES
from stylemesh.shapes.primitives import GOLDEN_RATIO
from stylemesh.template import Template

BUILTIN_SHAPES = [
    "box",
    "sphere",
    "cylinder",
    "cone",
    "capsule",
    "torus",
    "torus-knot",
    "tetrahedron",
    "octahedron",
    "dodecahedron",
    "icosahedron",
    "rhombicuboctahedron",
    "triangular-prism",
    "pentagonal-prism",
    "hexagonal-prism",
    "square-pyramid",
    "pentagonal-pyramid",
    "triangular-dipyramid",
    "pentagonal-dipyramid",
    "elongated-square-dipyramid",
    "elongated-pentagonal-dipyramid",
    "elongated-pentagonal-cupola",
    "goldberg",
    "icosphere",
    "geodesic",
]


@pytest.mark.parametrize("name", BUILTIN_SHAPES)
def test_builtin_shape_builds(shape_registry, name):
    template = shape_registry.lookup(name)(1.5)

    assert isinstance(template, Template)
    assert template.geometry.vertex_count > 0
    assert np.all(np.isfinite(template.geometry.vertices))


@pytest.mark.parametrize(
    "shape_type, mesh_name",
    [
        ("box", "box"),
        ("sphere", "sphere"),
        ("cylinder", "cylinder"),
        ("cone", "cylinder"),
        ("torus-knot", "tk"),
        ("tetrahedron", "polyhedron"),
        ("icosphere", "icosphere"),
    ],
)
def test_mesh_names(shape_registry, shape_type, mesh_name):
    assert shape_registry.lookup(shape_type)(1.0).name == mesh_name


def test_underscore_aliases(shape_registry):
    hyphen = shape_registry.lookup("triangular-prism")(1.0).geometry
    underscore = shape_registry.lookup("triangular_prism")(1.0).geometry

    assert np.allclose(hyphen.vertices, underscore.vertices)
    assert shape_registry.lookup("square_pyramid") is not None


def test_polyhedron_type_indices(shape_registry):
    geom = shape_registry.lookup("elongated-pentagonal-cupola")(1.0).geometry
    assert geom.params["type"] == PolyhedronType.ELONGATED_PENTAGONAL_CUPOLA == 14
    assert shape_registry.lookup("tetrahedron")(1.0).geometry.params["type"] == 0


def test_polyhedron_scales_with_size(shape_registry):
    creator = shape_registry.lookup("octahedron")
    small = creator(1.0).geometry.extents()
    large = creator(2.0).geometry.extents()
    assert np.allclose(large, 2.0 * small)


def test_tetrahedron_has_unit_edges(shape_registry):
    verts = shape_registry.lookup("tetrahedron")(1.0).geometry.vertices
    d = np.linalg.norm(verts[:, None, :] - verts[None, :, :], axis=-1)
    edges = d[np.triu_indices(4, k=1)]
    assert np.allclose(edges, 1.0)


def test_cylinder_height_uses_golden_ratio(shape_registry):
    dx, dy, dz = shape_registry.lookup("cylinder")(2.0).geometry.extents()
    assert dz == pytest.approx(2.0 * GOLDEN_RATIO)
    assert dx == pytest.approx(2.0)


def test_sphere_diameter(shape_registry):
    geom = shape_registry.lookup("sphere")(3.0).geometry
    assert geom.params == {"diameter": 3.0}
    assert np.allclose(np.linalg.norm(geom.vertices, axis=1), 1.5)


def test_torus_knot_params(shape_registry):
    params = shape_registry.lookup("torus-knot")(2.0).geometry.params
    assert params["radius"] == pytest.approx(0.6)
    assert params["tube"] == pytest.approx(0.2)
    assert params["radialSegments"] == 128


def test_icosphere_radius(shape_registry):
    geom = shape_registry.lookup("icosphere")(2.0).geometry
    assert np.allclose(np.linalg.norm(geom.vertices, axis=1), 1.5)


def test_geometry_is_read_only(shape_registry):
    geom = shape_registry.lookup("box")(1.0).geometry
    with pytest.raises(ValueError):
        geom.vertices[0, 0] = 99.0


def test_every_arrow_type_registered():
    registry = create_arrow_registry()
    for name in ARROW_TYPES:
        template = registry.lookup(name)(0.5)
        assert template.name == f"arrow-{name}"
        assert template.geometry.params["length"] == 0.5
    assert registry.lookup("sphere")(0.5).name == "arrow-sphere"
    assert registry.lookup("none") is None


def test_builtin_tags():
    listing = create_shape_registry().list()
    assert "builtin" in listing["box"]["tags"]
    assert "polyhedron" in listing["octahedron"]["tags"]
    assert "alias" in listing["triangular_prism"]["tags"]
