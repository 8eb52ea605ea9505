"""
stylemesh: Built-in Shapes
--------------------------
Creators for the built-in node shapes and arrowheads, and helpers that load
them into a ``ShapeRegistry``.

Registry keys
-------------
Node shapes: ``box`` | ``sphere`` | ``cylinder`` | ``cone`` | ``capsule`` |
``torus`` | ``torus-knot`` | polyhedra (``tetrahedron`` ... ``elongated-pentagonal-cupola``,
also under underscore spellings) | ``goldberg`` | ``icosphere`` | ``geodesic``

Arrow types: see ``arrows.ARROW_TYPES`` plus ``sphere``

Factory
-------
>>> from stylemesh.shapes import create_shape_registry
>>> reg = create_shape_registry()
>>> reg.lookup("box")(2.0).geometry.params
{'size': 2.0}
"""

from collections.abc import Callable
from functools import partial

from ..core.registry import ShapeRegistry
from ..template import Geometry, Template
from . import arrows, primitives
from .polyhedra import PolyhedronType, polyhedron

__all__ = [
    "PolyhedronType",
    "create_shape_registry",
    "create_arrow_registry",
    "register_builtin_shapes",
    "register_builtin_arrows",
]


def _as_creator(make_geometry: Callable[[float], Geometry]) -> Callable[[float], Template]:
    def creator(size: float) -> Template:
        return Template.from_geometry(make_geometry(float(size)))

    return creator


_PRIMITIVES = {
    "box": primitives.box,
    "sphere": primitives.sphere,
    "cylinder": primitives.cylinder,
    "cone": primitives.cone,
    "capsule": primitives.capsule,
    "torus": primitives.torus,
    "torus-knot": primitives.torus_knot,
}

_SPHERICAL = {
    "goldberg": primitives.goldberg,
    "icosphere": primitives.icosphere,
    "geodesic": primitives.geodesic,
}


def register_builtin_shapes(registry: ShapeRegistry) -> ShapeRegistry:
    """Load every built-in node shape into ``registry`` and return it."""
    for name, make in _PRIMITIVES.items():
        registry.register(name, _as_creator(make), tags=["builtin"])

    for kind in PolyhedronType:
        name = kind.name.lower().replace("_", "-")
        registry.register(name, _as_creator(partial(polyhedron, kind)), tags=["builtin", "polyhedron"])
        if "-" in name:
            # underscore spellings from older style sheets
            registry.register(
                name.replace("-", "_"),
                _as_creator(partial(polyhedron, kind)),
                tags=["builtin", "polyhedron", "alias"],
            )

    for name, make in _SPHERICAL.items():
        registry.register(name, _as_creator(make), tags=["builtin"])
    return registry


def create_shape_registry() -> ShapeRegistry:
    """Fresh node-shape registry preloaded with the built-in creators."""
    return register_builtin_shapes(ShapeRegistry("shape"))


def register_builtin_arrows(registry: ShapeRegistry) -> ShapeRegistry:
    """Load every built-in arrowhead into ``registry``; creators take the arrow length."""
    for name in arrows.ARROW_TYPES:
        registry.register(name, _as_creator(partial(arrows.arrow_outline, name)), tags=["builtin", "filled"])
    registry.register("sphere", _as_creator(arrows.sphere_arrow), tags=["builtin", "billboard"])
    return registry


def create_arrow_registry() -> ShapeRegistry:
    return register_builtin_arrows(ShapeRegistry("arrow"))
