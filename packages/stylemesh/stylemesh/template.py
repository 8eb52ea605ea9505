"""stylemesh: Templates and Instances
-----------------------------------

Renderable value types shared by the cache and the element factories.

Public API
----------
``Geometry`` : Immutable vertex data produced by a shape creator
``Template`` : Expensive master renderable, owned by a ``TemplateCache``
``Instance`` : Lightweight, individually transformable reference to a Template

Notes
-----
Templates are hidden masters; only Instances are meant to be drawn. An
Instance reads material and visibility through its Template, so every
instance of a key looks the same while keeping its own transform.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import numpy as np

from .core.errors import StyleMaterialError

if TYPE_CHECKING:
    from .material import MaterialDescriptor

__all__ = [
    "Geometry",
    "Template",
    "Instance",
]


def _vec3(values: Any = (0.0, 0.0, 0.0)) -> np.ndarray:
    arr = np.asarray(values, dtype=np.float64).reshape(3).copy()
    return arr


@dataclass(frozen=True, eq=False)
class Geometry:
    """Vertex cloud for one shape at one size.

    Attributes
    ----------
    name : str
        Mesh name reported by the creator (e.g. ``"box"``, ``"polyhedron"``).
    kind : str
        Shape type the geometry was built for.
    params : dict
        Size parameters passed to the generator (``size``, ``diameter``, ...).
    vertices : numpy.ndarray
        Read-only ``(N, 3)`` float array.
    """

    name: str
    kind: str
    params: dict[str, Any]
    vertices: np.ndarray

    def __post_init__(self) -> None:
        verts = np.array(self.vertices, dtype=np.float64).reshape(-1, 3)
        verts.setflags(write=False)
        object.__setattr__(self, "vertices", verts)
        object.__setattr__(self, "params", dict(self.params))

    @property
    def vertex_count(self) -> int:
        return int(self.vertices.shape[0])

    def extents(self) -> np.ndarray:
        """Axis-aligned size ``(dx, dy, dz)`` of the vertex cloud."""
        if self.vertex_count == 0:
            return np.zeros(3)
        return self.vertices.max(axis=0) - self.vertices.min(axis=0)


@dataclass(eq=False)
class Template:
    """Master renderable built once per cache key.

    Attributes
    ----------
    name : str
        Name of the master (normally the geometry name).
    geometry : Geometry
        Shared vertex data.
    material : MaterialDescriptor or None
        Attached by the element factory before caching.
    visibility : float
        Default opacity of everything drawn from this template.
    is_visible : bool
        False once the template is stored in a cache.
    position : numpy.ndarray
        Position of the master itself (parked out of view when cached).

    Notes
    -----
    ``freeze()`` is called by the cache after storing the template. From then
    on every assignment raises ``StyleMaterialError`` [701] and ``position``
    is read-only.
    """

    name: str
    geometry: Geometry
    material: MaterialDescriptor | None = None
    visibility: float = 1.0
    is_visible: bool = True
    position: np.ndarray = field(default_factory=_vec3)
    _spawned: int = field(default=0, init=False, repr=False)
    _frozen: bool = field(default=False, init=False, repr=False)

    def __setattr__(self, attr: str, value: Any) -> None:
        if getattr(self, "_frozen", False):
            raise StyleMaterialError(
                f"[701] Template '{self.name}' is cached and frozen; cannot set '{attr}'"
            )
        object.__setattr__(self, attr, value)

    @classmethod
    def from_geometry(cls, geometry: Geometry) -> Template:
        return cls(name=geometry.name, geometry=geometry)

    @property
    def instance_count(self) -> int:
        """Number of instances spawned so far."""
        return self._spawned

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def hide(self, position: Any) -> None:
        """Mark as a hidden master and move it to ``position``."""
        self.is_visible = False
        self.position = _vec3(position)

    def freeze(self) -> Template:
        """Make the template immutable. Calling it again is a no-op."""
        self.position.setflags(write=False)
        object.__setattr__(self, "_frozen", True)
        return self

    def spawn(self, name: str) -> Instance:
        """Create a new Instance bound to this template."""
        object.__setattr__(self, "_spawned", self._spawned + 1)
        return Instance(name=name, template=self)


@dataclass(eq=False)
class Instance:
    """Cheap reference to a Template with its own transform."""

    name: str
    template: Template
    position: np.ndarray = field(default_factory=_vec3)
    rotation: np.ndarray = field(default_factory=_vec3)
    scaling: np.ndarray = field(default_factory=lambda: _vec3((1.0, 1.0, 1.0)))

    @property
    def material(self) -> MaterialDescriptor | None:
        return self.template.material

    @property
    def visibility(self) -> float:
        return self.template.visibility

    @property
    def geometry(self) -> Geometry:
        return self.template.geometry

    def set_position(self, x: float, y: float, z: float) -> None:
        self.position = _vec3((x, y, z))

    def world_vertices(self) -> np.ndarray:
        """Template vertices scaled and translated by this instance.

        Rotation is ignored; it is kept for the renderer.
        """
        return self.template.geometry.vertices * self.scaling + self.position
