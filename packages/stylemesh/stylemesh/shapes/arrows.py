"""
stylemesh: Arrowhead geometry
-----------------------------
Outlines for edge arrowheads. Arrows point along +z with the tip at the
origin, so an instance placed at an edge's end point needs no offset.
"""

__all__ = [
    "ARROW_TYPES",
    "arrow_outline",
    "sphere_arrow",
]

import numpy as np

from ..template import Geometry
from .primitives import _uv_sphere


def _circle(radius: float, center_z: float, n: int = 16) -> list[tuple[float, float, float]]:
    theta = 2.0 * np.pi * np.arange(n) / n
    return [(radius * np.cos(t), 0.0, center_z + radius * np.sin(t)) for t in theta]


def _outline(arrow_type: str, length: float, width: float) -> list[tuple[float, float, float]]:
    L, w = length, width / 2.0
    if arrow_type in ("normal", "open-normal"):
        return [(0.0, 0.0, 0.0), (-w, 0.0, -L), (w, 0.0, -L)]
    if arrow_type == "inverted":
        return [(0.0, 0.0, -L), (-w, 0.0, 0.0), (w, 0.0, 0.0)]
    if arrow_type in ("diamond", "open-diamond"):
        return [(0.0, 0.0, 0.0), (w, 0.0, -L / 2.0), (0.0, 0.0, -L), (-w, 0.0, -L / 2.0)]
    if arrow_type == "box":
        return [(-w, 0.0, 0.0), (w, 0.0, 0.0), (w, 0.0, -L), (-w, 0.0, -L)]
    if arrow_type in ("dot", "open-dot", "sphere-dot"):
        return _circle(L / 2.0, -L / 2.0)
    if arrow_type == "vee":
        return [(0.0, 0.0, 0.0), (-w, 0.0, -L), (0.0, 0.0, -0.6 * L), (w, 0.0, -L)]
    if arrow_type == "tee":
        return [(-w, 0.0, 0.0), (w, 0.0, 0.0), (w, 0.0, -0.2 * L), (-w, 0.0, -0.2 * L)]
    if arrow_type == "half-open":
        return [(0.0, 0.0, 0.0), (-w, 0.0, -L), (0.0, 0.0, -L)]
    if arrow_type == "crow":
        return [(0.0, 0.0, -L), (-w, 0.0, 0.0), (0.0, 0.0, 0.0), (w, 0.0, 0.0)]
    raise KeyError(arrow_type)


ARROW_TYPES = (
    "normal",
    "inverted",
    "diamond",
    "box",
    "dot",
    "vee",
    "tee",
    "half-open",
    "crow",
    "open-normal",
    "open-diamond",
    "open-dot",
    "sphere-dot",
)


def arrow_outline(arrow_type: str, length: float, width: float | None = None) -> Geometry:
    """Flat outline for a filled or open arrow type."""
    w = length if width is None else width
    verts = np.array(_outline(arrow_type, length, w), dtype=np.float64)
    return Geometry(f"arrow-{arrow_type}", arrow_type, {"length": length, "width": w}, verts)


def sphere_arrow(length: float) -> Geometry:
    verts = _uv_sphere(length / 2.0, 12) - [0.0, 0.0, length / 2.0]
    return Geometry("arrow-sphere", "sphere", {"diameter": length}, verts)
