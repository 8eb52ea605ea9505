"""
stylemesh: Polyhedron geometry
------------------------------
Platonic, Archimedean and Johnson solids used as node shapes.

Notes
- ``PolyhedronType`` values match the renderer's polyhedron indices so a
  geometry's ``params["type"]`` can be handed to it unchanged.
- Unit solids have edge length 1 and are centred on their centroid;
  ``size`` scales every vertex.
"""

__all__ = [
    "PolyhedronType",
    "polyhedron",
]

from enum import IntEnum
from functools import lru_cache

import numpy as np

from ..template import Geometry

_PHI = (1.0 + np.sqrt(5.0)) / 2.0


class PolyhedronType(IntEnum):
    TETRAHEDRON = 0
    OCTAHEDRON = 1
    DODECAHEDRON = 2
    ICOSAHEDRON = 3
    RHOMBICUBOCTAHEDRON = 4
    TRIANGULAR_PRISM = 5
    PENTAGONAL_PRISM = 6
    HEXAGONAL_PRISM = 7
    SQUARE_PYRAMID = 8
    PENTAGONAL_PYRAMID = 9
    TRIANGULAR_DIPYRAMID = 10
    PENTAGONAL_DIPYRAMID = 11
    ELONGATED_SQUARE_DIPYRAMID = 12
    ELONGATED_PENTAGONAL_DIPYRAMID = 13
    ELONGATED_PENTAGONAL_CUPOLA = 14


def _signs(*coords):
    """All sign combinations of ``coords`` (zeros are not doubled)."""
    out = {()}
    for c in coords:
        options = {c, -c} if c != 0 else {0.0}
        out = {prefix + (o,) for prefix in out for o in options}
    return [list(p) for p in out]


def _cyclic(points):
    out = []
    for x, y, z in points:
        out.extend([(x, y, z), (y, z, x), (z, x, y)])
    return out


def _circumradius(n: int) -> float:
    """Circumradius of a regular n-gon with unit edges."""
    return 1.0 / (2.0 * np.sin(np.pi / n))


def _ngon(n: int, z: float, phase: float = 0.0, radius: float | None = None) -> np.ndarray:
    r = _circumradius(n) if radius is None else radius
    theta = phase + 2.0 * np.pi * np.arange(n) / n
    return np.column_stack([r * np.cos(theta), r * np.sin(theta), np.full(n, z)])


def _apex_height(n: int) -> float:
    """Height of a pyramid over a unit-edge n-gon with unit lateral edges."""
    return float(np.sqrt(1.0 - _circumradius(n) ** 2))


def _prism(n: int) -> np.ndarray:
    return np.vstack([_ngon(n, -0.5), _ngon(n, 0.5)])


def _pyramid(n: int) -> np.ndarray:
    return np.vstack([_ngon(n, 0.0), [[0.0, 0.0, _apex_height(n)]]])


def _dipyramid(n: int, elongated: bool = False) -> np.ndarray:
    h = _apex_height(n)
    if elongated:
        return np.vstack([_prism(n), [[0.0, 0.0, 0.5 + h]], [[0.0, 0.0, -0.5 - h]]])
    return np.vstack([_ngon(n, 0.0), [[0.0, 0.0, h]], [[0.0, 0.0, -h]]])


def _elongated_pentagonal_cupola() -> np.ndarray:
    # decagonal prism capped by a pentagon
    cupola_h = float(np.sqrt(1.0 - 1.0 / (4.0 * np.sin(np.pi / 5.0) ** 2)))
    top = _ngon(5, 1.0 + cupola_h, phase=np.pi / 10.0)
    return np.vstack([_ngon(10, 0.0), _ngon(10, 1.0), top])


def _unit(kind: PolyhedronType) -> np.ndarray:
    if kind is PolyhedronType.TETRAHEDRON:
        pts = np.array([(1, 1, 1), (1, -1, -1), (-1, 1, -1), (-1, -1, 1)], dtype=float)
        return pts / (2.0 * np.sqrt(2.0))
    if kind is PolyhedronType.OCTAHEDRON:
        pts = np.vstack([np.eye(3), -np.eye(3)])
        return pts / np.sqrt(2.0)
    if kind is PolyhedronType.DODECAHEDRON:
        pts = _signs(1.0, 1.0, 1.0) + _cyclic(
            [tuple(p) for p in _signs(0.0, 1.0 / _PHI, _PHI)]
        )
        return np.array(pts, dtype=float) / (2.0 / _PHI)
    if kind is PolyhedronType.ICOSAHEDRON:
        pts = _cyclic([tuple(p) for p in _signs(0.0, 1.0, _PHI)])
        return np.array(pts, dtype=float) / 2.0
    if kind is PolyhedronType.RHOMBICUBOCTAHEDRON:
        s = 1.0 + np.sqrt(2.0)
        pts = _cyclic([tuple(p) for p in _signs(1.0, 1.0, s)])
        return np.unique(np.array(pts, dtype=float), axis=0) / 2.0
    if kind is PolyhedronType.TRIANGULAR_PRISM:
        return _prism(3)
    if kind is PolyhedronType.PENTAGONAL_PRISM:
        return _prism(5)
    if kind is PolyhedronType.HEXAGONAL_PRISM:
        return _prism(6)
    if kind is PolyhedronType.SQUARE_PYRAMID:
        return _pyramid(4)
    if kind is PolyhedronType.PENTAGONAL_PYRAMID:
        return _pyramid(5)
    if kind is PolyhedronType.TRIANGULAR_DIPYRAMID:
        return _dipyramid(3)
    if kind is PolyhedronType.PENTAGONAL_DIPYRAMID:
        return _dipyramid(5)
    if kind is PolyhedronType.ELONGATED_SQUARE_DIPYRAMID:
        return _dipyramid(4, elongated=True)
    if kind is PolyhedronType.ELONGATED_PENTAGONAL_DIPYRAMID:
        return _dipyramid(5, elongated=True)
    return _elongated_pentagonal_cupola()


@lru_cache(maxsize=None)
def _unit_centered(kind: PolyhedronType) -> np.ndarray:
    pts = _unit(kind)
    pts = pts - pts.mean(axis=0)
    pts.setflags(write=False)
    return pts


def polyhedron(kind: PolyhedronType, size: float) -> Geometry:
    """Geometry for polyhedron ``kind`` scaled by ``size``."""
    kind = PolyhedronType(kind)
    return Geometry(
        "polyhedron",
        kind.name.lower().replace("_", "-"),
        {"size": size, "type": int(kind)},
        _unit_centered(kind) * size,
    )
