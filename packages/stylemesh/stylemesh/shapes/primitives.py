"""
stylemesh: Primitive shape geometry
-----------------------------------
Vertex generators for the round and prismatic built-in node shapes.

Notes
- Generators return ``Geometry`` objects; the registry wraps them into
  Templates. Only vertex positions are produced (no faces or normals).
- Mesh names follow the renderer's builder names, which is why ``cone``
  reports ``"cylinder"`` and ``torus-knot`` reports ``"tk"``.
"""

__all__ = [
    "GOLDEN_RATIO",
    "TORUSKNOT_RADIUS_MULTIPLIER",
    "TORUSKNOT_TUBE_MULTIPLIER",
    "TORUSKNOT_RADIAL_SEGMENTS",
    "ICOSPHERE_RADIUS_MULTIPLIER",
    "box",
    "sphere",
    "cylinder",
    "cone",
    "capsule",
    "torus",
    "torus_knot",
    "icosphere",
    "geodesic",
    "goldberg",
]

import numpy as np

from ..template import Geometry

GOLDEN_RATIO = 1.618
TORUSKNOT_RADIUS_MULTIPLIER = 0.3
TORUSKNOT_TUBE_MULTIPLIER = 0.1
TORUSKNOT_RADIAL_SEGMENTS = 128
ICOSPHERE_RADIUS_MULTIPLIER = 0.75

_SEGMENTS = 32
_TESSELLATION = 24


def _ring(radius: float, z: float, n: int, phase: float = 0.0) -> np.ndarray:
    theta = phase + np.linspace(0.0, 2.0 * np.pi, n, endpoint=False)
    return np.column_stack([radius * np.cos(theta), radius * np.sin(theta), np.full(n, z)])


def box(size: float) -> Geometry:
    h = size / 2.0
    corners = np.array(np.meshgrid([-h, h], [-h, h], [-h, h], indexing="ij")).reshape(3, -1).T
    return Geometry("box", "box", {"size": size}, corners)


def _uv_sphere(radius: float, segments: int = _SEGMENTS) -> np.ndarray:
    lat = np.linspace(0.0, np.pi, segments + 1)
    lon = np.linspace(0.0, 2.0 * np.pi, 2 * segments, endpoint=False)
    la, lo = np.meshgrid(lat, lon, indexing="ij")
    pts = np.stack(
        [radius * np.sin(la) * np.cos(lo), radius * np.cos(la), radius * np.sin(la) * np.sin(lo)],
        axis=-1,
    ).reshape(-1, 3)
    # collapse duplicate pole points
    return np.unique(np.round(pts, 12), axis=0)


def sphere(size: float) -> Geometry:
    return Geometry("sphere", "sphere", {"diameter": size}, _uv_sphere(size / 2.0))


def _frustum(name: str, kind: str, height: float, d_top: float, d_bottom: float) -> Geometry:
    parts = [_ring(d_bottom / 2.0, -height / 2.0, _TESSELLATION)]
    if d_top > 0:
        parts.append(_ring(d_top / 2.0, height / 2.0, _TESSELLATION))
    else:
        parts.append(np.array([[0.0, 0.0, height / 2.0]]))
    params = {"height": height, "diameterTop": d_top, "diameterBottom": d_bottom}
    return Geometry(name, kind, params, np.vstack(parts))


def cylinder(size: float) -> Geometry:
    return _frustum("cylinder", "cylinder", size * GOLDEN_RATIO, size, size)


def cone(size: float) -> Geometry:
    return _frustum("cylinder", "cone", size * GOLDEN_RATIO, 0.0, size)


def capsule(size: float) -> Geometry:
    """Capsule of height ``size`` and radius ``size / 4``."""
    radius = size / 4.0
    half_body = size / 2.0 - radius
    cap = _uv_sphere(radius, 16)
    top = cap[cap[:, 2] >= 0] + [0.0, 0.0, half_body]
    bottom = cap[cap[:, 2] <= 0] - [0.0, 0.0, half_body]
    return Geometry("capsule", "capsule", {"height": size, "radius": radius}, np.vstack([top, bottom]))


def torus(size: float) -> Geometry:
    """Torus of diameter ``size`` and tube thickness ``size / 2``."""
    major = size / 2.0
    minor = size / 4.0
    u, v = np.meshgrid(
        np.linspace(0.0, 2.0 * np.pi, _TESSELLATION, endpoint=False),
        np.linspace(0.0, 2.0 * np.pi, _TESSELLATION // 2, endpoint=False),
        indexing="ij",
    )
    pts = np.stack(
        [(major + minor * np.cos(v)) * np.cos(u), minor * np.sin(v), (major + minor * np.cos(v)) * np.sin(u)],
        axis=-1,
    ).reshape(-1, 3)
    return Geometry("torus", "torus", {"diameter": size, "thickness": size / 2.0}, pts)


def torus_knot(size: float, p: int = 2, q: int = 3) -> Geometry:
    radius = size * TORUSKNOT_RADIUS_MULTIPLIER
    tube = size * TORUSKNOT_TUBE_MULTIPLIER
    t = np.linspace(0.0, 2.0 * np.pi, TORUSKNOT_RADIAL_SEGMENTS, endpoint=False)
    r = radius * (2.0 + np.cos(q * t)) / 2.0
    curve = np.column_stack([r * np.cos(p * t), r * np.sin(p * t), radius * np.sin(q * t) / 2.0])
    # sweep a small circle around the curve in the xy-radial plane
    radial = curve.copy()
    radial[:, 2] = 0.0
    norms = np.linalg.norm(radial, axis=1, keepdims=True)
    radial = radial / np.where(norms == 0, 1.0, norms)
    up = np.array([0.0, 0.0, 1.0])
    phis = np.linspace(0.0, 2.0 * np.pi, 8, endpoint=False)
    pts = np.concatenate([curve + tube * (np.cos(phi) * radial + np.sin(phi) * up) for phi in phis])
    params = {
        "radius": radius,
        "tube": tube,
        "radialSegments": TORUSKNOT_RADIAL_SEGMENTS,
    }
    return Geometry("tk", "torus-knot", params, pts)


# --------------------------- icosahedral family ---------------------------

_PHI = (1.0 + np.sqrt(5.0)) / 2.0
_ICO_VERTS = np.array(
    [
        (-1, _PHI, 0), (1, _PHI, 0), (-1, -_PHI, 0), (1, -_PHI, 0),
        (0, -1, _PHI), (0, 1, _PHI), (0, -1, -_PHI), (0, 1, -_PHI),
        (_PHI, 0, -1), (_PHI, 0, 1), (-_PHI, 0, -1), (-_PHI, 0, 1),
    ],
    dtype=np.float64,
)
_ICO_FACES = [
    (0, 11, 5), (0, 5, 1), (0, 1, 7), (0, 7, 10), (0, 10, 11),
    (1, 5, 9), (5, 11, 4), (11, 10, 2), (10, 7, 6), (7, 1, 8),
    (3, 9, 4), (3, 4, 2), (3, 2, 6), (3, 6, 8), (3, 8, 9),
    (4, 9, 5), (2, 4, 11), (6, 2, 10), (8, 6, 7), (9, 8, 1),
]


def _subdivided_icosahedron(subdivisions: int) -> tuple[np.ndarray, list[tuple[int, int, int]]]:
    """Unit-sphere icosahedron split ``subdivisions`` times."""
    verts = [v / np.linalg.norm(v) for v in _ICO_VERTS]
    faces = list(_ICO_FACES)
    for _ in range(subdivisions):
        midpoints: dict[tuple[int, int], int] = {}

        def midpoint(a: int, b: int) -> int:
            key = (min(a, b), max(a, b))
            if key not in midpoints:
                m = verts[a] + verts[b]
                verts.append(m / np.linalg.norm(m))
                midpoints[key] = len(verts) - 1
            return midpoints[key]

        new_faces = []
        for a, b, c in faces:
            ab, bc, ca = midpoint(a, b), midpoint(b, c), midpoint(c, a)
            new_faces.extend([(a, ab, ca), (b, bc, ab), (c, ca, bc), (ab, bc, ca)])
        faces = new_faces
    return np.array(verts), faces


def icosphere(size: float, subdivisions: int = 3) -> Geometry:
    radius = size * ICOSPHERE_RADIUS_MULTIPLIER
    verts, _ = _subdivided_icosahedron(subdivisions)
    return Geometry("icosphere", "icosphere", {"radius": radius, "subdivisions": subdivisions}, verts * radius)


def geodesic(size: float) -> Geometry:
    verts, _ = _subdivided_icosahedron(1)
    return Geometry("geodesic", "geodesic", {"size": size}, verts * (size / 2.0))


def goldberg(size: float) -> Geometry:
    """Dual of the geodesic sphere: one vertex per geodesic face."""
    verts, faces = _subdivided_icosahedron(1)
    centers = np.array([verts[list(f)].mean(axis=0) for f in faces])
    centers /= np.linalg.norm(centers, axis=1, keepdims=True)
    return Geometry("goldberg", "goldberg", {"size": size}, centers * (size / 2.0))
