"""
stylemesh: Element Factories
----------------------------
Factories that turn node and edge styles into cached templates and
per-element instances.

Cache keys
----------
``node-style-<styleId>-<2d|3d>`` | ``edge-style-<styleId>`` |
``edge-arrow-<styleId>-<type>-<2d|3d>``
"""

from .edge import EdgeMeshFactory
from .node import NodeMeshFactory

__all__ = [
    "EdgeMeshFactory",
    "NodeMeshFactory",
]
