"""
stylemesh: Edge mesh factory
----------------------------
Cached templates for solid edge lines and arrowheads.

Behavior
- Solid lines share one unit-segment template per edge style
  (``edge-style-<styleId>``); each edge instance is scaled and placed by the
  caller. Lines are always unlit.
- Arrowheads are cached per style, arrow type and mode
  (``edge-arrow-<styleId>-<type>-<2d|3d>``) and use the same lit/unlit
  material branch as nodes.
- Patterned line types are drawn by a separate renderer and are not handled
  here.
"""

from __future__ import annotations

__all__ = [
    "EdgeMeshFactory",
]

from collections.abc import Mapping
from typing import Any

import numpy as np

from ..cache import TemplateCache
from ..core.config import RenderConfig, load_render_config
from ..core.errors import StyleConfigError, UnknownShapeError
from ..core.registry import ShapeRegistry
from ..material import build_material
from ..shapes import create_arrow_registry
from ..specs import ArrowHeadOptions, EdgeMeshOptions, EdgeStyleSpec, validate_options
from ..template import Geometry, Instance, Template

ARROW_LENGTH_FACTOR = 0.5


class EdgeMeshFactory:
    """
    Build edge-line and arrowhead instances through a ``TemplateCache``.

    Parameters
    ----------
    arrow_registry : ShapeRegistry, optional
        Arrowhead creators (called with the arrow length). Built-ins when
        omitted.
    config : RenderConfig, optional
        Render settings (unit edge geometry, material defaults).
    """

    kind = "edge"

    def __init__(
        self,
        arrow_registry: ShapeRegistry | None = None,
        config: RenderConfig | None = None,
    ) -> None:
        self.arrow_registry = arrow_registry if arrow_registry is not None else create_arrow_registry()
        self.config = config or load_render_config()

    # --------------------------- lines ---------------------------
    def create(
        self,
        cache: TemplateCache,
        options: EdgeMeshOptions | Mapping[str, Any],
        style: EdgeStyleSpec | Mapping[str, Any] | None = None,
    ) -> Instance:
        """Return an instance of the solid-line template for this edge style.

        Raises
        ------
        StyleConfigError
            - [532] Invalid edge options, or edge style on a cache miss.
            - [513] Line type other than ``"solid"`` (only on a cache miss).
        """
        opts = validate_options(EdgeMeshOptions, options, 532, "edge options")

        def build() -> Template:
            st = validate_options(EdgeStyleSpec, style, 532, "edge style")
            if st.line.type != "solid":
                raise StyleConfigError(f"[513] unsupported cached line type: {st.line.type}")
            points = np.asarray(self.config.edges.unit_points, dtype=np.float64).reshape(2, 3)
            geometry = Geometry("edge-line", "line", {"width": opts.width}, points)
            template = Template.from_geometry(geometry)
            template.material = build_material(
                {"texture": {"color": opts.color}}, is_2d=True, config=self.config
            )
            template.visibility = st.line.opacity
            return template

        return cache.get(f"edge-style-{opts.style_id}", build)

    # --------------------------- arrowheads ---------------------------
    def create_arrow_head(
        self,
        cache: TemplateCache,
        style_id: str,
        options: ArrowHeadOptions | Mapping[str, Any],
        *,
        is_2d: bool = False,
    ) -> Instance | None:
        """Return an arrowhead instance, or None when no arrow is requested.

        Raises
        ------
        StyleConfigError
            - [533] Invalid arrowhead options.
        UnknownShapeError
            - [512] Arrow type with no registered creator.
        """
        opts = validate_options(ArrowHeadOptions, options, 533, "arrowhead options")
        if not opts.type or opts.type == "none":
            return None

        arrow_type = opts.type
        key = f"edge-arrow-{style_id}-{arrow_type}-{'2d' if is_2d else '3d'}"

        def build() -> Template:
            creator = self.arrow_registry.lookup(arrow_type)
            if creator is None:
                raise UnknownShapeError(f"[512] unsupported arrow type: {arrow_type}")
            template = creator(ARROW_LENGTH_FACTOR * opts.size)
            template.material = build_material(
                {"texture": {"color": opts.color}}, is_2d, config=self.config
            )
            template.visibility = opts.opacity
            return template

        return cache.get(key, build)
