"""
stylemesh: Node mesh factory
----------------------------
Turn a node's style into a cached master template and hand back an instance.

Behavior
- The cache key is ``node-style-<styleId>-<2d|3d>``. The rendering mode is
  part of the key because one style needs a lit template in 3D and an unlit
  one in 2D.
- Create options are validated only on a cache miss; a hit spawns an
  instance and nothing else.
- On a cache miss the shape creator is looked up by ``shape.type`` and called
  with ``shape.size`` (falling back to the node size). The frozen material is
  attached, and an explicit texture opacity becomes the template visibility.
- A missing shape type raises ``MissingShapeTypeError`` [510]; a type with no
  creator raises ``UnknownShapeError`` [511]. Neither leaves a cache entry.
"""

from __future__ import annotations

__all__ = [
    "NodeMeshFactory",
]

from collections.abc import Mapping
from typing import Any

from ..cache import TemplateCache
from ..color import resolve_color
from ..core.config import RenderConfig, load_render_config
from ..core.errors import MissingShapeTypeError, UnknownShapeError
from ..core.registry import ShapeCreator, ShapeRegistry
from ..material import build_material
from ..shapes import create_shape_registry
from ..specs import NodeCreateOptions, NodeMeshOptions, validate_options
from ..template import Instance, Template


class NodeMeshFactory:
    """
    Build node instances from style options through a ``TemplateCache``.

    Parameters
    ----------
    registry : ShapeRegistry, optional
        Shape creators to use. A fresh registry with the built-in shapes when
        omitted.
    config : RenderConfig, optional
        Render settings for materials.

    Examples
    --------
    >>> factory = NodeMeshFactory()
    >>> cache = TemplateCache()
    >>> inst = factory.create(
    ...     cache,
    ...     {"style_id": "s1", "is_2d": False, "size": 1},
    ...     {"shape": {"type": "box"}, "texture": {"color": "#FF0000"}},
    ... )
    >>> inst.material.diffuse_color.to_hex()
    '#FF0000'
    """

    kind = "node"

    def __init__(
        self,
        registry: ShapeRegistry | None = None,
        config: RenderConfig | None = None,
    ) -> None:
        self.registry = registry if registry is not None else create_shape_registry()
        self.config = config or load_render_config()

    @staticmethod
    def cache_key(options: NodeMeshOptions | Mapping[str, Any]) -> str:
        opts = validate_options(NodeMeshOptions, options, 530, "node options")
        return f"node-style-{opts.style_id}-{'2d' if opts.is_2d else '3d'}"

    def register_shape_creator(self, shape_type: str, creator: ShapeCreator, **meta: Any) -> None:
        """Add or replace a creator in this factory's registry."""
        self.registry.register(shape_type, creator, **meta)

    def create(
        self,
        cache: TemplateCache,
        options: NodeMeshOptions | Mapping[str, Any],
        create_options: NodeCreateOptions | Mapping[str, Any] | None = None,
    ) -> Instance:
        """
        Return an instance of the template for this node style.

        Parameters
        ----------
        cache : TemplateCache
            Cache holding the master templates.
        options : NodeMeshOptions or Mapping
            ``style_id``, ``is_2d`` and default ``size``.
        create_options : NodeCreateOptions or Mapping, optional
            ``shape``, ``texture`` and ``effect`` sections.

        Returns
        -------
        Instance
            New instance; its template is shared with every node of the same
            style and mode.

        Raises
        ------
        StyleConfigError
            - [530] Invalid node options.
            - [531] Invalid create options (only on a cache miss).
        MissingShapeTypeError
            - [510] No ``shape.type`` (only on a cache miss).
        UnknownShapeError
            - [511] No creator for ``shape.type`` (only on a cache miss).
        """
        opts = validate_options(NodeMeshOptions, options, 530, "node options")
        key = self.cache_key(opts)

        def build() -> Template:
            create = validate_options(NodeCreateOptions, create_options, 531, "create options")
            template = self._build_template(opts, create)
            template.material = build_material(create, opts.is_2d, config=self.config)
            color = resolve_color(create.texture.color if create.texture else None)
            if color is not None and color.opacity is not None:
                template.visibility = color.opacity
            return template

        return cache.get(key, build)

    def create_without_cache(
        self,
        options: NodeMeshOptions | Mapping[str, Any],
        create_options: NodeCreateOptions | Mapping[str, Any] | None = None,
    ) -> Template:
        """Build the bare shape template (no material, no caching)."""
        opts = validate_options(NodeMeshOptions, options, 530, "node options")
        create = validate_options(NodeCreateOptions, create_options, 531, "create options")
        return self._build_template(opts, create)

    def _build_template(self, opts: NodeMeshOptions, create: NodeCreateOptions) -> Template:
        shape = create.shape
        if shape is None or not shape.type:
            raise MissingShapeTypeError("[510] shape with type required to create mesh")

        creator = self.registry.lookup(shape.type)
        if creator is None:
            raise UnknownShapeError(f"[511] unknown shape: {shape.type}")

        size = shape.size if shape.size is not None else opts.size
        return creator(size)
